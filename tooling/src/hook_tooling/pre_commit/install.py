"""Install the hook as .git/hooks/pre-commit."""

from __future__ import annotations

import logging
import os
import shlex
import stat
import subprocess
import sys
from pathlib import Path

log = logging.getLogger(__name__)

HOOK_MARKER = "# installed by hooktool"

HOOK_TEMPLATE = """#!/bin/sh
{marker}
exec {python} -m hook_tooling.cli.main pre-commit
"""


def hooks_dir(project_root: Path) -> Path:
    """Git hooks directory for project_root (honors core.hooksPath and worktrees)."""
    try:
        r = subprocess.run(
            ["git", "rev-parse", "--git-path", "hooks"],
            cwd=project_root,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        log.debug("git not in PATH: %s", e)
    else:
        if r.returncode == 0 and r.stdout.strip():
            p = Path(r.stdout.strip())
            return p if p.is_absolute() else project_root / p
    return project_root / ".git" / "hooks"


def render_hook(python: str | None = None) -> str:
    return HOOK_TEMPLATE.format(marker=HOOK_MARKER, python=shlex.quote(python or sys.executable))


def install_hook(project_root: Path, force: bool = False, python: str | None = None) -> int:
    """Write the pre-commit hook script. Returns 0 on success, 1 on failure.

    An existing hook not written by hooktool is left alone unless force is set.
    """
    if not (project_root / ".git").exists():
        print(f"❌ {project_root} is not a git checkout", file=sys.stderr)
        return 1

    target = hooks_dir(project_root) / "pre-commit"
    if target.exists() and not force:
        existing = target.read_text(errors="replace")
        if HOOK_MARKER not in existing:
            print(
                f"❌ {target} already exists and was not installed by hooktool. Use --force to replace it.",
                file=sys.stderr,
            )
            return 1

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_hook(python))
    mode = target.stat().st_mode
    os.chmod(target, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    print(f"✅ Installed pre-commit hook: {target}")
    return 0
