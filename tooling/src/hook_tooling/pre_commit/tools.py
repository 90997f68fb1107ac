"""Subprocess-backed collaborators of the pre-commit hook.

Each class wraps one external tool and reports its exit status. Tool output
is not captured (so diagnostics reach the terminal) except where the hook
needs to read it.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from hook_tooling.pre_commit.errors import HookStepError, Step

log = logging.getLogger(__name__)

# Exit status a POSIX shell reports for a command it cannot find.
COMMAND_NOT_FOUND = 127
# ... and for one it finds but cannot execute.
CANNOT_EXECUTE = 126


def _run(
    cmd: Sequence[str],
    cwd: Path | None = None,
    capture: bool = False,
) -> subprocess.CompletedProcess[str]:
    log.debug("Running %s", shlex.join(cmd))
    try:
        return subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=capture,
            text=True,
        )
    except FileNotFoundError:
        print(f"{cmd[0]}: command not found", file=sys.stderr)
        return subprocess.CompletedProcess(list(cmd), COMMAND_NOT_FOUND, "", "")
    except OSError as e:
        print(f"{cmd[0]}: {e.strerror or e}", file=sys.stderr)
        return subprocess.CompletedProcess(list(cmd), CANNOT_EXECUTE, "", "")


class Auditor:
    """Dependency vulnerability audit (cargo audit by default)."""

    def __init__(self, argv: Sequence[str], cwd: Path) -> None:
        self.argv = list(argv)
        self.cwd = cwd

    def run(self) -> int:
        return _run(self.argv, cwd=self.cwd).returncode


class GitIndex:
    """Staged-file listing and re-staging through the git CLI."""

    def __init__(self, argv: Sequence[str], cwd: Path) -> None:
        self.argv = list(argv)
        self.cwd = cwd

    def list_staged(self) -> list[str]:
        """Paths staged for commit, relative to the repo root, in git's order.

        Raises HookStepError(ENUMERATE) when git fails (e.g. not a repository).
        """
        r = _run(
            [*self.argv, "diff", "--cached", "--name-only", "-z"],
            cwd=self.cwd,
            capture=True,
        )
        if r.returncode != 0:
            if r.stderr:
                print(r.stderr.rstrip(), file=sys.stderr)
            raise HookStepError(Step.ENUMERATE, r.returncode)
        return [p for p in (r.stdout or "").split("\0") if p]

    def add(self, path: str) -> int:
        return _run([*self.argv, "add", "--", path], cwd=self.cwd).returncode


class RustFormatter:
    """rustfmt in check mode (report only) or write mode (rewrite in place)."""

    def __init__(self, argv: Sequence[str], cwd: Path) -> None:
        self.argv = list(argv)
        self.cwd = cwd

    def _cmd(self, path: str, config: str, check: bool) -> list[str]:
        cmd = list(self.argv)
        if check:
            cmd.append("--check")
        # An empty flattened config means no --config at all.
        if config:
            cmd += ["--config", config]
        cmd.append(path)
        return cmd

    def check(self, path: str, config: str) -> int:
        return _run(self._cmd(path, config, check=True), cwd=self.cwd).returncode

    def write(self, path: str, config: str) -> int:
        return _run(self._cmd(path, config, check=False), cwd=self.cwd).returncode


class BlackFormatter:
    """black in write mode."""

    def __init__(self, argv: Sequence[str], cwd: Path) -> None:
        self.argv = list(argv)
        self.cwd = cwd

    def write(self, path: str) -> int:
        return _run([*self.argv, path], cwd=self.cwd).returncode
