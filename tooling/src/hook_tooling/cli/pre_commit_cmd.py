"""CLI for pre-commit: hooktool pre-commit [run | install | fmt-config]."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from hook_tooling.helpers import flatten_fmt_config
from hook_tooling.pre_commit import ConfigError, HookConfig, install_hook, run_pre_commit


def _root_parser(prog: str, description: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog=prog, description=description)
    ap.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Repository root (default: cwd)",
    )
    return ap


def run_fmt_config(project_root: Path) -> int:
    """Print the flattened rustfmt config the hook would pass. Returns 0/1."""
    try:
        config = HookConfig.load(project_root)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    p = config.fmt_config_path(project_root)
    if not p.is_file():
        print(f"error: rustfmt config not found: {p}", file=sys.stderr)
        return 1
    print(flatten_fmt_config(p.read_text(encoding="utf-8")))
    return 0


def run_pre_commit_argv(argv: list[str] | None = None) -> None:
    """Dispatch hooktool pre-commit [<subcommand>] [options]. No subcommand runs the hook."""
    if argv is None:
        argv = sys.argv[2:]  # skip 'hooktool pre-commit'

    sub = argv[0].lower() if argv else "run"
    args = argv[1:]

    if sub == "run":
        if args:
            print("Error: hooktool pre-commit takes no options", file=sys.stderr)
            sys.exit(1)
        sys.exit(run_pre_commit(Path.cwd()))

    if sub == "install":
        ap = _root_parser("hooktool pre-commit install", "Install the git pre-commit hook")
        ap.add_argument(
            "--force",
            action="store_true",
            help="Replace an existing pre-commit hook",
        )
        parsed = ap.parse_args(args)
        sys.exit(install_hook(parsed.project_root.resolve(), force=parsed.force))

    if sub == "fmt-config":
        ap = _root_parser(
            "hooktool pre-commit fmt-config",
            "Print the flattened rustfmt --config argument",
        )
        parsed = ap.parse_args(args)
        sys.exit(run_fmt_config(parsed.project_root.resolve()))

    print(f"Error: Unknown pre-commit subcommand: {sub}", file=sys.stderr)
    print("Subcommands: run (default), install, fmt-config", file=sys.stderr)
    sys.exit(1)
