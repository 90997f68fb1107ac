"""Main CLI entry point for hooktool."""

import logging
import os
import sys

from hook_tooling.cli import pre_commit_cmd


def _configure_logging() -> None:
    level = logging.DEBUG if os.environ.get("HOOKTOOL_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    """Main CLI entry point."""
    _configure_logging()

    if len(sys.argv) < 2:
        print("Usage: hooktool <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  pre-commit             - Audit deps, format and re-stage staged files",
            file=sys.stderr,
        )
        print(
            "  pre-commit install     - Install the hook as .git/hooks/pre-commit",
            file=sys.stderr,
        )
        print(
            "  pre-commit fmt-config  - Print the flattened rustfmt --config argument",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "pre-commit":
        pre_commit_cmd.run_pre_commit_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
