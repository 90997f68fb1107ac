"""Shared helpers for hook_tooling (text, path, command).

Used by the pre-commit runner, its config loader and the CLI.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

# --- Text ---


def flatten_fmt_config(raw: str) -> str:
    """Flatten a key="value" per line rustfmt config into one --config argument.

    Line breaks become commas, a single trailing comma is dropped and every
    double quote is removed: 'a="1"\\nb="2"\\n' -> 'a=1,b=2'.
    """
    text = raw.replace("\r\n", "\n").replace("\n", ",")
    if text.endswith(","):
        text = text[:-1]
    return text.replace('"', "")


# --- Path ---


def extension_tag(path: str) -> str:
    """Substring after the last '.' of the base name; '' when the name has no '.'."""
    name = PurePosixPath(path).name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def resolve_under(root: Path, p: str | Path) -> Path:
    """Return p if absolute, else root / p."""
    path = Path(p)
    return path if path.is_absolute() else root / path


# --- Command ---


def as_argv(value: str | Sequence[str]) -> list[str]:
    """Normalize a command given as a shell-like string or a list into argv. Raises ValueError if empty."""
    argv = shlex.split(value) if isinstance(value, str) else [str(x) for x in value]
    if not argv:
        msg = "command must not be empty"
        raise ValueError(msg)
    return argv
