"""Hook configuration: tool commands and the rustfmt config location.

Optional ``hooktool.yaml`` at the project root overrides the defaults::

    audit: cargo audit --deny warnings
    rustfmt: [rustup, run, nightly, rustfmt]
    black: black --quiet
    fmt_config: tests/fmt.toml

Commands may be a string (split like a shell would) or a list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from hook_tooling.helpers import as_argv, resolve_under
from hook_tooling.pre_commit.errors import ConfigError

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "hooktool.yaml"

DEFAULT_HOOK_CONFIG: dict[str, Any] = {
    "audit": ["cargo", "audit"],
    "rustfmt": ["rustfmt"],
    "black": ["black"],
    "git": ["git"],
    "fmt_config": "tests/fmt.toml",
}

_COMMAND_KEYS = ("audit", "rustfmt", "black", "git")


@dataclass
class HookConfig:
    """Commands the hook shells out to, plus where the rustfmt config lives."""

    audit: list[str] = field(default_factory=lambda: list(DEFAULT_HOOK_CONFIG["audit"]))
    rustfmt: list[str] = field(default_factory=lambda: list(DEFAULT_HOOK_CONFIG["rustfmt"]))
    black: list[str] = field(default_factory=lambda: list(DEFAULT_HOOK_CONFIG["black"]))
    git: list[str] = field(default_factory=lambda: list(DEFAULT_HOOK_CONFIG["git"]))
    fmt_config: str = DEFAULT_HOOK_CONFIG["fmt_config"]

    @classmethod
    def load(cls, project_root: Path, config_path: Path | None = None) -> HookConfig:
        """Load configuration, falling back to defaults.

        Search order:
        1. Explicit ``config_path`` argument
        2. ``hooktool.yaml`` in project_root
        3. Built-in defaults

        Raises ConfigError when the file found is not a valid mapping.
        """
        search_paths: list[Path] = []
        if config_path is not None:
            search_paths.append(resolve_under(project_root, config_path))
        search_paths.append(project_root / CONFIG_FILE_NAME)

        for path in search_paths:
            if not path.is_file():
                continue
            log.debug("Loading hook config from %s", path)
            try:
                with path.open(encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                msg = f"Could not parse {path}: {e}"
                raise ConfigError(msg) from e
            if loaded is None:
                return cls()
            if not isinstance(loaded, dict):
                msg = f"{path}: expected a mapping at top level"
                raise ConfigError(msg)
            return cls.from_raw(loaded, source=path)

        if config_path is not None:
            msg = f"Config file not found: {config_path}"
            raise ConfigError(msg)
        return cls()

    @classmethod
    def from_raw(cls, raw: dict[str, Any], source: Path | None = None) -> HookConfig:
        """Build config from a raw dict; unknown keys are ignored."""
        where = f"{source}: " if source else ""
        cfg = cls()
        for key in _COMMAND_KEYS:
            if key not in raw:
                continue
            value = raw[key]
            if not isinstance(value, (str, list)):
                msg = f"{where}'{key}' must be a string or a list"
                raise ConfigError(msg)
            try:
                setattr(cfg, key, as_argv(value))
            except ValueError as e:
                msg = f"{where}'{key}': {e}"
                raise ConfigError(msg) from e

        if "fmt_config" in raw:
            value = raw["fmt_config"]
            if not isinstance(value, str) or not value:
                msg = f"{where}'fmt_config' must be a non-empty path"
                raise ConfigError(msg)
            cfg.fmt_config = value

        unknown = sorted(set(raw) - set(DEFAULT_HOOK_CONFIG))
        if unknown:
            log.warning("Ignoring unknown hook config keys: %s", ", ".join(map(str, unknown)))
        return cfg

    def fmt_config_path(self, project_root: Path) -> Path:
        """rustfmt config file, resolved against project_root unless absolute."""
        return resolve_under(project_root, self.fmt_config)
