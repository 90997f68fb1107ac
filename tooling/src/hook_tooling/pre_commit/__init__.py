"""Pre-commit hook: cargo audit, rustfmt/black on staged files, re-stage, fail fast."""

from hook_tooling.pre_commit.config import HookConfig
from hook_tooling.pre_commit.errors import ConfigError, HookStepError, Step
from hook_tooling.pre_commit.install import install_hook
from hook_tooling.pre_commit.runner import HookRunner, run_pre_commit

__all__ = [
    "ConfigError",
    "HookConfig",
    "HookRunner",
    "HookStepError",
    "Step",
    "install_hook",
    "run_pre_commit",
]
