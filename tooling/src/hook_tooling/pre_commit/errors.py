"""Failures raised by the pre-commit hook. Every one of them aborts the run."""

from __future__ import annotations

from enum import Enum


class Step(str, Enum):
    """Hook step that produced a failure."""

    AUDIT = "audit"
    ENUMERATE = "enumerate"
    CONFIG = "config"
    CHECK = "check"
    WRITE = "write"
    STAGE = "stage"


class HookStepError(RuntimeError):
    """A hook step exited non-zero. returncode is what the hook itself exits with."""

    def __init__(self, step: Step, returncode: int, path: str | None = None) -> None:
        self.step = step
        if returncode < 0:
            # Killed by signal N: report 128 + N like a shell does.
            returncode = 128 - returncode
        self.returncode = returncode if returncode != 0 else 1
        self.path = path
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f" ({self.path})" if self.path else ""
        return f"{self.step.value} step failed{where} with exit status {self.returncode}"


class ConfigError(ValueError):
    """Invalid hooktool.yaml."""
