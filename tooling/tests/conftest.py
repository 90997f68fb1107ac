"""Pytest fixtures for hook_tooling tests."""

from __future__ import annotations

from pathlib import Path

import pytest


class CallLog:
    """Ordered record of collaborator calls, shared by the stubs below."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def of(self, kind: str) -> list[tuple[str, ...]]:
        return [c for c in self.calls if c[0] == kind]


class StubAuditor:
    def __init__(self, log: CallLog, rc: int = 0) -> None:
        self.log = log
        self.rc = rc

    def run(self) -> int:
        self.log.calls.append(("audit",))
        return self.rc


class StubIndex:
    def __init__(
        self,
        log: CallLog,
        staged: list[str],
        add_rc: dict[str, int] | None = None,
    ) -> None:
        self.log = log
        self.staged = staged
        self.add_rc = add_rc or {}

    def list_staged(self) -> list[str]:
        self.log.calls.append(("list",))
        return list(self.staged)

    def add(self, path: str) -> int:
        self.log.calls.append(("add", path))
        return self.add_rc.get(path, 0)


class StubRustfmt:
    def __init__(
        self,
        log: CallLog,
        check_rc: dict[str, int] | None = None,
        write_rc: dict[str, int] | None = None,
    ) -> None:
        self.log = log
        self.check_rc = check_rc or {}
        self.write_rc = write_rc or {}

    def check(self, path: str, config: str) -> int:
        self.log.calls.append(("rustfmt-check", path, config))
        return self.check_rc.get(path, 0)

    def write(self, path: str, config: str) -> int:
        self.log.calls.append(("rustfmt-write", path, config))
        return self.write_rc.get(path, 0)


class StubBlack:
    def __init__(self, log: CallLog, write_rc: dict[str, int] | None = None) -> None:
        self.log = log
        self.write_rc = write_rc or {}

    def write(self, path: str) -> int:
        self.log.calls.append(("black", path))
        return self.write_rc.get(path, 0)


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def rust_project(tmp_path: Path) -> Path:
    """Project root with a tests/fmt.toml like the one rustfmt is run with."""
    (tmp_path / "tests").mkdir()
    (tmp_path / "tests" / "fmt.toml").write_text(
        'comment_width=100\nwrap_comments=true\nimports_granularity="Module"\n'
    )
    return tmp_path
