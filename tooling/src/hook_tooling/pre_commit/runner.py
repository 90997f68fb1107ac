"""Pre-commit hook runner: audit, then format and re-stage every staged file.

Protocol (fail-fast, first non-zero exit status wins):

1. run the dependency audit;
2. list staged paths once;
3. for each path in that order: print it, format it by extension
   (``rs``: rustfmt --check then rustfmt; ``py``: black; anything else:
   nothing), then ``git add`` it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Protocol, TextIO

from hook_tooling.helpers import extension_tag, flatten_fmt_config
from hook_tooling.pre_commit.config import HookConfig
from hook_tooling.pre_commit.errors import ConfigError, HookStepError, Step
from hook_tooling.pre_commit.tools import Auditor, BlackFormatter, GitIndex, RustFormatter

log = logging.getLogger(__name__)


class AuditorLike(Protocol):
    def run(self) -> int: ...


class IndexLike(Protocol):
    def list_staged(self) -> list[str]: ...

    def add(self, path: str) -> int: ...


class CheckingFormatter(Protocol):
    def check(self, path: str, config: str) -> int: ...

    def write(self, path: str, config: str) -> int: ...


class WritingFormatter(Protocol):
    def write(self, path: str) -> int: ...


class HookRunner:
    """Drives one hook invocation. Collaborators default to the real tools from config."""

    def __init__(
        self,
        project_root: Path,
        config: HookConfig | None = None,
        *,
        auditor: AuditorLike | None = None,
        index: IndexLike | None = None,
        rustfmt: CheckingFormatter | None = None,
        black: WritingFormatter | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.project_root = project_root
        self.config = config if config is not None else HookConfig()
        self.auditor = auditor or Auditor(self.config.audit, project_root)
        self.index = index or GitIndex(self.config.git, project_root)
        self.rustfmt = rustfmt or RustFormatter(self.config.rustfmt, project_root)
        self.black = black or BlackFormatter(self.config.black, project_root)
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def run(self) -> None:
        """Run the whole hook. Raises HookStepError on the first failing step."""
        rc = self.auditor.run()
        if rc != 0:
            raise HookStepError(Step.AUDIT, rc)

        staged = list(self.index.list_staged())
        log.debug("%d staged file(s)", len(staged))
        for path in staged:
            self.process_file(path)

    def process_file(self, path: str) -> None:
        """Format one staged path according to its extension, then re-stage it."""
        print(path, file=self.out, flush=True)
        tag = extension_tag(path)

        if tag == "rs":
            config = self.fmt_config()
            rc = self.rustfmt.check(path, config)
            if rc != 0:
                raise HookStepError(Step.CHECK, rc, path)
            rc = self.rustfmt.write(path, config)
            if rc != 0:
                raise HookStepError(Step.WRITE, rc, path)
        elif tag == "py":
            rc = self.black.write(path)
            if rc != 0:
                raise HookStepError(Step.WRITE, rc, path)
        else:
            log.debug("No formatter for %s (extension %r)", path, tag)

        rc = self.index.add(path)
        if rc != 0:
            raise HookStepError(Step.STAGE, rc, path)

    def fmt_config(self) -> str:
        """Read and flatten the rustfmt config. Re-read on every call."""
        p = self.config.fmt_config_path(self.project_root)
        try:
            raw = p.read_text(encoding="utf-8")
        except OSError as e:
            print(f"error: cannot read rustfmt config {p}: {e.strerror or e}", file=sys.stderr)
            raise HookStepError(Step.CONFIG, 1) from e
        return flatten_fmt_config(raw)


def run_pre_commit(
    project_root: Path,
    config: HookConfig | None = None,
    runner: HookRunner | None = None,
) -> int:
    """Run the pre-commit hook in project_root. Returns the exit status (0 on success)."""
    try:
        if runner is None:
            if config is None:
                config = HookConfig.load(project_root)
            runner = HookRunner(project_root, config)
        runner.run()
        return 0
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except HookStepError as e:
        log.debug("Hook aborted: %s", e)
        print(f"pre-commit: {e}", file=sys.stderr)
        return e.returncode
