from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum
from ..errors import IndentationUnderflowError
from ..tree.node import SpecNode

log = logging.getLogger(__name__)

class UnderflowPolicy(str, Enum):
    CLAMP = "clamp"
    RAISE = "raise"

@dataclass(frozen=True)
class NotifierSnapshot:
    indentation: int = 0
    passed: int = 0
    failed: int = 0
    ignored: int = 0

    def __post_init__(self):
        for name in ("indentation", "passed", "failed", "ignored"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.ignored

@dataclass(frozen=True)
class RunSummary:
    """Read-only counters handed to whoever drives the run."""
    passed: int
    failed: int
    ignored: int

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.ignored

    @property
    def ok(self) -> bool:
        return self.failed == 0

class Tally:
    """Indentation and counters shared by the notifiers that keep score."""

    def __init__(self, initial: NotifierSnapshot | None = None,
                 underflow: UnderflowPolicy = UnderflowPolicy.CLAMP):
        self.underflow = UnderflowPolicy(underflow)
        self._state = initial or NotifierSnapshot()

    @property
    def indentation(self) -> int:
        return self._state.indentation

    def snapshot(self) -> NotifierSnapshot:
        return self._state

    def summary(self) -> RunSummary:
        s = self._state
        return RunSummary(s.passed, s.failed, s.ignored)

    def reset(self) -> None:
        self._state = NotifierSnapshot()

    def push(self) -> None:
        self._state = replace(self._state, indentation=self._state.indentation + 1)

    def pop(self, node: SpecNode) -> None:
        depth = self._state.indentation
        if depth == 0:
            if self.underflow is UnderflowPolicy.RAISE:
                raise IndentationUnderflowError(f"{node.name!r} completed without a matching start")
            log.warning("unbalanced completion for %r; indentation kept at 0", node.name)
            return
        self._state = replace(self._state, indentation=depth - 1)

    def passed(self, node: SpecNode) -> None:
        if node.counts_as_test:
            self._state = replace(self._state, passed=self._state.passed + 1)

    def failed(self, node: SpecNode) -> None:
        if node.counts_as_test:
            self._state = replace(self._state, failed=self._state.failed + 1)

    def ignored(self) -> None:
        self._state = replace(self._state, ignored=self._state.ignored + 1)
