from __future__ import annotations
from ..tree.node import Failure, SpecNode
from .state import NotifierSnapshot, RunSummary, Tally, UnderflowPolicy

class SilentNotifier:
    """Keeps the same counters as VerboseNotifier without writing anything."""

    def __init__(self, initial: NotifierSnapshot | None = None,
                 underflow: UnderflowPolicy = UnderflowPolicy.CLAMP):
        self._tally = Tally(initial, underflow)

    def snapshot(self) -> NotifierSnapshot: return self._tally.snapshot()
    def summary(self) -> RunSummary: return self._tally.summary()
    def reset(self) -> None: self._tally.reset()

    def on_start(self, node: SpecNode) -> None:
        self._tally.push()

    def on_success(self, node: SpecNode) -> None:
        self._tally.pop(node)
        self._tally.passed(node)

    def on_failure(self, node: SpecNode, failure: Failure) -> None:
        self._tally.pop(node)
        self._tally.failed(node)

    def on_ignore(self, node: SpecNode) -> None:
        self._tally.ignored()

    def on_finish(self) -> None:
        pass
