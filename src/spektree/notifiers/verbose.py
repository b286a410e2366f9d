from __future__ import annotations
from ..sinks.base import OutputSink
from ..tree.node import Failure, SpecNode
from .colors import green, red, yellow
from .state import NotifierSnapshot, RunSummary, Tally, UnderflowPolicy

INDENT = "  "

class VerboseNotifier:
    """Writes the run as an indented, colored stream and keeps pass/fail/ignore counts.

    Not thread safe: one walker owns one instance. Completion events without a
    matching start either clamp at depth 0 (default) or raise
    IndentationUnderflowError, depending on ``underflow``.
    """

    def __init__(self, sink: OutputSink, initial: NotifierSnapshot | None = None,
                 underflow: UnderflowPolicy = UnderflowPolicy.CLAMP):
        self.sink = sink
        self._tally = Tally(initial, underflow)

    @property
    def indentation(self) -> int:
        return self._tally.indentation

    def snapshot(self) -> NotifierSnapshot:
        return self._tally.snapshot()

    def summary(self) -> RunSummary:
        return self._tally.summary()

    def reset(self) -> None:
        self._tally.reset()

    def on_start(self, node: SpecNode) -> None:
        self.sink.output(INDENT * self._tally.indentation + node.name)
        self._tally.push()

    def on_success(self, node: SpecNode) -> None:
        self._tally.pop(node)
        self._tally.passed(node)

    def on_failure(self, node: SpecNode, failure: Failure) -> None:
        depth = self._tally.indentation
        self._tally.pop(node)
        self.sink.output("")
        self.sink.output(INDENT * depth + red(f"Failed: {failure.message} {failure}"))
        self.sink.output("")
        self._tally.failed(node)

    def on_ignore(self, node: SpecNode) -> None:
        self.sink.output(yellow(f"Ignored pending test: {node.name}"))
        self._tally.ignored()

    def on_finish(self) -> None:
        s = self._tally.snapshot()
        self.sink.output("")
        self.sink.output(f"Found {s.total} tests")
        self.sink.output(green(f"  {s.passed} tests passed"))
        self.sink.output(red(f"  {s.failed} tests failed"))
        self.sink.output(yellow(f"  {s.ignored} tests ignored"))
