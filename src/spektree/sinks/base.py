from typing import Protocol, runtime_checkable

@runtime_checkable
class OutputSink(Protocol):
    """Destination for report lines. One call writes one line; the sink adds the newline."""
    def output(self, line: str) -> None: ...
