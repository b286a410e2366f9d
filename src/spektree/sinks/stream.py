import sys
from typing import Optional, TextIO

class StreamSink:
    def __init__(self, stream: Optional[TextIO] = None, flush: bool = False):
        self.stream = stream
        self.flush = flush

    def output(self, line: str) -> None:
        # resolve stdout lazily so capture tools that swap sys.stdout still see the lines
        print(line, file=self.stream or sys.stdout, flush=self.flush)
