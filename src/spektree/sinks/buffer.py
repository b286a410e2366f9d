from dataclasses import dataclass, field
from typing import List

@dataclass
class BufferSink:
    lines: List[str] = field(default_factory=list)

    def output(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()
