from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

class ActionType(str, Enum):
    GROUP = "group"
    TEST = "test"

@dataclass(frozen=True)
class SpecNode:
    """One point in the test tree. Notifiers only look at name and kind."""
    name: str
    kind: ActionType = ActionType.TEST
    executable: Optional[Any] = None
    children: Tuple["SpecNode", ...] = field(default_factory=tuple)
    pending: bool = False

    def __post_init__(self):
        # accept any iterable of children but store an immutable, ordered tuple
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_group(self) -> bool:
        return self.kind is ActionType.GROUP

    @property
    def counts_as_test(self) -> bool:
        return not self.is_group

@dataclass(frozen=True)
class Failure:
    message: str
    kind: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Failure":
        return cls(message=str(exc), kind=error_kind(exc))

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"

def error_kind(exc: BaseException) -> str:
    t = type(exc)
    if t.__module__ == "builtins":
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"
