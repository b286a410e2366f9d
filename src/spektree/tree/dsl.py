from typing import Callable, Optional
from .node import ActionType, SpecNode

def describe(name: str, *children: SpecNode, setup: Optional[Callable[[], None]] = None) -> SpecNode:
    return SpecNode(name, ActionType.GROUP, setup, children)

def it(name: str, fn: Optional[Callable[[], None]] = None) -> SpecNode:
    return SpecNode(name, ActionType.TEST, fn)

def xdescribe(name: str, *children: SpecNode) -> SpecNode:
    return SpecNode(name, ActionType.GROUP, None, children, pending=True)

def xit(name: str, fn: Optional[Callable[[], None]] = None) -> SpecNode:
    return SpecNode(name, ActionType.TEST, fn, pending=True)
