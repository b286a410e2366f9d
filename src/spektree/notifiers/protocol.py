"""Tree event notifier contract.

A tree walker calls, per node, ``on_start`` then exactly one of ``on_success`` /
``on_failure``, or ``on_ignore`` alone when the node is skipped. ``on_finish`` is
called once after the whole traversal. Implementations are plain classes that
satisfy :class:`TreeNotifier` structurally; no base class is involved.

The same events also exist as values (:class:`Started`, :class:`Succeeded`, ...)
for code that queues, records or replays them; :func:`dispatch` turns a value
back into the matching call.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable
from ..tree.node import Failure, SpecNode

@runtime_checkable
class TreeNotifier(Protocol):
    def on_start(self, node: SpecNode) -> None: ...
    def on_success(self, node: SpecNode) -> None: ...
    def on_failure(self, node: SpecNode, failure: Failure) -> None: ...
    def on_ignore(self, node: SpecNode) -> None: ...
    def on_finish(self) -> None: ...

@dataclass(frozen=True)
class Started:
    node: SpecNode

@dataclass(frozen=True)
class Succeeded:
    node: SpecNode

@dataclass(frozen=True)
class Failed:
    node: SpecNode
    failure: Failure

@dataclass(frozen=True)
class Ignored:
    node: SpecNode

@dataclass(frozen=True)
class Finished:
    pass

TreeEvent = Union[Started, Succeeded, Failed, Ignored, Finished]

def dispatch(notifier: TreeNotifier, event: TreeEvent) -> None:
    if isinstance(event, Started):
        notifier.on_start(event.node)
    elif isinstance(event, Succeeded):
        notifier.on_success(event.node)
    elif isinstance(event, Failed):
        notifier.on_failure(event.node, event.failure)
    elif isinstance(event, Ignored):
        notifier.on_ignore(event.node)
    elif isinstance(event, Finished):
        notifier.on_finish()
    else:
        raise TypeError(f"not a tree event: {event!r}")
