from __future__ import annotations
from typing import List, Optional
from ..tree.node import Failure, SpecNode
from .protocol import Failed, Finished, Ignored, Started, Succeeded, TreeEvent, TreeNotifier, dispatch

class RecordingNotifier:
    """Stores every event as a value, optionally forwarding it to another notifier."""

    def __init__(self, forward: Optional[TreeNotifier] = None):
        self.events: List[TreeEvent] = []
        self.forward = forward

    def _record(self, event: TreeEvent) -> None:
        self.events.append(event)
        if self.forward is not None:
            dispatch(self.forward, event)

    def on_start(self, node: SpecNode) -> None: self._record(Started(node))
    def on_success(self, node: SpecNode) -> None: self._record(Succeeded(node))
    def on_failure(self, node: SpecNode, failure: Failure) -> None: self._record(Failed(node, failure))
    def on_ignore(self, node: SpecNode) -> None: self._record(Ignored(node))
    def on_finish(self) -> None: self._record(Finished())

    def replay(self, target: TreeNotifier) -> None:
        for event in self.events:
            dispatch(target, event)
