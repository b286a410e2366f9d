from __future__ import annotations
import importlib
import logging
from typing import Any, Optional
from ..errors import SpecLoadError
from ..notifiers.protocol import TreeNotifier
from ..notifiers.state import RunSummary
from ..tree.node import Failure, SpecNode

log = logging.getLogger(__name__)

class TreeWalker:
    """Single-threaded depth-first walk that feeds one notifier.

    A failing group setup skips that group's children. Child failures are
    reported on the child only; the enclosing group still succeeds.
    """

    def __init__(self, notifier: TreeNotifier):
        self.notifier = notifier

    def run(self, root: SpecNode) -> Optional[RunSummary]:
        self.walk(root)
        self.notifier.on_finish()
        summary = getattr(self.notifier, "summary", None)
        return summary() if callable(summary) else None

    def walk(self, node: SpecNode) -> None:
        if node.pending:
            self.notifier.on_ignore(node)
            return
        self.notifier.on_start(node)
        try:
            if node.executable is not None:
                node.executable()
        except Exception as e:
            log.debug("%s failed", node.name, exc_info=True)
            self.notifier.on_failure(node, Failure.from_exception(e))
            return
        for child in node.children:
            self.walk(child)
        self.notifier.on_success(node)

def load_spec(target: str) -> SpecNode:
    """Resolve ``package.module[:attr]`` to a SpecNode; ``attr`` defaults to ``spec``.

    Anything that goes wrong while importing the module or building the tree
    is reported as SpecLoadError.
    """
    mod_name, _, attr = target.partition(":")
    attr = attr or "spec"
    if not mod_name or mod_name.startswith("."):
        raise SpecLoadError(f"{target!r} needs an absolute module name, e.g. mypkg.specs:spec")
    try:
        mod = importlib.import_module(mod_name)
    except Exception as e:
        raise SpecLoadError(f"cannot import {mod_name!r}: {e}") from e
    try:
        obj: Any = getattr(mod, attr)
    except AttributeError:
        raise SpecLoadError(f"{mod_name!r} has no attribute {attr!r}") from None
    if callable(obj) and not isinstance(obj, SpecNode):
        try:
            obj = obj()
        except Exception as e:
            raise SpecLoadError(f"{target!r} raised while building the tree: {e!r}") from e
    if not isinstance(obj, SpecNode):
        raise SpecLoadError(f"{target!r} resolved to {type(obj).__name__}, not SpecNode")
    return obj
