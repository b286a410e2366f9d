# Lightweight package init: avoid eager imports of the CLI stack at import time.
__all__ = ["SpecNode", "ActionType", "Failure", "VerboseNotifier", "TreeWalker"]

def __getattr__(name):
    if name in ("SpecNode", "ActionType", "Failure"):
        from .tree import node as _node
        return getattr(_node, name)
    if name == "VerboseNotifier":
        from .notifiers.verbose import VerboseNotifier as _VerboseNotifier
        return _VerboseNotifier
    if name == "TreeWalker":
        from .runners.runner import TreeWalker as _TreeWalker
        return _TreeWalker
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
