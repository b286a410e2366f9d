from .runner import TreeWalker, load_spec

__all__ = ["TreeWalker", "load_spec"]
