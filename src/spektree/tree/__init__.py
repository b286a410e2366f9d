from .node import ActionType, SpecNode, Failure
from .dsl import describe, it, xdescribe, xit

__all__ = ["ActionType", "SpecNode", "Failure", "describe", "it", "xdescribe", "xit"]
