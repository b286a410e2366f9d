from .base import OutputSink
from .stream import StreamSink
from .buffer import BufferSink

__all__ = ["OutputSink", "StreamSink", "BufferSink"]
