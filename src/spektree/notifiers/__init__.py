from .protocol import TreeNotifier, TreeEvent, Started, Succeeded, Failed, Ignored, Finished, dispatch
from .state import NotifierSnapshot, RunSummary, UnderflowPolicy
from .verbose import VerboseNotifier
from .silent import SilentNotifier
from .recording import RecordingNotifier

__all__ = [
    "TreeNotifier", "TreeEvent", "Started", "Succeeded", "Failed", "Ignored", "Finished", "dispatch",
    "NotifierSnapshot", "RunSummary", "UnderflowPolicy",
    "VerboseNotifier", "SilentNotifier", "RecordingNotifier",
]
