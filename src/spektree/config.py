from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional
import yaml, pathlib
from .notifiers.protocol import TreeNotifier
from .notifiers.silent import SilentNotifier
from .notifiers.state import UnderflowPolicy
from .notifiers.verbose import VerboseNotifier
from .sinks.base import OutputSink
from .sinks.stream import StreamSink

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class NotifierConfig(BaseModel):
    kind: Literal["verbose", "silent"] = Field("verbose", description="verbose prints the tree, silent only counts")
    underflow: UnderflowPolicy = Field(UnderflowPolicy.CLAMP, description="clamp or raise on unbalanced completions")
    flush: bool = Field(False, description="flush the stream after every line")

class AppConfig(BaseModel):
    notifier: NotifierConfig = Field(default_factory=NotifierConfig)
    log_level: str = Field("INFO", description="DEBUG, INFO, WARNING, ERROR or CRITICAL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, v):
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level

def load_config(path: Optional[str] = None) -> AppConfig:
    if path is None:
        return AppConfig()
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    return AppConfig.model_validate(data)

def build_notifier(cfg: AppConfig, sink: Optional[OutputSink] = None) -> TreeNotifier:
    n = cfg.notifier
    if n.kind == "silent":
        return SilentNotifier(underflow=n.underflow)
    return VerboseNotifier(sink or StreamSink(flush=n.flush), underflow=n.underflow)
