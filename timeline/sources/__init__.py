# timeline/sources/__init__.py

import os
from typing import Optional
from .base import EventSource
from .redis_source import RedisEventSource
from .static_source import SAMPLE_EVENTS, StaticEventSource


def build_source(kind: Optional[str] = None) -> EventSource:
    kind = kind or os.getenv("TIMELINE_SOURCE", "static")
    if kind == "static":
        return StaticEventSource()
    if kind == "redis":
        return RedisEventSource()
    raise ValueError(f"Unsupported event source: {kind}")
