# timeline/__init__.py
from .api import Event, TimelineConfig, TimelineLayout
from .lanes import InvalidIntervalError, LanePool, assign_lanes
from .layout import compute_layout
from .service import TimelineService
from .sources import EventSource, RedisEventSource, StaticEventSource
