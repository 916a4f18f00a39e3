# timeline/lanes/__init__.py
from .engine import assign_lanes, validate_events
from .errors import InvalidIntervalError
from .lane_pool import LanePool
