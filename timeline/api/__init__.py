# timeline/api/__init__.py
from .schemas import Event, TimelineConfig, EventBlock, LaneLayout, AxisLabel, TimelineLayout
