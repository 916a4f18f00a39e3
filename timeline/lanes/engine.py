# timeline/lanes/engine.py

from typing import Iterable, List
from timeline.api import Event
from timeline.lanes.errors import InvalidIntervalError
from timeline.lanes.lane_pool import LanePool
from timeline.utils.event_utils import chronological_key, sort_events


def validate_events(events: Iterable[Event]):
    for event in events:
        if event.start_date > event.end_date:
            raise InvalidIntervalError(event)


def assign_lanes(events: Iterable[Event]) -> List[List[Event]]:
    """
    Partition events into the fewest lanes with no overlap inside a lane.

    Events are visited in (start, end, id) order. Each one goes to the
    lowest-numbered lane whose last event ends at or before it starts
    (back-to-back events share a lane), otherwise it opens a new lane.
    Lanes come back ordered by their first event.

    Raises:
        InvalidIntervalError: an event ends before it starts. Nothing is
            assigned in that case.
    """
    events = list(events)
    validate_events(events)
    if not events:
        return []

    lanes: List[List[Event]] = []
    pool = LanePool()

    for event in sort_events(events):
        lane_index = pool.acquire(event.start_date, event.end_date)
        if lane_index is None:
            pool.open(event.end_date)
            lanes.append([event])
        else:
            lanes[lane_index].append(event)

    lanes.sort(key=lambda lane: chronological_key(lane[0]))
    return lanes
