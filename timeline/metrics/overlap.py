# timeline/metrics/overlap.py

from typing import Dict, Iterable, List
from timeline.api import Event

_END, _POINT, _START = 0, 1, 2


def max_concurrency(events: Iterable[Event]) -> int:
    """
    Largest number of events in progress at a single instant.

    This is the lower bound on any lane assignment. Touching endpoints do not
    overlap, and a zero-length event only collides with events that strictly
    contain its instant.
    """
    boundaries = []
    for event in events:
        if event.start_date == event.end_date:
            boundaries.append((event.start_date, _POINT))
        else:
            boundaries.append((event.start_date, _START))
            boundaries.append((event.end_date, _END))
    boundaries.sort()

    active = 0
    peak = 0
    for _, kind in boundaries:
        if kind == _END:
            active -= 1
        elif kind == _START:
            active += 1
            peak = max(peak, active)
        else:
            peak = max(peak, active + 1)
    return peak


def packing_stats(lanes: List[List[Event]]) -> Dict[str, object]:
    events = [event for lane in lanes for event in lane]
    return {
        "lane_count": len(lanes),
        "event_count": len(events),
        "max_concurrency": max_concurrency(events),
        "lane_sizes": [len(lane) for lane in lanes],
    }
