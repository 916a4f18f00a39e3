# timeline/utils/event_utils.py

from typing import Iterable, List
from timeline.api import Event


def chronological_key(event: Event):
    """Start, end, id, then name, so ties sort the same on every run."""
    return (event.start_date, event.end_date, event.id, event.name)


def sort_events(events: Iterable[Event]) -> List[Event]:
    return sorted(events, key=chronological_key)
