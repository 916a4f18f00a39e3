# timeline/sources/static_source.py

from datetime import datetime
from typing import Iterable, List, Optional
from timeline.api import Event


def _event(id: str, name: str, start: str, end: str) -> Event:
    return Event(
        id=id,
        name=name,
        start_date=datetime.fromisoformat(start),
        end_date=datetime.fromisoformat(end),
    )


SAMPLE_EVENTS = [
    _event("1", "First item", "2020-01-01", "2020-01-05"),
    _event("2", "Second item", "2020-01-02", "2020-01-08"),
    _event("3", "Another item", "2020-01-06", "2020-01-13"),
    _event("4", "Another item", "2020-01-14", "2020-01-14"),
    _event("5", "Third item", "2020-02-01", "2020-02-15"),
    _event("6", "Fourth item with a super long name", "2020-01-12", "2020-02-16"),
    _event("7", "Fifth item with a super long name", "2020-01-01", "2020-01-02"),
    _event("8", "First item", "2020-01-18", "2020-01-19"),
    _event("9", "Second item", "2020-02-01", "2020-02-14"),
    _event("10", "Another item", "2020-01-03", "2020-01-04"),
    _event("11", "Another item", "2020-01-14", "2020-01-18"),
    _event("12", "Third item", "2020-02-03", "2020-02-06"),
]


class StaticEventSource:
    """In-memory events, the bundled sample timeline by default."""

    def __init__(self, events: Optional[Iterable[Event]] = None):
        self._events = list(SAMPLE_EVENTS if events is None else events)

    async def load_events(self) -> List[Event]:
        return list(self._events)
