# timeline/sources/base.py

from typing import List, Protocol
from timeline.api import Event


class EventSource(Protocol):
    async def load_events(self) -> List[Event]:
        ...
