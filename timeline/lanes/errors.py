# timeline/lanes/errors.py

from timeline.api import Event


class InvalidIntervalError(ValueError):
    """Raised when an event ends before it starts."""

    def __init__(self, event: Event):
        self.event = event
        self.event_id = event.id
        super().__init__(
            f"Event {event.id} ends before it starts "
            f"(start={event.start_date.isoformat()}, end={event.end_date.isoformat()})"
        )
