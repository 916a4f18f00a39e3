# timeline/sources/redis_source.py

import redis.asyncio as redis
import logging
import os
from typing import List
from timeline.api import Event

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")
EVENTS_KEY = os.getenv("TIMELINE_EVENTS_KEY", "timeline:events")


class RedisEventSource:
    """Read-only view of events stored as a redis list of JSON objects."""

    def __init__(self, url: str = REDIS_URL, key: str = EVENTS_KEY, client=None):
        self.url = url
        self.key = key
        self.redis = client

    async def connect(self):
        """Initialize Redis connection."""
        if self.redis is None:
            self.redis = await redis.from_url(self.url, decode_responses=True)

    async def load_events(self) -> List[Event]:
        await self.connect()
        raw = await self.redis.lrange(self.key, 0, -1)
        events = [Event.model_validate_json(item) for item in raw]
        logging.debug(f"Loaded {len(events)} events from {self.key}")
        return events
