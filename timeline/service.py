# timeline/service.py

import asyncio
import logging
from typing import List, Optional
from timeline.api import Event, TimelineConfig, TimelineLayout
from timeline.lanes import InvalidIntervalError, assign_lanes
from timeline.layout import compute_layout
from timeline.metrics.overlap import packing_stats
from timeline.sources import EventSource


class TimelineService:
    """Feeds events from a source through the lane engine and into a layout."""

    def __init__(self, source: EventSource, config: Optional[TimelineConfig] = None):
        self.source = source
        self.config = config or TimelineConfig()

    # ------------------------------
    # Lanes
    # ------------------------------
    async def lanes(self) -> List[List[Event]]:
        events = await self.source.load_events()
        try:
            lanes = assign_lanes(events)
        except InvalidIntervalError as e:
            logging.warning(f"Rejected timeline: {e}")
            raise

        logging.info(f"Assigned {len(events)} events to {len(lanes)} lanes")
        for index, lane in enumerate(lanes):
            logging.debug(f"Lane {index}: {[event.id for event in lane]}")
        return lanes

    async def layout(self, width_per_day: Optional[float] = None) -> TimelineLayout:
        config = self.config
        if width_per_day is not None:
            config = TimelineConfig(**{**config.model_dump(), "width_per_day": width_per_day})
        return compute_layout(await self.lanes(), config)

    async def stats(self) -> dict:
        return packing_stats(await self.lanes())

    # ------------------------------
    # Live Feed
    # ------------------------------
    async def watch(self, poll_seconds: float = 1.0, stop_flag=None):
        """Yield a layout snapshot whenever the source's events change."""
        last_state = None

        while not (stop_flag and stop_flag()):
            snapshot = (await self.layout()).model_dump(mode="json")
            if snapshot != last_state:
                yield snapshot
                last_state = snapshot

            await asyncio.sleep(poll_seconds)

        logging.info("Timeline watch stopped")
