# timeline/lanes/lane_pool.py

import heapq
from datetime import datetime
from typing import List, Optional, Tuple


class LanePool:
    """
    Tracks which lanes are busy until when.

    Busy lanes sit in a min-heap keyed by the end of their last event. Once a
    lane's end is at or before the next start it moves to the free heap, keyed
    by lane index, so the lowest-numbered free lane is always reused first.
    Starts must be acquired in ascending order.
    """

    def __init__(self):
        self._busy: List[Tuple[datetime, int]] = []
        self._free: List[int] = []
        self._count = 0

    def acquire(self, start: datetime, end: datetime) -> Optional[int]:
        """Claim the lowest free lane for [start, end), or None if all are busy."""
        while self._busy and self._busy[0][0] <= start:
            _, lane_index = heapq.heappop(self._busy)
            heapq.heappush(self._free, lane_index)

        if not self._free:
            return None
        lane_index = heapq.heappop(self._free)
        heapq.heappush(self._busy, (end, lane_index))
        return lane_index

    def open(self, end: datetime) -> int:
        lane_index = self._count
        self._count += 1
        heapq.heappush(self._busy, (end, lane_index))
        return lane_index
