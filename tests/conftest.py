"""Shared helpers for the timeline tests.

Also ensures the project root is on sys.path so 'import timeline' works
without an install.
"""

from __future__ import annotations

import sys
from datetime import datetime, timedelta
from pathlib import Path

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from timeline.api import Event  # noqa: E402

BASE = datetime(2024, 1, 1)


def make_event(id: str, start: float, end: float, name: str = "") -> Event:
    """Event spanning [start, end) in days from BASE."""
    return Event(
        id=id,
        name=name or id,
        start_date=BASE + timedelta(days=start),
        end_date=BASE + timedelta(days=end),
    )
