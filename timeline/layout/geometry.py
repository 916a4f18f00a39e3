# timeline/layout/geometry.py

from datetime import timedelta
from typing import List, Optional
from timeline.api import (
    AxisLabel,
    Event,
    EventBlock,
    LaneLayout,
    TimelineConfig,
    TimelineLayout,
)

DAY = timedelta(days=1)


def whole_days(delta: timedelta) -> int:
    return delta // DAY


def compute_layout(lanes: List[List[Event]], config: Optional[TimelineConfig] = None) -> TimelineLayout:
    """
    Map lanes to horizontal geometry.

    Each block sits at its start's whole-day offset from the earliest start
    and is as wide as its duration in whole days, never narrower than
    `min_duration_days`. Axis labels run every `label_step_days` from the
    earliest start.
    """
    config = config or TimelineConfig()
    scale = config.width_per_day

    all_events = [event for lane in lanes for event in lane]
    if not all_events:
        return TimelineLayout(width_per_day=scale)

    min_start = min(event.start_date for event in all_events)
    max_end = max(event.end_date for event in all_events)
    total_days = whole_days(max_end - min_start)

    lane_layouts = []
    right_edge = total_days
    for index, lane in enumerate(lanes):
        blocks = []
        for event in lane:
            offset = whole_days(event.start_date - min_start)
            duration = max(config.min_duration_days, whole_days(event.duration))
            right_edge = max(right_edge, offset + duration)
            blocks.append(
                EventBlock(
                    event=event,
                    offset_days=offset,
                    duration_days=duration,
                    x=offset * scale,
                    width=duration * scale,
                    label=(
                        f"{event.start_date.strftime(config.date_format)} - "
                        f"{event.end_date.strftime(config.date_format)}"
                    ),
                )
            )
        lane_layouts.append(LaneLayout(index=index, blocks=blocks))

    step = config.label_step_days
    axis = [
        AxisLabel(
            x=i * step * scale,
            text=(min_start + i * step * DAY).strftime(config.date_format),
        )
        for i in range(total_days // step + 1)
    ]

    return TimelineLayout(
        width_per_day=scale,
        total_days=total_days,
        total_width=right_edge * scale,
        axis=axis,
        lanes=lane_layouts,
    )
