# timeline/api/schemas.py

from datetime import datetime, timedelta, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, confloat, conint, field_validator


# -----------------------------
# 1. Event Model
# -----------------------------
class Event(BaseModel):
    """A named interval on the timeline.

    start_date <= end_date is checked by the lane engine, not here, so a
    source can hand over whatever it stores. Dates are held in UTC; naive
    values are read as UTC.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    start_date: datetime
    end_date: datetime

    @field_validator("start_date", "end_date")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @property
    def duration(self) -> timedelta:
        return self.end_date - self.start_date


# -----------------------------
# 2. Timeline Config (Renderer Parameters)
# -----------------------------
class TimelineConfig(BaseModel):
    width_per_day: confloat(ge=5, le=120) = Field(10.0, description="Horizontal units per day (zoom)")
    min_duration_days: conint(ge=1) = Field(1, description="Width floor for short events, in days")
    label_step_days: conint(gt=0) = Field(5, description="Days between date axis labels")
    date_format: str = Field("%b %d", description="strftime format for labels")


# -----------------------------
# 3. Layout Output
# -----------------------------
class EventBlock(BaseModel):
    event: Event
    offset_days: int
    duration_days: int
    x: float
    width: float
    label: str


class LaneLayout(BaseModel):
    index: int
    blocks: List[EventBlock] = Field(default_factory=list)


class AxisLabel(BaseModel):
    x: float
    text: str


class TimelineLayout(BaseModel):
    width_per_day: float
    total_days: int = 0
    total_width: float = 0.0
    axis: List[AxisLabel] = Field(default_factory=list)
    lanes: List[LaneLayout] = Field(default_factory=list)
