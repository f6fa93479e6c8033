"""
History schemas.

ActivityRecord is the stable JSON contract with the History Store:

    {id, actId, date, time, duration, distanceM, calories,
     avgPace, avgSpeedKmh, points: [{lat, lon}, ...]}

Python attribute names are snake_case; the camelCase aliases are
what gets persisted.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from fittrack.shared.constants import ActivityType, MAX_RECORD_POINTS
from fittrack.features.tracking.schemas import TrackPoint


class ActivityRecord(BaseModel):
    """Completed workout. Immutable once created."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int  # creation time, epoch milliseconds
    activity: ActivityType = Field(alias="actId")
    date: datetime  # workout start, ISO-8601
    time: str  # local "HH:MM" label
    duration: int = Field(ge=0)  # seconds
    distance_m: int = Field(alias="distanceM", ge=0)
    calories: int = Field(ge=0)
    avg_pace: Optional[float] = Field(default=None, alias="avgPace")  # sec/km
    avg_speed_kmh: float = Field(alias="avgSpeedKmh", ge=0)
    points: List[TrackPoint] = Field(default_factory=list, max_length=MAX_RECORD_POINTS)

    def to_json_dict(self) -> dict:
        """Serialize to the persisted camelCase shape."""
        return self.model_dump(mode="json", by_alias=True)


# Validates/dumps whole history documents
ActivityHistory = TypeAdapter(List[ActivityRecord])


class ActivityTotals(BaseModel):
    """Per-activity aggregate."""

    activity: ActivityType
    label: str
    count: int
    distance_km: float


class HistoryStats(BaseModel):
    """Aggregate statistics over the whole history."""

    count: int = 0
    distance_km: float = 0.0
    duration_sec: int = 0
    calories: int = 0
    by_activity: List[ActivityTotals] = Field(default_factory=list)
    best: Optional[ActivityRecord] = None  # longest distance
