"""
Workout API schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from fittrack.shared.constants import ActivityInfo, ActivityType, GpsStatus, get_activity
from fittrack.shared.formatters import (
    format_distance,
    format_distance_short,
    format_duration,
    format_pace,
    format_speed,
)
from fittrack.features.metrics import LiveMetrics
from fittrack.features.route import RoutePath
from fittrack.features.tracking import PositionSample
from fittrack.features.workout import WorkoutPhase


class ActivityInfoResponse(BaseModel):
    """Catalog entry."""

    id: ActivityType
    label: str
    uses_pace: bool
    description: str

    @classmethod
    def from_info(cls, info: ActivityInfo) -> "ActivityInfoResponse":
        return cls(
            id=info.type,
            label=info.label,
            uses_pace=info.uses_pace,
            description=info.description,
        )


class StartWorkoutRequest(BaseModel):
    activity: ActivityType


class SamplesRequest(BaseModel):
    """Batch of samples in arrival order."""

    samples: List[PositionSample] = Field(min_length=1)


class SamplesResponse(BaseModel):
    queued: int
    pending: int


class StatusRequest(BaseModel):
    status: GpsStatus


class FormattedMetrics(BaseModel):
    """Display strings for live metrics."""

    duration: str
    distance: str
    distance_km: str
    pace: str
    speed: str


class LiveMetricsResponse(BaseModel):
    """Current workout state."""

    activity: ActivityType
    label: str
    uses_pace: bool  # show pace rather than speed
    phase: WorkoutPhase
    elapsed_seconds: int
    distance_m: float
    pace_sec_per_km: Optional[float] = None
    speed_kmh: float
    calories: int
    gps_status: GpsStatus
    point_count: int
    formatted: FormattedMetrics

    @classmethod
    def build(
        cls,
        activity: ActivityType,
        phase: WorkoutPhase,
        metrics: LiveMetrics,
    ) -> "LiveMetricsResponse":
        info = get_activity(activity)
        return cls(
            activity=activity,
            label=info.label,
            uses_pace=info.uses_pace,
            phase=phase,
            elapsed_seconds=metrics.elapsed_seconds,
            distance_m=metrics.distance_m,
            pace_sec_per_km=metrics.pace_sec_per_km,
            speed_kmh=metrics.speed_kmh,
            calories=metrics.calories,
            gps_status=metrics.gps_status,
            point_count=metrics.point_count,
            formatted=FormattedMetrics(
                duration=format_duration(metrics.elapsed_seconds),
                distance=format_distance(metrics.distance_m),
                distance_km=format_distance_short(metrics.distance_m),
                pace=format_pace(metrics.pace_sec_per_km),
                speed=format_speed(metrics.speed_kmh),
            ),
        )


class RoutePathResponse(BaseModel):
    """Drawable route; `d` is SVG path data."""

    d: str
    start_x: float
    start_y: float
    end_x: float
    end_y: float

    @classmethod
    def from_path(cls, path: RoutePath) -> "RoutePathResponse":
        return cls(
            d=path.d,
            start_x=path.start_x,
            start_y=path.start_y,
            end_x=path.end_x,
            end_y=path.end_y,
        )
