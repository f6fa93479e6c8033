"""
Activity record assembly.

Freezes a finished workout into an ActivityRecord.
"""

from datetime import datetime
from typing import Sequence

from fittrack.shared.constants import DEFAULT_WEIGHT_KG, MAX_RECORD_POINTS
from fittrack.shared.formulas import round_half_up
from fittrack.features.metrics import calories, pace, speed_kmh
from fittrack.features.route import downsample_points
from fittrack.features.tracking.schemas import TrackPoint

from .schemas import ActivityRecord


def build_activity_record(
    activity: str,
    started_at: datetime,
    finished_at: datetime,
    duration_sec: int,
    distance_m: float,
    points: Sequence[TrackPoint],
    weight_kg: float = DEFAULT_WEIGHT_KG,
    max_points: int = MAX_RECORD_POINTS,
) -> ActivityRecord:
    """
    Assemble persistable record from final workout values.

    Metrics use the unrounded distance; only the stored distance is rounded.

    Args:
        activity: Activity id
        started_at: Workout start (timezone-aware; gives date and local time label)
        finished_at: Finish instant (gives record id)
        duration_sec: Final elapsed seconds
        distance_m: Final accumulated distance
        points: Retained track points
        weight_kg: Body weight for calories
        max_points: Track length limit (index-stride downsampled above it)
    """
    return ActivityRecord(
        id=int(finished_at.timestamp() * 1000),
        activity=activity,
        date=started_at,
        time=started_at.strftime("%H:%M"),
        duration=duration_sec,
        distance_m=round_half_up(distance_m),
        calories=calories(activity, distance_m, duration_sec, weight_kg),
        avg_pace=pace(distance_m, duration_sec),
        avg_speed_kmh=speed_kmh(distance_m, duration_sec),
        points=downsample_points(points, max_points),
    )
