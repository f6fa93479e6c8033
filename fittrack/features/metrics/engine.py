"""
Workout metrics.

Pure functions deriving pace, speed and calories from
distance, duration and activity type.

Calories = MET × weight_kg × hours, where MET depends on activity
and (for run/bike) on average speed. See shared/formulas.py.
"""

from dataclasses import dataclass
from typing import Optional

from fittrack.shared.constants import (
    DEFAULT_WEIGHT_KG,
    GpsStatus,
    MIN_PACE_DISTANCE_M,
)
from fittrack.shared.formulas import met_value, round_half_up


def pace(distance_m: float, duration_sec: float) -> Optional[float]:
    """
    Average pace.

    Returns:
        Seconds per km, or None below MIN_PACE_DISTANCE_M
    """
    if distance_m < MIN_PACE_DISTANCE_M:
        return None
    return duration_sec / (distance_m / 1000)


def speed_kmh(distance_m: float, duration_sec: float) -> float:
    """Average speed in km/h (0 for non-positive duration)."""
    if duration_sec <= 0:
        return 0.0
    return (distance_m / 1000) / (duration_sec / 3600)


def calories(
    activity: str,
    distance_m: float,
    duration_sec: float,
    weight_kg: float = DEFAULT_WEIGHT_KG
) -> int:
    """
    Estimate burned calories.

    Args:
        activity: Activity id ("run", "bike", "walk", "hike", "swim")
        distance_m: Distance in meters
        duration_sec: Duration in seconds
        weight_kg: Body weight

    Returns:
        Kilocalories, rounded to integer
    """
    if duration_sec <= 0:
        return 0

    hours = duration_sec / 3600
    avg_speed = (distance_m / 1000) / hours if distance_m > 0 else 0.0
    met = met_value(activity, avg_speed)

    return round_half_up(met * weight_kg * hours)


@dataclass(frozen=True)
class LiveMetrics:
    """Snapshot of metrics for display during a workout."""
    elapsed_seconds: int
    distance_m: float
    pace_sec_per_km: Optional[float]
    speed_kmh: float
    calories: int
    gps_status: GpsStatus
    point_count: int


def live_metrics(
    activity: str,
    distance_m: float,
    elapsed_seconds: int,
    current_speed_mps: float = 0.0,
    weight_kg: float = DEFAULT_WEIGHT_KG,
    gps_status: GpsStatus = GpsStatus.IDLE,
    point_count: int = 0,
) -> LiveMetrics:
    """
    Build live display metrics.

    Speed prefers the sensor's instantaneous reading and falls back
    to the average over the workout.
    """
    if current_speed_mps > 0:
        display_speed = current_speed_mps * 3.6
    else:
        display_speed = speed_kmh(distance_m, elapsed_seconds)

    return LiveMetrics(
        elapsed_seconds=elapsed_seconds,
        distance_m=distance_m,
        pace_sec_per_km=pace(distance_m, elapsed_seconds),
        speed_kmh=display_speed,
        calories=calories(activity, distance_m, elapsed_seconds, weight_kg),
        gps_status=gps_status,
        point_count=point_count,
    )
