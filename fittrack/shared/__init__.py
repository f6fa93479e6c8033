"""
Shared utilities (NOT business logic).

Usage:
    from fittrack.shared import haversine, met_value
    from fittrack.shared.formatters import format_pace
"""
from .geo import (
    haversine,
    EARTH_RADIUS_M,
)
from .formatters import (
    format_duration,
    format_pace,
    format_distance,
    format_distance_short,
    format_speed,
)
from .formulas import (
    met_value,
    round_half_up,
)
from .constants import (
    ActivityType,
    ActivityInfo,
    GpsStatus,
    ACTIVITIES,
    MAX_RECORD_POINTS,
    get_activity,
)

__all__ = [
    # geo
    "haversine",
    "EARTH_RADIUS_M",
    # formatters
    "format_duration",
    "format_pace",
    "format_distance",
    "format_distance_short",
    "format_speed",
    # formulas
    "met_value",
    "round_half_up",
    # constants
    "ActivityType",
    "ActivityInfo",
    "GpsStatus",
    "ACTIVITIES",
    "MAX_RECORD_POINTS",
    "get_activity",
]
