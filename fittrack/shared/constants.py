"""
Unified constants for activity types and GPS tracking.

This module provides a single source of truth for activity type naming
and the tracking filter thresholds across the entire application.
"""

from dataclasses import dataclass
from enum import Enum


class ActivityType(str, Enum):
    """
    Activity types a workout can be recorded as.

    Values are the persisted `actId` strings.
    """
    RUN = "run"
    BIKE = "bike"
    WALK = "walk"
    HIKE = "hike"
    SWIM = "swim"


class GpsStatus(str, Enum):
    """
    Position source status.

    Reported by the external position source and forwarded unchanged.
    """
    IDLE = "idle"
    ACQUIRING = "acquiring"
    OK = "ok"
    DENIED = "denied"
    UNAVAILABLE = "unavailable"


# Statuses where no usable position source exists
SIGNAL_LOST_STATUSES = frozenset({GpsStatus.DENIED, GpsStatus.UNAVAILABLE})


@dataclass(frozen=True)
class ActivityInfo:
    """Display metadata for an activity type."""
    type: ActivityType
    label: str
    uses_pace: bool  # show pace (min/km) instead of speed (km/h)
    description: str


# Catalog order is the display order
ACTIVITIES: tuple[ActivityInfo, ...] = (
    ActivityInfo(ActivityType.RUN, "Run", True, "Outdoor run"),
    ActivityInfo(ActivityType.BIKE, "Cycling", False, "Road / MTB"),
    ActivityInfo(ActivityType.WALK, "Walk", True, "Walk / Nordic walking"),
    ActivityInfo(ActivityType.HIKE, "Hike", True, "Trip into nature"),
    ActivityInfo(ActivityType.SWIM, "Swim", False, "Pool / open water"),
)


def get_activity(activity: str) -> ActivityInfo:
    """
    Look up catalog entry by activity id.

    Unknown ids fall back to the first entry (run).
    """
    for info in ACTIVITIES:
        if info.type.value == activity:
            return info
    return ACTIVITIES[0]


# =============================================================================
# Position Filtering
# =============================================================================

# Consecutive points closer than this (degrees, per axis) are GPS jitter (~0.1 m)
DEDUP_THRESHOLD_DEG = 1e-6

# Samples at or above this accuracy (meters) never add distance
MAX_DISTANCE_ACCURACY_M = 25.0

# Only fixes better than this (meters) may become the new reference
MAX_REFERENCE_ACCURACY_M = 20.0

# Per-step distance bounds (meters): below = stationary noise, above = teleport
MIN_STEP_DISTANCE_M = 1.0
MAX_STEP_DISTANCE_M = 200.0


# =============================================================================
# Metrics
# =============================================================================

# Below this distance pace is statistically meaningless
MIN_PACE_DISTANCE_M = 10.0

DEFAULT_WEIGHT_KG = 70.0

# MET used when activity type is unknown
FALLBACK_MET = 7.0


# =============================================================================
# Records
# =============================================================================

MAX_RECORD_POINTS = 500

# Minimum lat/lon span (degrees) for route projection of a single location
MIN_ROUTE_SPAN_DEG = 0.0001

DEFAULT_ROUTE_PADDING = 16.0
