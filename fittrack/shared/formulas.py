"""
Metabolic formulas for calorie calculations.

MET (metabolic equivalent) values per activity and speed tier.
Source: Compendium of Physical Activities.

These are calibration constants, not tunables.
"""

import math

from .constants import ActivityType, FALLBACK_MET


# (upper speed bound km/h exclusive, MET); last tier catches everything above
RUN_MET_TIERS = [
    (6.0, 6.0),
    (8.0, 8.3),
    (10.0, 9.8),
    (12.0, 11.0),
    (14.0, 12.8),
    (16.0, 14.5),
    (math.inf, 16.0),
]

BIKE_MET_TIERS = [
    (16.0, 4.0),
    (20.0, 6.0),
    (25.0, 8.0),
    (30.0, 10.0),
    (math.inf, 12.0),
]

# Activities whose MET does not depend on speed
CONSTANT_MET = {
    ActivityType.WALK: 3.5,
    ActivityType.HIKE: 6.0,
    ActivityType.SWIM: 7.0,
}


def _tier_lookup(tiers: list[tuple[float, float]], speed_kmh: float) -> float:
    for upper_bound, met in tiers:
        if speed_kmh < upper_bound:
            return met
    return tiers[-1][1]


def met_value(activity: str, speed_kmh: float) -> float:
    """
    Get MET for activity at given average speed.

    Args:
        activity: Activity id ("run", "bike", ...); unknown ids use FALLBACK_MET
        speed_kmh: Average speed in km/h

    Returns:
        MET value
    """
    try:
        activity_type = ActivityType(activity)
    except ValueError:
        return FALLBACK_MET

    if activity_type == ActivityType.RUN:
        return _tier_lookup(RUN_MET_TIERS, speed_kmh)
    if activity_type == ActivityType.BIKE:
        return _tier_lookup(BIKE_MET_TIERS, speed_kmh)
    return CONSTANT_MET.get(activity_type, FALLBACK_MET)


def round_half_up(value: float) -> int:
    """
    Round to nearest integer, halves away from zero.

    Python's round() uses banker's rounding (round(0.5) == 0), which
    would disagree with persisted records for exact halves.
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)
