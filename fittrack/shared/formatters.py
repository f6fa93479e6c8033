"""
Formatting utilities for display.

Used by the API and any client rendering live metrics.
"""

from typing import Literal, Union

# Paces slower than this (sec/km, 2 hours) are shown as a placeholder
MAX_DISPLAY_PACE_SEC = 7200

PACE_PLACEHOLDER = "--'--\""


def format_duration(
    seconds: float,
    show_hours: Union[bool, Literal["auto"]] = "auto"
) -> str:
    """
    Format duration as 'MM:SS' or 'H:MM:SS'.

    Args:
        seconds: Duration in seconds (negative treated as 0)
        show_hours: True to always show hours, "auto" to show them
                    only when duration >= 1 hour

    Returns:
        Formatted string (e.g., '05:07', '1:02:03')
    """
    total = max(0, int(seconds))
    h = total // 3600
    m = (total % 3600) // 60
    s = total % 60

    if show_hours is True or (show_hours == "auto" and h > 0):
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m:02d}:{s:02d}"


def format_pace(sec_per_km: float | None) -> str:
    """
    Format pace as M'SS".

    Args:
        sec_per_km: Pace in seconds per km

    Returns:
        Formatted string (e.g., 5'30"), placeholder when pace is unknown
        or unrealistically slow
    """
    if not sec_per_km or sec_per_km <= 0 or sec_per_km > MAX_DISPLAY_PACE_SEC:
        return PACE_PLACEHOLDER

    minutes = int(sec_per_km // 60)
    seconds = int(sec_per_km % 60 + 0.5)
    if seconds == 60:
        minutes += 1
        seconds = 0

    return f"{minutes}'{seconds:02d}\""


def format_distance(meters: float) -> str:
    """
    Format distance.

    Returns:
        '850 m' below one kilometer, otherwise '12.50 km'
    """
    if meters < 1000:
        return f"{int(meters + 0.5)} m"
    return f"{meters / 1000:.2f} km"


def format_distance_short(meters: float) -> str:
    """Format distance as bare kilometers with two decimals."""
    return f"{meters / 1000:.2f}"


def format_speed(kmh: float) -> str:
    """Format speed with one decimal."""
    return f"{kmh:.1f}"
