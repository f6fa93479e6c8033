"""
Workout metrics module.

Usage:
    from fittrack.features.metrics import pace, speed_kmh, calories
"""

from .engine import pace, speed_kmh, calories, live_metrics, LiveMetrics

__all__ = [
    "pace",
    "speed_kmh",
    "calories",
    "live_metrics",
    "LiveMetrics",
]
