"""
Route geometry module.

Usage:
    from fittrack.features.route import project, downsample_points

Components:
- project: Geographic points -> canvas path (RoutePath)
- downsample_points: Index-stride reduction of long tracks
"""

from .projector import project, RoutePath, PathCommand
from .downsample import downsample_points

__all__ = [
    "project",
    "RoutePath",
    "PathCommand",
    "downsample_points",
]
