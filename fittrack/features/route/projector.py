"""
Route Projector

Projects a sequence of geographic points onto a 2D canvas.

Longitude maps to x, latitude maps to y inverted (north is up,
canvas y grows downward). A single uniform scale keeps the aspect
ratio; the tighter axis sets the zoom and the other axis is centered.
"""

from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from fittrack.shared.constants import DEFAULT_ROUTE_PADDING, MIN_ROUTE_SPAN_DEG
from fittrack.features.tracking.schemas import TrackPoint

from .downsample import downsample_points


@dataclass(frozen=True)
class PathCommand:
    """One drawing command in canvas coordinates."""
    op: Literal["M", "L"]  # move-to / line-to
    x: float
    y: float


@dataclass(frozen=True)
class RoutePath:
    """Drawable route geometry."""
    commands: List[PathCommand]
    start_x: float
    start_y: float
    end_x: float
    end_y: float

    @property
    def d(self) -> str:
        """SVG path data, e.g. 'M16.0,84.0 L30.5,70.2'."""
        return " ".join(f"{c.op}{c.x:.1f},{c.y:.1f}" for c in self.commands)


def project(
    points: Sequence[TrackPoint],
    width: float,
    height: float,
    padding: float = DEFAULT_ROUTE_PADDING,
    max_points: Optional[int] = None,
) -> Optional[RoutePath]:
    """
    Project route points into canvas space.

    Args:
        points: Ordered track points
        width, height: Canvas size
        padding: Minimum margin on each side
        max_points: Downsample (index stride) before projecting

    Returns:
        RoutePath, or None when there are fewer than 2 points
    """
    if len(points) < 2:
        return None

    if max_points is not None:
        points = downsample_points(points, max_points)

    lats = [p.lat for p in points]
    lons = [p.lon for p in points]
    min_lat, max_lat = min(lats), max(lats)
    min_lon, max_lon = min(lons), max(lons)

    # Degenerate box (single location) would divide by zero
    lat_range = (max_lat - min_lat) or MIN_ROUTE_SPAN_DEG
    lon_range = (max_lon - min_lon) or MIN_ROUTE_SPAN_DEG

    scale = min(
        (width - padding * 2) / lon_range,
        (height - padding * 2) / lat_range,
    )
    off_x = (width - lon_range * scale) / 2
    off_y = (height - lat_range * scale) / 2

    def to_x(lon: float) -> float:
        return off_x + (lon - min_lon) * scale

    def to_y(lat: float) -> float:
        return height - off_y - (lat - min_lat) * scale

    commands = [
        PathCommand(op="M" if i == 0 else "L", x=to_x(p.lon), y=to_y(p.lat))
        for i, p in enumerate(points)
    ]

    return RoutePath(
        commands=commands,
        start_x=commands[0].x,
        start_y=commands[0].y,
        end_x=commands[-1].x,
        end_y=commands[-1].y,
    )
