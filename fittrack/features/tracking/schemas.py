"""
Tracking schemas.

Pydantic models for position samples and retained track points.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PositionSample(BaseModel):
    """Single raw fix pushed by the position source."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    accuracy: Optional[float] = Field(default=None, ge=0)  # meters, lower = better
    speed: Optional[float] = None  # m/s
    altitude: Optional[float] = None  # meters


class TrackPoint(BaseModel):
    """Retained point of a recorded track."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float
