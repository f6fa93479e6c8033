"""
GPS tracking module.

Usage:
    from fittrack.features.tracking import PositionIngest, PositionSample
    from fittrack.features.tracking import SampleChannel, ClockTick

Components:
- PositionSample, TrackPoint: Pydantic schemas for raw fixes and track points
- PositionIngest: Filter samples, accumulate distance, retain track
- SampleChannel: Single-consumer event channel feeding the engine
"""

from .schemas import PositionSample, TrackPoint
from .ingest import PositionIngest, IngestResult, TrackView
from .channel import SampleChannel, ClockTick, ChannelEvent

__all__ = [
    # Schemas
    "PositionSample",
    "TrackPoint",
    # Services
    "PositionIngest",
    "IngestResult",
    "TrackView",
    "SampleChannel",
    "ClockTick",
    "ChannelEvent",
]
