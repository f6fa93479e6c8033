"""
Position Ingest

Filters raw position samples, accumulates total distance and
retains a deduplicated track of points.

Three filters run on every sample:
- Dedup: points closer than DEDUP_THRESHOLD_DEG on both axes are not retained
- Accuracy gate: only fixes better than MAX_DISTANCE_ACCURACY_M add distance
- Step bounds: steps outside (MIN_STEP_DISTANCE_M, MAX_STEP_DISTANCE_M)
  are noise at rest or teleports after signal reacquisition

Distance is measured from a reference position, not the previous sample.
The reference only moves on high-quality fixes, so a run of poor fixes
cannot drag it around.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import List, Optional

from fittrack.shared.constants import (
    GpsStatus,
    SIGNAL_LOST_STATUSES,
    DEDUP_THRESHOLD_DEG,
    MAX_DISTANCE_ACCURACY_M,
    MAX_REFERENCE_ACCURACY_M,
    MIN_STEP_DISTANCE_M,
    MAX_STEP_DISTANCE_M,
)
from fittrack.shared.geo import haversine

from .schemas import PositionSample, TrackPoint

logger = logging.getLogger(__name__)


class TrackView(Sequence):
    """
    Read-only view of the first `length` retained points.

    The track is append-only (reset swaps in a new list), so a view
    is a stable snapshot without copying.
    """

    __slots__ = ("_points", "_length")

    def __init__(self, points: List[TrackPoint], length: Optional[int] = None):
        self._points = points
        self._length = len(points) if length is None else length

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._points[i] for i in range(*index.indices(self._length))]
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("track index out of range")
        return self._points[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"TrackView({self._length} points)"


@dataclass
class IngestResult:
    """Outcome of feeding one sample."""
    accepted: bool      # sample added distance
    distance: float     # accumulated distance after this sample (m)
    points: TrackView = field(default_factory=lambda: TrackView([]))
    point_added: bool = False


class PositionIngest:
    """
    Stateful sample filter and distance accumulator.

    Not thread-safe: samples must be fed one at a time in arrival order
    (see SampleChannel for the consuming loop).

    Example usage:
        ingest = PositionIngest()
        result = ingest.on_sample(PositionSample(latitude=50.08, longitude=14.42, accuracy=8))
        print(result.distance)
    """

    def __init__(self):
        self._points: List[TrackPoint] = []
        self._distance = 0.0
        self._reference: Optional[TrackPoint] = None
        self._status = GpsStatus.IDLE

        # Live display values
        self.current_speed = 0.0  # m/s
        self.altitude: Optional[float] = None
        self.accuracy: Optional[float] = None

    # =========================================================================
    # State
    # =========================================================================

    @property
    def distance(self) -> float:
        """Accumulated distance in meters."""
        return self._distance

    @property
    def points(self) -> List[TrackPoint]:
        """Copy of retained track points."""
        return list(self._points)

    @property
    def point_count(self) -> int:
        return len(self._points)

    @property
    def reference(self) -> Optional[TrackPoint]:
        return self._reference

    @property
    def status(self) -> GpsStatus:
        return self._status

    def reset(self) -> None:
        """Drop all accumulated state."""
        self._points = []
        self._distance = 0.0
        self._reference = None
        self._status = GpsStatus.IDLE
        self.current_speed = 0.0
        self.altitude = None
        self.accuracy = None

    def set_status(self, status: GpsStatus) -> None:
        """
        Record status reported by the position source.

        Denied/unavailable leaves distance at its last value; no further
        accumulation happens until samples arrive again.
        """
        status = GpsStatus(status)
        if status == self._status:
            return

        if status in SIGNAL_LOST_STATUSES:
            logger.warning(
                f"Position source {status.value}; distance frozen at {self._distance:.1f} m"
            )
        else:
            logger.info(f"Position source status: {status.value}")
        self._status = status

    # =========================================================================
    # Sample Handling
    # =========================================================================

    def on_sample(self, sample: PositionSample) -> IngestResult:
        """
        Feed a sample recorded while the workout is running.

        Args:
            sample: Raw position fix

        Returns:
            IngestResult with accepted flag, accumulated distance and points
        """
        self._update_display(sample)
        point_added = self._retain_point(sample)
        accepted = self._accumulate(sample)
        self._update_reference(sample)

        return IngestResult(
            accepted=accepted,
            distance=self._distance,
            points=TrackView(self._points),
            point_added=point_added,
        )

    def observe(self, sample: PositionSample) -> None:
        """
        Feed a sample recorded while the workout is paused.

        Updates the live display and re-seats the reference on good fixes,
        so movement during the pause is never counted after resume.
        """
        self._update_display(sample)
        self._update_reference(sample)

    def _update_display(self, sample: PositionSample) -> None:
        self._status = GpsStatus.OK
        self.current_speed = sample.speed if sample.speed and sample.speed > 0 else 0.0
        self.altitude = sample.altitude
        self.accuracy = sample.accuracy

    def _retain_point(self, sample: PositionSample) -> bool:
        """Append sample to the track unless it duplicates the last point."""
        if self._points:
            last = self._points[-1]
            if (
                abs(last.lat - sample.latitude) < DEDUP_THRESHOLD_DEG
                and abs(last.lon - sample.longitude) < DEDUP_THRESHOLD_DEG
            ):
                return False

        self._points.append(TrackPoint(lat=sample.latitude, lon=sample.longitude))
        return True

    def _accumulate(self, sample: PositionSample) -> bool:
        """Add step distance from the reference if the sample passes the filters."""
        if self._reference is None:
            return False

        accuracy = _effective_accuracy(sample)
        if accuracy >= MAX_DISTANCE_ACCURACY_M:
            logger.debug(f"Sample skipped for distance: accuracy {sample.accuracy}")
            return False

        step = haversine(
            self._reference.lat, self._reference.lon,
            sample.latitude, sample.longitude,
        )
        if not MIN_STEP_DISTANCE_M < step < MAX_STEP_DISTANCE_M:
            logger.debug(f"Sample skipped for distance: step {step:.1f} m out of bounds")
            return False

        self._distance += step
        return True

    def _update_reference(self, sample: PositionSample) -> None:
        if self._reference is None or _effective_accuracy(sample) < MAX_REFERENCE_ACCURACY_M:
            self._reference = TrackPoint(lat=sample.latitude, lon=sample.longitude)


def _effective_accuracy(sample: PositionSample) -> float:
    """Missing accuracy counts as an unusable fix."""
    if sample.accuracy is None:
        return math.inf
    return sample.accuracy
