"""
Workout Session

Combines WorkoutClock, PositionIngest and the metrics engine for one
workout, and assembles the ActivityRecord when it finishes.

Synchronous and single-threaded; WorkoutRecorder feeds it from the
sample channel.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from fittrack.shared.constants import (
    ActivityType,
    DEFAULT_ROUTE_PADDING,
    DEFAULT_WEIGHT_KG,
    GpsStatus,
    MAX_RECORD_POINTS,
)
from fittrack.features.history.assembly import build_activity_record
from fittrack.features.history.schemas import ActivityRecord
from fittrack.features.metrics import LiveMetrics, live_metrics
from fittrack.features.route import RoutePath, project
from fittrack.features.tracking import (
    ChannelEvent,
    ClockTick,
    IngestResult,
    PositionIngest,
    PositionSample,
)

from .clock import WorkoutClock, WorkoutPhase

logger = logging.getLogger(__name__)


def local_now() -> datetime:
    """Current time, timezone-aware in the local zone."""
    return datetime.now().astimezone()


class WorkoutSession:
    """
    One workout from start to finish.

    Example usage:
        session = WorkoutSession(ActivityType.RUN)
        session.start()
        session.on_sample(sample)
        session.tick()
        record = session.finish()
    """

    def __init__(
        self,
        activity: ActivityType | str,
        weight_kg: float = DEFAULT_WEIGHT_KG,
        max_points: int = MAX_RECORD_POINTS,
        now: Callable[[], datetime] = local_now,
    ):
        # Records hold at most MAX_RECORD_POINTS; a larger limit would fail at finish
        if not 2 <= max_points <= MAX_RECORD_POINTS:
            raise ValueError(
                f"max_points must be between 2 and {MAX_RECORD_POINTS}, got {max_points}"
            )

        self.activity = ActivityType(activity)
        self.weight_kg = weight_kg
        self.max_points = max_points
        self._now = now

        self.clock = WorkoutClock()
        self.ingest = PositionIngest()
        self.started_at: Optional[datetime] = None
        self.record: Optional[ActivityRecord] = None

    @property
    def phase(self) -> WorkoutPhase:
        return self.clock.phase

    @property
    def elapsed(self) -> int:
        return self.clock.elapsed

    @property
    def distance(self) -> float:
        return self.ingest.distance

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self) -> None:
        self.clock.start()
        self.ingest.reset()
        self.ingest.set_status(GpsStatus.ACQUIRING)
        self.started_at = self._now()
        logger.info(f"Workout started: {self.activity.value}")

    def pause(self) -> None:
        self.clock.pause()

    def resume(self) -> None:
        self.clock.resume()

    def finish(self) -> ActivityRecord:
        """
        End workout and freeze it into a record.

        Raises:
            IllegalTransitionError: workout is not active or paused
        """
        duration = self.clock.finish()
        self.record = build_activity_record(
            activity=self.activity,
            started_at=self.started_at,
            finished_at=self._now(),
            duration_sec=duration,
            distance_m=self.ingest.distance,
            points=self.ingest.points,
            weight_kg=self.weight_kg,
            max_points=self.max_points,
        )
        self.ingest.set_status(GpsStatus.IDLE)

        logger.info(
            f"Workout finished: {self.activity.value}, "
            f"{self.record.distance_m} m in {self.record.duration} s, "
            f"{len(self.record.points)} points"
        )
        return self.record

    def cancel(self) -> None:
        """Discard workout; no record is produced."""
        self.clock.cancel()
        self.ingest.reset()
        logger.info(f"Workout cancelled: {self.activity.value}")

    # =========================================================================
    # Events
    # =========================================================================

    def on_sample(self, sample: PositionSample) -> Optional[IngestResult]:
        """
        Apply position sample.

        Only an active workout records track and distance; a paused one
        just follows the position.
        """
        if self.clock.is_running:
            return self.ingest.on_sample(sample)
        phase = self.clock.phase
        if phase == WorkoutPhase.PAUSED:
            self.ingest.observe(sample)
        else:
            logger.debug(f"Sample ignored in phase {phase.value}")
        return None

    def on_status(self, status: GpsStatus) -> None:
        if self.clock.phase.is_terminal:
            return
        self.ingest.set_status(status)

    def tick(self, seconds: int = 1) -> bool:
        return self.clock.tick(seconds)

    def handle_event(self, event: ChannelEvent) -> None:
        """Dispatch a channel event."""
        if isinstance(event, ClockTick):
            self.tick(event.seconds)
        elif isinstance(event, GpsStatus):
            self.on_status(event)
        elif isinstance(event, PositionSample):
            self.on_sample(event)
        else:
            raise TypeError(f"Unsupported channel event: {type(event).__name__}")

    # =========================================================================
    # Live View
    # =========================================================================

    def metrics(self) -> LiveMetrics:
        return live_metrics(
            activity=self.activity,
            distance_m=self.ingest.distance,
            elapsed_seconds=self.clock.elapsed,
            current_speed_mps=self.ingest.current_speed,
            weight_kg=self.weight_kg,
            gps_status=self.ingest.status,
            point_count=self.ingest.point_count,
        )

    def route(
        self,
        width: float,
        height: float,
        padding: float = DEFAULT_ROUTE_PADDING,
    ) -> Optional[RoutePath]:
        return project(self.ingest.points, width, height, padding)
