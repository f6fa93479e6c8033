"""
Workout service.

Owns the single current workout of the app (one user, one device)
and hands finished records to the History Store.
"""

import logging
from typing import Optional

from fittrack.shared.constants import ActivityType, DEFAULT_WEIGHT_KG, MAX_RECORD_POINTS
from fittrack.features.history.schemas import ActivityRecord
from fittrack.features.history.store import HistoryStore

from .recorder import WorkoutRecorder
from .session import WorkoutSession

logger = logging.getLogger(__name__)


class WorkoutInProgressError(Exception):
    """A workout is already running."""


class NoActiveWorkoutError(Exception):
    """There is no current workout."""


class WorkoutService:
    """Start, look up and end the current workout."""

    def __init__(
        self,
        store: HistoryStore,
        weight_kg: float = DEFAULT_WEIGHT_KG,
        tick_interval: float = 1.0,
        max_points: int = MAX_RECORD_POINTS,
    ):
        self.store = store
        self.weight_kg = weight_kg
        self.tick_interval = tick_interval
        self.max_points = max_points
        self._current: Optional[WorkoutRecorder] = None

    @property
    def current(self) -> WorkoutRecorder:
        if self._current is None:
            raise NoActiveWorkoutError("No workout in progress")
        return self._current

    @property
    def has_current(self) -> bool:
        return self._current is not None

    def start(self, activity: ActivityType | str) -> WorkoutRecorder:
        """Start new workout. Must be called inside the event loop."""
        if self._current is not None:
            raise WorkoutInProgressError(
                f"A {self._current.session.activity.value} workout is already in progress"
            )

        session = WorkoutSession(
            activity,
            weight_kg=self.weight_kg,
            max_points=self.max_points,
        )
        recorder = WorkoutRecorder(session, self.store, tick_interval=self.tick_interval)
        recorder.start()
        self._current = recorder
        return recorder

    async def finish(self) -> ActivityRecord:
        record = await self.current.finish()
        self._current = None
        return record

    async def cancel(self) -> None:
        await self.current.cancel()
        self._current = None

    def shutdown(self) -> None:
        """Stop the current workout without recording it. Idempotent."""
        if self._current is None:
            return
        logger.warning("Shutting down with a workout in progress; it is discarded")
        self._current.stop()
        self._current = None
