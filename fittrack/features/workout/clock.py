"""
Workout Clock

Phase state machine and elapsed-time counter for one workout.

    PENDING --start--> ACTIVE <--pause/resume--> PAUSED
       |                  |                         |
       +----cancel--------+---finish/cancel---------+
                          v
              FINISHED / CANCELLED (terminal)

Every transition is guarded: requesting one that is not valid in the
current phase raises IllegalTransitionError and changes nothing.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class WorkoutPhase(str, Enum):
    """Workout lifecycle phase."""
    PENDING = "pending"
    ACTIVE = "active"
    PAUSED = "paused"
    FINISHED = "finished"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (WorkoutPhase.FINISHED, WorkoutPhase.CANCELLED)


# (operation, current phase) -> next phase
TRANSITIONS: dict[tuple[str, WorkoutPhase], WorkoutPhase] = {
    ("start", WorkoutPhase.PENDING): WorkoutPhase.ACTIVE,
    ("pause", WorkoutPhase.ACTIVE): WorkoutPhase.PAUSED,
    ("resume", WorkoutPhase.PAUSED): WorkoutPhase.ACTIVE,
    ("finish", WorkoutPhase.ACTIVE): WorkoutPhase.FINISHED,
    ("finish", WorkoutPhase.PAUSED): WorkoutPhase.FINISHED,
    ("cancel", WorkoutPhase.PENDING): WorkoutPhase.CANCELLED,
    ("cancel", WorkoutPhase.ACTIVE): WorkoutPhase.CANCELLED,
    ("cancel", WorkoutPhase.PAUSED): WorkoutPhase.CANCELLED,
}


class IllegalTransitionError(Exception):
    """Operation is not valid in the current workout phase."""

    def __init__(self, operation: str, phase: WorkoutPhase):
        self.operation = operation
        self.phase = phase
        super().__init__(f"Cannot {operation} a workout that is {phase.value}")


class WorkoutClock:
    """
    Workout phase machine with a tick-driven elapsed counter.

    Ticks come from an external timer; elapsed advances by one per tick
    only while ACTIVE, so ticks delivered during a pause are dropped.
    """

    def __init__(self):
        self._phase = WorkoutPhase.PENDING
        self._elapsed = 0

    @property
    def phase(self) -> WorkoutPhase:
        return self._phase

    @property
    def elapsed(self) -> int:
        """Elapsed active seconds."""
        return self._elapsed

    @property
    def is_running(self) -> bool:
        return self._phase == WorkoutPhase.ACTIVE

    def _transition(self, operation: str) -> WorkoutPhase:
        next_phase = TRANSITIONS.get((operation, self._phase))
        if next_phase is None:
            raise IllegalTransitionError(operation, self._phase)

        logger.debug(f"Workout {self._phase.value} -> {next_phase.value}")
        self._phase = next_phase
        return next_phase

    def start(self) -> None:
        self._transition("start")
        self._elapsed = 0

    def pause(self) -> None:
        self._transition("pause")

    def resume(self) -> None:
        self._transition("resume")

    def finish(self) -> int:
        """Stop the clock for good. Returns final elapsed seconds."""
        self._transition("finish")
        return self._elapsed

    def cancel(self) -> None:
        """Discard the workout; elapsed is no longer observable."""
        self._transition("cancel")
        self._elapsed = 0

    def tick(self, seconds: int = 1) -> bool:
        """
        Advance elapsed time.

        Returns:
            True if the tick was counted (phase is ACTIVE)
        """
        if self._phase != WorkoutPhase.ACTIVE:
            return False
        self._elapsed += seconds
        return True
