"""
Workout lifecycle module.

Usage:
    from fittrack.features.workout import WorkoutSession, WorkoutClock
    from fittrack.features.workout import WorkoutService

Components:
- WorkoutClock: Guarded phase machine + elapsed counter
- WorkoutSession: Clock + ingest + live metrics for one workout
- WorkoutRecorder: Async driver feeding the session from a SampleChannel
- WorkoutService: Current workout of the app
"""

from .clock import WorkoutClock, WorkoutPhase, IllegalTransitionError
from .session import WorkoutSession
from .recorder import WorkoutRecorder
from .service import WorkoutService, WorkoutInProgressError, NoActiveWorkoutError

__all__ = [
    "WorkoutClock",
    "WorkoutPhase",
    "IllegalTransitionError",
    "WorkoutSession",
    "WorkoutRecorder",
    "WorkoutService",
    "WorkoutInProgressError",
    "NoActiveWorkoutError",
]
