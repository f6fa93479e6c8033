"""
API dependencies.

Collaborators live on app.state (set up in the lifespan) so tests can
inject their own.
"""

from fastapi import Request

from fittrack.features.history import HistoryStore
from fittrack.features.workout import WorkoutService


def get_history_store(request: Request) -> HistoryStore:
    return request.app.state.history_store


def get_workout_service(request: Request) -> WorkoutService:
    return request.app.state.workout_service
