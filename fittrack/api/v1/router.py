"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from fittrack.api.v1.routes import activities, workouts, history

api_router = APIRouter()

api_router.include_router(activities.router, prefix="/activities", tags=["Activities"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["Workouts"])
api_router.include_router(history.router, prefix="/history", tags=["History"])
