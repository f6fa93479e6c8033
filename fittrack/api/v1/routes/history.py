"""
History API Routes

Endpoints for recorded workouts and aggregate statistics.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from fittrack.api.deps import get_history_store
from fittrack.features.history import (
    ActivityRecord,
    HistoryStats,
    HistoryStore,
    calculate_history_stats,
)
from fittrack.features.route import project
from fittrack.schemas.workout import RoutePathResponse

router = APIRouter()


@router.get("", response_model=List[ActivityRecord])
async def list_history(store: HistoryStore = Depends(get_history_store)):
    """All recorded workouts, most recent first."""
    return store.load()


@router.get("/stats", response_model=HistoryStats)
async def get_history_stats(store: HistoryStore = Depends(get_history_store)):
    """Totals, per-activity breakdown and longest workout."""
    return calculate_history_stats(store.load())


@router.delete("", status_code=204)
async def clear_history(store: HistoryStore = Depends(get_history_store)):
    store.clear()
    return Response(status_code=204)


@router.get("/{record_id}", response_model=ActivityRecord)
async def get_record(
    record_id: int,
    store: HistoryStore = Depends(get_history_store)
):
    record = store.get(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Activity not found")
    return record


@router.get("/{record_id}/route", response_model=RoutePathResponse)
async def get_record_route(
    record_id: int,
    width: float = Query(default=340, gt=0),
    height: float = Query(default=160, gt=0),
    padding: float = Query(default=16, ge=0),
    store: HistoryStore = Depends(get_history_store)
):
    """Route geometry of a recorded workout."""
    record = store.get(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Activity not found")

    path = project(record.points, width, height, padding)
    if path is None:
        raise HTTPException(status_code=404, detail="Activity has no route")
    return RoutePathResponse.from_path(path)
