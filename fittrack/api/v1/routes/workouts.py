"""
Workout API Routes

Endpoints driving the current workout: lifecycle, position samples,
status updates, clock ticks and live metrics.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from fittrack.api.deps import get_workout_service
from fittrack.features.history import ActivityRecord
from fittrack.features.workout import (
    IllegalTransitionError,
    NoActiveWorkoutError,
    WorkoutInProgressError,
    WorkoutRecorder,
    WorkoutService,
)
from fittrack.schemas.workout import (
    LiveMetricsResponse,
    RoutePathResponse,
    SamplesRequest,
    SamplesResponse,
    StartWorkoutRequest,
    StatusRequest,
)

router = APIRouter()


def _current(service: WorkoutService) -> WorkoutRecorder:
    try:
        return service.current
    except NoActiveWorkoutError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _metrics(recorder: WorkoutRecorder) -> LiveMetricsResponse:
    session = recorder.session
    return LiveMetricsResponse.build(session.activity, session.phase, session.metrics())


@router.post("", response_model=LiveMetricsResponse, status_code=201)
async def start_workout(
    request: StartWorkoutRequest,
    service: WorkoutService = Depends(get_workout_service)
):
    """Start recording a new workout."""
    try:
        recorder = service.start(request.activity)
    except WorkoutInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return _metrics(recorder)


@router.get("/current", response_model=LiveMetricsResponse)
async def get_current_workout(
    service: WorkoutService = Depends(get_workout_service)
):
    """Live metrics of the current workout."""
    recorder = _current(service)
    await recorder.flush()
    return _metrics(recorder)


@router.post("/current/samples", response_model=SamplesResponse, status_code=202)
async def push_samples(
    request: SamplesRequest,
    service: WorkoutService = Depends(get_workout_service)
):
    """Queue position samples (in arrival order)."""
    recorder = _current(service)
    queued = sum(1 for sample in request.samples if recorder.publish_sample(sample))
    return SamplesResponse(queued=queued, pending=recorder.channel.pending)


@router.post("/current/status", status_code=202)
async def push_status(
    request: StatusRequest,
    service: WorkoutService = Depends(get_workout_service)
):
    """Forward position source status (e.g. denied, unavailable)."""
    recorder = _current(service)
    recorder.publish_status(request.status)
    return {"status": request.status}


@router.post("/current/tick", status_code=202)
async def push_tick(
    seconds: int = Query(default=1, ge=1, le=60),
    service: WorkoutService = Depends(get_workout_service)
):
    """External clock tick (when the built-in ticker is disabled)."""
    recorder = _current(service)
    recorder.tick(seconds)
    return {"seconds": seconds}


@router.post("/current/pause", response_model=LiveMetricsResponse)
async def pause_workout(service: WorkoutService = Depends(get_workout_service)):
    recorder = _current(service)
    try:
        await recorder.pause()
    except IllegalTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _metrics(recorder)


@router.post("/current/resume", response_model=LiveMetricsResponse)
async def resume_workout(service: WorkoutService = Depends(get_workout_service)):
    recorder = _current(service)
    try:
        await recorder.resume()
    except IllegalTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _metrics(recorder)


@router.post("/current/finish", response_model=ActivityRecord)
async def finish_workout(service: WorkoutService = Depends(get_workout_service)):
    """Finish workout and save it to history."""
    _current(service)
    try:
        return await service.finish()
    except IllegalTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/current/cancel", status_code=204)
async def cancel_workout(service: WorkoutService = Depends(get_workout_service)):
    """Discard workout without saving."""
    _current(service)
    try:
        await service.cancel()
    except IllegalTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return Response(status_code=204)


@router.get("/current/route", response_model=RoutePathResponse)
async def get_current_route(
    width: float = Query(default=300, gt=0),
    height: float = Query(default=160, gt=0),
    padding: float = Query(default=16, ge=0),
    service: WorkoutService = Depends(get_workout_service)
):
    """Live route geometry."""
    recorder = _current(service)
    await recorder.flush()

    path = recorder.session.route(width, height, padding)
    if path is None:
        raise HTTPException(status_code=404, detail="Route needs at least 2 points")
    return RoutePathResponse.from_path(path)
