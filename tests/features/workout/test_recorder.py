"""
Tests for WorkoutRecorder and WorkoutService.

Events go through the real SampleChannel; asyncio.run drives each scenario.
"""

import asyncio

import pytest

from fittrack.features.history import InMemoryHistoryStore
from fittrack.features.tracking import PositionSample
from fittrack.features.workout import (
    IllegalTransitionError,
    NoActiveWorkoutError,
    WorkoutInProgressError,
    WorkoutPhase,
    WorkoutRecorder,
    WorkoutService,
    WorkoutSession,
)
from fittrack.shared.constants import ActivityType, GpsStatus


START_LAT = 50.0875
START_LON = 14.4213
METERS_PER_DEG_LAT = 111_194.93


def sample_at(north_m: float, accuracy: float = 8.0) -> PositionSample:
    return PositionSample(
        latitude=START_LAT + north_m / METERS_PER_DEG_LAT,
        longitude=START_LON,
        accuracy=accuracy,
    )


@pytest.fixture
def store():
    return InMemoryHistoryStore()


def make_recorder(store, activity=ActivityType.RUN, tick_interval=0):
    return WorkoutRecorder(WorkoutSession(activity), store, tick_interval=tick_interval)


# =============================================================================
# WorkoutRecorder
# =============================================================================

class TestWorkoutRecorder:

    def test_finish_observes_all_published_events(self, store):
        """Nothing published before finish() is dropped."""
        async def scenario():
            recorder = make_recorder(store)
            recorder.start()
            for i in range(60):
                recorder.publish_sample(sample_at(i * 4))
                recorder.tick()
            # Nothing awaited yet: all 120 events are still queued
            return await recorder.finish()

        record = asyncio.run(scenario())

        assert record.duration == 60
        assert record.distance_m == pytest.approx(236, abs=1)
        assert store.load() == [record]

    def test_ticks_published_before_pause_count(self, store):
        async def scenario():
            recorder = make_recorder(store)
            recorder.start()
            for _ in range(5):
                recorder.tick()
            await recorder.pause()
            for _ in range(5):
                recorder.tick()
            await recorder.flush()
            elapsed_paused = recorder.session.elapsed

            await recorder.resume()
            recorder.tick()
            record = await recorder.finish()
            return elapsed_paused, record

        elapsed_paused, record = asyncio.run(scenario())

        assert elapsed_paused == 5
        assert record.duration == 6

    def test_status_forwarded(self, store):
        async def scenario():
            recorder = make_recorder(store)
            recorder.start()
            recorder.publish_status(GpsStatus.UNAVAILABLE)
            await recorder.flush()
            status = recorder.session.ingest.status
            await recorder.cancel()
            return status

        assert asyncio.run(scenario()) == GpsStatus.UNAVAILABLE

    def test_cancel_saves_nothing(self, store):
        async def scenario():
            recorder = make_recorder(store)
            recorder.start()
            recorder.publish_sample(sample_at(0))
            await recorder.cancel()
            return recorder

        recorder = asyncio.run(scenario())

        assert recorder.session.phase == WorkoutPhase.CANCELLED
        assert recorder.stopped
        assert store.load() == []

    def test_stop_is_idempotent(self, store):
        async def scenario():
            recorder = make_recorder(store)
            recorder.start()
            recorder.stop()
            recorder.stop()
            return recorder.publish_sample(sample_at(0))

        assert asyncio.run(scenario()) is False

    def test_stop_before_start(self, store):
        recorder = make_recorder(store)
        recorder.stop()
        recorder.stop()
        assert recorder.stopped

    def test_finish_prepends_to_history(self, store):
        async def scenario():
            records = []
            for activity in (ActivityType.WALK, ActivityType.BIKE):
                recorder = make_recorder(store, activity)
                recorder.start()
                recorder.tick()
                records.append(await recorder.finish())
            return records

        walk, bike = asyncio.run(scenario())
        assert [r.activity for r in store.load()] == [ActivityType.BIKE, ActivityType.WALK]

    def test_illegal_resume(self, store):
        async def scenario():
            recorder = make_recorder(store)
            recorder.start()
            try:
                await recorder.resume()
            finally:
                recorder.stop()

        with pytest.raises(IllegalTransitionError):
            asyncio.run(scenario())

    def test_builtin_ticker(self, store):
        async def scenario():
            recorder = make_recorder(store, tick_interval=0.01)
            recorder.start()
            await asyncio.sleep(0.2)
            await recorder.pause()
            paused_at = recorder.session.elapsed
            await asyncio.sleep(0.1)
            await recorder.flush()
            still = recorder.session.elapsed
            await recorder.cancel()
            return paused_at, still

        paused_at, still = asyncio.run(scenario())

        assert paused_at >= 1
        assert still == paused_at


# =============================================================================
# WorkoutService
# =============================================================================

class TestWorkoutService:

    def test_single_current_workout(self, store):
        async def scenario():
            service = WorkoutService(store, tick_interval=0)
            service.start(ActivityType.RUN)
            try:
                service.start(ActivityType.BIKE)
            finally:
                service.shutdown()

        with pytest.raises(WorkoutInProgressError):
            asyncio.run(scenario())

    def test_no_current_workout(self, store):
        service = WorkoutService(store)
        assert not service.has_current
        with pytest.raises(NoActiveWorkoutError):
            service.current

    def test_finish_clears_current(self, store):
        async def scenario():
            service = WorkoutService(store, weight_kg=80, tick_interval=0)
            recorder = service.start("walk")
            recorder.tick(3600)
            record = await service.finish()
            return service, record

        service, record = asyncio.run(scenario())

        assert not service.has_current
        # MET 3.5 × 80 kg × 1 h
        assert record.calories == 280
        assert store.load() == [record]

    def test_shutdown_is_idempotent(self, store):
        async def scenario():
            service = WorkoutService(store, tick_interval=0)
            service.start(ActivityType.HIKE)
            service.shutdown()
            service.shutdown()
            return service

        service = asyncio.run(scenario())
        assert not service.has_current
        assert store.load() == []
