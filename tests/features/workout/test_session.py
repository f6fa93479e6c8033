"""
Tests for WorkoutSession.

Full workouts driven synchronously, without a live sensor.
"""

from datetime import datetime, timedelta, timezone

import pytest

from fittrack.features.tracking import ClockTick, PositionSample
from fittrack.features.workout import IllegalTransitionError, WorkoutPhase, WorkoutSession
from fittrack.shared.constants import ActivityType, GpsStatus


# =============================================================================
# Test Data
# =============================================================================

START_LAT = 50.0875
START_LON = 14.4213
METERS_PER_DEG_LAT = 111_194.93

CET = timezone(timedelta(hours=1))
STARTED_AT = datetime(2026, 3, 14, 7, 45, 12, tzinfo=CET)


def sample_at(north_m: float, accuracy: float = 8.0) -> PositionSample:
    return PositionSample(
        latitude=START_LAT + north_m / METERS_PER_DEG_LAT,
        longitude=START_LON,
        accuracy=accuracy,
    )


class FakeClock:
    """Returns STARTED_AT, then advances by one second per call."""

    def __init__(self):
        self.current = STARTED_AT

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(seconds=1)
        return now


@pytest.fixture
def session():
    return WorkoutSession(ActivityType.RUN, now=FakeClock())


def run_steps(session: WorkoutSession, steps: int, step_m: float = 3.0) -> None:
    """One sample and one tick per step, moving north step_m each time."""
    start = len(session.ingest.points)
    for i in range(steps):
        session.on_sample(sample_at((start + i) * step_m))
        session.tick()


# =============================================================================
# Lifecycle
# =============================================================================

class TestLifecycle:

    def test_start(self, session):
        session.start()

        assert session.phase == WorkoutPhase.ACTIVE
        assert session.started_at == STARTED_AT
        assert session.ingest.status == GpsStatus.ACQUIRING

    def test_samples_ignored_before_start(self, session):
        assert session.on_sample(sample_at(0)) is None
        assert session.ingest.point_count == 0

    def test_finish_produces_record(self, session):
        session.start()
        run_steps(session, 400, step_m=3.0)
        record = session.finish()

        assert record.activity == ActivityType.RUN
        assert record.duration == 400
        # 399 steps of 3 m after the first sample
        assert record.distance_m == pytest.approx(1197, abs=2)
        assert record.avg_pace == pytest.approx(400 / 1.197, rel=0.01)
        assert record.avg_speed_kmh == pytest.approx(1.197 / (400 / 3600), rel=0.01)
        assert record.date == STARTED_AT
        assert record.time == "07:45"
        assert session.record is record

    def test_record_id_from_finish_time(self, session):
        session.start()
        record = session.finish()

        finished_at = STARTED_AT + timedelta(seconds=1)
        assert record.id == int(finished_at.timestamp() * 1000)

    def test_long_workout_points_capped(self, session):
        session.start()
        run_steps(session, 1200, step_m=2.0)
        record = session.finish()

        assert len(record.points) <= 500
        assert record.points[0] == session.ingest.points[0]
        assert record.points[-1] == session.ingest.points[-1]

    def test_short_workout_has_no_pace(self, session):
        session.start()
        session.on_sample(sample_at(0))
        session.on_sample(sample_at(5))
        session.tick()
        record = session.finish()

        assert record.distance_m == 5
        assert record.avg_pace is None

    def test_cancel_discards_values(self, session):
        session.start()
        run_steps(session, 50)
        session.cancel()

        assert session.phase == WorkoutPhase.CANCELLED
        assert session.elapsed == 0
        assert session.distance == 0.0
        assert session.ingest.points == []
        assert session.record is None

    @pytest.mark.parametrize("max_points", [1, 501, 1000])
    def test_point_limit_out_of_range(self, max_points):
        """A record can never hold more than 500 points."""
        with pytest.raises(ValueError):
            WorkoutSession(ActivityType.RUN, max_points=max_points)

    def test_custom_point_limit(self):
        session = WorkoutSession(ActivityType.RUN, max_points=100, now=FakeClock())
        session.start()
        run_steps(session, 800, step_m=2.0)
        record = session.finish()

        assert session.phase == WorkoutPhase.FINISHED
        assert len(record.points) <= 100
        assert record.points[-1] == session.ingest.points[-1]

    def test_finish_twice_fails(self, session):
        session.start()
        session.finish()
        with pytest.raises(IllegalTransitionError):
            session.finish()


# =============================================================================
# Pause Handling
# =============================================================================

class TestPause:

    def test_pause_freezes_time_and_distance(self, session):
        session.start()
        run_steps(session, 10, step_m=5.0)
        distance = session.distance
        points = session.ingest.point_count

        session.pause()
        for i in range(20):
            session.on_sample(sample_at(100 + i * 5))
            session.tick()

        assert session.elapsed == 10
        assert session.distance == distance
        assert session.ingest.point_count == points

    def test_movement_during_pause_not_counted(self, session):
        session.start()
        session.on_sample(sample_at(0))
        session.pause()
        session.on_sample(sample_at(150))
        session.on_sample(sample_at(300))
        session.resume()
        session.on_sample(sample_at(320))

        assert session.distance == pytest.approx(20, rel=0.01)


# =============================================================================
# Events and Live View
# =============================================================================

class TestEventsAndLiveView:

    def test_handle_event_dispatch(self, session):
        session.start()
        session.handle_event(sample_at(0))
        session.handle_event(sample_at(50))
        session.handle_event(ClockTick())
        session.handle_event(GpsStatus.DENIED)

        assert session.ingest.point_count == 2
        assert session.elapsed == 1
        assert session.ingest.status == GpsStatus.DENIED

    def test_handle_unknown_event(self, session):
        with pytest.raises(TypeError):
            session.handle_event("tick")

    def test_status_after_finish_ignored(self, session):
        session.start()
        session.finish()
        session.on_status(GpsStatus.DENIED)
        assert session.ingest.status == GpsStatus.IDLE

    def test_signal_denied_degrades_to_duration_only(self, session):
        session.start()
        run_steps(session, 10, step_m=5.0)
        session.on_status(GpsStatus.DENIED)
        for _ in range(10):
            session.tick()

        metrics = session.metrics()
        assert metrics.elapsed_seconds == 20
        assert metrics.distance_m == pytest.approx(45, rel=0.01)
        assert metrics.gps_status == GpsStatus.DENIED
        assert metrics.calories > 0

    def test_metrics(self, session):
        session.start()
        run_steps(session, 100, step_m=3.0)

        metrics = session.metrics()
        assert metrics.elapsed_seconds == 100
        assert metrics.distance_m == pytest.approx(297, rel=0.01)
        assert metrics.point_count == 100

    def test_route(self, session):
        session.start()
        assert session.route(300, 160) is None

        run_steps(session, 5, step_m=10.0)
        path = session.route(300, 160)
        assert len(path.commands) == 5
