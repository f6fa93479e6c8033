"""
Workout Recorder

Runs a WorkoutSession behind a SampleChannel: external sources publish
samples, status changes and ticks; one consumer task applies them.

Lifecycle operations drain the channel first, so every event published
before pause/finish is applied in the phase it was published in.
"""

import asyncio
import logging
from typing import Optional

from fittrack.shared.constants import GpsStatus
from fittrack.features.history.schemas import ActivityRecord
from fittrack.features.history.store import HistoryStore
from fittrack.features.tracking import ClockTick, PositionSample, SampleChannel

from .session import WorkoutSession

logger = logging.getLogger(__name__)


class WorkoutRecorder:
    """
    Async driver of one workout session.

    Must be started inside a running event loop. tick_interval=0
    disables the built-in ticker (ticks are then published by the caller).
    """

    def __init__(
        self,
        session: WorkoutSession,
        store: HistoryStore,
        tick_interval: float = 1.0,
    ):
        self.session = session
        self.store = store
        self.tick_interval = tick_interval

        self.channel = SampleChannel()
        self.channel.subscribe(session.handle_event)

        self._consumer: Optional[asyncio.Task] = None
        self._ticker: Optional[asyncio.Task] = None
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    # =========================================================================
    # Event Sources
    # =========================================================================

    def publish_sample(self, sample: PositionSample) -> bool:
        return self.channel.publish(sample)

    def publish_status(self, status: GpsStatus) -> bool:
        return self.channel.publish(GpsStatus(status))

    def tick(self, seconds: int = 1) -> bool:
        return self.channel.publish(ClockTick(seconds))

    async def _tick_loop(self) -> None:
        while True:
            await asyncio.sleep(self.tick_interval)
            self.channel.publish(ClockTick())

    def _start_ticker(self) -> None:
        if self.tick_interval > 0:
            self._ticker = asyncio.create_task(self._tick_loop())

    def _stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def flush(self) -> None:
        """Wait until every published event has been applied."""
        if self._consumer is not None and not self._consumer.done():
            await self.channel.drain()

    def start(self) -> None:
        self.session.start()
        self._consumer = asyncio.create_task(self.channel.run())
        self._start_ticker()

    async def pause(self) -> None:
        await self.flush()
        self.session.pause()
        # Fresh ticker on resume: no partial second carries over
        self._stop_ticker()

    async def resume(self) -> None:
        await self.flush()
        self.session.resume()
        self._start_ticker()

    async def finish(self) -> ActivityRecord:
        """
        Apply all pending events, finish and persist the record.

        Raises:
            IllegalTransitionError: workout is not active or paused
        """
        await self.flush()
        record = self.session.finish()
        self.stop()
        self.store.add(record)
        return record

    async def cancel(self) -> None:
        self.session.cancel()
        self.stop()

    def stop(self) -> None:
        """Stop ingestion and clock. Idempotent."""
        if self._stopped:
            return
        self._stopped = True
        self._stop_ticker()
        self.channel.close()
        logger.debug("Workout recorder stopped")
