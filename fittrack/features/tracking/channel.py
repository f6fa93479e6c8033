"""
Sample channel.

Explicit subscribable channel between the external event sources
(position source, clock ticker) and the workout engine.

All events go through one asyncio.Queue and are applied by a single
consuming loop, so engine state is only ever mutated sequentially and
in arrival order.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from fittrack.shared.constants import GpsStatus

from .schemas import PositionSample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockTick:
    """One unit of workout time (nominally one second)."""
    seconds: int = 1


ChannelEvent = Union[PositionSample, GpsStatus, ClockTick]

EventHandler = Callable[[ChannelEvent], None]

# Queued to stop the consuming loop
_CLOSE = object()


class SampleChannel:
    """
    Single-subscriber event channel.

    Example usage:
        channel = SampleChannel()
        channel.subscribe(session.handle_event)
        consumer = asyncio.create_task(channel.run())
        channel.publish(sample)
        await channel.drain()   # every published event has been applied
        channel.close()
    """

    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue()
        self._handler: Optional[EventHandler] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Events published but not yet applied."""
        return self._queue.qsize()

    def subscribe(self, handler: EventHandler) -> None:
        """Attach the one consumer of this channel."""
        if self._handler is not None:
            raise RuntimeError("SampleChannel already has a subscriber")
        self._handler = handler

    def publish(self, event: ChannelEvent) -> bool:
        """
        Enqueue event without blocking.

        Returns:
            False if the channel is closed and the event was dropped
        """
        if self._closed:
            logger.debug(f"Channel closed, dropping {type(event).__name__}")
            return False
        self._queue.put_nowait(event)
        return True

    async def run(self) -> None:
        """Consuming loop. Returns after close()."""
        if self._handler is None:
            raise RuntimeError("SampleChannel has no subscriber")

        while True:
            event = await self._queue.get()
            try:
                if event is _CLOSE:
                    return
                self._handler(event)
            except Exception:
                # One bad event must not kill the workout
                logger.exception(f"Failed to apply {type(event).__name__}")
            finally:
                self._queue.task_done()

    async def drain(self) -> None:
        """Wait until every event published so far has been applied."""
        await self._queue.join()

    def close(self) -> None:
        """Stop accepting events. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_CLOSE)
