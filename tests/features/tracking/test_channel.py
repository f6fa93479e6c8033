"""
Tests for SampleChannel.

The channel is exercised with asyncio.run so no async test plugin is needed.
"""

import asyncio

import pytest

from fittrack.features.tracking import ClockTick, PositionSample, SampleChannel
from fittrack.shared.constants import GpsStatus


def test_events_applied_in_order():
    """Single consumer applies events in publish order."""
    applied = []

    async def scenario():
        channel = SampleChannel()
        channel.subscribe(applied.append)
        consumer = asyncio.create_task(channel.run())

        channel.publish(GpsStatus.ACQUIRING)
        channel.publish(PositionSample(latitude=50.0, longitude=14.0, accuracy=5))
        channel.publish(ClockTick())
        await channel.drain()

        channel.close()
        await consumer

    asyncio.run(scenario())

    assert applied[0] == GpsStatus.ACQUIRING
    assert isinstance(applied[1], PositionSample)
    assert applied[2] == ClockTick()


def test_drain_waits_for_all_events():
    applied = []

    async def scenario():
        channel = SampleChannel()
        channel.subscribe(applied.append)
        consumer = asyncio.create_task(channel.run())

        for _ in range(100):
            channel.publish(ClockTick())
        await channel.drain()
        count = len(applied)

        channel.close()
        await consumer
        return count

    assert asyncio.run(scenario()) == 100


def test_publish_after_close_is_dropped():
    channel = SampleChannel()
    channel.subscribe(lambda event: None)
    channel.close()

    assert channel.closed
    assert channel.publish(ClockTick()) is False


def test_close_is_idempotent():
    async def scenario():
        channel = SampleChannel()
        channel.subscribe(lambda event: None)
        consumer = asyncio.create_task(channel.run())
        channel.close()
        channel.close()
        await consumer

    asyncio.run(scenario())


def test_failing_handler_does_not_stop_loop():
    """A bad event is logged and the loop moves on."""
    applied = []

    def handler(event):
        if event.seconds == 2:
            raise ValueError("boom")
        applied.append(event)

    async def scenario():
        channel = SampleChannel()
        channel.subscribe(handler)
        consumer = asyncio.create_task(channel.run())

        channel.publish(ClockTick(1))
        channel.publish(ClockTick(2))
        channel.publish(ClockTick(3))
        await channel.drain()

        channel.close()
        await consumer

    asyncio.run(scenario())
    assert [e.seconds for e in applied] == [1, 3]


def test_single_subscriber():
    channel = SampleChannel()
    channel.subscribe(lambda event: None)

    with pytest.raises(RuntimeError):
        channel.subscribe(lambda event: None)


def test_run_without_subscriber():
    with pytest.raises(RuntimeError):
        asyncio.run(SampleChannel().run())
