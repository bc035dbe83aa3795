"""Tests for the in-process change feed."""

import asyncio

import pytest

from fireprotect.routes.changes import sse_event
from fireprotect.services.change_feed import ChangeFeed


@pytest.mark.asyncio
async def test_subscriber_receives_matching_events():
    feed = ChangeFeed()

    async with feed.subscribe("alerts") as subscription:
        feed.publish("alerts", "INSERT", {"id": "a1"})
        feed.publish("locations", "INSERT", {"id": "l1"})
        feed.publish("alerts", "UPDATE", {"id": "a1", "status": "resolved"}, old={"id": "a1"})

        first = await subscription.get()
        second = await subscription.get()

    assert (first.event_type, first.new["id"]) == ("INSERT", "a1")
    assert (second.event_type, second.old) == ("UPDATE", {"id": "a1"})


@pytest.mark.asyncio
async def test_event_type_filter():
    feed = ChangeFeed()

    async with feed.subscribe("alerts", ["UPDATE"]) as subscription:
        feed.publish("alerts", "INSERT", {"id": "a1"})
        feed.publish("alerts", "UPDATE", {"id": "a1"})

        event = await asyncio.wait_for(subscription.get(), timeout=1)
        assert event.event_type == "UPDATE"
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(subscription.get(), timeout=0.05)


@pytest.mark.asyncio
async def test_unsubscribe_on_exit():
    feed = ChangeFeed()

    async with feed.subscribe("alerts"):
        assert feed.subscriber_count == 1
    assert feed.subscriber_count == 0

    # Publishing with nobody listening is a no-op
    event = feed.publish("alerts", "DELETE", None, old={"id": "a1"})
    assert event.new is None


@pytest.mark.asyncio
async def test_slow_subscriber_drops_oldest():
    feed = ChangeFeed(max_queue_size=2)

    async with feed.subscribe("alerts") as subscription:
        for n in range(3):
            feed.publish("alerts", "INSERT", {"n": n})

        assert (await subscription.get()).new == {"n": 1}
        assert (await subscription.get()).new == {"n": 2}


def test_sse_event_format():
    event = ChangeFeed().publish("alerts", "INSERT", {"id": "a1"})

    frame = sse_event(event)

    assert frame.startswith("event: INSERT\ndata: ")
    assert frame.endswith("\n\n")
    assert '"eventType": "INSERT"' in frame
    assert '"table": "alerts"' in frame
    assert '"commitTimestamp"' in frame
