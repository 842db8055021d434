"""Tests for the server-sent event stream writer."""

import asyncio
import json

import pytest

from mention_relay.adapters.web.broadcasters import BroadcastHub
from mention_relay.adapters.web.streams import KEEPALIVE_FRAME, encode_event, event_stream
from mention_relay.domain.models import LatestEvent, MediaRecord


def test_encode_event_produces_data_frame() -> None:
    """Given an event, when encoding, then a single data frame with JSON is produced."""
    frame = encode_event(LatestEvent(latest=MediaRecord(media_url="https://x/img.jpg")))

    assert frame.startswith("data: ")
    assert frame.endswith("\n\n")
    assert "\n" not in frame[: -2]
    assert json.loads(frame[len("data: ") :])["latest"]["mediaUrl"] == "https://x/img.jpg"


@pytest.mark.asyncio
async def test_stream_yields_snapshot_then_live_frames() -> None:
    """Given a subscriber with a snapshot, when streaming, then snapshot precedes live pushes."""
    hub = BroadcastHub()
    subscriber = hub.subscribe(initial_event=LatestEvent(latest=MediaRecord.empty()))
    stream = event_stream(subscriber, hub.unsubscribe)

    first = await anext(stream)
    hub.push_to_all(LatestEvent(latest=MediaRecord(media_url="https://x/img.jpg")))
    second = await anext(stream)

    assert json.loads(first[len("data: ") :])["latest"]["mediaUrl"] is None
    assert json.loads(second[len("data: ") :])["latest"]["mediaUrl"] == "https://x/img.jpg"
    await stream.aclose()


@pytest.mark.asyncio
async def test_stream_closed_by_client_unsubscribes() -> None:
    """Given an open stream, when the transport closes it, then the subscriber is removed."""
    hub = BroadcastHub()
    subscriber = hub.subscribe(initial_event=LatestEvent(latest=MediaRecord.empty()))
    stream = event_stream(subscriber, hub.unsubscribe)
    await anext(stream)

    await stream.aclose()

    assert hub.subscriber_count == 0
    assert subscriber.closed


@pytest.mark.asyncio
async def test_stream_cancelled_while_waiting_unsubscribes() -> None:
    """Given a stream waiting for frames, when its task is cancelled, then cleanup runs."""
    hub = BroadcastHub()
    subscriber = hub.subscribe()
    stream = event_stream(subscriber, hub.unsubscribe)

    async def consume() -> None:
        async for _ in stream:
            pass

    task = asyncio.create_task(consume())
    await asyncio.sleep(0.01)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert hub.subscriber_count == 0


@pytest.mark.asyncio
async def test_stream_sends_keepalive_when_idle() -> None:
    """Given no events, when the keepalive interval passes, then a comment frame is sent."""
    hub = BroadcastHub()
    subscriber = hub.subscribe()
    stream = event_stream(subscriber, hub.unsubscribe, keepalive_seconds=0.01)

    frame = await asyncio.wait_for(anext(stream), timeout=1)

    assert frame == KEEPALIVE_FRAME
    assert hub.subscriber_count == 1
    await stream.aclose()


@pytest.mark.asyncio
async def test_stream_ends_when_hub_closes() -> None:
    """Given an open stream, when the hub closes all subscribers, then the stream finishes."""
    hub = BroadcastHub()
    subscriber = hub.subscribe()
    closed: list[str] = []
    stream = event_stream(subscriber, lambda s: closed.append(s.subscriber_id))

    hub.close_all()

    with pytest.raises(StopAsyncIteration):
        await asyncio.wait_for(anext(stream), timeout=1)
    assert closed == [subscriber.subscriber_id]


@pytest.mark.asyncio
async def test_stream_without_keepalive_stays_silent_until_disconnect() -> None:
    """Given keepalives disabled, when idle, then nothing is sent until the server cancels it."""
    hub = BroadcastHub()
    subscriber = hub.subscribe()
    stream = event_stream(subscriber, hub.unsubscribe, keepalive_seconds=0)

    pending = asyncio.ensure_future(anext(stream))
    await asyncio.sleep(0.05)

    assert not pending.done()
    assert hub.subscriber_count == 1

    pending.cancel()
    with pytest.raises(asyncio.CancelledError):
        await pending
    assert hub.subscriber_count == 0
