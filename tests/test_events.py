"""Tests for the subscriber event bus."""

import asyncio
import threading

import pytest

from bookgraph.core.catalog import EventBus


def test_publish_reaches_every_subscriber_in_order():
    bus = EventBus()
    first = bus.subscribe()
    second = bus.subscribe()

    assert bus.publish("a") == 2
    assert bus.publish("b") == 2

    assert first.drain() == ["a", "b"]
    assert second.drain() == ["a", "b"]


def test_no_replay_for_late_subscribers():
    bus = EventBus()
    bus.publish("early")
    late = bus.subscribe()
    bus.publish("late")
    assert late.drain() == ["late"]


def test_publish_without_subscribers():
    bus = EventBus()
    assert bus.publish("nobody") == 0


def test_unsubscribe_stops_delivery_only_for_that_handle():
    bus = EventBus()
    kept = bus.subscribe()
    gone = bus.subscribe()

    bus.unsubscribe(gone)
    bus.publish("x")

    assert bus.subscriber_count == 1
    assert kept.drain() == ["x"]
    assert gone.drain() == []
    assert gone.closed


def test_unsubscribe_twice_is_noop():
    bus = EventBus()
    subscription = bus.subscribe()
    subscription.close()
    bus.unsubscribe(subscription)
    assert bus.subscriber_count == 0


def test_async_iteration_waits_for_publish():
    bus = EventBus()

    async def scenario():
        subscription = bus.subscribe()
        received = []

        async def consume():
            async for event in subscription:
                received.append(event)

        task = asyncio.create_task(consume())
        await asyncio.sleep(0)
        bus.publish(1)
        bus.publish(2)
        await asyncio.sleep(0)
        subscription.close()
        await asyncio.wait_for(task, timeout=1)
        return received

    assert asyncio.run(scenario()) == [1, 2]


def test_close_wakes_waiting_consumer():
    bus = EventBus()

    async def scenario():
        subscription = bus.subscribe()

        async def consume():
            return [event async for event in subscription]

        task = asyncio.create_task(consume())
        await asyncio.sleep(0)
        subscription.close()
        return await asyncio.wait_for(task, timeout=1)

    assert asyncio.run(scenario()) == []


def test_context_manager_unsubscribes():
    bus = EventBus()

    async def scenario():
        async with bus.subscribe():
            assert bus.subscriber_count == 1
        return bus.subscriber_count

    assert asyncio.run(scenario()) == 0


def test_publish_from_another_thread():
    bus = EventBus()

    async def scenario():
        subscription = bus.subscribe()
        worker = threading.Thread(target=bus.publish, args=("threaded",))
        worker.start()
        worker.join()
        event = await asyncio.wait_for(subscription.__anext__(), timeout=1)
        subscription.close()
        return event

    assert asyncio.run(scenario()) == "threaded"


def test_bounded_queue_drops_oldest():
    bus = EventBus(queue_size=2)
    subscription = bus.subscribe()
    for event in ("a", "b", "c"):
        bus.publish(event)
    assert subscription.drain() == ["b", "c"]
    assert subscription.dropped == 1


def test_negative_queue_size():
    with pytest.raises(ValueError):
        EventBus(queue_size=-1)
