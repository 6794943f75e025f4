"""Unit tests for InMemoryEventBus and FakeEventBus."""

import pytest

from elitescope.adapters.event_bus.fake import FakeEventBus
from elitescope.adapters.event_bus.in_memory import InMemoryEventBus
from elitescope.core.events.expert_access import (
    ExpertAccessReviewedEvent,
    ExpertAccessSubmittedEvent,
)
from elitescope.core.shared_models import ExpertAccessStatus


def _reviewed() -> ExpertAccessReviewedEvent:
    return ExpertAccessReviewedEvent(request_id=1, status=ExpertAccessStatus.APPROVED)


class TestInMemoryEventBus:
    @pytest.mark.asyncio
    async def test_glob_pattern_routing(self):
        bus = InMemoryEventBus()
        received = []

        async def on_any(event):
            received.append(("any", event.event_type))

        async def on_reviewed(event):
            received.append(("reviewed", event.event_type))

        bus.subscribe("expert_access.*", on_any)
        bus.subscribe("expert_access.reviewed", on_reviewed)

        await bus.publish(ExpertAccessSubmittedEvent(email="a@b.org"))
        await bus.publish(_reviewed())

        assert received == [
            ("any", "expert_access.submitted"),
            ("any", "expert_access.reviewed"),
            ("reviewed", "expert_access.reviewed"),
        ]

    @pytest.mark.asyncio
    async def test_failing_subscriber_does_not_affect_others(self):
        bus = InMemoryEventBus()
        received = []

        async def broken(event):
            raise RuntimeError("subscriber bug")

        async def healthy(event):
            received.append(event)

        bus.subscribe("*", broken)
        bus.subscribe("*", healthy)

        await bus.publish(_reviewed())

        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_no_subscribers_is_noop(self):
        await InMemoryEventBus().publish(_reviewed())


class TestFakeEventBus:
    @pytest.mark.asyncio
    async def test_records_without_calling_subscribers(self):
        bus = FakeEventBus()
        called = []

        async def handler(event):
            called.append(event)

        bus.subscribe("*", handler)
        await bus.publish(_reviewed())

        assert bus.assert_published("expert_access.reviewed").request_id == 1
        assert called == []

    @pytest.mark.asyncio
    async def test_assertions(self):
        bus = FakeEventBus()

        with pytest.raises(AssertionError):
            bus.assert_published("expert_access.reviewed")
        bus.assert_not_published("expert_access.reviewed")
