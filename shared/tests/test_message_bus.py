from dataclasses import dataclass

from shared.application.message_bus import MessageBus
from shared.domain.base import DomainEvent


@dataclass
class SomethingHappened(DomainEvent):
    name: str


def test_event_reaches_every_handler_once():
    bus = MessageBus()
    received = []

    def first(event):
        received.append(("first", event.name))

    def second(event):
        received.append(("second", event.name))

    bus.register_event_handler(SomethingHappened, first)
    bus.register_event_handler(SomethingHappened, second)
    bus.register_event_handler(SomethingHappened, first)

    bus.publish_events([SomethingHappened(name="a")])

    assert received == [("first", "a"), ("second", "a")]


def test_failing_handler_does_not_stop_others():
    bus = MessageBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.register_event_handler(SomethingHappened, broken)
    bus.register_event_handler(SomethingHappened, lambda event: received.append(event.name))

    bus.publish_events([SomethingHappened(name="b")])

    assert received == ["b"]


def test_unregister_and_events_without_handlers():
    bus = MessageBus()
    handler = lambda event: None  # noqa: E731
    bus.register_event_handler(SomethingHappened, handler)
    bus.unregister_event_handler(SomethingHappened, handler)

    assert bus.handlers_for(SomethingHappened) == []
    bus.publish_events([SomethingHappened(name="c")])


def test_event_serializes_to_dict():
    event = SomethingHappened(name="d")
    data = event.to_dict()

    assert data["event_type"] == "SomethingHappened"
    assert data["aggregate_id"] is None


def test_event_timestamp_is_timezone_aware():
    event = SomethingHappened(name="a")

    assert event.occurred_at.tzinfo is not None
    assert event.to_dict()["occurred_at"].endswith("+00:00")
