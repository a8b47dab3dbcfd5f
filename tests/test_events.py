"""Tests for domain event publishing."""

import logging
from concurrent.futures import ThreadPoolExecutor
from uuid import uuid4

from nutriplan.domain.events import DomainEvent, EventType
from nutriplan.services.events import EventPublisher, NullEventSink
from tests.fakes import RecordingEventSink


def _event() -> DomainEvent:
    return DomainEvent(
        type=EventType.PROGRESS_LOGGED,
        user_id=uuid4(),
        title="Progress logged",
        message="Check-in recorded.",
    )


def test_inline_sink_failure_is_swallowed() -> None:
    publisher = EventPublisher(sink=RecordingEventSink(fail=True))

    publisher.publish(_event())


def test_executor_delivers_events() -> None:
    sink = RecordingEventSink()
    publisher = EventPublisher(sink=sink, executor=ThreadPoolExecutor(max_workers=1))

    event = _event()
    publisher.publish(event)
    publisher.close()

    assert sink.events == [event]


def test_executor_failure_does_not_reach_caller() -> None:
    publisher = EventPublisher(
        sink=RecordingEventSink(fail=True), executor=ThreadPoolExecutor(max_workers=1)
    )

    publisher.publish(_event())
    publisher.close()


def test_null_sink_drops_events() -> None:
    EventPublisher(sink=NullEventSink()).publish(_event())


def test_publish_after_close_drops_event(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("nutriplan"), "propagate", True)
    sink = RecordingEventSink()
    publisher = EventPublisher(sink=sink, executor=ThreadPoolExecutor(max_workers=1))
    publisher.close()

    with caplog.at_level("WARNING", logger="nutriplan.services.events"):
        publisher.publish(_event())

    assert sink.events == []
    assert "publisher is closed" in caplog.text
