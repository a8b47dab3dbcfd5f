"""Fire-and-forget publishing of domain events."""

import logging
from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Protocol

from nutriplan.domain.events import DomainEvent

_logger = logging.getLogger(__name__)


class EventSink(Protocol):
    """Outbound channel for domain events."""

    def publish(self, event: DomainEvent) -> None:
        """Deliver an event."""


@dataclass
class NullEventSink(EventSink):
    """Sink that drops every event."""

    def publish(self, event: DomainEvent) -> None:
        """Discard the event."""


@dataclass
class EventPublisher:
    """Hands events to a sink without letting delivery affect the caller."""

    sink: EventSink
    executor: Executor | None = None

    def publish(self, event: DomainEvent) -> None:
        """Schedule delivery of an event and return immediately."""
        if self.executor is None:
            self._deliver(event)
            return
        try:
            future = self.executor.submit(self.sink.publish, event)
        except RuntimeError:
            _logger.warning(
                "Dropping %s event: publisher is closed", event.type.value
            )
            return
        future.add_done_callback(lambda done: _log_failure(done, event))

    def close(self) -> None:
        """Wait for pending deliveries and release the executor."""
        if self.executor is not None:
            self.executor.shutdown(wait=True)

    def _deliver(self, event: DomainEvent) -> None:
        try:
            self.sink.publish(event)
        except Exception:
            _logger.exception("Failed to publish %s event", event.type.value)


def _log_failure(future: "Future[None]", event: DomainEvent) -> None:
    exc = future.exception()
    if exc is not None:
        _logger.error(
            "Failed to publish %s event: %s", event.type.value, exc, exc_info=exc
        )
