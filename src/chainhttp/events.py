r"""Structured events emitted by the capabilities and the sinks that
receive them.

The behaviors never print: they build an event and hand it to an
``EventSink``. The default sink writes events through the standard
``logging`` module with the event fields attached as structured
``extra`` data, so they show up as JSON keys when the
``StructuredFormatter`` is used.

Example:
    ```pycon
    >>> from chainhttp import LoggingHttpClient, StubTransport
    >>> from chainhttp.events import CollectingEventSink, RequestLoggedEvent
    >>> sink = CollectingEventSink()
    >>> client = LoggingHttpClient(StubTransport(), sink=sink)
    >>> response = client.request("GET", "https://api.example.com/data")
    >>> [type(event).__name__ for event in sink.events]
    ['RequestLoggedEvent']

    ```
"""

from __future__ import annotations

__all__ = [
    "CollectingEventSink",
    "Event",
    "EventSink",
    "LoggerEventSink",
    "NullEventSink",
    "RequestLoggedEvent",
    "RetryExhaustedEvent",
    "RetryScheduledEvent",
    "TransportTraceEvent",
]

import logging
import threading
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, TypeVar, Union, runtime_checkable

from chainhttp.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestLoggedEvent:
    """Emitted once per call by the logging behavior.

    Attributes:
        status_code: The status code of the returned response.
        method: The HTTP method (e.g., "GET", "POST").
        url: The requested URL.
        elapsed_ms: The time spent in the wrapped capability, in
            milliseconds. Always >= 0.
    """

    name: ClassVar[str] = "request_logged"

    status_code: int
    method: str
    url: str
    elapsed_ms: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    def message(self) -> str:
        return f"[{self.status_code}] {self.method} {self.url} ({self.elapsed_ms:.1f}ms)"


@dataclass(frozen=True)
class RetryScheduledEvent:
    """Emitted by the retry behavior before waiting for a new attempt.

    Attributes:
        delay_ms: The backoff delay before the next attempt, in
            milliseconds.
        next_attempt: The number (1-indexed) of the upcoming attempt.
    """

    name: ClassVar[str] = "retry_scheduled"

    delay_ms: float
    next_attempt: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    def message(self) -> str:
        return f"Retry in {self.delay_ms:g} ms (attempt {self.next_attempt})"


@dataclass(frozen=True)
class RetryExhaustedEvent:
    """Emitted when the retry behavior gives up and returns the last
    server error response.

    Attributes:
        method: The HTTP method (e.g., "GET", "POST").
        url: The requested URL.
        attempts: The number of attempts that were made.
        status_code: The status code of the returned response.
    """

    name: ClassVar[str] = "retry_exhausted"

    method: str
    url: str
    attempts: int
    status_code: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    def message(self) -> str:
        return (
            f"{self.method} request to {self.url} still failing with status "
            f"{self.status_code} after {self.attempts} attempts"
        )


@dataclass(frozen=True)
class TransportTraceEvent:
    """Emitted by the stand-in transport for every call it receives.

    Attributes:
        method: The HTTP method (e.g., "GET", "POST").
        url: The requested URL.
        options: The transport options of the call.
    """

    name: ClassVar[str] = "transport_trace"

    method: str
    url: str
    options: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {"method": self.method, "url": self.url, "options": dict(self.options)}

    def message(self) -> str:
        return f"TRANSPORT -> {self.method} {self.url}"


Event = Union[RequestLoggedEvent, RetryScheduledEvent, RetryExhaustedEvent, TransportTraceEvent]

T = TypeVar("T")


@runtime_checkable
class EventSink(Protocol):
    """Receiver of the structured events emitted by the capabilities."""

    def record(self, event: Event) -> None:
        """Record one event."""


class LoggerEventSink:
    r"""Event sink writing every event to a ``logging.Logger``.

    The event fields are passed as ``extra`` so a structured formatter
    can output them as separate keys. The event name is stored under
    the ``event`` key.

    Args:
        logger: The logger to write to. Defaults to the
            ``chainhttp.events`` logger.
        level: The log level used for every event.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.level = level

    def record(self, event: Event) -> None:
        log_structured(self.logger, self.level, event.message(), event=event.name, **event.as_dict())


class CollectingEventSink:
    r"""Event sink keeping every event in memory.

    Useful in tests and to inspect the behavior of a chain. Recording is
    thread-safe so one sink can be shared by concurrent calls.

    Example:
        ```pycon
        >>> from chainhttp.events import CollectingEventSink, RetryScheduledEvent
        >>> sink = CollectingEventSink()
        >>> sink.record(RetryScheduledEvent(delay_ms=100.0, next_attempt=2))
        >>> sink.of_type(RetryScheduledEvent)
        [RetryScheduledEvent(delay_ms=100.0, next_attempt=2)]
        >>> len(sink)
        1

        ```
    """

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> list[Event]:
        """A copy of the recorded events, in emission order."""
        with self._lock:
            return list(self._events)

    def record(self, event: Event) -> None:
        with self._lock:
            self._events.append(event)

    def of_type(self, event_type: type[T]) -> list[T]:
        """Return the recorded events of the given type."""
        return [event for event in self.events if isinstance(event, event_type)]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


class NullEventSink:
    """Event sink discarding every event."""

    def record(self, event: Event) -> None:
        pass
