r"""Decorators measuring the latency of each call and emitting one
``RequestLoggedEvent`` per call."""

from __future__ import annotations

__all__ = ["AsyncLoggingHttpClient", "LoggingHttpClient"]

import time
from typing import TYPE_CHECKING, Any

from chainhttp.capability import AsyncHttpClientDecorator, HttpClientDecorator
from chainhttp.events import LoggerEventSink, RequestLoggedEvent

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from chainhttp.capability import AsyncBaseHttpClient, BaseHttpClient
    from chainhttp.events import EventSink
    from chainhttp.response import Response


def _elapsed_ms(start: float, end: float) -> float:
    return max(0.0, (end - start) * 1000.0)


class LoggingHttpClient(HttpClientDecorator):
    r"""Decorator emitting one event per call with the call latency.

    The wrapped call is timed with a monotonic clock. The response is
    returned unchanged. A ``TransportError`` raised by the inner
    capability propagates untouched and no event is emitted for it.

    Args:
        inner: The capability to delegate to.
        sink: The sink receiving the events. Defaults to a
            ``LoggerEventSink``.
        clock: Monotonic clock returning seconds. Defaults to
            ``time.perf_counter``.

    Example:
        ```pycon
        >>> from chainhttp import LoggingHttpClient, StubTransport
        >>> from chainhttp.events import CollectingEventSink
        >>> sink = CollectingEventSink()
        >>> client = LoggingHttpClient(StubTransport(), sink=sink)
        >>> client.request("POST", "https://api.example.com").status_code
        200
        >>> event = sink.events[0]
        >>> event.status_code, event.method, event.url
        (200, 'POST', 'https://api.example.com')

        ```
    """

    def __init__(
        self,
        inner: BaseHttpClient,
        *,
        sink: EventSink | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__(inner)
        self._sink: EventSink = sink if sink is not None else LoggerEventSink()
        self._clock = clock

    def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        start = self._clock()
        response = self._inner.request(method, url, options)
        self._sink.record(
            RequestLoggedEvent(
                status_code=response.status_code,
                method=method,
                url=url,
                elapsed_ms=_elapsed_ms(start, self._clock()),
            )
        )
        return response


class AsyncLoggingHttpClient(AsyncHttpClientDecorator):
    r"""Asynchronous version of ``LoggingHttpClient``.

    Args:
        inner: The asynchronous capability to delegate to.
        sink: The sink receiving the events. Defaults to a
            ``LoggerEventSink``.
        clock: Monotonic clock returning seconds. Defaults to
            ``time.perf_counter``.
    """

    def __init__(
        self,
        inner: AsyncBaseHttpClient,
        *,
        sink: EventSink | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__(inner)
        self._sink: EventSink = sink if sink is not None else LoggerEventSink()
        self._clock = clock

    async def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        start = self._clock()
        response = await self._inner.request(method, url, options)
        self._sink.record(
            RequestLoggedEvent(
                status_code=response.status_code,
                method=method,
                url=url,
                elapsed_ms=_elapsed_ms(start, self._clock()),
            )
        )
        return response
