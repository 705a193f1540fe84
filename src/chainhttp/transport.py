r"""Stand-in terminal transport used for composition demos and tests."""

from __future__ import annotations

__all__ = ["SentRequest", "StubTransport"]

import copy
import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from chainhttp.capability import BaseHttpClient
from chainhttp.core.validation import validate_request_args
from chainhttp.events import LoggerEventSink, TransportTraceEvent
from chainhttp.response import Response

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chainhttp.events import EventSink

DEFAULT_STUB_BODY = b'{"data":"hello"}'


@dataclass(frozen=True)
class SentRequest:
    """A call received by ``StubTransport``.

    Attributes:
        method: The HTTP method.
        url: The requested URL.
        options: A read-only copy of the transport options.
    """

    method: str
    url: str
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(copy.deepcopy(dict(self.options))))


class StubTransport(BaseHttpClient):
    r"""Terminal capability always returning the same response.

    Each call emits a ``TransportTraceEvent`` describing what a real
    transport would send and is appended to an internal log, readable
    through ``sent_requests``.

    Args:
        status_code: The status code of the returned response.
        body: The body of the returned response.
        sink: The sink receiving the trace events. Defaults to a
            ``LoggerEventSink`` at DEBUG level.

    Example:
        ```pycon
        >>> from chainhttp import StubTransport
        >>> transport = StubTransport()
        >>> response = transport.request("GET", "https://example.com", {"timeout": 5})
        >>> response.status_code, response.body
        (200, b'{"data":"hello"}')
        >>> transport.sent_requests
        (SentRequest(method='GET', url='https://example.com', options=mappingproxy({'timeout': 5})),)

        ```
    """

    def __init__(
        self,
        status_code: int = 200,
        body: bytes | str = DEFAULT_STUB_BODY,
        *,
        sink: EventSink | None = None,
    ) -> None:
        self._response = Response(status_code=status_code, body=body)
        self._sink: EventSink = sink if sink is not None else LoggerEventSink(level=logging.DEBUG)
        self._sent: list[SentRequest] = []
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(status_code={self._response.status_code})"

    @property
    def sent_requests(self) -> tuple[SentRequest, ...]:
        """The calls received so far, oldest first."""
        with self._lock:
            return tuple(self._sent)

    def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        validate_request_args(method, url)
        sent = SentRequest(method=method, url=url, options=options or {})
        with self._lock:
            self._sent.append(sent)
        self._sink.record(
            TransportTraceEvent(method=method, url=url, options=copy.deepcopy(dict(sent.options)))
        )
        return self._response
