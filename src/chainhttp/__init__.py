r"""chainhttp - Composable HTTP client built from decorators.

A terminal transport turns a ``(method, url, options)`` request into a
``Response``. Decorators wrap exactly one inner capability and add a
cross-cutting behavior without touching the transport or each other:

    - LoggingHttpClient: emits one structured event per call with its latency
    - RetryingHttpClient: retries 5xx responses with exponential backoff

Chain order decides the behavior: retry outside logging logs every
attempt, logging outside retry logs only the final outcome.

Example:
    ```pycon
    >>> from chainhttp import LoggingHttpClient, RetryingHttpClient, StubTransport
    >>> from chainhttp.events import CollectingEventSink
    >>> sink = CollectingEventSink()
    >>> client = RetryingHttpClient(
    ...     LoggingHttpClient(StubTransport(), sink=sink), sink=sink
    ... )
    >>> response = client.request("GET", "https://example.com/api/stats")
    >>> response.status_code
    200
    >>> len(sink)
    1

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncBaseHttpClient",
    "AsyncHttpClientDecorator",
    "AsyncHttpxTransport",
    "AsyncLoggingHttpClient",
    "AsyncRetryingHttpClient",
    "BaseHttpClient",
    "HttpClientDecorator",
    "HttpxTransport",
    "LoggingHttpClient",
    "Response",
    "RetryCancelledError",
    "RetryConfig",
    "RetryingHttpClient",
    "StubTransport",
    "TransportError",
    "__version__",
    "compose",
]

from importlib.metadata import PackageNotFoundError, version

from chainhttp.capability import (
    AsyncBaseHttpClient,
    AsyncHttpClientDecorator,
    BaseHttpClient,
    HttpClientDecorator,
    compose,
)
from chainhttp.exceptions import RetryCancelledError, TransportError
from chainhttp.httpx_transport import AsyncHttpxTransport, HttpxTransport
from chainhttp.logging_client import AsyncLoggingHttpClient, LoggingHttpClient
from chainhttp.response import Response
from chainhttp.retry import AsyncRetryingHttpClient, RetryConfig, RetryingHttpClient
from chainhttp.transport import StubTransport

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
