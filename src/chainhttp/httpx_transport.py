r"""Terminal capabilities sending real requests with ``httpx``.

The ``options`` mapping of a request is forwarded as keyword arguments
to ``httpx.Client.request``. The accepted keys are ``auth``, ``content``,
``cookies``, ``data``, ``extensions``, ``files``, ``follow_redirects``,
``headers``, ``json``, ``params`` and ``timeout``. ``body`` is accepted as
an alias of ``content``. Any other key raises ``ValueError``.

Malformed URLs, connection failures and timeouts are raised as
``TransportError``; any status code, 5xx included, is returned as a
``Response``.
"""

from __future__ import annotations

__all__ = ["AsyncHttpxTransport", "HttpxTransport", "REQUEST_OPTIONS", "prepare_options"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from chainhttp.capability import AsyncBaseHttpClient, BaseHttpClient
from chainhttp.core.config import DEFAULT_TIMEOUT
from chainhttp.core.validation import validate_request_args, validate_timeout
from chainhttp.exceptions import TransportError
from chainhttp.response import Response

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

logger: logging.Logger = logging.getLogger(__name__)

REQUEST_OPTIONS = frozenset(
    {
        "auth",
        "content",
        "cookies",
        "data",
        "extensions",
        "files",
        "follow_redirects",
        "headers",
        "json",
        "params",
        "timeout",
    }
)


def prepare_options(options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Convert request options to ``httpx.Client.request`` keyword
    arguments.

    Args:
        options: The request options. ``body`` is renamed ``content``.

    Returns:
        A new dictionary of keyword arguments.

    Raises:
        ValueError: If an option is not supported, or if both ``body``
            and ``content`` are given.

    Example:
        ```pycon
        >>> from chainhttp.httpx_transport import prepare_options
        >>> prepare_options({"body": b"x", "timeout": 2})
        {'timeout': 2, 'content': b'x'}
        >>> prepare_options({"verify": False})
        Traceback (most recent call last):
        ...
        ValueError: options must only use supported keys, got unsupported ['verify']

        ```
    """
    kwargs = dict(options or {})
    if "body" in kwargs:
        if "content" in kwargs:
            msg = "options must not contain both 'body' and 'content'"
            raise ValueError(msg)
        kwargs["content"] = kwargs.pop("body")
    unsupported = sorted(set(kwargs) - REQUEST_OPTIONS)
    if unsupported:
        msg = f"options must only use supported keys, got unsupported {unsupported}"
        raise ValueError(msg)
    return kwargs


def _parse_url(method: str, url: str) -> httpx.URL:
    try:
        return httpx.URL(url)
    except (httpx.InvalidURL, ValueError) as exc:
        raise _to_transport_error(exc, method, url) from exc


def _to_transport_error(exc: Exception, method: str, url: str) -> TransportError:
    logger.debug(f"{method} request to {url} encountered {type(exc).__name__}: {exc}")
    if isinstance(exc, httpx.TimeoutException):
        return TransportError(
            method=method, url=url, message=f"{method} request to {url} timed out", cause=exc
        )
    if isinstance(exc, (httpx.InvalidURL, ValueError)):
        return TransportError(
            method=method,
            url=url,
            message=f"{method} request to {url} has an invalid URL: {exc}",
            cause=exc,
        )
    return TransportError(
        method=method, url=url, message=f"{method} request to {url} failed: {exc}", cause=exc
    )


class HttpxTransport(BaseHttpClient):
    r"""Terminal capability backed by an ``httpx.Client``.

    When no client is given, the transport creates one and closes it on
    ``close`` or when leaving the ``with`` block. A client passed by the
    caller is never closed by the transport.

    Args:
        client: Optional ``httpx.Client`` to send the requests with.
        timeout: Timeout of the client created when ``client`` is None.

    Example:
        ```pycon
        >>> from chainhttp import HttpxTransport, LoggingHttpClient, RetryingHttpClient
        >>> with HttpxTransport() as transport:  # doctest: +SKIP
        ...     client = RetryingHttpClient(LoggingHttpClient(transport))
        ...     response = client.request("GET", "https://api.example.com/data")
        ...

        ```
    """

    def __init__(
        self, client: httpx.Client | None = None, *, timeout: float | httpx.Timeout = DEFAULT_TIMEOUT
    ) -> None:
        validate_timeout(timeout)
        self._owns_client = client is None
        self._client: httpx.Client = client if client is not None else httpx.Client(timeout=timeout)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        validate_request_args(method, url)
        kwargs = prepare_options(options)
        request_url = _parse_url(method, url)
        try:
            response = self._client.request(method, request_url, **kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise _to_transport_error(exc, method, url) from exc
        return Response(status_code=response.status_code, body=response.content)


class AsyncHttpxTransport(AsyncBaseHttpClient):
    r"""Asynchronous terminal capability backed by an
    ``httpx.AsyncClient``.

    Args:
        client: Optional ``httpx.AsyncClient`` to send the requests with.
        timeout: Timeout of the client created when ``client`` is None.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        validate_timeout(timeout)
        self._owns_client = client is None
        self._client: httpx.AsyncClient = (
            client if client is not None else httpx.AsyncClient(timeout=timeout)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        validate_request_args(method, url)
        kwargs = prepare_options(options)
        request_url = _parse_url(method, url)
        try:
            response = await self._client.request(method, request_url, **kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise _to_transport_error(exc, method, url) from exc
        return Response(status_code=response.status_code, body=response.content)
