r"""Capability contract shared by transports and decorators.

A capability turns one ``(method, url, options)`` request into a
``Response``. Transports are the leaves of a chain; decorators wrap
exactly one inner capability and add behavior around the delegation.
Because every node exposes the same ``request`` signature, decorators
compose in any order:

```python
from chainhttp import LoggingHttpClient, RetryingHttpClient, StubTransport

client = RetryingHttpClient(LoggingHttpClient(StubTransport()))
response = client.request("GET", "https://api.example.com/stats")
```
"""

from __future__ import annotations

__all__ = [
    "AsyncBaseHttpClient",
    "AsyncHttpClientDecorator",
    "BaseHttpClient",
    "HttpClientDecorator",
    "compose",
]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from chainhttp.response import Response

C = TypeVar("C", "BaseHttpClient", "AsyncBaseHttpClient")


class BaseHttpClient(ABC):
    """Abstract synchronous HTTP capability."""

    @abstractmethod
    def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        """Send one HTTP request.

        Args:
            method: The HTTP method (e.g., "GET", "POST").
            url: The fully qualified request URL.
            options: Transport options (headers, timeout, body, etc.).
                The mapping is never mutated.

        Returns:
            The response of the request. A 5xx status is a valid response,
            not an error.

        Raises:
            TransportError: If no response could be obtained.
        """


class AsyncBaseHttpClient(ABC):
    """Abstract asynchronous HTTP capability."""

    @abstractmethod
    async def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        """Send one HTTP request.

        See ``BaseHttpClient.request`` for the contract.
        """


class HttpClientDecorator(BaseHttpClient):
    r"""Base class of the capabilities wrapping one inner capability.

    The default ``request`` forwards the call unchanged, so a subclass
    only implements the behavior it adds. The inner capability is fixed
    at construction and exposed read-only.

    Args:
        inner: The capability to delegate to.

    Raises:
        TypeError: If ``inner`` is not a ``BaseHttpClient``.

    Example:
        ```pycon
        >>> from chainhttp import HttpClientDecorator, StubTransport
        >>> transport = StubTransport()
        >>> client = HttpClientDecorator(transport)
        >>> client.inner is transport
        True
        >>> client.request("GET", "https://api.example.com").status_code
        200

        ```
    """

    def __init__(self, inner: BaseHttpClient) -> None:
        if not isinstance(inner, BaseHttpClient):
            msg = f"inner must be a BaseHttpClient, got {type(inner).__qualname__}"
            raise TypeError(msg)
        self._inner = inner

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self._inner!r})"

    @property
    def inner(self) -> BaseHttpClient:
        """The wrapped capability."""
        return self._inner

    def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        return self._inner.request(method, url, options)


class AsyncHttpClientDecorator(AsyncBaseHttpClient):
    r"""Base class of the asynchronous capabilities wrapping one inner
    capability.

    Args:
        inner: The asynchronous capability to delegate to.

    Raises:
        TypeError: If ``inner`` is not an ``AsyncBaseHttpClient``.
    """

    def __init__(self, inner: AsyncBaseHttpClient) -> None:
        if not isinstance(inner, AsyncBaseHttpClient):
            msg = f"inner must be an AsyncBaseHttpClient, got {type(inner).__qualname__}"
            raise TypeError(msg)
        self._inner = inner

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self._inner!r})"

    @property
    def inner(self) -> AsyncBaseHttpClient:
        """The wrapped capability."""
        return self._inner

    async def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        return await self._inner.request(method, url, options)


def compose(transport: C, *decorators: Callable[[C], C]) -> C:
    r"""Wrap a transport in a sequence of decorators.

    The first decorator is the innermost one, so
    ``compose(t, LoggingHttpClient, RetryingHttpClient)`` builds
    ``RetryingHttpClient(LoggingHttpClient(t))``. Use
    ``functools.partial`` to configure a decorator.

    Args:
        transport: The terminal capability.
        *decorators: Callables taking the inner capability and returning
            the capability that wraps it.

    Returns:
        The outermost capability, or ``transport`` itself if no decorator
        is given.

    Example:
        ```pycon
        >>> from functools import partial
        >>> from chainhttp import (
        ...     LoggingHttpClient,
        ...     RetryConfig,
        ...     RetryingHttpClient,
        ...     StubTransport,
        ...     compose,
        ... )
        >>> client = compose(
        ...     StubTransport(),
        ...     LoggingHttpClient,
        ...     partial(RetryingHttpClient, config=RetryConfig(max_attempts=4)),
        ... )
        >>> client
        RetryingHttpClient(LoggingHttpClient(StubTransport(status_code=200)))

        ```
    """
    client = transport
    for decorator in decorators:
        client = decorator(client)
    return client
