r"""Immutable value object representing a raw HTTP response."""

from __future__ import annotations

__all__ = ["Response"]

from dataclasses import dataclass

from chainhttp.core.config import SERVER_ERROR_STATUS


@dataclass(frozen=True)
class Response:
    r"""Raw HTTP response made of a status code and an uninterpreted
    body.

    The object is frozen: decorators may build a new ``Response`` but
    can never mutate one produced by the transport. A ``str`` body is
    encoded to UTF-8 so the stored body is always ``bytes``.

    Args:
        status_code: The HTTP status code (e.g. 200, 404, 503).
        body: The raw body as received from the transport.

    Example:
        ```pycon
        >>> from chainhttp import Response
        >>> response = Response(200, b'{"data":"hello"}')
        >>> response.status_code
        200
        >>> response.text
        '{"data":"hello"}'
        >>> Response(503, "Service Unavailable").is_server_error
        True

        ```
    """

    status_code: int
    body: bytes = b""

    def __post_init__(self) -> None:
        if isinstance(self.body, str):
            object.__setattr__(self, "body", self.body.encode("utf-8"))

    @property
    def is_success(self) -> bool:
        """``True`` if the status code is below 400."""
        return self.status_code < 400

    @property
    def is_server_error(self) -> bool:
        """``True`` if the status code is a 5xx server error."""
        return self.status_code >= SERVER_ERROR_STATUS

    @property
    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")
