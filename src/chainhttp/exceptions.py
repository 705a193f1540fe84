r"""Define the exceptions raised by the HTTP capabilities."""

from __future__ import annotations

__all__ = ["RetryCancelledError", "TransportError"]


class TransportError(RuntimeError):
    r"""Raised when a request attempt could not produce any response.

    This is the hard failure channel (connection refused, DNS failure,
    timeout at the transport level). A response carrying a 5xx status
    code is not a ``TransportError``: it is a successful exchange that
    carries a server error.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: A descriptive error message.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from chainhttp import TransportError
        >>> raise TransportError(
        ...     method="GET", url="https://api.example.com", message="connection refused"
        ... )
        Traceback (most recent call last):
            ...
        chainhttp.exceptions.TransportError: connection refused

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.cause = cause


class RetryCancelledError(TransportError):
    r"""Raised when a retry sequence is cancelled during a backoff wait.

    Args:
        method: The HTTP method of the cancelled request.
        url: The URL of the cancelled request.
        next_attempt: The attempt number (1-indexed) that was about to run.
    """

    def __init__(self, method: str, url: str, next_attempt: int) -> None:
        super().__init__(
            method=method,
            url=url,
            message=f"{method} request to {url} cancelled before attempt {next_attempt}",
        )
        self.next_attempt = next_attempt
