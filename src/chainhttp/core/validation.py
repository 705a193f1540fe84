r"""Parameter validation utilities for the HTTP capabilities.

This module provides validation functions for request arguments and
retry parameters so invalid values fail fast with a clear message.
"""

from __future__ import annotations

__all__ = ["validate_request_args", "validate_retry_params", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


def validate_request_args(method: str, url: str) -> None:
    """Validate the method and URL of a request.

    Args:
        method: The HTTP method. Must be a non-empty string.
        url: The request URL. Must be a non-empty string.

    Raises:
        ValueError: If the method or the URL is empty.

    Example:
        ```pycon
        >>> from chainhttp.core.validation import validate_request_args
        >>> validate_request_args("GET", "https://api.example.com")
        >>> validate_request_args("", "https://api.example.com")
        Traceback (most recent call last):
        ...
        ValueError: method must be a non-empty string, got ''

        ```
    """
    if not method:
        msg = f"method must be a non-empty string, got {method!r}"
        raise ValueError(msg)
    if not url:
        msg = f"url must be a non-empty string, got {url!r}"
        raise ValueError(msg)


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(
    max_attempts: int,
    base_delay: float,
    max_total_time: float | None = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_attempts: Maximum number of attempts including the first
            one. Must be an int >= 1. A value of 1 disables retries.
        base_delay: Base delay in seconds of the exponential backoff.
            Must be >= 0.
        max_total_time: Optional time budget in seconds for the whole
            retry sequence. Must be > 0 if provided.

    Raises:
        TypeError: If ``max_attempts`` is not an int.
        ValueError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from chainhttp.core.validation import validate_retry_params
        >>> validate_retry_params(max_attempts=3, base_delay=0.1)
        >>> validate_retry_params(max_attempts=0, base_delay=0.1)
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 1, got 0

        ```
    """
    if not isinstance(max_attempts, int) or isinstance(max_attempts, bool):
        msg = f"max_attempts must be an int, got {type(max_attempts).__qualname__}"
        raise TypeError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
    if base_delay < 0:
        msg = f"base_delay must be >= 0, got {base_delay}"
        raise ValueError(msg)
    if max_total_time is not None and max_total_time <= 0:
        msg = f"max_total_time must be > 0, got {max_total_time}"
        raise ValueError(msg)
