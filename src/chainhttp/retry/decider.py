r"""Decide whether a response should be retried."""

from __future__ import annotations

__all__ = ["RetryDecider"]

from typing import TYPE_CHECKING

from chainhttp.core.config import SERVER_ERROR_STATUS

if TYPE_CHECKING:
    from chainhttp.response import Response


class RetryDecider:
    r"""Decides whether a response should trigger a retry.

    Only server errors (status >= 500) are retried. Success and client
    error responses (4xx) are terminal.

    Example:
        ```pycon
        >>> from chainhttp import Response
        >>> from chainhttp.retry import RetryDecider
        >>> decider = RetryDecider()
        >>> decider.should_retry(Response(503))
        True
        >>> decider.should_retry(Response(404))
        False

        ```
    """

    def __init__(self, min_status: int = SERVER_ERROR_STATUS) -> None:
        self.min_status = min_status

    def should_retry(self, response: Response) -> bool:
        return response.status_code >= self.min_status
