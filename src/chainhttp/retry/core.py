r"""Shared logic of the synchronous and asynchronous retry decorators."""

from __future__ import annotations

__all__ = ["exceeds_time_budget", "give_up", "schedule_retry"]

import logging
from typing import TYPE_CHECKING

from chainhttp.events import RetryExhaustedEvent, RetryScheduledEvent

if TYPE_CHECKING:
    from chainhttp.events import EventSink
    from chainhttp.response import Response
    from chainhttp.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


def exceeds_time_budget(config: RetryConfig, elapsed: float, delay: float) -> bool:
    """Return ``True`` if waiting ``delay`` more seconds would exceed the
    time budget of the configuration.

    Args:
        config: The retry configuration.
        elapsed: Seconds already spent on the call.
        delay: The backoff delay of the next retry.
    """
    if config.max_total_time is None:
        return False
    return elapsed + delay > config.max_total_time


def schedule_retry(
    sink: EventSink,
    *,
    method: str,
    url: str,
    response: Response,
    delay: float,
    next_attempt: int,
    max_attempts: int,
) -> None:
    """Emit the event announcing a retry.

    Args:
        sink: The sink receiving the event.
        method: The HTTP method of the request.
        url: The URL of the request.
        response: The server error response triggering the retry.
        delay: The backoff delay in seconds.
        next_attempt: The number (1-indexed) of the upcoming attempt.
        max_attempts: The maximum number of attempts.
    """
    logger.debug(
        f"{method} request to {url} failed with status {response.status_code}, "
        f"retrying in {delay:.3f}s (attempt {next_attempt}/{max_attempts})"
    )
    sink.record(RetryScheduledEvent(delay_ms=round(delay * 1000.0, 6), next_attempt=next_attempt))


def give_up(
    sink: EventSink,
    *,
    method: str,
    url: str,
    attempts: int,
    response: Response,
) -> Response:
    """Emit the exhaustion event and return the last response as-is.

    Args:
        sink: The sink receiving the event.
        method: The HTTP method of the request.
        url: The URL of the request.
        attempts: The number of attempts that were made.
        response: The last server error response.

    Returns:
        ``response``, unchanged.
    """
    logger.debug(
        f"{method} request to {url} failed with status {response.status_code} "
        f"after {attempts} attempts"
    )
    sink.record(
        RetryExhaustedEvent(
            method=method, url=url, attempts=attempts, status_code=response.status_code
        )
    )
    return response
