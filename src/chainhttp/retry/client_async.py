r"""Asynchronous decorator retrying server error responses with
exponential backoff."""

from __future__ import annotations

__all__ = ["AsyncRetryingHttpClient"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from chainhttp.capability import AsyncHttpClientDecorator
from chainhttp.events import LoggerEventSink
from chainhttp.retry.config import RetryConfig
from chainhttp.retry.core import exceeds_time_budget, give_up, schedule_retry
from chainhttp.retry.decider import RetryDecider

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from chainhttp.capability import AsyncBaseHttpClient
    from chainhttp.events import EventSink
    from chainhttp.response import Response

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryingHttpClient(AsyncHttpClientDecorator):
    r"""Asynchronous version of ``RetryingHttpClient``.

    The backoff wait uses ``asyncio.sleep`` so other tasks keep running
    while a retry sequence is waiting. Cancelling the task during the
    wait raises ``asyncio.CancelledError`` in the caller and no further
    attempt is made.

    Args:
        inner: The asynchronous capability to delegate to.
        config: The retry configuration. Defaults to ``RetryConfig()``.
        sink: The sink receiving the retry events. Defaults to a
            ``LoggerEventSink``.
        sleep: Coroutine function waiting for the given number of
            seconds. Defaults to ``asyncio.sleep``.
        clock: Monotonic clock used for ``max_total_time``.
    """

    def __init__(
        self,
        inner: AsyncBaseHttpClient,
        config: RetryConfig | None = None,
        *,
        sink: EventSink | None = None,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(inner)
        self.config: RetryConfig = config or RetryConfig()
        self.decider: RetryDecider = RetryDecider()
        self._sink: EventSink = sink if sink is not None else LoggerEventSink()
        self._sleep = sleep
        self._clock = clock

    async def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        start = self._clock()
        attempt = 1
        while True:
            response = await self._inner.request(method, url, options)
            if not self.decider.should_retry(response):
                return response
            if attempt >= self.config.max_attempts:
                return give_up(self._sink, method=method, url=url, attempts=attempt, response=response)

            delay = self.config.calculate_delay(attempt)
            if exceeds_time_budget(self.config, self._clock() - start, delay):
                logger.debug(f"{method} request to {url}: max_total_time would be exceeded")
                return give_up(self._sink, method=method, url=url, attempts=attempt, response=response)

            schedule_retry(
                self._sink,
                method=method,
                url=url,
                response=response,
                delay=delay,
                next_attempt=attempt + 1,
                max_attempts=self.config.max_attempts,
            )
            if self._sleep is None:
                await asyncio.sleep(delay)
            else:
                await self._sleep(delay)
            attempt += 1
