r"""Decorator retrying server error responses with exponential backoff."""

from __future__ import annotations

__all__ = ["RetryingHttpClient"]

import logging
import time
from typing import TYPE_CHECKING, Any

from chainhttp.capability import HttpClientDecorator
from chainhttp.events import LoggerEventSink
from chainhttp.exceptions import RetryCancelledError
from chainhttp.retry.config import RetryConfig
from chainhttp.retry.core import exceeds_time_budget, give_up, schedule_retry
from chainhttp.retry.decider import RetryDecider
from chainhttp.utils.sleep import WaitCancelledError, default_sleep

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from chainhttp.capability import BaseHttpClient
    from chainhttp.events import EventSink
    from chainhttp.response import Response
    from chainhttp.utils.sleep import Sleeper

logger: logging.Logger = logging.getLogger(__name__)


class RetryingHttpClient(HttpClientDecorator):
    r"""Decorator retrying 5xx responses using exponential backoff.

    Backoff formula, with ``attempt`` the 1-indexed number of the attempt
    that just failed:

    ```
    delay = base_delay * 2 ** (attempt - 1)
    ```

    With the defaults (``max_attempts=3``, ``base_delay=0.1``):

    | Attempt | Delay before the call |
    |---------|-----------------------|
    | 1       | 0 ms                  |
    | 2       | 100 ms                |
    | 3       | 200 ms                |

    The first response with a status below 500 is returned immediately.
    When the last attempt still returns a 5xx, that response is returned
    as-is and a ``RetryExhaustedEvent`` is emitted. No delay follows the
    final attempt.

    A ``TransportError`` raised by the inner capability is not retried:
    it propagates on the attempt where it occurred.

    Args:
        inner: The capability to delegate to.
        config: The retry configuration. Defaults to ``RetryConfig()``.
        sink: The sink receiving the retry events. Defaults to a
            ``LoggerEventSink``.
        sleep: Function blocking for the given number of seconds.
            Defaults to ``time.sleep``. Pass a ``CancellableSleep`` to
            be able to cancel a pending backoff wait.
        clock: Monotonic clock used for ``max_total_time``.

    Example:
        ```pycon
        >>> from chainhttp import RetryConfig, RetryingHttpClient, StubTransport
        >>> client = RetryingHttpClient(StubTransport(), RetryConfig(max_attempts=4))
        >>> client.request("GET", "https://api.example.com").status_code
        200

        ```
    """

    def __init__(
        self,
        inner: BaseHttpClient,
        config: RetryConfig | None = None,
        *,
        sink: EventSink | None = None,
        sleep: Sleeper | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(inner)
        self.config: RetryConfig = config or RetryConfig()
        self.decider: RetryDecider = RetryDecider()
        self._sink: EventSink = sink if sink is not None else LoggerEventSink()
        self._sleep: Sleeper = sleep if sleep is not None else default_sleep
        self._clock = clock

    def request(
        self, method: str, url: str, options: Mapping[str, Any] | None = None
    ) -> Response:
        start = self._clock()
        attempt = 1
        while True:
            response = self._inner.request(method, url, options)
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
            try:
                self._sleep(delay)
            except WaitCancelledError as exc:
                raise RetryCancelledError(method=method, url=url, next_attempt=attempt + 1) from exc
            attempt += 1
