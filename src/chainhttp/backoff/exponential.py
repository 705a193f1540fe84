r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from chainhttp.backoff.base import BaseBackoffStrategy
from chainhttp.core.config import DEFAULT_BASE_DELAY


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** retry_index), with optional
    max_delay cap. This is the default strategy of the retry behavior.

    Args:
        base_delay: The delay in seconds before the first retry
            (default: 0.1).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from chainhttp.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.1)
        >>> backoff.calculate(0)  # Before attempt 2
        0.1
        >>> backoff.calculate(1)  # Before attempt 3
        0.2
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
        >>> backoff.calculate(10)
        5.0

        ```
    """

    def __init__(self, base_delay: float = DEFAULT_BASE_DELAY, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_delay={self.base_delay}, max_delay={self.max_delay})"

    def calculate(self, retry_index: int) -> float:
        delay = self.base_delay * (2**retry_index)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
