r"""Configuration dataclass for the retry behavior."""

from __future__ import annotations

__all__ = ["RetryConfig"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from chainhttp.backoff.exponential import ExponentialBackoff
from chainhttp.core.config import DEFAULT_BASE_DELAY, DEFAULT_MAX_ATTEMPTS
from chainhttp.core.validation import validate_retry_params

if TYPE_CHECKING:
    from chainhttp.backoff.base import BaseBackoffStrategy


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    Args:
        max_attempts: Maximum number of attempts, including the first
            one. Must be >= 1. With 1 the request is never retried.
        base_delay: Delay in seconds before the first retry. Later delays
            double at every retry. Must be >= 0. Only used when
            ``backoff_strategy`` is None.
        backoff_strategy: Optional strategy computing the delays. When
            set, it takes precedence and ``base_delay`` is ignored.
        max_total_time: Optional time budget in seconds. A retry whose
            backoff delay would end after the budget is not scheduled
            and the last response is returned.

    Example:
        ```pycon
        >>> from chainhttp.retry import RetryConfig
        >>> config = RetryConfig()
        >>> config.max_attempts, config.base_delay
        (3, 0.1)
        >>> [config.calculate_delay(attempt) for attempt in (1, 2, 3)]
        [0.1, 0.2, 0.4]
        >>> config.merge(max_attempts=5).max_attempts
        5

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay: float = DEFAULT_BASE_DELAY
    backoff_strategy: BaseBackoffStrategy | None = None
    max_total_time: float | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            TypeError: If ``max_attempts`` is not an int.
            ValueError: If any parameter fails validation.
        """
        validate_retry_params(
            max_attempts=self.max_attempts,
            base_delay=self.base_delay,
            max_total_time=self.max_total_time,
        )

    @property
    def strategy(self) -> BaseBackoffStrategy:
        """The backoff strategy used to compute the delays."""
        if self.backoff_strategy is not None:
            return self.backoff_strategy
        return ExponentialBackoff(base_delay=self.base_delay)

    def calculate_delay(self, attempt: int) -> float:
        """Return the delay to wait after a failed attempt.

        Args:
            attempt: The number (1-indexed) of the attempt that just
                failed.

        Returns:
            The delay in seconds before attempt ``attempt + 1``.
        """
        return self.strategy.calculate(attempt - 1)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Return a copy of this configuration with some fields
        replaced.

        Raises:
            ValueError: If an overridden value fails validation.
        """
        return replace(self, **overrides)
