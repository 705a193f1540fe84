r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from chainhttp.backoff.base import BaseBackoffStrategy
from chainhttp.core.config import DEFAULT_BASE_DELAY


class ConstantBackoff(BaseBackoffStrategy):
    """Constant backoff strategy.

    Waits the same delay before every retry.

    Args:
        delay: The fixed delay in seconds (default: 0.1).

    Example:
        ```pycon
        >>> from chainhttp.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=0.5)
        >>> backoff.calculate(0)
        0.5
        >>> backoff.calculate(4)
        0.5

        ```
    """

    def __init__(self, delay: float = DEFAULT_BASE_DELAY) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(delay={self.delay})"

    def calculate(self, retry_index: int) -> float:  # noqa: ARG002
        return self.delay
