r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy maps the index of a retry to the delay to wait
    before it. The delay depends only on that index.
    """

    @abstractmethod
    def calculate(self, retry_index: int) -> float:
        """Calculate the backoff delay for a given retry.

        Args:
            retry_index: The retry number (0-indexed). ``retry_index=0``
                is the wait between attempt 1 and attempt 2.

        Returns:
            The delay in seconds before the next attempt.
        """
