r"""Backoff strategies for retry delays.

This package provides strategies mapping a retry index to the delay to
wait before the next attempt.
"""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]

from chainhttp.backoff.base import BaseBackoffStrategy
from chainhttp.backoff.constant import ConstantBackoff
from chainhttp.backoff.exponential import ExponentialBackoff
