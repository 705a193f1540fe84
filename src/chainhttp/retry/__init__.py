r"""Retry behavior: configuration, decision logic and the retrying
decorators.

Public API:
    - RetryConfig: Configuration for retry behavior
    - RetryDecider: Logic for deciding whether to retry
    - RetryingHttpClient: Synchronous retrying decorator
    - AsyncRetryingHttpClient: Asynchronous retrying decorator
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryingHttpClient",
    "RetryConfig",
    "RetryDecider",
    "RetryingHttpClient",
]

from chainhttp.retry.client import RetryingHttpClient
from chainhttp.retry.client_async import AsyncRetryingHttpClient
from chainhttp.retry.config import RetryConfig
from chainhttp.retry.decider import RetryDecider
