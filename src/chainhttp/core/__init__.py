r"""Core defaults and validation shared by all capabilities."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TIMEOUT",
    "SERVER_ERROR_STATUS",
    "validate_request_args",
    "validate_retry_params",
    "validate_timeout",
]

from chainhttp.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT,
    SERVER_ERROR_STATUS,
)
from chainhttp.core.validation import (
    validate_request_args,
    validate_retry_params,
    validate_timeout,
)
