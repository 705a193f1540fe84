r"""Utility functions for logging and backoff waits."""

from __future__ import annotations

__all__ = [
    "CancellableSleep",
    "Sleeper",
    "StructuredFormatter",
    "WaitCancelledError",
    "clear_correlation_id",
    "default_sleep",
    "enable_structured_logging",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

from chainhttp.utils.sleep import CancellableSleep, Sleeper, WaitCancelledError, default_sleep
from chainhttp.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    enable_structured_logging,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
