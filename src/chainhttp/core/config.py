r"""Default values shared by the capabilities and retry configuration."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TIMEOUT",
    "SERVER_ERROR_STATUS",
]

# Default timeout in seconds used by the httpx transports
DEFAULT_TIMEOUT = 10.0

# Default maximum number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Default base delay in seconds for exponential backoff
# Wait time = base_delay * (2 ** (attempt - 1))
# With 0.1: 1st retry waits 0.1s, 2nd waits 0.2s, 3rd waits 0.4s
DEFAULT_BASE_DELAY = 0.1

# Lowest status code considered a retryable server error
SERVER_ERROR_STATUS = 500
