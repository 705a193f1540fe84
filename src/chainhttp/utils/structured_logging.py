r"""Structured logging utilities for machine-readable log output.

The events emitted by the capabilities carry their fields as ``extra``
data on the log record. ``StructuredFormatter`` renders such records as
one JSON object per line, with the correlation id of the current
context when one is set.

Example:
    Send the events of a chain to stderr as JSON lines:

    ```python
    import logging
    from chainhttp.utils.structured_logging import (
        enable_structured_logging,
        set_correlation_id,
    )

    enable_structured_logging(level=logging.INFO)
    set_correlation_id("request-123")
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "enable_structured_logging",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import IO, Any

# Context variable for correlation ID (thread-safe and async-safe)
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "chainhttp_correlation_id", default=None
)

# Attributes set by logging.LogRecord itself, everything else is extra data
_RECORD_ATTRIBUTES = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set (e.g., request ID,
            trace ID).

    Example:
        ```pycon
        >>> from chainhttp.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("request-456")
        >>> get_correlation_id()
        'request-456'
        >>> clear_correlation_id()
        >>> get_correlation_id()

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record becomes a JSON object with the keys ``timestamp``,
    ``level``, ``logger`` and ``message``, the ``correlation_id`` when
    set, ``exception`` when the record carries exception info, and every
    field passed through ``extra``. Values that are not JSON
    serializable are rendered with ``repr``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record creation time as ISO 8601 in UTC, with
        millisecond precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields to include in the log.

    Example:
        ```pycon
        >>> import logging
        >>> from io import StringIO
        >>> from chainhttp.utils.structured_logging import (
        ...     StructuredFormatter,
        ...     log_structured,
        ... )
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.DEBUG)
        >>> log_structured(logger, logging.INFO, "Request completed", status_code=200)
        >>> '"status_code": 200' in stream.getvalue()
        True

        ```
    """
    logger.log(level, message, extra=extra)


def enable_structured_logging(
    logger_name: str = "chainhttp",
    level: int = logging.INFO,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Attach a JSON handler to the package logger.

    Args:
        logger_name: The name of the logger to configure.
        level: The level set on the logger.
        stream: The stream to write to. Defaults to ``sys.stderr``.

    Returns:
        The handler that was added, so the caller can remove it.
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    target = logging.getLogger(logger_name)
    target.addHandler(handler)
    target.setLevel(level)
    return handler
