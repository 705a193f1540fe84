from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

from chainhttp.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    enable_structured_logging,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)


@pytest.fixture
def json_logger() -> tuple[logging.Logger, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("chainhttp.test_structured")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger, stream


##############################################
#     Tests for correlation ID management    #
##############################################


def test_correlation_id_set_get_clear() -> None:
    clear_correlation_id()
    assert get_correlation_id() is None
    set_correlation_id("test-123")
    assert get_correlation_id() == "test-123"
    clear_correlation_id()
    assert get_correlation_id() is None


#########################################
#     Tests for StructuredFormatter     #
#########################################


def test_structured_formatter_basic_log(json_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = json_logger
    logger.info("Test message")

    log_data = json.loads(stream.getvalue().strip())
    assert log_data["message"] == "Test message"
    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "chainhttp.test_structured"
    assert log_data["timestamp"].endswith("Z")
    assert "correlation_id" not in log_data


def test_structured_formatter_includes_correlation_id(
    json_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = json_logger
    set_correlation_id("req-42")
    try:
        logger.info("with id")
    finally:
        clear_correlation_id()
    assert json.loads(stream.getvalue())["correlation_id"] == "req-42"


def test_structured_formatter_includes_exception(
    json_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = json_logger
    try:
        msg = "boom"
        raise ValueError(msg)
    except ValueError:
        logger.exception("failed")
    assert "ValueError: boom" in json.loads(stream.getvalue())["exception"]


def test_structured_formatter_non_serializable_extra(
    json_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = json_logger
    logger.info("extra", extra={"payload": object()})
    assert json.loads(stream.getvalue())["payload"].startswith("<object object")


####################################
#     Tests for log_structured     #
####################################


def test_log_structured_extra_fields(json_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = json_logger
    log_structured(logger, logging.INFO, "Request completed", status_code=200, elapsed_ms=1.5)

    log_data = json.loads(stream.getvalue())
    assert log_data["message"] == "Request completed"
    assert log_data["status_code"] == 200
    assert log_data["elapsed_ms"] == 1.5


def test_log_structured_respects_level(json_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = json_logger
    logger.setLevel(logging.WARNING)
    log_structured(logger, logging.INFO, "ignored", status_code=200)
    assert stream.getvalue() == ""


###############################################
#     Tests for enable_structured_logging     #
###############################################


def test_enable_structured_logging() -> None:
    stream = StringIO()
    handler = enable_structured_logging("chainhttp.test_enable", level=logging.DEBUG, stream=stream)
    logger = logging.getLogger("chainhttp.test_enable")
    try:
        assert handler in logger.handlers
        assert logger.level == logging.DEBUG
        logger.debug("hello")
        assert json.loads(stream.getvalue())["message"] == "hello"
    finally:
        logger.removeHandler(handler)
