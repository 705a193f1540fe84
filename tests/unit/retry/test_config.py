from __future__ import annotations

import pytest

from chainhttp.backoff import ConstantBackoff, ExponentialBackoff
from chainhttp.core import DEFAULT_BASE_DELAY, DEFAULT_MAX_ATTEMPTS
from chainhttp.retry import RetryConfig

#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    config = RetryConfig()
    assert config.max_attempts == DEFAULT_MAX_ATTEMPTS == 3
    assert config.base_delay == DEFAULT_BASE_DELAY == 0.1
    assert config.backoff_strategy is None
    assert config.max_total_time is None


def test_retry_config_default_strategy_is_exponential() -> None:
    strategy = RetryConfig(base_delay=0.5).strategy
    assert isinstance(strategy, ExponentialBackoff)
    assert strategy.base_delay == 0.5


def test_retry_config_custom_strategy() -> None:
    strategy = ConstantBackoff(delay=1.0)
    assert RetryConfig(backoff_strategy=strategy).strategy is strategy


@pytest.mark.parametrize(
    ("attempt", "delay"), [(1, 0.1), (2, 0.2), (3, 0.4), (4, 0.8)]
)
def test_retry_config_calculate_delay(attempt: int, delay: float) -> None:
    assert RetryConfig().calculate_delay(attempt) == pytest.approx(delay)


def test_retry_config_calculate_delay_exact_values() -> None:
    config = RetryConfig(base_delay=0.1)
    assert config.calculate_delay(1) == 0.1
    assert config.calculate_delay(2) == 0.2


def test_retry_config_is_frozen() -> None:
    config = RetryConfig()
    with pytest.raises(AttributeError):
        config.max_attempts = 5  # type: ignore[misc]


def test_retry_config_merge() -> None:
    config = RetryConfig(max_attempts=5)
    merged = config.merge(base_delay=0.3)
    assert merged == RetryConfig(max_attempts=5, base_delay=0.3)
    assert config.base_delay == 0.1


def test_retry_config_merge_updates_default_strategy() -> None:
    merged = RetryConfig().merge(base_delay=1.0)
    assert merged.calculate_delay(2) == 2.0


def test_retry_config_merge_validates() -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1, got 0"):
        RetryConfig().merge(max_attempts=0)


@pytest.mark.parametrize("max_attempts", [0, -1])
def test_retry_config_invalid_max_attempts(max_attempts: int) -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        RetryConfig(max_attempts=max_attempts)


def test_retry_config_invalid_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be >= 0, got -0.1"):
        RetryConfig(base_delay=-0.1)


@pytest.mark.parametrize("max_total_time", [0, -1.0])
def test_retry_config_invalid_max_total_time(max_total_time: float) -> None:
    with pytest.raises(ValueError, match=r"max_total_time must be > 0"):
        RetryConfig(max_total_time=max_total_time)


def test_retry_config_single_attempt_is_valid() -> None:
    assert RetryConfig(max_attempts=1).max_attempts == 1


@pytest.mark.parametrize("max_attempts", [2.5, 3.0, "3", True, None])
def test_retry_config_max_attempts_must_be_int(max_attempts: object) -> None:
    with pytest.raises(TypeError, match=r"max_attempts must be an int"):
        RetryConfig(max_attempts=max_attempts)  # type: ignore[arg-type]


def test_retry_config_strategy_takes_precedence_over_base_delay() -> None:
    config = RetryConfig(base_delay=5.0, backoff_strategy=ConstantBackoff(delay=0.25))
    assert [config.calculate_delay(attempt) for attempt in (1, 2, 3)] == [0.25, 0.25, 0.25]
