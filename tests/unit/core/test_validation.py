r"""Unit tests for the validation helpers."""

from __future__ import annotations

import pytest

from aiopayjp.core.validation import (
    normalize_api_key,
    validate_retry_params,
    validate_timeout,
)
from aiopayjp.exceptions import ConfigurationError

######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.001, 1, 30.0])
def test_validate_timeout_valid(timeout: float) -> None:
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, 0.0, -1, -0.5])
def test_validate_timeout_not_positive(timeout: float) -> None:
    with pytest.raises(ConfigurationError, match="timeout must be > 0"):
        validate_timeout(timeout)


@pytest.mark.parametrize("timeout", ["30", None, True])
def test_validate_timeout_not_a_number(timeout: object) -> None:
    with pytest.raises(ConfigurationError, match="timeout must be a number"):
        validate_timeout(timeout)  # type: ignore[arg-type]


@pytest.mark.parametrize("timeout", [float("inf"), float("nan")])
def test_validate_timeout_not_finite(timeout: float) -> None:
    with pytest.raises(ConfigurationError, match="timeout must be finite"):
        validate_timeout(timeout)


###########################################
#     Tests for validate_retry_params     #
###########################################


@pytest.mark.parametrize(
    ("max_retry", "initial", "maximum"), [(0, 0.0, 0.0), (3, 0.5, 10.0), (10, 20.0, 1.0)]
)
def test_validate_retry_params_valid(max_retry: int, initial: float, maximum: float) -> None:
    validate_retry_params(max_retry, initial, maximum)


def test_validate_retry_params_negative_max_retry() -> None:
    with pytest.raises(ConfigurationError, match="max_retry must be an integer >= 0"):
        validate_retry_params(-1, 0.5, 10.0)


def test_validate_retry_params_negative_initial_delay() -> None:
    with pytest.raises(ConfigurationError, match="retry_initial_delay"):
        validate_retry_params(3, -0.5, 10.0)


def test_validate_retry_params_negative_max_delay() -> None:
    with pytest.raises(ConfigurationError, match="retry_max_delay"):
        validate_retry_params(3, 0.5, -10.0)


@pytest.mark.parametrize(
    ("initial", "maximum", "match"),
    [
        (float("inf"), 10.0, "retry_initial_delay must be finite"),
        (float("nan"), 10.0, "retry_initial_delay must be finite"),
        (0.5, float("inf"), "retry_max_delay must be finite"),
        (0.5, float("nan"), "retry_max_delay must be finite"),
        ("0.5", 10.0, "retry_initial_delay must be a number"),
        (0.5, "10", "retry_max_delay must be a number"),
        (None, 10.0, "retry_initial_delay must be a number"),
        (0.5, True, "retry_max_delay must be a number"),
    ],
)
def test_validate_retry_params_invalid_delay(
    initial: object, maximum: object, match: str
) -> None:
    with pytest.raises(ConfigurationError, match=match):
        validate_retry_params(3, initial, maximum)  # type: ignore[arg-type]


#######################################
#     Tests for normalize_api_key     #
#######################################


@pytest.mark.parametrize(
    "api_key",
    [
        "sk_test_xxxxx",
        "sk_test_xxxxx\n",
        "  sk_test_xxxxx  ",
        "\tsk_test_xxxxx\t",
        " \t sk_test_xxxxx \n ",
        "sk_test_xxxxx\r\n",
    ],
)
def test_normalize_api_key_strips_whitespace(api_key: str) -> None:
    assert normalize_api_key(api_key) == "sk_test_xxxxx"


def test_normalize_api_key_keeps_inner_characters() -> None:
    assert normalize_api_key(" pk_test_a b ") == "pk_test_a b"


def test_normalize_api_key_not_a_string() -> None:
    with pytest.raises(ConfigurationError, match="api_key must be a string"):
        normalize_api_key(None)  # type: ignore[arg-type]
