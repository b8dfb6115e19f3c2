r"""Parameter validation utilities for the client configuration.

This module provides validation functions for the client configuration
to ensure it meets the required constraints before the transport is
built.
"""

from __future__ import annotations

__all__ = ["normalize_api_key", "validate_retry_params", "validate_timeout"]

import math

from aiopayjp.exceptions import ConfigurationError


def validate_timeout(timeout: float) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for one HTTP attempt.
            Must be a number > 0.

    Raises:
        ConfigurationError: If timeout is not a positive finite number.

    Example:
        ```pycon
        >>> from aiopayjp.core.validation import validate_timeout
        >>> validate_timeout(30.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aiopayjp.exceptions.ConfigurationError: timeout must be > 0, got 0

        ```
    """
    _check_finite_number("timeout", timeout)
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ConfigurationError(msg)


def validate_retry_params(
    max_retry: int,
    retry_initial_delay: float,
    retry_max_delay: float,
) -> None:
    """Validate retry parameters.

    ``retry_initial_delay`` may exceed ``retry_max_delay``, in which
    case the cap applies from the first retry on.

    Args:
        max_retry: Maximum number of retries after the first attempt.
            Must be >= 0. A value of 0 means no retries.
        retry_initial_delay: Backoff delay in seconds before the first
            retry. Must be >= 0.
        retry_max_delay: Upper bound in seconds of any backoff delay.
            Must be >= 0.

    Raises:
        ConfigurationError: If any parameter is negative, or a delay
            is not a finite number.

    Example:
        ```pycon
        >>> from aiopayjp.core.validation import validate_retry_params
        >>> validate_retry_params(max_retry=3, retry_initial_delay=0.5, retry_max_delay=10.0)

        ```
    """
    if isinstance(max_retry, bool) or not isinstance(max_retry, int) or max_retry < 0:
        msg = f"max_retry must be an integer >= 0, got {max_retry!r}"
        raise ConfigurationError(msg)
    for name, delay in (
        ("retry_initial_delay", retry_initial_delay),
        ("retry_max_delay", retry_max_delay),
    ):
        _check_finite_number(name, delay)
        if delay < 0:
            msg = f"{name} must be >= 0, got {delay}"
            raise ConfigurationError(msg)


def _check_finite_number(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{name} must be a number, got {type(value).__name__}"
        raise ConfigurationError(msg)
    if not math.isfinite(value):
        msg = f"{name} must be finite, got {value}"
        raise ConfigurationError(msg)


def normalize_api_key(api_key: str) -> str:
    r"""Strip surrounding whitespace from an API key.

    Keys read from environment variables or shell commands often carry
    a trailing newline.

    Args:
        api_key: The raw API key.

    Returns:
        The key without leading or trailing whitespace.

    Raises:
        ConfigurationError: If the key is not a string.

    Example:
        ```pycon
        >>> from aiopayjp.core.validation import normalize_api_key
        >>> normalize_api_key(" sk_test_abc \n")
        'sk_test_abc'

        ```
    """
    if not isinstance(api_key, str):
        msg = f"api_key must be a string, got {type(api_key).__name__}"
        raise ConfigurationError(msg)
    return api_key.strip()
