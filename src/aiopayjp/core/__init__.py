r"""Core configuration and validation shared by the PAY.JP clients."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_RETRY",
    "DEFAULT_RETRY_INITIAL_DELAY",
    "DEFAULT_RETRY_MAX_DELAY",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "ClientConfig",
    "normalize_api_key",
    "validate_retry_params",
    "validate_timeout",
]

from aiopayjp.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    DEFAULT_MAX_RETRY,
    DEFAULT_RETRY_INITIAL_DELAY,
    DEFAULT_RETRY_MAX_DELAY,
    DEFAULT_TIMEOUT,
    USER_AGENT,
    ClientConfig,
)
from aiopayjp.core.validation import (
    normalize_api_key,
    validate_retry_params,
    validate_timeout,
)
