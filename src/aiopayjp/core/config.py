r"""Configuration dataclass and defaults for the PAY.JP clients.

This module provides the configuration constants and the immutable
dataclass-based configuration shared by ``PayjpClient`` and
``PayjpPublicClient``.
"""

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
]

from dataclasses import dataclass, replace
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from aiopayjp.core.validation import validate_retry_params, validate_timeout

# Default base URL of the PAY.JP API
DEFAULT_BASE_URL = "https://api.pay.jp/v1"

# Default maximum number of retries on HTTP 429
# Total attempts = max_retry + 1 (initial attempt)
DEFAULT_MAX_RETRY = 3

# Default backoff delay in seconds before the first retry
DEFAULT_RETRY_INITIAL_DELAY = 0.5

# Default upper bound in seconds of any backoff delay
DEFAULT_RETRY_MAX_DELAY = 10.0

# Default timeout in seconds of one HTTP attempt
DEFAULT_TIMEOUT = 30.0


def _package_version() -> str:
    try:
        return version("aiopayjp")
    except PackageNotFoundError:  # pragma: no cover
        return "0.0.0"


USER_AGENT = f"aiopayjp/{_package_version()}"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for a PAY.JP client.

    The configuration is immutable and is shared read-only by every
    request issued through a client. Durations are expressed in seconds.

    Args:
        base_url: Base URL of the API. Request paths are appended to it.
        max_retry: Maximum number of retries on HTTP 429, not counting
            the first attempt. Must be >= 0.
        retry_initial_delay: Backoff delay before the first retry.
        retry_max_delay: Upper bound of any backoff delay.
        timeout: Timeout of one HTTP attempt. Must be > 0.

    Raises:
        ConfigurationError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from aiopayjp.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.base_url
        'https://api.pay.jp/v1'
        >>> config.max_retry
        3
        >>> config.merge(max_retry=5).max_retry
        5
        >>> config.retry_initial_delay_ms, config.retry_max_delay_ms
        (500, 10000)

        ```
    """

    base_url: str = DEFAULT_BASE_URL
    max_retry: int = DEFAULT_MAX_RETRY
    retry_initial_delay: float = DEFAULT_RETRY_INITIAL_DELAY
    retry_max_delay: float = DEFAULT_RETRY_MAX_DELAY
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        validate_timeout(self.timeout)
        validate_retry_params(
            max_retry=self.max_retry,
            retry_initial_delay=self.retry_initial_delay,
            retry_max_delay=self.retry_max_delay,
        )

    @property
    def retry_initial_delay_ms(self) -> int:
        """The initial retry delay in whole milliseconds."""
        return round(self.retry_initial_delay * 1000)

    @property
    def retry_max_delay_ms(self) -> int:
        """The maximum retry delay in whole milliseconds."""
        return round(self.retry_max_delay * 1000)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied. The current instance
        is left unchanged.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from aiopayjp.core.config import ClientConfig
            >>> config = ClientConfig(max_retry=3)
            >>> config.merge(max_retry=5, timeout=None).max_retry
            5
            >>> config.max_retry
            3

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the configuration parameters.
        """
        return {
            "base_url": self.base_url,
            "max_retry": self.max_retry,
            "retry_initial_delay": self.retry_initial_delay,
            "retry_max_delay": self.retry_max_delay,
            "timeout": self.timeout,
        }


DEFAULT_CONFIG = ClientConfig()
