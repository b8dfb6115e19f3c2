r"""Exception hierarchy for PAY.JP API interactions.

Every failure surfaced by the client is a subclass of ``PayjpError``.
The subclasses are mutually exclusive, so callers can branch on the
exception type to decide how to react.
"""

from __future__ import annotations

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ConfigurationError",
    "PayjpError",
    "RateLimitError",
    "SerializationError",
    "TransportError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class PayjpError(Exception):
    """Base class for all errors raised by aiopayjp."""


class ConfigurationError(PayjpError):
    """Raised when the client or its transport cannot be constructed."""


class AuthenticationError(PayjpError):
    """Raised when the API rejects the credentials (HTTP 401).

    Example:
        ```pycon
        >>> from aiopayjp.exceptions import AuthenticationError
        >>> str(AuthenticationError("Invalid API key"))
        'Authentication error: Invalid API key'

        ```
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"Authentication error: {message}")
        self.message = message


class RateLimitError(PayjpError):
    """Raised when the API keeps answering HTTP 429 after all retries.

    Args:
        attempts: The total number of attempts that were made.
    """

    def __init__(self, attempts: int = 1) -> None:
        super().__init__("Rate limit exceeded")
        self.attempts = attempts


class ApiError(PayjpError):
    r"""Raised for any other non-success status returned by the API.

    When the response body holds a structured error envelope, its
    fields are exposed as attributes. Otherwise ``error_type`` is
    ``"unknown_error"`` and ``message`` contains the raw status.

    Args:
        status: The HTTP status code.
        error_type: The error type (e.g. ``"card_error"``).
        message: The human-readable error message.
        code: The specific error code, if any.
        param: The request parameter that caused the error, if any.
        response: The HTTP response the error was built from.

    Example:
        ```pycon
        >>> from aiopayjp.exceptions import ApiError
        >>> error = ApiError(402, "card_error", "card declined", code="declined")
        >>> str(error)
        'API error: [402] card_error: card declined (code: declined)'
        >>> error.is_unknown
        False

        ```
    """

    def __init__(
        self,
        status: int,
        error_type: str,
        message: str,
        *,
        code: str | None = None,
        param: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.error_type = error_type
        self.message = message
        self.code = code
        self.param = param
        self.response = response
        super().__init__(f"API error: {self._describe()}")

    def _describe(self) -> str:
        text = f"[{self.status}] {self.error_type}: {self.message}"
        if self.code is not None:
            text += f" (code: {self.code})"
        if self.param is not None:
            text += f" (param: {self.param})"
        return text

    @property
    def is_unknown(self) -> bool:
        """``True`` if the error body could not be parsed."""
        return self.error_type == "unknown_error"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(status={self.status}, "
            f"error_type={self.error_type!r}, message={self.message!r}, "
            f"code={self.code!r}, param={self.param!r})"
        )


class TransportError(PayjpError):
    """Raised on network-level failures (DNS, connection, TLS, timeout).

    The original ``httpx`` exception is available as ``__cause__``.
    """


class SerializationError(PayjpError):
    """Raised when a request body cannot be encoded or a response body
    cannot be decoded into the expected type."""
