r"""Status interpretation for PAY.JP API responses.

This module provides the ``StatusInterpreter`` class that maps an HTTP
response to an ``Outcome``: either a decoded value or exactly one
classified failure.
"""

from __future__ import annotations

__all__ = ["Outcome", "StatusInterpreter"]

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from aiopayjp.exceptions import (
    ApiError,
    AuthenticationError,
    PayjpError,
    RateLimitError,
    SerializationError,
)

if TYPE_CHECKING:
    import httpx

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODES = (200, 201)


class ErrorBody(BaseModel):
    """Error details returned by the API."""

    status: int
    type: str
    message: str
    code: str | None = None
    param: str | None = None


class ErrorEnvelope(BaseModel):
    """Error response wrapper returned by the API."""

    error: ErrorBody


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Classified result of one request attempt.

    Exactly one of ``value`` (on success) or ``error`` is meaningful.

    Attributes:
        value: The decoded response body on success.
        error: The classified failure, or ``None`` on success.
    """

    value: T | None = None
    error: PayjpError | None = None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: PayjpError) -> Outcome[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def retryable(self) -> bool:
        """``True`` only for rate-limited attempts."""
        return isinstance(self.error, RateLimitError)

    def unwrap(self) -> T:
        """Return the value, or raise the classified failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class StatusInterpreter:
    """Maps HTTP responses to classified outcomes.

    - ``200``/``201``: the body is decoded into the expected type.
    - ``429``: rate limited, the only retryable outcome.
    - ``401``: authentication failure; the body is not parsed.
    - anything else: the body is parsed as an error envelope, falling
      back to a generic ``unknown_error``.
    """

    def interpret(self, response: httpx.Response, result_type: Any) -> Outcome[Any]:
        """Classify a response.

        Args:
            response: The HTTP response of one attempt.
            result_type: The type the success body is decoded into.

        Returns:
            The classified outcome.
        """
        status = response.status_code
        if status in SUCCESS_STATUS_CODES:
            return self._decode(response, result_type)
        if status == 429:
            return Outcome.failure(RateLimitError())
        if status == 401:
            return Outcome.failure(AuthenticationError("Invalid API key"))
        return Outcome.failure(self.parse_error(response))

    def _decode(self, response: httpx.Response, result_type: Any) -> Outcome[Any]:
        try:
            value = _adapter(result_type).validate_json(response.content)
        except ValidationError as exc:
            logger.debug(
                f"Failed to decode {response.status_code} response into {result_type!r}"
            )
            msg = f"Failed to decode response body: {exc}"
            return Outcome.failure(SerializationError(msg))
        return Outcome.success(value)

    def parse_error(self, response: httpx.Response) -> ApiError:
        """Build an ``ApiError`` from an error response.

        Args:
            response: A response with a non-success status.

        Returns:
            The structured error, or a generic ``unknown_error`` if the
            body does not hold an error envelope.
        """
        try:
            body = ErrorEnvelope.model_validate_json(response.content).error
        except ValidationError:
            reason = response.reason_phrase
            message = f"HTTP error: {response.status_code}"
            if reason:
                message = f"{message} {reason}"
            return ApiError(
                response.status_code,
                "unknown_error",
                message,
                response=response,
            )
        return ApiError(
            body.status,
            body.type,
            body.message,
            code=body.code,
            param=body.param,
            response=response,
        )
