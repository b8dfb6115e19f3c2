r"""Asynchronous retry executor for PAY.JP API requests.

This module provides the ``AsyncRetryExecutor`` class that runs one
logical API call as an explicit two-state machine, retrying only when
the API answers HTTP 429.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "RetryState"]

import asyncio
import enum
import logging
from typing import TYPE_CHECKING, Any

import httpx

from aiopayjp.backoff import EqualJitterBackoff
from aiopayjp.core.config import USER_AGENT
from aiopayjp.encoding import FORM_CONTENT_TYPE, encode_form
from aiopayjp.exceptions import PayjpError, RateLimitError, TransportError
from aiopayjp.retry.interpreter import Outcome, StatusInterpreter
from aiopayjp.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from aiopayjp.backoff import BaseBackoffStrategy
    from aiopayjp.core.config import ClientConfig
    from aiopayjp.encoding import RequestDescriptor

logger: logging.Logger = logging.getLogger(__name__)


class RetryState(enum.Enum):
    """States of the retry loop."""

    ATTEMPTING = "attempting"
    DONE = "done"


class AsyncRetryExecutor:
    """Executes API requests with retry on rate limiting.

    Each call to ``execute`` starts in ``ATTEMPTING`` with an attempt
    count of 0 and performs one encode/send/classify cycle per step:

    - Success: go to ``DONE`` and return the decoded value
    - Rate limited with ``count < max_retry``: sleep, increment the
      count and stay in ``ATTEMPTING``
    - Rate limited with ``count >= max_retry``: go to ``DONE`` and raise
      ``RateLimitError``
    - Any other failure: go to ``DONE`` and raise it, never retried

    The only suspension points are the network round trip and the
    backoff sleep. Attempts of one call are strictly sequential.

    Args:
        http_client: The shared ``httpx.AsyncClient`` used to send requests.
        config: The client configuration.
        backoff_strategy: Optional backoff strategy. Defaults to an
            ``EqualJitterBackoff`` built from the configuration.
        interpreter: Optional status interpreter.
        auth: Optional authentication applied to every attempt in place
            of the HTTP client default.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aiopayjp.core.config import ClientConfig
        >>> from aiopayjp.encoding import RequestDescriptor
        >>> from aiopayjp.retry import AsyncRetryExecutor
        >>> async def main():  # doctest: +SKIP
        ...     async with httpx.AsyncClient() as http_client:
        ...         executor = AsyncRetryExecutor(
        ...             http_client, ClientConfig(), auth=httpx.BasicAuth("sk_test_xxxxx", "")
        ...         )
        ...         return await executor.execute(RequestDescriptor("GET", "/account"), dict)
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        config: ClientConfig,
        backoff_strategy: BaseBackoffStrategy | None = None,
        interpreter: StatusInterpreter | None = None,
        auth: httpx.Auth | None = None,
    ) -> None:
        self.http_client = http_client
        self.config = config
        self.auth = auth
        self.backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy
            if backoff_strategy is not None
            else EqualJitterBackoff(config.retry_initial_delay_ms, config.retry_max_delay_ms)
        )
        self.interpreter: StatusInterpreter = (
            interpreter if interpreter is not None else StatusInterpreter()
        )

    async def execute(self, request: RequestDescriptor, result_type: Any) -> Any:
        """Run one logical call to completion.

        Args:
            request: The method, path and optional parameters of the call.
            result_type: The type the success body is decoded into.

        Returns:
            The decoded response body.

        Raises:
            RateLimitError: If every attempt was rate limited.
            AuthenticationError: On HTTP 401.
            ApiError: On any other non-success status.
            TransportError: On network failures, including timeouts.
            SerializationError: If the request cannot be encoded or the
                response cannot be decoded.
        """
        state = RetryState.ATTEMPTING
        attempt_count = 0
        outcome: Outcome[Any] = Outcome()

        while state is RetryState.ATTEMPTING:
            logger.debug(
                f"{request.method} {request.path}: attempt "
                f"{attempt_count + 1}/{self.config.max_retry + 1}"
            )
            outcome = await self.attempt(request, result_type)

            if outcome.retryable and attempt_count < self.config.max_retry:
                delay = self.backoff_strategy.calculate(attempt_count)
                log_structured(
                    logger,
                    logging.DEBUG,
                    f"{request.method} {request.path}: rate limited, retrying in {delay:.3f}s",
                    http_method=request.method,
                    http_path=request.path,
                    attempt=attempt_count + 1,
                    delay=delay,
                )
                await asyncio.sleep(delay)
                attempt_count += 1
            else:
                state = RetryState.DONE

        if outcome.retryable:
            logger.debug(
                f"{request.method} {request.path}: still rate limited after "
                f"{attempt_count + 1} attempts"
            )
            raise RateLimitError(attempts=attempt_count + 1)
        return outcome.unwrap()

    async def attempt(self, request: RequestDescriptor, result_type: Any) -> Outcome[Any]:
        """Perform a single encode/send/classify cycle.

        Args:
            request: The call to perform.
            result_type: The type the success body is decoded into.

        Returns:
            The classified outcome. Failures are returned, not raised.
        """
        try:
            response = await self.send(request)
        except PayjpError as exc:
            return Outcome.failure(exc)
        return self.interpreter.interpret(response, result_type)

    async def send(self, request: RequestDescriptor) -> httpx.Response:
        """Encode and send one HTTP request.

        Every attempt carries the executor authentication, the
        ``User-Agent`` header and the configured timeout, whatever the
        defaults of the HTTP client are.

        Raises:
            SerializationError: If the parameters cannot be encoded.
            TransportError: If the request fails at the network level.
        """
        url = f"{self.config.base_url}{request.path}"
        headers = {"User-Agent": USER_AGENT}
        kwargs: dict[str, Any] = {"headers": headers, "timeout": self.config.timeout}
        if self.auth is not None:
            kwargs["auth"] = self.auth
        if request.method == "GET":
            if request.params is not None:
                kwargs["params"] = request.encoded_params()
        elif request.params is not None:
            kwargs["content"] = encode_form(request.params)
            headers["Content-Type"] = FORM_CONTENT_TYPE

        try:
            return await self.http_client.request(request.method, url, **kwargs)
        except httpx.TimeoutException as exc:
            msg = f"{request.method} request to {url} timed out"
            raise TransportError(msg) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            msg = f"{request.method} request to {url} failed: {exc}"
            raise TransportError(msg) from exc
