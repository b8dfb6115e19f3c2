r"""Asynchronous clients for the PAY.JP API.

This module provides ``PayjpClient``, which authenticates with a secret
key and exposes every resource service, and ``PayjpPublicClient``,
which authenticates with a public key and can only create tokens. Both
share one ``httpx.AsyncClient`` across all their requests and run every
call through the retry engine.
"""

from __future__ import annotations

__all__ = ["BaseClient", "PayjpClient", "PayjpPublicClient"]

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from aiopayjp.core.config import DEFAULT_CONFIG, USER_AGENT, ClientConfig
from aiopayjp.core.validation import normalize_api_key
from aiopayjp.encoding import RequestDescriptor
from aiopayjp.exceptions import ConfigurationError
from aiopayjp.resources.account import AccountService
from aiopayjp.resources.balance import BalanceService
from aiopayjp.resources.charge import ChargeService
from aiopayjp.resources.customer import CustomerHandle, CustomerService
from aiopayjp.resources.event import EventService
from aiopayjp.resources.plan import PlanService
from aiopayjp.resources.platform import TenantService, TenantTransferService
from aiopayjp.resources.statement import StatementService
from aiopayjp.resources.subscription import SubscriptionService
from aiopayjp.resources.term import TermService
from aiopayjp.resources.three_d_secure import ThreeDSecureRequestService
from aiopayjp.resources.token import PublicTokenService, TokenService
from aiopayjp.resources.transfer import TransferService
from aiopayjp.retry import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from pydantic import BaseModel

    from aiopayjp.backoff import BaseBackoffStrategy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class BaseClient:
    r"""Authenticated connection to the PAY.JP API.

    The API key is trimmed of surrounding whitespace and sent with HTTP
    Basic authentication and an empty password. The configuration is
    immutable and shared read-only by all calls, so one client can
    serve many concurrent tasks.

    Args:
        api_key: The API key.
        config: Optional configuration. Defaults to ``DEFAULT_CONFIG``.
        http_client: Optional ``httpx.AsyncClient`` to send requests
            with. The API key, ``User-Agent`` and timeout are still
            applied to every request. It is not closed by ``aclose``.
        backoff_strategy: Optional backoff strategy used between
            rate-limited attempts.

    Raises:
        ConfigurationError: If the HTTP transport cannot be set up.
    """

    def __init__(
        self,
        api_key: str,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        backoff_strategy: BaseBackoffStrategy | None = None,
    ) -> None:
        self._api_key = normalize_api_key(api_key)
        self._config = config if config is not None else DEFAULT_CONFIG
        self._owns_http_client = http_client is None
        self._http_client = (
            http_client if http_client is not None else self._create_http_client()
        )
        self._executor = AsyncRetryExecutor(
            self._http_client,
            self._config,
            backoff_strategy=backoff_strategy,
            auth=httpx.BasicAuth(self._api_key, ""),
        )

    def _create_http_client(self) -> httpx.AsyncClient:
        logger.debug(
            f"Creating HTTP client for {self._config.base_url} "
            f"(timeout={self._config.timeout}s)"
        )
        try:
            httpx.URL(self._config.base_url)
            return httpx.AsyncClient(
                auth=httpx.BasicAuth(self._api_key, ""),
                headers={"User-Agent": USER_AGENT},
                timeout=self._config.timeout,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            msg = f"Failed to initialize the HTTP client: {exc}"
            raise ConfigurationError(msg) from exc

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={self._config.base_url!r})"

    @property
    def api_key(self) -> str:
        """The trimmed API key."""
        return self._api_key

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        params: BaseModel | Mapping[str, Any] | None,
        result_type: type[T],
    ) -> T:
        r"""Send a request and decode the response.

        Args:
            method: The HTTP method (``GET``, ``POST`` or ``DELETE``).
            path: The path relative to the base URL, e.g. ``/charges``.
            params: Optional parameters, sent as query string for
                ``GET`` and as form body otherwise.
            result_type: The type the response body is decoded into.

        Returns:
            The decoded response body.

        Raises:
            RateLimitError: If every attempt was rate limited.
            AuthenticationError: If the API key was rejected.
            ApiError: On any other error status.
            TransportError: On network failures, including timeouts.
            SerializationError: If the request cannot be encoded or
                the response cannot be decoded.

        Example:
            ```pycon
            >>> import asyncio
            >>> from aiopayjp import PayjpClient
            >>> async def main():  # doctest: +SKIP
            ...     async with PayjpClient("sk_test_xxxxx") as client:
            ...         return await client.request("GET", "/account", None, dict)
            ...
            >>> asyncio.run(main())  # doctest: +SKIP

            ```
        """
        return await self._executor.execute(
            RequestDescriptor(method=method, path=path, params=params), result_type
        )

    async def get(self, path: str, result_type: type[T]) -> T:
        return await self.request("GET", path, None, result_type)

    async def get_with_params(
        self, path: str, params: BaseModel | Mapping[str, Any], result_type: type[T]
    ) -> T:
        return await self.request("GET", path, params, result_type)

    async def post(
        self, path: str, params: BaseModel | Mapping[str, Any], result_type: type[T]
    ) -> T:
        return await self.request("POST", path, params, result_type)

    async def delete(self, path: str, result_type: type[T]) -> T:
        return await self.request("DELETE", path, None, result_type)


class PayjpClient(BaseClient):
    r"""Client authenticated with a secret key (``sk_...``).

    Example:
        ```pycon
        >>> import asyncio
        >>> from aiopayjp import PayjpClient
        >>> from aiopayjp.resources import CreateChargeParams
        >>> async def main():  # doctest: +SKIP
        ...     async with PayjpClient("sk_test_xxxxx") as client:
        ...         charge = await client.charges.create(
        ...             CreateChargeParams(amount=1000, currency="jpy", card="tok_xxxxx")
        ...         )
        ...         cards = await client.customer("cus_xxxxx").cards.list()
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        api_key: str,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        backoff_strategy: BaseBackoffStrategy | None = None,
    ) -> None:
        super().__init__(
            api_key, config, http_client=http_client, backoff_strategy=backoff_strategy
        )
        self.account = AccountService(self)
        self.balances = BalanceService(self)
        self.charges = ChargeService(self)
        self.customers = CustomerService(self)
        self.events = EventService(self)
        self.plans = PlanService(self)
        self.statements = StatementService(self)
        self.subscriptions = SubscriptionService(self)
        self.terms = TermService(self)
        self.three_d_secure_requests = ThreeDSecureRequestService(self)
        self.tokens = TokenService(self)
        self.transfers = TransferService(self)
        self.tenants = TenantService(self)
        self.tenant_transfers = TenantTransferService(self)

    def customer(self, customer_id: str) -> CustomerHandle:
        """Return the operations of one customer, including its cards.

        Args:
            customer_id: The customer ID (``cus_...``).
        """
        return CustomerHandle(self, customer_id)


class PayjpPublicClient(BaseClient):
    r"""Client authenticated with a public key (``pk_...``).

    A public key can only create tokens, so this is the client to use
    where card details are collected.

    Example:
        ```pycon
        >>> from aiopayjp import PayjpPublicClient
        >>> client = PayjpPublicClient("pk_test_xxxxx")
        >>> client.tokens
        PublicTokenService()

        ```
    """

    def __init__(
        self,
        api_key: str,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        backoff_strategy: BaseBackoffStrategy | None = None,
    ) -> None:
        super().__init__(
            api_key, config, http_client=http_client, backoff_strategy=backoff_strategy
        )
        self.tokens = PublicTokenService(self)
