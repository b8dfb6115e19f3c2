r"""aiopayjp - Asynchronous typed client for the PAY.JP payment API.

This package turns typed parameter objects into authenticated HTTP
calls to PAY.JP, decodes the JSON responses into typed models and
transparently retries rate-limited requests with equal-jitter
exponential backoff. Built on top of httpx and pydantic.

Key Features:
    - Async clients for secret keys (all resources) and public keys (tokens)
    - Typed pydantic models and parameters for every resource
    - Bracket-notation form encoding of nested parameters
    - Automatic retry of HTTP 429 with capped equal-jitter backoff
    - One exception per failure class, all derived from ``PayjpError``
    - Opt-in structured JSON logging with correlation ids

Example:
    ```pycon
    >>> import asyncio
    >>> from aiopayjp import ClientConfig, PayjpClient
    >>> from aiopayjp.resources import CreateChargeParams
    >>> async def main():  # doctest: +SKIP
    ...     config = ClientConfig(max_retry=5)
    ...     async with PayjpClient("sk_test_xxxxx", config) as client:
    ...         charge = await client.charges.create(
    ...             CreateChargeParams(amount=1000, currency="jpy", card="tok_xxxxx")
    ...         )
    ...         print(charge.id, charge.paid)
    ...
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CONFIG",
    "ApiError",
    "AuthenticationError",
    "BaseClient",
    "ClientConfig",
    "ConfigurationError",
    "DeletedObject",
    "ListParams",
    "ListResponse",
    "PayjpClient",
    "PayjpError",
    "PayjpPublicClient",
    "RateLimitError",
    "SerializationError",
    "TransportError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from aiopayjp.client import BaseClient, PayjpClient, PayjpPublicClient
from aiopayjp.core.config import DEFAULT_CONFIG, ClientConfig
from aiopayjp.exceptions import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    PayjpError,
    RateLimitError,
    SerializationError,
    TransportError,
)
from aiopayjp.params import ListParams
from aiopayjp.response import DeletedObject, ListResponse

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
