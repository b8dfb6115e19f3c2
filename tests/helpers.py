r"""Shared test helpers for the client and resource tests.

This module provides a fake PAY.JP API built on
``httpx.MockTransport`` and sample API objects.
"""

from __future__ import annotations

__all__ = [
    "API_KEY",
    "CARD",
    "CHARGE",
    "MockApi",
    "error_response",
    "list_response",
]

from typing import TYPE_CHECKING, Any

import httpx

from aiopayjp import PayjpClient

if TYPE_CHECKING:
    from aiopayjp import BaseClient, ClientConfig

API_KEY = "sk_test_xxxxx"

CARD: dict[str, Any] = {
    "id": "car_123",
    "object": "card",
    "livemode": False,
    "created": 1_700_000_000,
    "brand": "Visa",
    "exp_month": 12,
    "exp_year": 2030,
    "last4": "4242",
    "three_d_secure_status": "verified",
}

CHARGE: dict[str, Any] = {
    "id": "ch_123",
    "object": "charge",
    "livemode": False,
    "created": 1_700_000_000,
    "amount": 1000,
    "currency": "jpy",
    "paid": True,
    "captured": True,
    "card": CARD,
    "refunded": False,
    "amount_refunded": 0,
}


def list_response(*items: dict[str, Any], url: str = "/v1/charges") -> dict[str, Any]:
    return {
        "object": "list",
        "data": list(items),
        "has_more": False,
        "url": url,
        "count": len(items),
    }


def error_response(
    status: int,
    error_type: str,
    message: str,
    **fields: Any,
) -> httpx.Response:
    return httpx.Response(
        status,
        json={"error": {"status": status, "type": error_type, "message": message, **fields}},
    )


class MockApi:
    r"""Fake PAY.JP API that replays canned responses.

    Responses are served in order and the last one is repeated once the
    others are used up. An exception in the list is raised instead of
    answering. Every request received is recorded.

    Args:
        *responses: The responses (or exceptions) to serve.
    """

    def __init__(self, *responses: httpx.Response | Exception) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, Exception):
            raise item
        return httpx.Response(item.status_code, headers=item.headers, content=item.content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def client(
        self,
        client_cls: type[BaseClient] = PayjpClient,
        config: ClientConfig | None = None,
    ) -> Any:
        return client_cls(API_KEY, config, http_client=self.http_client())
