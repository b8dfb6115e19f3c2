r"""Unit tests for the PAY.JP client handles."""

from __future__ import annotations

import asyncio
import base64
from unittest.mock import Mock, patch

import httpx
import pytest

from aiopayjp import (
    DEFAULT_CONFIG,
    BaseClient,
    ClientConfig,
    ConfigurationError,
    PayjpClient,
    PayjpPublicClient,
)
from aiopayjp.backoff import BaseBackoffStrategy, EqualJitterBackoff
from aiopayjp.core.config import USER_AGENT
from aiopayjp.encoding import FORM_CONTENT_TYPE
from aiopayjp.params import ListParams
from aiopayjp.resources import (
    AccountService,
    BalanceService,
    ChargeService,
    CustomerHandle,
    CustomerService,
    EventService,
    PlanService,
    PublicTokenService,
    StatementService,
    SubscriptionService,
    TermService,
    ThreeDSecureRequestService,
    TokenService,
    TransferService,
)
from aiopayjp.resources.platform import TenantService, TenantTransferService
from aiopayjp.response import DeletedObject
from tests.helpers import API_KEY, MockApi


def basic_auth_header(client: BaseClient) -> str:
    request = client.http_client.build_request("GET", "https://api.pay.jp/v1/account")
    flow = client.http_client.auth.auth_flow(request)
    return next(flow).headers["Authorization"]


################################
#     Tests for BaseClient     #
################################


def test_client_default_config() -> None:
    client = PayjpClient(API_KEY)
    assert client.config is DEFAULT_CONFIG


def test_client_custom_config() -> None:
    config = ClientConfig(max_retry=5)
    assert PayjpClient(API_KEY, config).config is config


def test_client_construction_is_idempotent() -> None:
    assert PayjpClient(API_KEY).config == PayjpClient(API_KEY).config


@pytest.mark.parametrize(
    "api_key",
    ["sk_test_xxxxx\n", "  sk_test_xxxxx  ", "\tsk_test_xxxxx", "sk_test_xxxxx\r\n"],
)
def test_client_trims_api_key(api_key: str) -> None:
    assert PayjpClient(api_key).api_key == "sk_test_xxxxx"


def test_client_basic_auth_with_empty_password() -> None:
    client = PayjpClient(" sk_test_xxxxx\n")
    expected = base64.b64encode(b"sk_test_xxxxx:").decode()
    assert basic_auth_header(client) == f"Basic {expected}"


def test_client_user_agent() -> None:
    assert PayjpClient(API_KEY).http_client.headers["User-Agent"] == USER_AGENT


def test_client_timeout() -> None:
    client = PayjpClient(API_KEY, ClientConfig(timeout=5.0))
    assert client.http_client.timeout == httpx.Timeout(5.0)


def test_client_invalid_base_url() -> None:
    with pytest.raises(ConfigurationError, match="Failed to initialize the HTTP client"):
        PayjpClient(API_KEY, ClientConfig(base_url="https://api.pay.jp:abc/v1"))


@pytest.mark.parametrize(
    "overrides",
    [
        {"retry_initial_delay": float("inf")},
        {"retry_max_delay": float("nan")},
        {"retry_max_delay": "10"},
        {"timeout": float("inf")},
    ],
)
def test_client_invalid_durations_raise_configuration_error(overrides: dict) -> None:
    with pytest.raises(ConfigurationError):
        PayjpClient(API_KEY, ClientConfig(**overrides))


def test_client_invalid_api_key_type() -> None:
    with pytest.raises(ConfigurationError):
        PayjpClient(None)  # type: ignore[arg-type]


def test_client_injected_http_client(mock_async_client: httpx.AsyncClient) -> None:
    assert PayjpClient(API_KEY, http_client=mock_async_client).http_client is mock_async_client


def test_client_backoff_strategy() -> None:
    strategy = Mock(spec=BaseBackoffStrategy)
    client = PayjpClient(API_KEY, backoff_strategy=strategy)
    assert client._executor.backoff_strategy is strategy


def test_client_default_backoff_strategy() -> None:
    client = PayjpClient(API_KEY, ClientConfig(retry_initial_delay=1.0, retry_max_delay=4.0))
    strategy = client._executor.backoff_strategy
    assert isinstance(strategy, EqualJitterBackoff)
    assert strategy.initial_delay_ms == 1000
    assert strategy.max_delay_ms == 4000


def test_client_repr() -> None:
    assert repr(PayjpClient(API_KEY)) == "PayjpClient(base_url='https://api.pay.jp/v1')"


def test_client_repr_hides_api_key() -> None:
    assert API_KEY not in repr(PayjpClient(API_KEY))


@pytest.mark.asyncio
async def test_client_aclose_owned_http_client() -> None:
    client = PayjpClient(API_KEY)
    await client.aclose()
    assert client.http_client.is_closed


@pytest.mark.asyncio
async def test_client_aclose_does_not_close_injected_client(
    mock_async_client: httpx.AsyncClient,
) -> None:
    client = PayjpClient(API_KEY, http_client=mock_async_client)
    await client.aclose()
    mock_async_client.aclose.assert_not_called()


@pytest.mark.asyncio
async def test_client_async_context_manager() -> None:
    async with PayjpClient(API_KEY) as client:
        assert not client.http_client.is_closed
    assert client.http_client.is_closed


@pytest.mark.asyncio
async def test_client_get(mock_api: MockApi) -> None:
    client = mock_api.client()
    assert await client.get("/account", dict) == {}

    request = mock_api.last_request
    assert request.method == "GET"
    assert str(request.url) == "https://api.pay.jp/v1/account"
    assert request.headers["User-Agent"] == USER_AGENT
    assert request.headers["Authorization"].startswith("Basic ")


@pytest.mark.asyncio
async def test_client_injected_http_client_sends_credentials() -> None:
    api = MockApi(httpx.Response(429), httpx.Response(200, json={}))
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(api))
    client = PayjpClient(
        "sk_test_abc\n", ClientConfig(timeout=12.5, max_retry=1), http_client=http_client
    )

    with patch("asyncio.sleep", return_value=None):
        await client.get("/account", dict)

    expected = base64.b64encode(b"sk_test_abc:").decode()
    assert len(api.requests) == 2
    for request in api.requests:
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert request.headers["User-Agent"] == USER_AGENT
        assert request.extensions["timeout"] == httpx.Timeout(12.5).as_dict()


@pytest.mark.asyncio
async def test_public_client_injected_http_client_sends_credentials() -> None:
    api = MockApi(httpx.Response(200, json={}))
    client = PayjpPublicClient(" pk_test_abc ", http_client=api.http_client())

    await client.request("GET", "/tokens", None, dict)
    expected = base64.b64encode(b"pk_test_abc:").decode()
    assert api.last_request.headers["Authorization"] == f"Basic {expected}"


@pytest.mark.asyncio
async def test_client_get_with_params(mock_api: MockApi) -> None:
    client = mock_api.client()
    await client.get_with_params("/charges", ListParams(limit=3, offset=6), dict)

    request = mock_api.last_request
    assert request.method == "GET"
    assert str(request.url) == "https://api.pay.jp/v1/charges?limit=3&offset=6"


@pytest.mark.asyncio
async def test_client_post(mock_api: MockApi) -> None:
    client = mock_api.client()
    await client.post("/charges", {"amount": 1000, "currency": "jpy"}, dict)

    request = mock_api.last_request
    assert request.method == "POST"
    assert request.headers["Content-Type"] == FORM_CONTENT_TYPE
    assert request.content == b"amount=1000&currency=jpy"


@pytest.mark.asyncio
async def test_client_delete() -> None:
    api = MockApi(httpx.Response(200, json={"id": "cus_1", "deleted": True, "livemode": False}))
    client = api.client()

    deleted = await client.delete("/customers/cus_1", DeletedObject)
    assert deleted.deleted
    assert api.last_request.method == "DELETE"
    assert api.last_request.content == b""


@pytest.mark.asyncio
async def test_client_request(mock_api: MockApi) -> None:
    client = mock_api.client()
    assert await client.request("POST", "/charges/ch_1/capture", None, dict) == {}
    assert mock_api.last_request.method == "POST"
    assert "Content-Type" not in mock_api.last_request.headers


@pytest.mark.asyncio
async def test_client_concurrent_calls_share_config(mock_api: MockApi) -> None:
    client = mock_api.client()
    results = await asyncio.gather(*(client.get(f"/charges/ch_{i}", dict) for i in range(5)))
    assert results == [{}] * 5
    assert sorted(str(request.url) for request in mock_api.requests) == [
        f"https://api.pay.jp/v1/charges/ch_{i}" for i in range(5)
    ]


#################################
#     Tests for PayjpClient     #
#################################


@pytest.mark.parametrize(
    ("name", "service_cls"),
    [
        ("account", AccountService),
        ("balances", BalanceService),
        ("charges", ChargeService),
        ("customers", CustomerService),
        ("events", EventService),
        ("plans", PlanService),
        ("statements", StatementService),
        ("subscriptions", SubscriptionService),
        ("terms", TermService),
        ("three_d_secure_requests", ThreeDSecureRequestService),
        ("tokens", TokenService),
        ("transfers", TransferService),
        ("tenants", TenantService),
        ("tenant_transfers", TenantTransferService),
    ],
)
def test_payjp_client_services(name: str, service_cls: type) -> None:
    assert isinstance(getattr(PayjpClient(API_KEY), name), service_cls)


def test_payjp_client_customer() -> None:
    customer = PayjpClient(API_KEY).customer("cus_123")
    assert isinstance(customer, CustomerHandle)
    assert customer.id == "cus_123"
    assert customer.cards.customer_id == "cus_123"


#######################################
#     Tests for PayjpPublicClient     #
#######################################


def test_public_client_tokens() -> None:
    client = PayjpPublicClient("pk_test_xxxxx")
    assert type(client.tokens) is PublicTokenService
    assert not hasattr(client.tokens, "retrieve")


def test_public_client_has_no_secret_services() -> None:
    client = PayjpPublicClient("pk_test_xxxxx")
    assert not hasattr(client, "charges")
    assert not hasattr(client, "customer")


def test_public_client_trims_api_key() -> None:
    assert PayjpPublicClient(" pk_test_xxxxx\n").api_key == "pk_test_xxxxx"
