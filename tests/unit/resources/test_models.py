r"""Unit tests for the response models and request parameters."""

from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError

from aiopayjp.params import ListParams
from aiopayjp.resources import (
    Card,
    CardDetails,
    CardThreeDSecureStatus,
    Charge,
    CreateChargeParams,
    CreatePlanParams,
    Customer,
    Event,
    EventType,
    PlanInterval,
    Statement,
    Subscription,
    SubscriptionStatus,
    ThreeDSecureRequest,
    ThreeDSecureStatus,
)
from aiopayjp.response import DeletedObject, ListResponse
from tests.helpers import CARD, CHARGE, MockApi, list_response

PLAN = {
    "id": "pln_1",
    "object": "plan",
    "livemode": False,
    "created": 1_700_000_000,
    "amount": 500,
    "currency": "jpy",
    "interval": "month",
}

SUBSCRIPTION = {
    "id": "sub_1",
    "object": "subscription",
    "livemode": False,
    "created": 1_700_000_000,
    "customer": "cus_1",
    "plan": PLAN,
    "status": "active",
    "start": 1_700_000_000,
}

CUSTOMER = {
    "id": "cus_1",
    "object": "customer",
    "livemode": False,
    "created": 1_700_000_000,
    "email": "a@example.com",
}

EVENT = {
    "id": "evnt_1",
    "object": "event",
    "livemode": False,
    "created": 1_700_000_000,
    "type": "charge.succeeded",
    "data": {"object": CHARGE},
    "pending_webhooks": 1,
}

##################################
#     Tests for ListResponse     #
##################################


def test_list_response_iter_and_len() -> None:
    page = ListResponse[Card].model_validate(list_response(CARD, CARD, url="/v1/cards"))
    assert len(page) == 2
    assert [card.id for card in page] == ["car_123", "car_123"]
    assert all(isinstance(card, Card) for card in page)
    assert page.url == "/v1/cards"
    assert page.count == 2
    assert not page.has_more


def test_list_response_empty() -> None:
    page = ListResponse[Charge].model_validate(list_response())
    assert len(page) == 0
    assert list(page) == []


def test_deleted_object() -> None:
    deleted = DeletedObject.model_validate({"id": "pln_1", "deleted": True, "livemode": False})
    assert deleted.id == "pln_1"
    assert deleted.deleted


#############################
#     Tests for models      #
#############################


def test_charge_with_card() -> None:
    charge = Charge.model_validate(CHARGE)
    assert charge.amount == 1000
    assert charge.card is not None
    assert charge.card.three_d_secure_status is CardThreeDSecureStatus.VERIFIED


def test_model_keeps_unknown_fields() -> None:
    charge = Charge.model_validate({**CHARGE, "new_field": "value"})
    assert charge.new_field == "value"


def test_model_missing_required_field() -> None:
    with pytest.raises(ValidationError):
        Charge.model_validate({"id": "ch_1"})


def test_customer_default_card_id() -> None:
    customer = Customer.model_validate({**CUSTOMER, "default_card": "car_123"})
    assert customer.default_card == "car_123"


def test_customer_default_card_expanded() -> None:
    customer = Customer.model_validate({**CUSTOMER, "default_card": CARD})
    assert isinstance(customer.default_card, Card)
    assert customer.default_card.last4 == "4242"


def test_customer_nested_lists() -> None:
    customer = Customer.model_validate(
        {
            **CUSTOMER,
            "cards": list_response(CARD, url="/v1/customers/cus_1/cards"),
            "subscriptions": list_response(SUBSCRIPTION, url="/v1/customers/cus_1/subscriptions"),
        }
    )
    assert [card.id for card in customer.cards] == ["car_123"]
    assert [subscription.id for subscription in customer.subscriptions] == ["sub_1"]


def test_subscription_with_plan() -> None:
    subscription = Subscription.model_validate(SUBSCRIPTION)
    assert subscription.status is SubscriptionStatus.ACTIVE
    assert subscription.plan.interval is PlanInterval.MONTH


def test_event_type_alias() -> None:
    event = Event.model_validate(EVENT)
    assert event.event_type is EventType.CHARGE_SUCCEEDED
    assert event.data.object["id"] == "ch_123"
    assert event.data.previous_attributes is None


def test_event_unknown_type() -> None:
    event = Event.model_validate({**EVENT, "type": "charge.teleported"})
    assert event.event_type is EventType.OTHER


def test_event_type_missing() -> None:
    assert EventType("not.a.type") is EventType.OTHER


def test_statement_type_alias() -> None:
    statement = Statement.model_validate(
        {
            "id": "st_1",
            "object": "statement",
            "livemode": False,
            "created": 1_700_000_000,
            "type": "transfer",
        }
    )
    assert statement.statement_type == "transfer"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("verified", ThreeDSecureStatus.VERIFIED),
        ("in_progress", ThreeDSecureStatus.IN_PROGRESS),
        ("something_new", ThreeDSecureStatus.UNKNOWN),
    ],
)
def test_three_d_secure_status(value: str, expected: ThreeDSecureStatus) -> None:
    request = ThreeDSecureRequest.model_validate(
        {"id": "tdsr_1", "created": 1_700_000_000, "status": value}
    )
    assert request.status is expected


#############################
#     Tests for params      #
#############################


def test_list_params_defaults() -> None:
    params = ListParams()
    assert params.limit is None
    assert params.offset is None


@pytest.mark.parametrize("limit", [0, 101])
def test_list_params_limit_out_of_range(limit: int) -> None:
    with pytest.raises(ValidationError):
        ListParams(limit=limit)


def test_list_params_negative_offset() -> None:
    with pytest.raises(ValidationError):
        ListParams(offset=-1)


def test_params_forbid_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        CreateChargeParams(amount=1000, currency="jpy", colour="red")


@pytest.mark.parametrize("expiry_days", [0, 61])
def test_create_charge_params_expiry_days_out_of_range(expiry_days: int) -> None:
    with pytest.raises(ValidationError):
        CreateChargeParams(amount=1000, currency="jpy", expiry_days=expiry_days)


@pytest.mark.parametrize("exp_month", [0, 13])
def test_card_details_exp_month_out_of_range(exp_month: int) -> None:
    with pytest.raises(ValidationError):
        CardDetails(number="4242424242424242", exp_month=exp_month, exp_year=2030)


def test_create_plan_params_billing_day_out_of_range() -> None:
    with pytest.raises(ValidationError):
        CreatePlanParams(amount=500, currency="jpy", interval=PlanInterval.MONTH, billing_day=32)


#######################################
#     Tests for decoded responses     #
#######################################


@pytest.mark.asyncio
async def test_charges_list_decodes_page() -> None:
    api = MockApi(httpx.Response(200, json=list_response(CHARGE, CHARGE)))
    page = await api.client().charges.list()

    assert isinstance(page, ListResponse)
    assert [charge.id for charge in page] == ["ch_123", "ch_123"]
    assert all(isinstance(charge, Charge) for charge in page)


@pytest.mark.asyncio
async def test_customer_cards_delete_decodes_deleted_object() -> None:
    api = MockApi(httpx.Response(200, json={"id": "car_1", "deleted": True, "livemode": False}))
    deleted = await api.client().customer("cus_1").cards.delete("car_1")

    assert isinstance(deleted, DeletedObject)
    assert deleted.id == "car_1"
