r"""Plan resource."""

from __future__ import annotations

__all__ = ["CreatePlanParams", "Plan", "PlanInterval", "PlanService", "UpdatePlanParams"]

import enum

from pydantic import Field

from aiopayjp.params import ListParams, Metadata, Params
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.response import DeletedObject, ListResponse, PayjpObject


class PlanInterval(str, enum.Enum):
    MONTH = "month"
    YEAR = "year"


class Plan(PayjpObject):
    """A recurring price that subscriptions are billed against."""

    id: str
    object: str = "plan"
    livemode: bool = False
    created: int
    amount: int
    currency: str
    interval: PlanInterval
    name: str | None = None
    trial_days: int | None = None
    billing_day: int | None = None
    metadata: Metadata | None = None


class CreatePlanParams(Params):
    r"""Parameters for creating a plan.

    Args:
        amount: Amount billed every interval.
        currency: Three-letter currency code.
        interval: Billing interval.
        id: Optional plan ID. Generated by the API if omitted.
        name: Display name.
        trial_days: Length of the trial period in days.
        billing_day: Day of the month billing happens on (1 to 31).
        metadata: Arbitrary key-value pairs.
    """

    amount: int
    currency: str
    interval: PlanInterval
    id: str | None = None
    name: str | None = None
    trial_days: int | None = None
    billing_day: int | None = Field(default=None, ge=1, le=31)
    metadata: Metadata | None = None


class UpdatePlanParams(Params):
    name: str | None = None
    trial_days: int | None = None
    billing_day: int | None = Field(default=None, ge=1, le=31)
    metadata: Metadata | None = None


class PlanService(BaseService):
    """Operations on plans."""

    async def create(self, params: CreatePlanParams) -> Plan:
        return await self._client.post("/plans", params, Plan)

    async def retrieve(self, plan_id: str) -> Plan:
        return await self._client.get(f"/plans/{quote_id(plan_id)}", Plan)

    async def update(self, plan_id: str, params: UpdatePlanParams) -> Plan:
        return await self._client.post(f"/plans/{quote_id(plan_id)}", params, Plan)

    async def delete(self, plan_id: str) -> DeletedObject:
        return await self._client.delete(f"/plans/{quote_id(plan_id)}", DeletedObject)

    async def list(self, params: ListParams | None = None) -> ListResponse[Plan]:
        return await self._client.get_with_params(
            "/plans", params or ListParams(), ListResponse[Plan]
        )
