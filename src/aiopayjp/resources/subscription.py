r"""Subscription resource.

A subscription bills a customer for a plan every interval. It can be
paused, resumed and canceled without being deleted.
"""

from __future__ import annotations

__all__ = [
    "CreateSubscriptionParams",
    "ResumeSubscriptionParams",
    "Subscription",
    "SubscriptionService",
    "SubscriptionStatus",
    "UpdateSubscriptionParams",
]

import enum

from aiopayjp.params import ListParams, Metadata, Params
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.resources.plan import Plan
from aiopayjp.response import DeletedObject, ListResponse, PayjpObject


class SubscriptionStatus(str, enum.Enum):
    ACTIVE = "active"
    TRIAL = "trial"
    CANCELED = "canceled"
    PAUSED = "paused"


class Subscription(PayjpObject):
    id: str
    object: str = "subscription"
    livemode: bool = False
    created: int
    customer: str
    plan: Plan
    status: SubscriptionStatus
    start: int
    trial_end: int | None = None
    paused_at: int | None = None
    canceled_at: int | None = None
    current_period_end: int | None = None
    current_period_start: int | None = None
    resumed_at: int | None = None
    prorate: bool | None = None
    metadata: Metadata | None = None


class CreateSubscriptionParams(Params):
    r"""Parameters for subscribing a customer to a plan.

    Args:
        customer: The customer ID.
        plan: The plan ID.
        trial_end: Unix timestamp the trial ends at, overriding the
            plan's trial period.
        prorate: Bill the first period pro rata.
        metadata: Arbitrary key-value pairs.
    """

    customer: str
    plan: str
    trial_end: int | None = None
    prorate: bool | None = None
    metadata: Metadata | None = None


class UpdateSubscriptionParams(Params):
    plan: str | None = None
    trial_end: int | None = None
    prorate: bool | None = None
    metadata: Metadata | None = None


class ResumeSubscriptionParams(Params):
    prorate: bool | None = None


class SubscriptionService(BaseService):
    """Operations on subscriptions."""

    async def create(self, params: CreateSubscriptionParams) -> Subscription:
        """Subscribe a customer to a plan.

        Example:
            ```pycon
            >>> from aiopayjp.resources.subscription import CreateSubscriptionParams
            >>> subscription = await client.subscriptions.create(  # doctest: +SKIP
            ...     CreateSubscriptionParams(customer="cus_xxxxx", plan="pln_xxxxx")
            ... )

            ```
        """
        return await self._client.post("/subscriptions", params, Subscription)

    @staticmethod
    def _path(subscription_id: str) -> str:
        return f"/subscriptions/{quote_id(subscription_id)}"

    async def retrieve(self, subscription_id: str) -> Subscription:
        return await self._client.get(self._path(subscription_id), Subscription)

    async def update(
        self, subscription_id: str, params: UpdateSubscriptionParams
    ) -> Subscription:
        return await self._client.post(self._path(subscription_id), params, Subscription)

    async def pause(self, subscription_id: str) -> Subscription:
        return await self._client.post(f"{self._path(subscription_id)}/pause", {}, Subscription)

    async def resume(
        self, subscription_id: str, params: ResumeSubscriptionParams | None = None
    ) -> Subscription:
        return await self._client.post(
            f"{self._path(subscription_id)}/resume",
            params or ResumeSubscriptionParams(),
            Subscription,
        )

    async def cancel(self, subscription_id: str) -> Subscription:
        """Cancel a subscription at the end of the current period."""
        return await self._client.post(f"{self._path(subscription_id)}/cancel", {}, Subscription)

    async def delete(self, subscription_id: str) -> DeletedObject:
        """Delete a subscription immediately."""
        return await self._client.delete(self._path(subscription_id), DeletedObject)

    async def list(self, params: ListParams | None = None) -> ListResponse[Subscription]:
        return await self._client.get_with_params(
            "/subscriptions", params or ListParams(), ListResponse[Subscription]
        )
