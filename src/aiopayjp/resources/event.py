r"""Event resource.

Events record changes to other objects. The affected object is kept as
raw JSON in ``Event.data.object`` because its type depends on the event.
"""

from __future__ import annotations

__all__ = ["Event", "EventData", "EventService", "EventType"]

import enum
from typing import Any

from pydantic import Field

from aiopayjp.params import ListParams
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.response import ListResponse, PayjpObject


class EventType(str, enum.Enum):
    r"""Type of an event.

    Types this version does not know about map to ``OTHER``.

    Example:
        ```pycon
        >>> from aiopayjp.resources.event import EventType
        >>> EventType("charge.succeeded")
        <EventType.CHARGE_SUCCEEDED: 'charge.succeeded'>
        >>> EventType("tenant.updated")
        <EventType.OTHER: 'other'>

        ```
    """

    CHARGE_CREATED = "charge.created"
    CHARGE_UPDATED = "charge.updated"
    CHARGE_SUCCEEDED = "charge.succeeded"
    CHARGE_FAILED = "charge.failed"
    CHARGE_CAPTURED = "charge.captured"
    CHARGE_REFUNDED = "charge.refunded"
    CUSTOMER_CREATED = "customer.created"
    CUSTOMER_UPDATED = "customer.updated"
    CUSTOMER_DELETED = "customer.deleted"
    CUSTOMER_CARD_CREATED = "customer.card.created"
    CUSTOMER_CARD_UPDATED = "customer.card.updated"
    CUSTOMER_CARD_DELETED = "customer.card.deleted"
    PLAN_CREATED = "plan.created"
    PLAN_UPDATED = "plan.updated"
    PLAN_DELETED = "plan.deleted"
    SUBSCRIPTION_CREATED = "subscription.created"
    SUBSCRIPTION_UPDATED = "subscription.updated"
    SUBSCRIPTION_DELETED = "subscription.deleted"
    SUBSCRIPTION_PAUSED = "subscription.paused"
    SUBSCRIPTION_RESUMED = "subscription.resumed"
    SUBSCRIPTION_CANCELED = "subscription.canceled"
    SUBSCRIPTION_RENEWED = "subscription.renewed"
    TRANSFER_CREATED = "transfer.created"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> EventType:
        return cls.OTHER


class EventData(PayjpObject):
    previous_attributes: dict[str, Any] | None = None
    object: dict[str, Any]


class Event(PayjpObject):
    """A change to an object, as delivered to webhooks.

    The wire field ``type`` is exposed as ``event_type``.
    """

    id: str
    object: str = "event"
    livemode: bool = False
    created: int
    event_type: EventType = Field(alias="type")
    data: EventData
    pending_webhooks: int | None = None


class EventService(BaseService):
    """Operations on events."""

    async def retrieve(self, event_id: str) -> Event:
        return await self._client.get(f"/events/{quote_id(event_id)}", Event)

    async def list(self, params: ListParams | None = None) -> ListResponse[Event]:
        return await self._client.get_with_params(
            "/events", params or ListParams(), ListResponse[Event]
        )
