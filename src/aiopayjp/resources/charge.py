r"""Charge resource.

A charge moves money from a card or a customer to the merchant. It can
be authorized first and captured later, refunded fully or partially,
and re-authorized before its authorization expires.
"""

from __future__ import annotations

__all__ = [
    "CaptureParams",
    "Charge",
    "ChargeService",
    "CreateChargeParams",
    "ListChargeParams",
    "ReauthParams",
    "RefundParams",
    "UpdateChargeParams",
]

from pydantic import Field

from aiopayjp.params import ListParams, Metadata, Params
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.resources.card import Card, CardThreeDSecureStatus
from aiopayjp.response import ListResponse, PayjpObject


class Charge(PayjpObject):
    """A payment made with a card."""

    id: str
    object: str = "charge"
    livemode: bool = False
    created: int
    amount: int
    currency: str
    paid: bool
    captured: bool
    captured_at: int | None = None
    card: Card | None = None
    customer: str | None = None
    description: str | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    fee_rate: str | None = None
    refunded: bool = False
    amount_refunded: int = 0
    refund_reason: str | None = None
    subscription: str | None = None
    metadata: Metadata | None = None
    expired_at: int | None = None
    three_d_secure_status: CardThreeDSecureStatus | None = None
    tenant: str | None = None
    platform_fee: int | None = None
    platform_fee_rate: str | None = None
    total_platform_fee: int | None = None


class CreateChargeParams(Params):
    r"""Parameters for creating a charge.

    Exactly one of ``card`` or ``customer`` is normally given.

    Args:
        amount: Amount in the smallest currency unit (50 to 9,999,999 JPY).
        currency: Three-letter currency code, only ``"jpy"`` is supported.
        card: A token ID (``tok_...``).
        customer: A customer ID (``cus_...``) whose default card is charged.
        description: Free-form description.
        capture: ``False`` to only authorize the amount.
        expiry_days: Days before an uncaptured authorization expires (1 to 60).
        metadata: Arbitrary key-value pairs.
        three_d_secure: Request a 3D Secure check.
        tenant: Tenant ID (Platform API).
        platform_fee: Platform fee (Platform API).

    Example:
        ```pycon
        >>> from aiopayjp.encoding import encode_form
        >>> from aiopayjp.resources.charge import CreateChargeParams
        >>> encode_form(CreateChargeParams(amount=1000, currency="jpy", capture=False))
        'amount=1000&currency=jpy&capture=false'

        ```
    """

    amount: int
    currency: str
    card: str | None = None
    customer: str | None = None
    description: str | None = None
    capture: bool | None = None
    expiry_days: int | None = Field(default=None, ge=1, le=60)
    metadata: Metadata | None = None
    three_d_secure: bool | None = None
    tenant: str | None = None
    platform_fee: int | None = None


class UpdateChargeParams(Params):
    description: str | None = None
    metadata: Metadata | None = None


class RefundParams(Params):
    """Parameters for refunding a charge.

    Args:
        amount: Amount to refund. Refunds the remaining amount if omitted.
        refund_reason: Free-form reason.
    """

    amount: int | None = None
    refund_reason: str | None = None


class CaptureParams(Params):
    """Parameters for capturing an authorized charge.

    Args:
        amount: Amount to capture, at most the authorized amount.
            Captures the full amount if omitted.
    """

    amount: int | None = None


class ReauthParams(Params):
    expiry_days: int | None = Field(default=None, ge=1, le=60)


class ListChargeParams(ListParams):
    """Filters of the charge list endpoint."""

    customer: str | None = None
    subscription: str | None = None
    tenant: str | None = None


class ChargeService(BaseService):
    """Operations on charges."""

    async def create(self, params: CreateChargeParams) -> Charge:
        """Create a charge.

        Args:
            params: The charge parameters.

        Returns:
            The created charge.

        Raises:
            ApiError: If the card is declined or a parameter is invalid.

        Example:
            ```pycon
            >>> from aiopayjp.resources.charge import CreateChargeParams
            >>> charge = await client.charges.create(  # doctest: +SKIP
            ...     CreateChargeParams(amount=1000, currency="jpy", card="tok_xxxxx")
            ... )

            ```
        """
        return await self._client.post("/charges", params, Charge)

    async def retrieve(self, charge_id: str) -> Charge:
        return await self._client.get(f"/charges/{quote_id(charge_id)}", Charge)

    async def update(self, charge_id: str, params: UpdateChargeParams) -> Charge:
        return await self._client.post(f"/charges/{quote_id(charge_id)}", params, Charge)

    async def capture(self, charge_id: str, params: CaptureParams | None = None) -> Charge:
        """Capture a charge created with ``capture=False``."""
        return await self._client.post(
            f"/charges/{quote_id(charge_id)}/capture", params or CaptureParams(), Charge
        )

    async def refund(self, charge_id: str, params: RefundParams | None = None) -> Charge:
        """Refund a charge, fully unless ``params.amount`` is given."""
        return await self._client.post(
            f"/charges/{quote_id(charge_id)}/refund", params or RefundParams(), Charge
        )

    async def reauth(self, charge_id: str, params: ReauthParams | None = None) -> Charge:
        """Extend the authorization of an uncaptured charge."""
        return await self._client.post(
            f"/charges/{quote_id(charge_id)}/reauth", params or ReauthParams(), Charge
        )

    async def tds_finish(self, charge_id: str) -> Charge:
        """Complete the charge once the customer finished 3D Secure."""
        return await self._client.post(f"/charges/{quote_id(charge_id)}/tds_finish", {}, Charge)

    async def list(self, params: ListChargeParams | None = None) -> ListResponse[Charge]:
        return await self._client.get_with_params(
            "/charges", params or ListChargeParams(), ListResponse[Charge]
        )
