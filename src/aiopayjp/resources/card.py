r"""Card resource and the per-customer card service."""

from __future__ import annotations

__all__ = [
    "Card",
    "CardService",
    "CardThreeDSecureStatus",
    "CreateCardParams",
    "UpdateCardParams",
]

import enum
from typing import TYPE_CHECKING

from aiopayjp.params import ListParams, Metadata, Params
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.response import DeletedObject, ListResponse, PayjpObject

if TYPE_CHECKING:
    from aiopayjp.client import BaseClient


class CardThreeDSecureStatus(str, enum.Enum):
    """Result of the 3D Secure check of a card."""

    UNVERIFIED = "unverified"
    VERIFIED = "verified"
    ATTEMPTED = "attempted"
    FAILED = "failed"
    ERROR = "error"


class Card(PayjpObject):
    """A payment card attached to a customer or a token."""

    id: str
    object: str = "card"
    livemode: bool = False
    created: int
    customer: str | None = None
    brand: str
    cvc_check: str | None = None
    exp_month: int
    exp_year: int
    fingerprint: str | None = None
    last4: str
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_city: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    address_zip_check: str | None = None
    country: str | None = None
    three_d_secure_status: CardThreeDSecureStatus | None = None
    email: str | None = None
    phone: str | None = None
    metadata: Metadata | None = None


class CreateCardParams(Params):
    r"""Parameters for attaching a card to a customer.

    Args:
        card: A token ID (``tok_...``) created from the card details.
        metadata: Arbitrary key-value pairs.
        default: Make the new card the customer's default card.
    """

    card: str | None = None
    metadata: Metadata | None = None
    default: bool | None = None


class UpdateCardParams(Params):
    """Parameters for updating a card."""

    exp_month: int | None = None
    exp_year: int | None = None
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_city: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    country: str | None = None
    email: str | None = None
    phone: str | None = None
    metadata: Metadata | None = None


class CardService(BaseService):
    r"""Operations on the cards of one customer.

    Obtained through ``client.customer(customer_id).cards``.

    Args:
        client: The client used to send requests.
        customer_id: The customer the cards belong to.
    """

    def __init__(self, client: BaseClient, customer_id: str) -> None:
        super().__init__(client)
        self.customer_id = customer_id

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(customer_id={self.customer_id!r})"

    @property
    def _path(self) -> str:
        return f"/customers/{quote_id(self.customer_id)}/cards"

    async def create(self, params: CreateCardParams) -> Card:
        """Attach a card to the customer.

        Example:
            ```pycon
            >>> from aiopayjp.resources.card import CreateCardParams
            >>> card = await client.customer("cus_xxxxx").cards.create(  # doctest: +SKIP
            ...     CreateCardParams(card="tok_xxxxx", default=True)
            ... )

            ```
        """
        return await self._client.post(self._path, params, Card)

    async def retrieve(self, card_id: str) -> Card:
        return await self._client.get(f"{self._path}/{quote_id(card_id)}", Card)

    async def update(self, card_id: str, params: UpdateCardParams) -> Card:
        return await self._client.post(f"{self._path}/{quote_id(card_id)}", params, Card)

    async def delete(self, card_id: str) -> DeletedObject:
        return await self._client.delete(f"{self._path}/{quote_id(card_id)}", DeletedObject)

    async def list(self, params: ListParams | None = None) -> ListResponse[Card]:
        return await self._client.get_with_params(
            self._path, params or ListParams(), ListResponse[Card]
        )
