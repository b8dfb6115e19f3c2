r"""Customer resource.

A customer stores cards so they can be charged repeatedly. The cards
of one customer are managed through ``client.customer(customer_id)``.
"""

from __future__ import annotations

__all__ = [
    "CreateCustomerParams",
    "Customer",
    "CustomerHandle",
    "CustomerService",
    "UpdateCustomerParams",
]

from typing import TYPE_CHECKING

from pydantic import Field

from aiopayjp.params import ListParams, Metadata, Params
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.resources.card import Card, CardService
from aiopayjp.resources.subscription import Subscription
from aiopayjp.response import DeletedObject, ListResponse, PayjpObject

if TYPE_CHECKING:
    from aiopayjp.client import BaseClient


class Customer(PayjpObject):
    r"""A buyer who can be charged multiple times.

    ``default_card`` holds the card ID, or the full ``Card`` when the
    field was expanded.

    Example:
        ```pycon
        >>> from aiopayjp.resources.customer import Customer
        >>> customer = Customer.model_validate(
        ...     {"id": "cus_1", "object": "customer", "livemode": False, "created": 0,
        ...      "default_card": "car_1"}
        ... )
        >>> customer.default_card
        'car_1'

        ```
    """

    id: str
    object: str = "customer"
    livemode: bool = False
    created: int
    default_card: Card | str | None = Field(default=None, union_mode="left_to_right")
    email: str | None = None
    description: str | None = None
    metadata: Metadata | None = None
    subscriptions: ListResponse[Subscription] | None = None
    cards: ListResponse[Card] | None = None


class CreateCustomerParams(Params):
    r"""Parameters for creating a customer.

    Args:
        email: Contact email.
        description: Free-form description.
        card: A token ID (``tok_...``) to attach as the default card.
        metadata: Arbitrary key-value pairs.
    """

    email: str | None = None
    description: str | None = None
    card: str | None = None
    metadata: Metadata | None = None


class UpdateCustomerParams(Params):
    email: str | None = None
    description: str | None = None
    default_card: str | None = None
    metadata: Metadata | None = None


class CustomerService(BaseService):
    """Operations on customers."""

    async def create(self, params: CreateCustomerParams | None = None) -> Customer:
        return await self._client.post(
            "/customers", params or CreateCustomerParams(), Customer
        )

    async def retrieve(self, customer_id: str) -> Customer:
        return await self._client.get(f"/customers/{quote_id(customer_id)}", Customer)

    async def update(self, customer_id: str, params: UpdateCustomerParams) -> Customer:
        return await self._client.post(f"/customers/{quote_id(customer_id)}", params, Customer)

    async def delete(self, customer_id: str) -> DeletedObject:
        return await self._client.delete(f"/customers/{quote_id(customer_id)}", DeletedObject)

    async def list(self, params: ListParams | None = None) -> ListResponse[Customer]:
        return await self._client.get_with_params(
            "/customers", params or ListParams(), ListResponse[Customer]
        )


class CustomerHandle:
    r"""Operations on one known customer, including its cards.

    Args:
        client: The client used to send requests.
        customer_id: The customer ID.

    Example:
        ```pycon
        >>> customer = client.customer("cus_xxxxx")  # doctest: +SKIP
        >>> cards = await customer.cards.list()  # doctest: +SKIP

        ```
    """

    def __init__(self, client: BaseClient, customer_id: str) -> None:
        self._client = client
        self.id = customer_id
        self.cards = CardService(client, customer_id)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(id={self.id!r})"

    async def retrieve(self) -> Customer:
        return await self._client.get(f"/customers/{quote_id(self.id)}", Customer)

    async def update(self, params: UpdateCustomerParams) -> Customer:
        return await self._client.post(f"/customers/{quote_id(self.id)}", params, Customer)

    async def delete(self) -> DeletedObject:
        return await self._client.delete(f"/customers/{quote_id(self.id)}", DeletedObject)
