r"""Account resource."""

from __future__ import annotations

__all__ = ["Account", "AccountService"]

from aiopayjp.params import Metadata
from aiopayjp.resources.base import BaseService
from aiopayjp.response import PayjpObject


class Account(PayjpObject):
    """The merchant account the secret key belongs to."""

    id: str
    object: str = "account"
    livemode: bool = False
    created: int
    email: str | None = None
    merchant_name: str | None = None
    business_type: str | None = None
    currencies_supported: list[str] | None = None
    default_currency: str | None = None
    product_detail: str | None = None
    metadata: Metadata | None = None


class AccountService(BaseService):
    """Operations on the account."""

    async def retrieve(self) -> Account:
        """Retrieve the account.

        Example:
            ```pycon
            >>> account = await client.account.retrieve()  # doctest: +SKIP

            ```
        """
        return await self._client.get("/account", Account)
