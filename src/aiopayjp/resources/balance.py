r"""Balance resource and statement download URLs."""

from __future__ import annotations

__all__ = ["BankInfo", "Balance", "BalanceService", "StatementUrls"]

from aiopayjp.params import ListParams
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.response import ListResponse, PayjpObject


class BankInfo(PayjpObject):
    """Bank account a balance is paid out to."""

    bank_code: str
    branch_code: str
    account_type: str
    account_number: str
    account_holder_name: str


class Balance(PayjpObject):
    """Amount owed to or by the merchant for a period."""

    id: str
    object: str = "balance"
    livemode: bool = False
    created: int
    total: int
    available: int = 0
    pending: int = 0
    state: str | None = None
    tenant: str | None = None
    bank_info: BankInfo | None = None
    closed_at: int | None = None
    due_date: int | None = None


class StatementUrls(PayjpObject):
    """Short-lived download URL of a statement."""

    object: str = "statement_url"
    expires: int
    url: str | None = None


class BalanceService(BaseService):
    """Operations on balances."""

    async def retrieve(self, balance_id: str) -> Balance:
        return await self._client.get(f"/balances/{quote_id(balance_id)}", Balance)

    async def statement_urls(self, balance_id: str) -> StatementUrls:
        """Create download URLs for the statements of a balance.

        Args:
            balance_id: The balance ID (``ba_...``).

        Returns:
            The download URL and its expiry.
        """
        return await self._client.post(
            f"/balances/{quote_id(balance_id)}/statement_urls", {}, StatementUrls
        )

    async def list(self, params: ListParams | None = None) -> ListResponse[Balance]:
        return await self._client.get_with_params(
            "/balances", params or ListParams(), ListResponse[Balance]
        )
