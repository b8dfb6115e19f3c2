r"""Transfer resource."""

from __future__ import annotations

__all__ = ["Transfer", "TransferService", "TransferSummary"]

from aiopayjp.params import ListParams
from aiopayjp.resources.balance import BankInfo
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.response import ListResponse, PayjpObject


class TransferSummary(PayjpObject):
    charge_amount: int = 0
    charge_count: int = 0
    charge_fee: int = 0
    refund_amount: int = 0
    refund_count: int = 0


class Transfer(PayjpObject):
    """A payout of sales to the merchant's bank account."""

    id: str
    object: str = "transfer"
    livemode: bool = False
    created: int
    amount: int
    currency: str
    status: str
    summary: TransferSummary
    scheduled_date: int | None = None
    bank: BankInfo | None = None
    statement_descriptor: str | None = None
    term: str | None = None


class TransferService(BaseService):
    """Operations on transfers."""

    async def retrieve(self, transfer_id: str) -> Transfer:
        return await self._client.get(f"/transfers/{quote_id(transfer_id)}", Transfer)

    async def list(self, params: ListParams | None = None) -> ListResponse[Transfer]:
        return await self._client.get_with_params(
            "/transfers", params or ListParams(), ListResponse[Transfer]
        )
