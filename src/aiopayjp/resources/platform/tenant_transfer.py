r"""Tenant transfer resource of the Platform API."""

from __future__ import annotations

__all__ = ["TenantTransfer", "TenantTransferService", "TenantTransferSummary"]

from aiopayjp.params import ListParams
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.resources.transfer import TransferSummary
from aiopayjp.response import ListResponse, PayjpObject


class TenantTransferSummary(TransferSummary):
    platform_fee: int = 0


class TenantTransfer(PayjpObject):
    """A payout of sales to one tenant."""

    id: str
    object: str = "tenant_transfer"
    livemode: bool = False
    created: int
    tenant: str
    amount: int
    currency: str
    status: str
    summary: TenantTransferSummary
    scheduled_date: int | None = None
    term: str | None = None


class TenantTransferService(BaseService):
    """Operations on tenant transfers."""

    async def retrieve(self, transfer_id: str) -> TenantTransfer:
        return await self._client.get(f"/tenant_transfers/{quote_id(transfer_id)}", TenantTransfer)

    async def list(self, params: ListParams | None = None) -> ListResponse[TenantTransfer]:
        return await self._client.get_with_params(
            "/tenant_transfers", params or ListParams(), ListResponse[TenantTransfer]
        )
