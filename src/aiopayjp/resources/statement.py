r"""Statement resource."""

from __future__ import annotations

__all__ = ["Statement", "StatementService"]

from pydantic import Field

from aiopayjp.params import ListParams
from aiopayjp.resources.balance import StatementUrls
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.response import ListResponse, PayjpObject


class Statement(PayjpObject):
    """A statement of sales and fees.

    The wire field ``type`` is exposed as ``statement_type``.
    """

    id: str
    object: str = "statement"
    livemode: bool = False
    created: int
    title: str | None = None
    tenant: str | None = None
    term: str | None = None
    balance_id: str | None = None
    statement_type: str | None = Field(default=None, alias="type")
    updated: int | None = None


class StatementService(BaseService):
    """Operations on statements."""

    async def retrieve(self, statement_id: str) -> Statement:
        return await self._client.get(f"/statements/{quote_id(statement_id)}", Statement)

    async def statement_urls(self, statement_id: str) -> StatementUrls:
        """Create a download URL for a statement."""
        return await self._client.post(
            f"/statements/{quote_id(statement_id)}/statement_urls", {}, StatementUrls
        )

    async def list(self, params: ListParams | None = None) -> ListResponse[Statement]:
        return await self._client.get_with_params(
            "/statements", params or ListParams(), ListResponse[Statement]
        )
