r"""Term resource.

A term is the aggregation period sales are settled by.
"""

from __future__ import annotations

__all__ = ["Term", "TermService"]

from aiopayjp.params import ListParams
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.response import ListResponse, PayjpObject


class Term(PayjpObject):
    id: str
    object: str = "term"
    livemode: bool = False
    start_at: int | None = None
    end_at: int | None = None
    charge_count: int = 0
    refund_count: int = 0
    dispute_count: int | None = None


class TermService(BaseService):
    """Operations on terms."""

    async def retrieve(self, term_id: str) -> Term:
        return await self._client.get(f"/terms/{quote_id(term_id)}", Term)

    async def list(self, params: ListParams | None = None) -> ListResponse[Term]:
        return await self._client.get_with_params(
            "/terms", params or ListParams(), ListResponse[Term]
        )
