r"""3D Secure request resource.

A 3D Secure request authenticates the holder of a card stored on a
customer, outside of a charge.
"""

from __future__ import annotations

__all__ = [
    "CreateThreeDSecureRequestParams",
    "ThreeDSecureRequest",
    "ThreeDSecureRequestService",
    "ThreeDSecureResult",
    "ThreeDSecureStatus",
]

import enum

from aiopayjp.params import ListParams, Params
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.response import ListResponse, PayjpObject


class ThreeDSecureStatus(str, enum.Enum):
    """Status of a 3D Secure request.

    Statuses this version does not know about map to ``UNKNOWN``.
    """

    IN_PROGRESS = "in_progress"
    VERIFIED = "verified"
    ATTEMPTED = "attempted"
    FAILED = "failed"
    ERROR = "error"
    ABORTED = "aborted"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> ThreeDSecureStatus:
        return cls.UNKNOWN


class ThreeDSecureResult(PayjpObject):
    code: str | None = None
    message: str | None = None
    eci: str | None = None


class ThreeDSecureRequest(PayjpObject):
    id: str
    object: str = "three_d_secure_request"
    livemode: bool = False
    created: int
    resource_type: str | None = None
    resource_id: str | None = None
    status: ThreeDSecureStatus | None = None
    authentication_url: str | None = None
    tenant: str | None = None
    state: str | None = None
    result: ThreeDSecureResult | None = None


class CreateThreeDSecureRequestParams(Params):
    r"""Parameters for starting a 3D Secure request.

    Args:
        resource_id: The card ID (``car_...``) to authenticate.
        tenant: Tenant ID (Platform API).
    """

    resource_id: str
    tenant: str | None = None


class ThreeDSecureRequestService(BaseService):
    """Operations on 3D Secure requests."""

    async def create(self, params: CreateThreeDSecureRequestParams) -> ThreeDSecureRequest:
        """Start a 3D Secure request.

        The customer must then be sent to ``authentication_url``.
        """
        return await self._client.post("/three_d_secure_requests", params, ThreeDSecureRequest)

    async def retrieve(self, request_id: str) -> ThreeDSecureRequest:
        return await self._client.get(
            f"/three_d_secure_requests/{quote_id(request_id)}", ThreeDSecureRequest
        )

    async def list(
        self, params: ListParams | None = None
    ) -> ListResponse[ThreeDSecureRequest]:
        return await self._client.get_with_params(
            "/three_d_secure_requests",
            params or ListParams(),
            ListResponse[ThreeDSecureRequest],
        )
