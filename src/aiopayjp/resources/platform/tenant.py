r"""Tenant resource of the Platform API.

A tenant is a sub-merchant selling through the platform.
"""

from __future__ import annotations

__all__ = [
    "ApplicationUrls",
    "BankAccount",
    "CreateTenantParams",
    "Tenant",
    "TenantService",
    "UpdateTenantParams",
]

from aiopayjp.params import ListParams, Metadata, Params
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.response import DeletedObject, ListResponse, PayjpObject


class BankAccount(PayjpObject):
    """Bank account a tenant is paid out to."""

    bank_code: str
    branch_code: str
    account_type: str
    account_number: str
    account_holder_name: str


class Tenant(PayjpObject):
    id: str
    object: str = "tenant"
    livemode: bool = False
    created: int
    name: str | None = None
    platform_fee_rate: str | None = None
    minimum_transfer_amount: int | None = None
    bank_account: BankAccount | None = None
    currencies_supported: list[str] | None = None
    default_currency: str | None = None
    metadata: Metadata | None = None


class CreateTenantParams(Params):
    r"""Parameters for creating a tenant.

    Args:
        name: Display name.
        platform_fee_rate: Fee rate kept by the platform, as a decimal
            string (e.g. ``"0.10"``).
        minimum_transfer_amount: Smallest amount paid out to the tenant.
        bank_account: Payout bank account, sent as
            ``bank_account[bank_code]`` and so on.
        metadata: Arbitrary key-value pairs.
    """

    name: str | None = None
    platform_fee_rate: str | None = None
    minimum_transfer_amount: int | None = None
    bank_account: BankAccount | None = None
    metadata: Metadata | None = None


class UpdateTenantParams(CreateTenantParams):
    pass


class ApplicationUrls(PayjpObject):
    """Onboarding URL a tenant fills in to apply for review."""

    url: str | None = None
    expires: int | None = None


class TenantService(BaseService):
    """Operations on tenants."""

    async def create(self, params: CreateTenantParams) -> Tenant:
        return await self._client.post("/tenants", params, Tenant)

    async def retrieve(self, tenant_id: str) -> Tenant:
        return await self._client.get(f"/tenants/{quote_id(tenant_id)}", Tenant)

    async def update(self, tenant_id: str, params: UpdateTenantParams) -> Tenant:
        return await self._client.post(f"/tenants/{quote_id(tenant_id)}", params, Tenant)

    async def delete(self, tenant_id: str) -> DeletedObject:
        return await self._client.delete(f"/tenants/{quote_id(tenant_id)}", DeletedObject)

    async def list(self, params: ListParams | None = None) -> ListResponse[Tenant]:
        return await self._client.get_with_params(
            "/tenants", params or ListParams(), ListResponse[Tenant]
        )

    async def create_application_urls(self, tenant_id: str) -> ApplicationUrls:
        return await self._client.post(
            f"/tenants/{quote_id(tenant_id)}/application_urls", {}, ApplicationUrls
        )
