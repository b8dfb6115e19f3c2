r"""Resources of the Platform API (tenants and their payouts)."""

from __future__ import annotations

__all__ = [
    "ApplicationUrls",
    "BankAccount",
    "CreateTenantParams",
    "Tenant",
    "TenantService",
    "TenantTransfer",
    "TenantTransferService",
    "TenantTransferSummary",
    "UpdateTenantParams",
]

from aiopayjp.resources.platform.tenant import (
    ApplicationUrls,
    BankAccount,
    CreateTenantParams,
    Tenant,
    TenantService,
    UpdateTenantParams,
)
from aiopayjp.resources.platform.tenant_transfer import (
    TenantTransfer,
    TenantTransferService,
    TenantTransferSummary,
)
