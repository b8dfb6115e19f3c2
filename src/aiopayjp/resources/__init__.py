r"""Typed models, parameters and services of the PAY.JP resources."""

from __future__ import annotations

__all__ = [
    "Account",
    "AccountService",
    "Balance",
    "BalanceService",
    "BaseService",
    "CaptureParams",
    "Card",
    "CardDetails",
    "CardService",
    "CardThreeDSecureStatus",
    "Charge",
    "ChargeService",
    "CreateCardParams",
    "CreateChargeParams",
    "CreateCustomerParams",
    "CreatePlanParams",
    "CreateSubscriptionParams",
    "CreateThreeDSecureRequestParams",
    "CreateTokenParams",
    "Customer",
    "CustomerHandle",
    "CustomerService",
    "Event",
    "EventService",
    "EventType",
    "ListChargeParams",
    "Plan",
    "PlanInterval",
    "PlanService",
    "PublicTokenService",
    "ReauthParams",
    "RefundParams",
    "ResumeSubscriptionParams",
    "Statement",
    "StatementService",
    "StatementUrls",
    "Subscription",
    "SubscriptionService",
    "SubscriptionStatus",
    "Term",
    "TermService",
    "ThreeDSecureRequest",
    "ThreeDSecureRequestService",
    "ThreeDSecureStatus",
    "Token",
    "TokenService",
    "Transfer",
    "TransferService",
    "UpdateCardParams",
    "UpdateChargeParams",
    "UpdateCustomerParams",
    "UpdatePlanParams",
    "UpdateSubscriptionParams",
]

from aiopayjp.resources.account import Account, AccountService
from aiopayjp.resources.balance import Balance, BalanceService, StatementUrls
from aiopayjp.resources.base import BaseService
from aiopayjp.resources.card import (
    Card,
    CardService,
    CardThreeDSecureStatus,
    CreateCardParams,
    UpdateCardParams,
)
from aiopayjp.resources.charge import (
    CaptureParams,
    Charge,
    ChargeService,
    CreateChargeParams,
    ListChargeParams,
    ReauthParams,
    RefundParams,
    UpdateChargeParams,
)
from aiopayjp.resources.customer import (
    CreateCustomerParams,
    Customer,
    CustomerHandle,
    CustomerService,
    UpdateCustomerParams,
)
from aiopayjp.resources.event import Event, EventService, EventType
from aiopayjp.resources.plan import (
    CreatePlanParams,
    Plan,
    PlanInterval,
    PlanService,
    UpdatePlanParams,
)
from aiopayjp.resources.statement import Statement, StatementService
from aiopayjp.resources.subscription import (
    CreateSubscriptionParams,
    ResumeSubscriptionParams,
    Subscription,
    SubscriptionService,
    SubscriptionStatus,
    UpdateSubscriptionParams,
)
from aiopayjp.resources.term import Term, TermService
from aiopayjp.resources.three_d_secure import (
    CreateThreeDSecureRequestParams,
    ThreeDSecureRequest,
    ThreeDSecureRequestService,
    ThreeDSecureStatus,
)
from aiopayjp.resources.token import (
    CardDetails,
    CreateTokenParams,
    PublicTokenService,
    Token,
    TokenService,
)
from aiopayjp.resources.transfer import Transfer, TransferService
