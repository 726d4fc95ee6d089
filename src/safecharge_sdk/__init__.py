"""Client SDK for the SafeCharge payment gateway.

This package exposes the request builders, response DTOs, checksum helpers
and HTTP clients most callers need.
"""

from .application.models import UrlDetails, UserDetails, user_details_from_params
from .application.requests.orders import (
    GetOrderDetailsRequest,
    GetSessionTokenRequest,
    OpenOrderRequest,
)
from .application.requests.payment_options import (
    AddUPOAPMRequest,
    AddUPOCreditCardRequest,
)
from .application.requests.subscriptions import CancelSubscriptionRequest
from .application.requests.transactions import (
    RefundTransactionRequest,
    SettleTransactionRequest,
    VoidTransactionRequest,
)
from .crypto.checksum import calculate_checksum, verify_request_checksum
from .domain.constants import ChecksumOrderMapping, HashAlgorithm
from .domain.errors import SafechargeError
from .domain.merchant import MerchantInfo
from .infrastructure.gateway_client import AsyncSafechargeClient, SafechargeClient

__all__ = [
    "AddUPOAPMRequest",
    "AddUPOCreditCardRequest",
    "AsyncSafechargeClient",
    "CancelSubscriptionRequest",
    "ChecksumOrderMapping",
    "GetOrderDetailsRequest",
    "GetSessionTokenRequest",
    "HashAlgorithm",
    "MerchantInfo",
    "OpenOrderRequest",
    "RefundTransactionRequest",
    "SafechargeClient",
    "SafechargeError",
    "SettleTransactionRequest",
    "UrlDetails",
    "UserDetails",
    "VoidTransactionRequest",
    "calculate_checksum",
    "user_details_from_params",
    "verify_request_checksum",
]
