"""Response DTOs returned by the gateway.

Every response validates the decoded JSON body by its camelCase field names
and keeps unknown fields, since the gateway adds fields between API versions.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import ConfigDict, field_validator

from ..domain.constants import APIResponseStatus, ErrorType, TransactionStatus
from ..domain.errors import GatewayResponseError
from .shared.serializers import WireModel


def _known_member(enum_type: type[Enum], value: Any) -> Any:
    """Return the enum member for a known value, otherwise the value unchanged."""
    try:
        return enum_type(value)
    except (TypeError, ValueError):
        return value


class SafechargeResponse(WireModel):
    """Fields common to every gateway response."""

    model_config = ConfigDict(extra="allow")

    session_token: Optional[str] = None
    internal_request_id: Optional[int] = None
    # Unrecognised values are kept as plain strings.
    status: Optional[Union[APIResponseStatus, str]] = None
    err_code: Optional[int] = None
    reason: Optional[str] = None
    merchant_id: Optional[str] = None
    merchant_site_id: Optional[str] = None
    version: Optional[str] = None
    client_request_id: Optional[str] = None
    error_type: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v: Any) -> Any:
        return _known_member(APIResponseStatus, v)

    def is_successful(self) -> bool:
        return self.status == APIResponseStatus.SUCCESS

    def is_session_expired(self) -> bool:
        """True when the session token must be renewed before retrying."""
        return self.error_type == ErrorType.SESSION_EXPIRED

    def raise_for_status(self) -> None:
        """Raise ``GatewayResponseError`` when the gateway reported an error."""
        if self.status == APIResponseStatus.ERROR:
            raise GatewayResponseError(
                self.reason, err_code=self.err_code, error_type=self.error_type
            )


class SafechargeTransactionResponse(SafechargeResponse):
    """Base for responses to operations that create a transaction."""

    transaction_status: Optional[Union[TransactionStatus, str]] = None
    transaction_id: Optional[str] = None
    external_transaction_id: Optional[str] = None
    auth_code: Optional[str] = None
    gw_error_code: Optional[int] = None
    gw_error_reason: Optional[str] = None
    gw_extended_error_code: Optional[int] = None
    payment_method_error_code: Optional[int] = None
    payment_method_error_reason: Optional[str] = None

    @field_validator("transaction_status", mode="before")
    @classmethod
    def coerce_transaction_status(cls, v: Any) -> Any:
        return _known_member(TransactionStatus, v)

    def is_approved(self) -> bool:
        return self.transaction_status == TransactionStatus.APPROVED


class GetSessionTokenResponse(SafechargeResponse):
    pass


class OpenOrderResponse(SafechargeResponse):
    order_id: Optional[str] = None
    user_token_id: Optional[str] = None


class GetOrderDetailsResponse(SafechargeResponse):
    order_id: Optional[str] = None
    transaction_details: Optional[dict[str, Any]] = None


class VoidTransactionResponse(SafechargeTransactionResponse):
    pass


class RefundTransactionResponse(SafechargeTransactionResponse):
    pass


class SettleTransactionResponse(SafechargeTransactionResponse):
    pass


class AddUPOAPMResponse(SafechargeResponse):
    user_payment_option_id: Optional[int] = None


class AddUPOCreditCardResponse(SafechargeResponse):
    user_payment_option_id: Optional[int] = None


class CancelSubscriptionResponse(SafechargeResponse):
    pass
