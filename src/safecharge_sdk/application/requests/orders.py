"""Session and order requests."""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar, Optional, Union

from pydantic import Field

from ...domain.constants import ChecksumOrderMapping
from ..models import UrlDetails, UserDetails
from ..responses import (
    GetOrderDetailsResponse,
    GetSessionTokenResponse,
    OpenOrderResponse,
    SafechargeResponse,
)
from .base import SafechargeBuilder, SafechargeRequest

AMOUNT_PATTERN = r"^\d+(\.\d{1,2})?$"
CURRENCY_PATTERN = r"^[A-Z]{3}$"


class GetSessionTokenRequest(SafechargeRequest):
    """Opens a gateway session; the returned token is sent with later requests."""

    endpoint: ClassVar[str] = "getSessionToken.do"
    response_type: ClassVar[type[SafechargeResponse]] = GetSessionTokenResponse

    @classmethod
    def builder(cls) -> "GetSessionTokenBuilder":
        return GetSessionTokenBuilder()


class GetSessionTokenBuilder(SafechargeBuilder[GetSessionTokenRequest]):
    request_type = GetSessionTokenRequest


class OpenOrderRequest(SafechargeRequest):
    """Creates an order within an open session."""

    checksum_mapping: ClassVar[ChecksumOrderMapping] = ChecksumOrderMapping.OPEN_ORDER
    endpoint: ClassVar[str] = "openOrder.do"
    response_type: ClassVar[type[SafechargeResponse]] = OpenOrderResponse

    session_token: str = Field(..., min_length=1)
    amount: str = Field(..., pattern=AMOUNT_PATTERN)
    currency: str = Field(..., pattern=CURRENCY_PATTERN)
    user_token_id: Optional[str] = Field(None, max_length=255)
    billing_address: Optional[UserDetails] = None
    url_details: Optional[UrlDetails] = None

    @classmethod
    def builder(cls) -> "OpenOrderBuilder":
        return OpenOrderBuilder()


class OpenOrderBuilder(SafechargeBuilder[OpenOrderRequest]):
    request_type = OpenOrderRequest

    def add_amount(self, amount: Union[str, Decimal]) -> "OpenOrderBuilder":
        return self._set("amount", str(amount))

    def add_currency(self, currency: str) -> "OpenOrderBuilder":
        return self._set("currency", currency)

    def add_user_token_id(self, user_token_id: str) -> "OpenOrderBuilder":
        return self._set("user_token_id", user_token_id)

    def add_billing_address(self, billing_address: UserDetails) -> "OpenOrderBuilder":
        return self._set("billing_address", billing_address)

    def add_url_details(self, url_details: UrlDetails) -> "OpenOrderBuilder":
        return self._set("url_details", url_details)


class GetOrderDetailsRequest(SafechargeRequest):
    """Looks up an order previously created by the merchant."""

    endpoint: ClassVar[str] = "getOrderDetails.do"
    response_type: ClassVar[type[SafechargeResponse]] = GetOrderDetailsResponse

    session_token: str = Field(..., min_length=1)
    # Merchant order id of the order to look up.
    order_id: str = Field(..., max_length=45)

    @classmethod
    def builder(cls) -> "GetOrderDetailsBuilder":
        return GetOrderDetailsBuilder()


class GetOrderDetailsBuilder(SafechargeBuilder[GetOrderDetailsRequest]):
    request_type = GetOrderDetailsRequest

    def add_order_id(self, order_id: str) -> "GetOrderDetailsBuilder":
        return self._set("order_id", order_id)
