"""Follow-up operations on an existing transaction: void, refund and settle."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, ClassVar, Optional, TypeVar, Union

from pydantic import Field

from ...domain.constants import ChecksumOrderMapping
from ..models import UrlDetails
from ..responses import (
    RefundTransactionResponse,
    SafechargeResponse,
    SettleTransactionResponse,
    VoidTransactionResponse,
)
from .base import SafechargeBuilder, SafechargeRequest
from .orders import AMOUNT_PATTERN, CURRENCY_PATTERN

T = TypeVar("T", bound="TransactionActionBuilder[Any]")
A = TypeVar("A", bound="TransactionActionRequest")


class TransactionActionRequest(SafechargeRequest):
    """Fields shared by requests that act on a previous transaction."""

    checksum_mapping: ClassVar[ChecksumOrderMapping] = (
        ChecksumOrderMapping.TRANSACTION_ACTION
    )

    amount: str = Field(..., pattern=AMOUNT_PATTERN)
    currency: str = Field(..., pattern=CURRENCY_PATTERN)
    related_transaction_id: str = Field(..., pattern=r"^\d{1,19}$")
    auth_code: Optional[str] = Field(None, max_length=128)
    client_unique_id: Optional[str] = Field(None, max_length=255)
    comment: Optional[str] = Field(None, max_length=255)
    url_details: Optional[UrlDetails] = None


class TransactionActionBuilder(SafechargeBuilder[A]):
    def add_amount(self: T, amount: Union[str, Decimal]) -> T:
        return self._set("amount", str(amount))

    def add_currency(self: T, currency: str) -> T:
        return self._set("currency", currency)

    def add_related_transaction_id(self: T, related_transaction_id: str) -> T:
        """Id of the transaction this operation applies to."""
        return self._set("related_transaction_id", related_transaction_id)

    def add_auth_code(self: T, auth_code: str) -> T:
        return self._set("auth_code", auth_code)

    def add_client_unique_id(self: T, client_unique_id: str) -> T:
        return self._set("client_unique_id", client_unique_id)

    def add_comment(self: T, comment: str) -> T:
        return self._set("comment", comment)

    def add_url_details(self: T, url_details: UrlDetails) -> T:
        return self._set("url_details", url_details)


class VoidTransactionRequest(TransactionActionRequest):
    endpoint: ClassVar[str] = "voidTransaction.do"
    response_type: ClassVar[type[SafechargeResponse]] = VoidTransactionResponse

    @classmethod
    def builder(cls) -> "VoidTransactionBuilder":
        return VoidTransactionBuilder()


class VoidTransactionBuilder(TransactionActionBuilder[VoidTransactionRequest]):
    request_type = VoidTransactionRequest


class RefundTransactionRequest(TransactionActionRequest):
    endpoint: ClassVar[str] = "refundTransaction.do"
    response_type: ClassVar[type[SafechargeResponse]] = RefundTransactionResponse

    @classmethod
    def builder(cls) -> "RefundTransactionBuilder":
        return RefundTransactionBuilder()


class RefundTransactionBuilder(TransactionActionBuilder[RefundTransactionRequest]):
    request_type = RefundTransactionRequest


class SettleTransactionRequest(TransactionActionRequest):
    endpoint: ClassVar[str] = "settleTransaction.do"
    response_type: ClassVar[type[SafechargeResponse]] = SettleTransactionResponse

    @classmethod
    def builder(cls) -> "SettleTransactionBuilder":
        return SettleTransactionBuilder()


class SettleTransactionBuilder(TransactionActionBuilder[SettleTransactionRequest]):
    request_type = SettleTransactionRequest
