"""Requests that store a user payment option (UPO) for a user."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Optional, TypeVar

from pydantic import Field

from ...domain.constants import ChecksumOrderMapping
from ..models import UserDetails, user_details_from_params
from ..responses import AddUPOAPMResponse, AddUPOCreditCardResponse, SafechargeResponse
from .base import SafechargeBuilder, SafechargeRequest

U = TypeVar("U", bound="_UserPaymentOptionBuilder[Any]")
P = TypeVar("P", bound=SafechargeRequest)


class _UserPaymentOptionBuilder(SafechargeBuilder[P]):
    def add_user_token_id(self: U, user_token_id: str) -> U:
        """Merchant-generated unique identifier of the user."""
        return self._set("user_token_id", user_token_id)

    def add_billing_address(self: U, billing_address: UserDetails) -> U:
        return self._set("billing_address", billing_address)

    def add_billing_details(
        self: U,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        address: Optional[str] = None,
        phone: Optional[str] = None,
        zip: Optional[str] = None,
        city: Optional[str] = None,
        country_code: Optional[str] = None,
        state: Optional[str] = None,
        email: Optional[str] = None,
        locale: Optional[str] = None,
        date_of_birth: Optional[str] = None,
    ) -> U:
        """Same as ``add_billing_address`` but from the individual address parts."""
        billing_address = user_details_from_params(
            first_name=first_name,
            last_name=last_name,
            address=address,
            phone=phone,
            zip=zip,
            city=city,
            country_code=country_code,
            state=state,
            email=email,
            locale=locale,
            date_of_birth=date_of_birth,
        )
        return self.add_billing_address(billing_address)


class AddUPOAPMRequest(SafechargeRequest):
    """Adds an alternative payment method (APM) payment option to a user."""

    checksum_mapping: ClassVar[ChecksumOrderMapping] = (
        ChecksumOrderMapping.ADD_CASHIER_APM
    )
    endpoint: ClassVar[str] = "addUPOAPM.do"
    response_type: ClassVar[type[SafechargeResponse]] = AddUPOAPMResponse

    # Cashier name of the payment method, e.g. apmgw_Neteller.
    payment_method_name: str = Field(..., min_length=1)
    apm_data: dict[str, str] = Field(..., min_length=1)
    user_token_id: str = Field(..., min_length=1, max_length=255)
    billing_address: Optional[UserDetails] = None

    @classmethod
    def builder(cls) -> "AddUPOAPMBuilder":
        return AddUPOAPMBuilder()


class AddUPOAPMBuilder(_UserPaymentOptionBuilder[AddUPOAPMRequest]):
    request_type = AddUPOAPMRequest

    def add_payment_method_name(self, payment_method_name: str) -> "AddUPOAPMBuilder":
        return self._set("payment_method_name", payment_method_name)

    def add_apm_data(self, apm_data: Mapping[str, str]) -> "AddUPOAPMBuilder":
        """Replace the APM account data, e.g. ``{"account_id": "user1111"}``."""
        return self._set("apm_data", dict(apm_data))

    def add_apm_data_entry(self, key: str, value: str) -> "AddUPOAPMBuilder":
        apm_data = self._values.get("apm_data")
        if apm_data is None:
            apm_data = {}
            self._values["apm_data"] = apm_data
        apm_data[key] = value
        return self


class AddUPOCreditCardRequest(SafechargeRequest):
    """Adds a credit card payment option to a user."""

    checksum_mapping: ClassVar[ChecksumOrderMapping] = (
        ChecksumOrderMapping.ADD_CASHIER_CC
    )
    endpoint: ClassVar[str] = "addUPOCreditCard.do"
    response_type: ClassVar[type[SafechargeResponse]] = AddUPOCreditCardResponse

    user_token_id: str = Field(..., min_length=1, max_length=255)
    cc_card_number: str = Field(..., pattern=r"^\d{12,19}$", repr=False)
    cc_exp_month: str = Field(..., pattern=r"^(0[1-9]|1[0-2])$")
    cc_exp_year: str = Field(..., pattern=r"^(\d{2}|\d{4})$")
    cc_name_on_card: str = Field(..., min_length=1, max_length=70)
    billing_address: Optional[UserDetails] = None

    @classmethod
    def builder(cls) -> "AddUPOCreditCardBuilder":
        return AddUPOCreditCardBuilder()


class AddUPOCreditCardBuilder(_UserPaymentOptionBuilder[AddUPOCreditCardRequest]):
    request_type = AddUPOCreditCardRequest

    def add_card_data(
        self,
        card_number: str,
        exp_month: str,
        exp_year: str,
        name_on_card: str,
    ) -> "AddUPOCreditCardBuilder":
        self._set("cc_card_number", card_number)
        self._set("cc_exp_month", exp_month)
        self._set("cc_exp_year", exp_year)
        return self._set("cc_name_on_card", name_on_card)
