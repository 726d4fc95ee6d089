from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ...domain.constants import ChecksumOrderMapping
from ..responses import CancelSubscriptionResponse, SafechargeResponse
from .base import SafechargeBuilder, SafechargeRequest


class CancelSubscriptionRequest(SafechargeRequest):
    """Cancels a user's recurring subscription."""

    checksum_mapping: ClassVar[ChecksumOrderMapping] = (
        ChecksumOrderMapping.CANCEL_CASHIER_SUBSCRIPTION
    )
    endpoint: ClassVar[str] = "cancelSubscription.do"
    response_type: ClassVar[type[SafechargeResponse]] = CancelSubscriptionResponse

    subscription_id: str = Field(..., min_length=1, max_length=20)
    user_token_id: str = Field(..., min_length=1, max_length=255)

    @classmethod
    def builder(cls) -> "CancelSubscriptionBuilder":
        return CancelSubscriptionBuilder()


class CancelSubscriptionBuilder(SafechargeBuilder[CancelSubscriptionRequest]):
    request_type = CancelSubscriptionRequest

    def add_subscription_id(self, subscription_id: str) -> "CancelSubscriptionBuilder":
        return self._set("subscription_id", subscription_id)

    def add_user_token_id(self, user_token_id: str) -> "CancelSubscriptionBuilder":
        return self._set("user_token_id", user_token_id)
