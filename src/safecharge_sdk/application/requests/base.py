"""Base request DTO and the fluent builder that signs and validates it."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, ClassVar, Generic, Optional, TypeVar
from uuid import uuid4

from pydantic import Field

from ...crypto.checksum import calculate_checksum
from ...domain.constants import (
    CLIENT_REQUEST_ID_MAX_LENGTH,
    TIME_STAMP_FORMAT,
    ChecksumOrderMapping,
)
from ...domain.errors import MissingMerchantInfoError
from ...domain.merchant import MerchantInfo
from ..responses import SafechargeResponse
from ..shared.serializers import WireModel

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="SafechargeRequest")
B = TypeVar("B", bound="SafechargeBuilder[Any]")


class SafechargeRequest(WireModel):
    """Fields carried by every request sent to the gateway.

    Subclasses set ``checksum_mapping`` to the ordered fields hashed into
    ``checksum``, ``endpoint`` to the API method they call and
    ``response_type`` to the DTO the gateway answers with.
    """

    checksum_mapping: ClassVar[ChecksumOrderMapping] = (
        ChecksumOrderMapping.API_GENERIC_CHECKSUM_MAPPING
    )
    endpoint: ClassVar[str]
    response_type: ClassVar[type[SafechargeResponse]] = SafechargeResponse

    session_token: Optional[str] = None
    merchant_id: str = Field(..., min_length=1)
    merchant_site_id: str = Field(..., min_length=1)
    client_request_id: Optional[str] = Field(
        None, max_length=CLIENT_REQUEST_ID_MAX_LENGTH
    )
    internal_request_id: Optional[int] = None
    time_stamp: str = Field(..., pattern=r"^\d{14}$")
    checksum: str = Field(..., min_length=1)


def generate_client_request_id() -> str:
    return uuid4().hex[:CLIENT_REQUEST_ID_MAX_LENGTH]


def current_time_stamp() -> str:
    """Gateway time stamp (local time, YYYYMMDDHHmmss)."""
    return datetime.now().strftime(TIME_STAMP_FORMAT)


class SafechargeBuilder(Generic[R]):
    """Collects request fields, then signs and validates them in ``build()``.

    Every ``add_*`` method returns the builder so calls can be chained.
    """

    request_type: ClassVar[type[SafechargeRequest]]

    def __init__(self) -> None:
        self._merchant_info: Optional[MerchantInfo] = None
        self._values: dict[str, Any] = {}

    def _set(self: B, field_name: str, value: Any) -> B:
        self._values[field_name] = value
        return self

    def add_merchant_info(self: B, merchant_info: MerchantInfo) -> B:
        self._merchant_info = merchant_info
        return self

    def add_session_token(self: B, session_token: str) -> B:
        return self._set("session_token", session_token)

    def add_client_request_id(self: B, client_request_id: str) -> B:
        return self._set("client_request_id", client_request_id)

    def add_internal_request_id(self: B, internal_request_id: int) -> B:
        return self._set("internal_request_id", internal_request_id)

    def add_time_stamp(self: B, time_stamp: str) -> B:
        """Override the request time stamp (defaults to the build time)."""
        return self._set("time_stamp", time_stamp)

    def build(self) -> R:
        """Populate, sign and validate the request.

        Raises:
            MissingMerchantInfoError: If no merchant info was added.
            pydantic.ValidationError: Listing every violated field constraint.
        """
        merchant_info = self._merchant_info
        if merchant_info is None:
            raise MissingMerchantInfoError(
                f"{self.request_type.__name__} requires merchant info to be built"
            )

        data: dict[str, Any] = {
            "merchant_id": merchant_info.merchant_id,
            "merchant_site_id": merchant_info.merchant_site_id,
            "client_request_id": generate_client_request_id(),
            "time_stamp": current_time_stamp(),
        }
        data.update(
            {name: value for name, value in self._values.items() if value is not None}
        )

        wire_values = {
            self.request_type.wire_name(name): value for name, value in data.items()
        }
        data["checksum"] = calculate_checksum(
            wire_values,
            self.request_type.checksum_mapping.fields,
            merchant_info.merchant_key,
            merchant_info.hash_algorithm,
        )

        request = self.request_type.model_validate(
            {name: value for name, value in data.items() if value is not None}
        )
        logger.debug(
            "Built %s (clientRequestId=%s)",
            self.request_type.__name__,
            request.client_request_id,
        )
        return request  # type: ignore[return-value]
