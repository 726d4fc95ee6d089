"""Domain-specific exceptions."""

from __future__ import annotations

from typing import Optional


class SafechargeError(Exception):
    """Base class for every error raised by the SDK."""


class MissingMerchantInfoError(SafechargeError, ValueError):
    """Raised when a request is built without merchant credentials."""


class UnsupportedHashAlgorithmError(SafechargeError, ValueError):
    """Raised when a checksum is requested with an unknown hash algorithm."""


class GatewayResponseError(SafechargeError):
    """Raised when the gateway answers with an ERROR status."""

    def __init__(
        self,
        reason: Optional[str],
        err_code: Optional[int] = None,
        error_type: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.err_code = err_code
        self.error_type = error_type
        super().__init__(f"Gateway error {err_code}: {reason or 'no reason given'}")
