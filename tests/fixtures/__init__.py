"""Test constants and helpers shared across test modules."""

from __future__ import annotations

from pydantic import ValidationError

MERCHANT_KEY = "s3cr3tK3y"
MERCHANT_ID = "1234567890"
MERCHANT_SITE_ID = "54321"
TIME_STAMP = "20170101120000"
CLIENT_REQUEST_ID = "req-0001"


def error_fields(exc: ValidationError) -> set[str]:
    """Top-level field names (python or wire form) reported by a ValidationError."""
    return {str(error["loc"][0]) for error in exc.errors() if error["loc"]}


__all__ = [
    "CLIENT_REQUEST_ID",
    "MERCHANT_ID",
    "MERCHANT_KEY",
    "MERCHANT_SITE_ID",
    "TIME_STAMP",
    "error_fields",
]
