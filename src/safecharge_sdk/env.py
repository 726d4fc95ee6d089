from __future__ import annotations

import os
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator

from .domain.constants import INTEGRATION_HOST, HashAlgorithm
from .domain.merchant import MerchantInfo


class Settings(BaseModel):
    """Typed SDK settings built from environment variables."""

    merchant_key: str
    merchant_id: str
    merchant_site_id: str
    server_host: str = INTEGRATION_HOST
    hash_algorithm: HashAlgorithm = HashAlgorithm.SHA256
    timeout: float = 10.0

    @field_validator("server_host")
    @classmethod
    def validate_server_host(cls, v: str) -> str:
        if not v:
            raise ValueError("Server host cannot be empty")
        parsed = urlparse(v)
        if parsed.scheme not in {"http", "https"}:
            raise ValueError("Server host must start with http:// or https://")
        if not parsed.netloc:
            raise ValueError("Server host must include a host")
        return v

    @field_validator("hash_algorithm", mode="before")
    @classmethod
    def normalize_hash_algorithm(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper().replace("-", "")
        return v

    def merchant_info(self) -> MerchantInfo:
        return MerchantInfo(
            merchant_key=self.merchant_key,
            merchant_id=self.merchant_id,
            merchant_site_id=self.merchant_site_id,
            server_host=self.server_host,
            hash_algorithm=self.hash_algorithm,
        )


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    merchant_key = os.environ.get("SAFECHARGE_MERCHANT_KEY")
    merchant_id = os.environ.get("SAFECHARGE_MERCHANT_ID")
    merchant_site_id = os.environ.get("SAFECHARGE_MERCHANT_SITE_ID")
    if not (merchant_key and merchant_id and merchant_site_id):
        raise ValueError(
            "SAFECHARGE_MERCHANT_KEY, SAFECHARGE_MERCHANT_ID, and "
            "SAFECHARGE_MERCHANT_SITE_ID are required"
        )
    return Settings(
        merchant_key=merchant_key,
        merchant_id=merchant_id,
        merchant_site_id=merchant_site_id,
        server_host=os.environ.get("SAFECHARGE_SERVER_HOST", INTEGRATION_HOST),
        hash_algorithm=os.environ.get("SAFECHARGE_HASH_ALGORITHM", "SHA256"),
        timeout=float(os.environ.get("SAFECHARGE_TIMEOUT", "10.0")),
    )
