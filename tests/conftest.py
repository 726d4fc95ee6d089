"""Shared pytest fixtures for SDK tests."""

from __future__ import annotations

import pytest

from safecharge_sdk.domain.constants import INTEGRATION_HOST, HashAlgorithm
from safecharge_sdk.domain.merchant import MerchantInfo
from tests.fixtures import MERCHANT_ID, MERCHANT_KEY, MERCHANT_SITE_ID


@pytest.fixture
def merchant_info() -> MerchantInfo:
    """Merchant credentials pointing at the integration host."""
    return MerchantInfo(
        merchant_key=MERCHANT_KEY,
        merchant_id=MERCHANT_ID,
        merchant_site_id=MERCHANT_SITE_ID,
        server_host=INTEGRATION_HOST,
    )


@pytest.fixture
def md5_merchant_info() -> MerchantInfo:
    return MerchantInfo(
        merchant_key=MERCHANT_KEY,
        merchant_id=MERCHANT_ID,
        merchant_site_id=MERCHANT_SITE_ID,
        server_host=INTEGRATION_HOST,
        hash_algorithm=HashAlgorithm.MD5,
    )
