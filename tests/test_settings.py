"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from safecharge_sdk.domain.constants import INTEGRATION_HOST, PRODUCTION_HOST, HashAlgorithm
from safecharge_sdk.env import Settings, get_settings


@pytest.fixture
def merchant_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setenv("SAFECHARGE_MERCHANT_KEY", "key")
    monkeypatch.setenv("SAFECHARGE_MERCHANT_ID", "111")
    monkeypatch.setenv("SAFECHARGE_MERCHANT_SITE_ID", "222")
    for name in (
        "SAFECHARGE_SERVER_HOST",
        "SAFECHARGE_HASH_ALGORITHM",
        "SAFECHARGE_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGetSettings:
    def test_defaults(self, merchant_env: pytest.MonkeyPatch) -> None:
        settings = get_settings()

        assert settings.server_host == INTEGRATION_HOST
        assert settings.hash_algorithm is HashAlgorithm.SHA256
        assert settings.timeout == 10.0

    def test_overrides(self, merchant_env: pytest.MonkeyPatch) -> None:
        merchant_env.setenv("SAFECHARGE_SERVER_HOST", PRODUCTION_HOST)
        merchant_env.setenv("SAFECHARGE_HASH_ALGORITHM", "md5")
        merchant_env.setenv("SAFECHARGE_TIMEOUT", "2.5")

        settings = get_settings()

        assert settings.server_host == PRODUCTION_HOST
        assert settings.hash_algorithm is HashAlgorithm.MD5
        assert settings.timeout == 2.5

    def test_hash_algorithm_spelling_is_normalized(
        self, merchant_env: pytest.MonkeyPatch
    ) -> None:
        merchant_env.setenv("SAFECHARGE_HASH_ALGORITHM", "sha-256")
        assert get_settings().hash_algorithm is HashAlgorithm.SHA256

    def test_missing_credentials_raise(self, merchant_env: pytest.MonkeyPatch) -> None:
        merchant_env.delenv("SAFECHARGE_MERCHANT_KEY")
        with pytest.raises(ValueError, match="SAFECHARGE_MERCHANT_KEY"):
            get_settings()

    def test_merchant_info(self, merchant_env: pytest.MonkeyPatch) -> None:
        info = get_settings().merchant_info()

        assert info.merchant_key == "key"
        assert info.merchant_id == "111"
        assert info.merchant_site_id == "222"
        assert info.server_host == INTEGRATION_HOST


class TestSettingsValidation:
    @pytest.mark.parametrize("host", ["", "ftp://gateway", "https://", "gateway.test"])
    def test_invalid_server_host(self, host: str) -> None:
        with pytest.raises(ValidationError):
            Settings(merchant_key="k", merchant_id="1", merchant_site_id="2", server_host=host)

    def test_unknown_hash_algorithm(self) -> None:
        with pytest.raises(ValidationError):
            Settings(
                merchant_key="k",
                merchant_id="1",
                merchant_site_id="2",
                hash_algorithm="SHA1",
            )
