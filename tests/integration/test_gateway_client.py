"""Gateway client tests against an in-process mock transport."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from safecharge_sdk.application.requests.orders import GetOrderDetailsRequest
from safecharge_sdk.application.requests.transactions import VoidTransactionRequest
from safecharge_sdk.application.responses import (
    GetOrderDetailsResponse,
    GetSessionTokenResponse,
    VoidTransactionResponse,
)
from safecharge_sdk.crypto.checksum import calculate_checksum
from safecharge_sdk.domain.constants import (
    PRODUCTION_HOST,
    APIResponseStatus,
    ChecksumOrderMapping,
)
from safecharge_sdk.domain.errors import SafechargeError
from safecharge_sdk.domain.merchant import MerchantInfo
from safecharge_sdk.infrastructure.gateway_client import (
    AsyncSafechargeClient,
    SafechargeClient,
    api_base_url,
)
from safecharge_sdk.infrastructure.http.http_client import (
    HttpRequestError,
    HttpResponseError,
)
from tests.fixtures import MERCHANT_KEY

API_PREFIX = "/ppp/api/v1/"


class FakeGateway:
    """Records requests and verifies their checksum like the real gateway would."""

    def __init__(self, responses: dict[str, dict]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, dict]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path.startswith(API_PREFIX)
        endpoint = request.url.path[len(API_PREFIX):]
        body = json.loads(request.content)
        self.calls.append((endpoint, body))
        if body["checksum"] != self._expected_checksum(endpoint, body):
            return httpx.Response(
                200,
                json={"status": "ERROR", "errCode": 1001, "reason": "Invalid checksum"},
            )
        return httpx.Response(200, json=self.responses[endpoint])

    @staticmethod
    def _expected_checksum(endpoint: str, body: dict) -> str:
        mapping = (
            ChecksumOrderMapping.TRANSACTION_ACTION
            if endpoint == "voidTransaction.do"
            else ChecksumOrderMapping.API_GENERIC_CHECKSUM_MAPPING
        )
        return calculate_checksum(body, mapping.fields, MERCHANT_KEY)


SESSION_BODY = {
    "sessionToken": "tok-123",
    "status": "SUCCESS",
    "errCode": 0,
    "reason": "",
    "version": "1.0",
}


def test_api_base_url() -> None:
    assert api_base_url(PRODUCTION_HOST) == "https://secure.safecharge.com/ppp/api/v1/"
    assert api_base_url("https://gw.test") == "https://gw.test/api/v1/"


class TestSafechargeClient:
    def test_get_session_token(self, merchant_info: MerchantInfo) -> None:
        gateway = FakeGateway({"getSessionToken.do": SESSION_BODY})

        with SafechargeClient(merchant_info, transport=httpx.MockTransport(gateway)) as client:
            response = client.get_session_token()

        assert isinstance(response, GetSessionTokenResponse)
        assert response.session_token == "tok-123"
        assert response.is_successful()
        endpoint, body = gateway.calls[0]
        assert endpoint == "getSessionToken.do"
        assert body["merchantId"] == merchant_info.merchant_id
        assert "merchantKey" not in body

    def test_session_then_order_details(self, merchant_info: MerchantInfo) -> None:
        gateway = FakeGateway(
            {
                "getSessionToken.do": SESSION_BODY,
                "getOrderDetails.do": {"status": "SUCCESS", "orderId": "o-1"},
            }
        )

        with SafechargeClient(merchant_info, transport=httpx.MockTransport(gateway)) as client:
            session = client.get_session_token()
            request = (
                GetOrderDetailsRequest.builder()
                .add_merchant_info(merchant_info)
                .add_session_token(session.session_token)
                .add_order_id("o-1")
                .build()
            )
            response = client.execute(request)

        assert isinstance(response, GetOrderDetailsResponse)
        assert response.order_id == "o-1"
        assert gateway.calls[1][1]["sessionToken"] == "tok-123"

    def test_transaction_action(self, merchant_info: MerchantInfo) -> None:
        gateway = FakeGateway(
            {
                "voidTransaction.do": {
                    "status": "SUCCESS",
                    "transactionStatus": "APPROVED",
                    "transactionId": "2",
                }
            }
        )
        request = (
            VoidTransactionRequest.builder()
            .add_merchant_info(merchant_info)
            .add_amount("5.00")
            .add_currency("EUR")
            .add_related_transaction_id("1")
            .build()
        )

        with SafechargeClient(merchant_info, transport=httpx.MockTransport(gateway)) as client:
            response = client.execute(request)

        assert isinstance(response, VoidTransactionResponse)
        assert response.is_approved()

    def test_tampered_request_gets_gateway_error(self, merchant_info: MerchantInfo) -> None:
        gateway = FakeGateway({"getSessionToken.do": SESSION_BODY})
        request = (
            GetOrderDetailsRequest.builder()
            .add_merchant_info(merchant_info)
            .add_session_token("tok-123")
            .add_order_id("o-1")
            .build()
            .model_copy(update={"merchant_site_id": "99999"})
        )

        with SafechargeClient(merchant_info, transport=httpx.MockTransport(gateway)) as client:
            response = client.execute(request)

        assert response.status is APIResponseStatus.ERROR
        assert response.err_code == 1001

    def test_http_error_status_raises(self, merchant_info: MerchantInfo) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(503, text="busy"))

        with SafechargeClient(merchant_info, transport=transport) as client:
            with pytest.raises(HttpResponseError) as exc_info:
                client.get_session_token()

        assert exc_info.value.status_code == 503
        assert exc_info.value.body == "busy"

    def test_http_error_status_is_logged(
        self, merchant_info: MerchantInfo, caplog: pytest.LogCaptureFixture
    ) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(502, text="bad"))

        with caplog.at_level(logging.WARNING):
            with SafechargeClient(merchant_info, transport=transport) as client:
                with pytest.raises(HttpResponseError):
                    client.get_session_token()

        assert any("502" in record.getMessage() for record in caplog.records)

    def test_non_object_json_body_raises(self, merchant_info: MerchantInfo) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=["x"]))

        with SafechargeClient(merchant_info, transport=transport) as client:
            with pytest.raises(HttpResponseError) as exc_info:
                client.get_session_token()

        assert exc_info.value.status_code == 200
        assert isinstance(exc_info.value, SafechargeError)

    def test_malformed_field_type_raises(self, merchant_info: MerchantInfo) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"errCode": "not-a-number"})
        )

        with SafechargeClient(merchant_info, transport=transport) as client:
            with pytest.raises(HttpResponseError):
                client.get_session_token()

    def test_unknown_status_values_are_kept(self, merchant_info: MerchantInfo) -> None:
        gateway = FakeGateway(
            {
                "voidTransaction.do": {
                    "status": "PENDING",
                    "transactionStatus": "CANCELLED",
                }
            }
        )
        request = (
            VoidTransactionRequest.builder()
            .add_merchant_info(merchant_info)
            .add_amount("5.00")
            .add_currency("EUR")
            .add_related_transaction_id("1")
            .build()
        )

        with SafechargeClient(merchant_info, transport=httpx.MockTransport(gateway)) as client:
            response = client.execute(request)

        assert isinstance(response, VoidTransactionResponse)
        assert response.status == "PENDING"
        assert response.transaction_status == "CANCELLED"
        assert not response.is_successful()
        assert not response.is_approved()

    def test_non_json_body_raises(self, merchant_info: MerchantInfo) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))

        with SafechargeClient(merchant_info, transport=transport) as client:
            with pytest.raises(HttpResponseError):
                client.get_session_token()

    def test_transport_failure_raises(self, merchant_info: MerchantInfo) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with SafechargeClient(merchant_info, transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(HttpRequestError, match="getSessionToken.do"):
                client.get_session_token()


class TestAsyncSafechargeClient:
    @pytest.mark.asyncio
    async def test_get_session_token(self, merchant_info: MerchantInfo) -> None:
        gateway = FakeGateway({"getSessionToken.do": SESSION_BODY})

        async with AsyncSafechargeClient(
            merchant_info, transport=httpx.MockTransport(gateway)
        ) as client:
            response = await client.get_session_token()

        assert response.session_token == "tok-123"
        assert gateway.calls[0][0] == "getSessionToken.do"

    @pytest.mark.asyncio
    async def test_http_error_status_raises(self, merchant_info: MerchantInfo) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="oops"))

        async with AsyncSafechargeClient(merchant_info, transport=transport) as client:
            with pytest.raises(HttpResponseError):
                await client.get_session_token()

    @pytest.mark.asyncio
    async def test_transport_failure_raises(self, merchant_info: MerchantInfo) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with AsyncSafechargeClient(
            merchant_info, transport=httpx.MockTransport(refuse)
        ) as client:
            with pytest.raises(HttpRequestError):
                await client.get_session_token()

    @pytest.mark.asyncio
    async def test_non_object_json_body_raises(self, merchant_info: MerchantInfo) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=["x"]))

        async with AsyncSafechargeClient(merchant_info, transport=transport) as client:
            with pytest.raises(HttpResponseError):
                await client.get_session_token()
