from __future__ import annotations

import logging
from typing import Optional, Type, cast
from types import TracebackType

import httpx
from pydantic import ValidationError

from ..application.requests.base import SafechargeRequest
from ..application.requests.orders import GetSessionTokenRequest
from ..application.responses import GetSessionTokenResponse, SafechargeResponse
from ..domain.constants import API_PATH
from ..domain.merchant import MerchantInfo
from .http.http_client import AsyncHttpClient, HttpClient, HttpResponseError

logger = logging.getLogger(__name__)


def api_base_url(server_host: str) -> str:
    """Join the gateway host with the REST API prefix."""
    return f"{server_host.rstrip('/')}/{API_PATH}"


def _parse_response(
    request: SafechargeRequest, resp: httpx.Response
) -> SafechargeResponse:
    try:
        body = resp.json()
    except ValueError as e:
        logger.exception("Non-JSON %s response body", request.endpoint)
        raise HttpResponseError(resp.status_code, resp.text) from e
    try:
        response = request.response_type.model_validate(body)
    except ValidationError as e:
        logger.exception("Unexpected %s response body", request.endpoint)
        raise HttpResponseError(resp.status_code, resp.text) from e
    if not response.is_successful():
        logger.warning(
            "%s returned %s (errCode=%s, reason=%s)",
            request.endpoint,
            response.status,
            response.err_code,
            response.reason,
        )
    return response


class SafechargeClient:
    """Synchronous client that sends signed requests to the gateway REST API.

    Requests are expected to come out of their builders already signed; the
    client only posts their wire form and validates the matching response DTO.
    """

    def __init__(
        self,
        merchant_info: MerchantInfo,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._merchant_info = merchant_info
        self._http = HttpClient(
            api_base_url(merchant_info.server_host),
            timeout=timeout,
            transport=transport,
        )

    def execute(self, request: SafechargeRequest) -> SafechargeResponse:
        logger.debug(
            "Sending %s (clientRequestId=%s)",
            request.endpoint,
            request.client_request_id,
        )
        resp = self._http.post(request.endpoint, json=request.to_wire())
        return _parse_response(request, resp)

    def get_session_token(self) -> GetSessionTokenResponse:
        """Open a gateway session for the configured merchant."""
        request = (
            GetSessionTokenRequest.builder()
            .add_merchant_info(self._merchant_info)
            .build()
        )
        return cast(GetSessionTokenResponse, self.execute(request))

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "SafechargeClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()


class AsyncSafechargeClient:
    """Asynchronous client for the gateway REST API.

    Mirrors `SafechargeClient` but uses `AsyncHttpClient` and async methods.
    """

    def __init__(
        self,
        merchant_info: MerchantInfo,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._merchant_info = merchant_info
        self._http = AsyncHttpClient(
            api_base_url(merchant_info.server_host),
            timeout=timeout,
            transport=transport,
        )

    async def execute(self, request: SafechargeRequest) -> SafechargeResponse:
        logger.debug(
            "Sending %s (clientRequestId=%s)",
            request.endpoint,
            request.client_request_id,
        )
        resp = await self._http.post(request.endpoint, json=request.to_wire())
        return _parse_response(request, resp)

    async def get_session_token(self) -> GetSessionTokenResponse:
        request = (
            GetSessionTokenRequest.builder()
            .add_merchant_info(self._merchant_info)
            .build()
        )
        return cast(GetSessionTokenResponse, await self.execute(request))

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncSafechargeClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
