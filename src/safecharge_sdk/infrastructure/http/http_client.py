from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type
from types import TracebackType

import httpx

from ...domain.errors import SafechargeError

logger = logging.getLogger(__name__)


class HttpRequestError(SafechargeError):
    """Raised when the request never got a response (connection, timeout...)."""


class HttpResponseError(SafechargeError):
    """Raised when the gateway answers with a non-successful HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Gateway returned HTTP {status_code}")


def _check_response(resp: httpx.Response) -> httpx.Response:
    if resp.is_error:
        logger.warning(
            "%s %s returned HTTP %s", resp.request.method, resp.request.url, resp.status_code
        )
        raise HttpResponseError(resp.status_code, resp.text)
    return resp


class HttpClient:
    """Thin synchronous HTTP client wrapper around httpx.

    - Normalizes base URLs and paths.
    - Applies a default timeout.
    - Raises for transport failures and non-successful responses.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    def post(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        url = self._url(path)
        try:
            resp = self._client.post(url, json=json, **kwargs)
        except httpx.HTTPError as e:
            logger.exception("POST %s failed", url)
            raise HttpRequestError(f"POST {url} failed: {e}") from e
        return _check_response(resp)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()


class AsyncHttpClient:
    """Thin asynchronous HTTP client wrapper around httpx.AsyncClient.

    Mirrors ``HttpClient`` with async methods.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def post(
        self,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        url = self._url(path)
        try:
            resp = await self._client.post(url, json=json, **kwargs)
        except httpx.HTTPError as e:
            logger.exception("POST %s failed", url)
            raise HttpRequestError(f"POST {url} failed: {e}") from e
        return _check_response(resp)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
