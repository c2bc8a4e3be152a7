"""Async HTTP client for the storefront REST API used by the admin screens.

Every failure, HTTP or transport, surfaces as a single :class:`ApiError` so
callers need exactly one ``except`` clause.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from storefront.client.query import ListQuery
from storefront.core.config import settings
from storefront.core.response import ListResponse

logger = logging.getLogger(__name__)

ListResult = ListResponse[dict[str, Any]]


class ApiError(Exception):
    """Normalized API failure: status code, human message, optional error code."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: Optional[str] = None,
        payload: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.payload = payload
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, code={self.code!r}, message={self.message!r})"


class ApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        headers: Optional[dict[str, str]] = None,
        client_id: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        default_headers = {"Content-Type": "application/json"}
        if client_id:
            default_headers["X-Client-ID"] = client_id
        default_headers.update(headers or {})
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=default_headers,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, **kwargs: Any) -> ApiClient:
        kwargs.setdefault("timeout", settings.api_timeout)
        kwargs.setdefault("client_id", settings.default_client_id)
        return cls(settings.api_base_url, **kwargs)

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body (None for 204)."""
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise ApiError("Request timed out", status_code=504) from exc
        except httpx.TransportError as exc:
            logger.warning("%s %s unreachable: %s", method, path, exc)
            raise ApiError("Network error - server unreachable", status_code=503) from exc

        if response.is_error:
            raise self._error_from_response(response)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError("Malformed response from server", status_code=502) from exc

    async def fetch_page(self, path: str, query: ListQuery) -> ListResult:
        """``GET <path>?page=&limit=[&sortBy=&sortOrder=]`` parsed into a ListResult."""
        body = await self.request("GET", path, params=query.to_request_params())
        try:
            return ListResult.model_validate(body)
        except PydanticValidationError as exc:
            raise ApiError("Malformed list response from server", status_code=502, payload=body) from exc

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    # ------------------------------------------------------------------
    # Error normalization
    # ------------------------------------------------------------------

    @staticmethod
    def _error_from_response(response: httpx.Response) -> ApiError:
        message = response.reason_phrase or f"HTTP {response.status_code}"
        code = None
        payload: Any = None
        try:
            payload = response.json()
        except ValueError:
            payload = response.text or None

        if isinstance(payload, dict):
            error = payload.get("error")
            if isinstance(error, dict):
                message = error.get("message") or message
                code = error.get("code")
            elif isinstance(error, str):
                message = error
            elif isinstance(payload.get("detail"), str):
                message = payload["detail"]

        logger.debug(
            "%s %s failed with %s: %s",
            response.request.method, response.request.url, response.status_code, message,
        )
        return ApiError(message, status_code=response.status_code, code=code, payload=payload)
