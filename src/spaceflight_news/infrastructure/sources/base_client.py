"""
Base API Client - Common HTTP GET pattern for JSON APIs.

Provides a reusable base class with:
- Shared httpx.AsyncClient management
- Request tracing to the diagnostics log (URL, status, trimmed body)
- Consistent error isolation: every failure becomes a FetchResult failure

No retries, rate limiting or caching are applied; each call is one GET.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from typing_extensions import Self

from spaceflight_news.shared.exceptions import HTTPStatusError, NetworkError, ParseError
from spaceflight_news.shared.result import FetchResult

logger = logging.getLogger(__name__)

# Response bodies are trimmed to this many characters in diagnostics
BODY_LOG_LIMIT = 300


class BaseAPIClient:
    """
    Base class for external JSON API clients.

    Subclasses should set ``_service_name`` and can override:
    - ``_parse_response()``: Custom payload extraction

    Example:
        class MyClient(BaseAPIClient):
            _service_name = "MyAPI"

            def __init__(self):
                super().__init__(base_url="https://api.example.com")

            async def get_item(self, item_id: str) -> dict | None:
                result = await self._make_request(f"/items/{item_id}")
                return result.payload if result.ok else None
    """

    _service_name: str = "API"

    def __init__(
        self,
        base_url: str = "",
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize base client.

        Args:
            base_url: Base URL for the API (optional, can pass full URLs)
            timeout: Request timeout in seconds. None keeps the httpx default.
            headers: Default headers for all requests
            transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        client_kwargs: dict[str, Any] = {"headers": headers or {}}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _build_url(self, url: str) -> str:
        """Build full URL from path or full URL."""
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._base_url}{url}"

    async def _make_request(self, url: str, *, headers: dict[str, str] | None = None) -> FetchResult:
        """
        Make one GET request and decode the JSON body.

        The body is always read as text before parsing so it can be traced,
        whatever the status code.

        Args:
            url: Full URL or path (appended to base_url)
            headers: Additional headers for this request

        Returns:
            FetchResult holding the decoded payload, or the error that ended the request
        """
        full_url = self._build_url(url)
        logger.info(f"{self._service_name} request URL: {full_url}")

        try:
            response = await self._execute_request(full_url, headers=headers)
            body = response.text
        except httpx.TimeoutException as e:
            logger.warning(f"{self._service_name} request timed out: {e!r}")
            return FetchResult.failure(full_url, NetworkError(f"Request timeout: {e}"))
        except httpx.RequestError as e:
            logger.warning(f"{self._service_name} request failed: {e!r}")
            return FetchResult.failure(full_url, NetworkError(f"Connection failed: {e}"))
        except Exception as e:
            logger.exception(f"{self._service_name} request error: {e}")
            return FetchResult.failure(full_url, NetworkError(f"Request failed: {e}"))

        status = response.status_code
        logger.info(f"{self._service_name} status: {status}")
        logger.debug(f"{self._service_name} response body (trimmed): {body[:BODY_LOG_LIMIT]}")

        if not response.is_success:
            logger.warning(f"{self._service_name} HTTP error {status}: {response.reason_phrase}")
            return FetchResult.failure(full_url, HTTPStatusError(status), status_code=status)

        try:
            payload = self._parse_response(body)
        except ParseError as e:
            logger.warning(f"{self._service_name} payload error: {e}")
            return FetchResult.failure(full_url, e, status_code=status)

        return FetchResult.success(full_url, payload, status_code=status)

    async def _execute_request(self, url: str, *, headers: dict[str, str] | None = None) -> httpx.Response:
        """Execute the actual HTTP request. Override for custom behavior."""
        return await self._client.get(url, headers=headers or {})

    def _parse_response(self, body: str) -> Any:
        """Parse response body as JSON. Override for custom extraction logic."""
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON response ({e.msg} at position {e.pos})", source=self._service_name) from e

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
