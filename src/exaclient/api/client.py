"""Async HTTP client for the exaroton API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from exaclient import __version__
from exaclient.api.exceptions import (
    ExarotonAPIError,
    ExarotonAuthenticationError,
    ExarotonConnectionError,
    ExarotonForbiddenError,
    ExarotonNotFoundError,
    ExarotonRateLimitError,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://api.exaroton.com/v1/"
DEFAULT_TIMEOUT = 30.0

_STATUS_ERRORS: dict[int, type[ExarotonAPIError]] = {
    401: ExarotonAuthenticationError,
    403: ExarotonForbiddenError,
    404: ExarotonNotFoundError,
    429: ExarotonRateLimitError,
}


class ExarotonClient:
    """Async API client for exaroton.

    Uses a single long-lived httpx.AsyncClient to reuse TCP/TLS connections.
    The client is lazily initialized on first request.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        # Paths are relative ("servers/"), so the base must end with a slash.
        self._base_url = base_url.rstrip("/") + "/"
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Accept": "application/json",
                    "User-Agent": f"exaclient/{__version__}",
                },
                timeout=httpx.Timeout(self._timeout, connect=10.0),
                transport=self._transport,
            )
        return self._client

    async def _send(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        client = self._get_client()
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ExarotonConnectionError(
                f"Request to {path} failed: {e}"
            ) from e
        logger.debug("%s %s -> %s", method, path, response.status_code)
        self._handle_errors(response)
        return response

    async def _request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> dict[str, Any]:
        response = await self._send(method, path, **kwargs)
        if response.status_code == 204:
            return {}
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise ExarotonAPIError(
                f"Invalid JSON in response from {path}",
                status_code=response.status_code,
            ) from e

    def _handle_errors(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            body = response.json()
            msg = body.get("error") or response.text
        except Exception:
            msg = response.text
        status = response.status_code
        logger.warning("API error %s for %s: %s", status, response.url, msg)
        error_cls = _STATUS_ERRORS.get(status)
        if error_cls is not None:
            raise error_cls(msg or f"HTTP {status}", status_code=status)
        raise ExarotonAPIError(f"API error {status}: {msg}", status_code=status)

    async def get(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return await self._request("GET", path, **kwargs)

    async def get_text(self, path: str) -> str:
        """GET request that returns the response body as plain text."""
        response = await self._send("GET", path)
        return response.text

    async def get_bytes(self, path: str) -> bytes:
        """GET request that returns the raw response body."""
        response = await self._send("GET", path)
        return response.content

    async def post(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return await self._request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return await self._request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return await self._request("DELETE", path, **kwargs)

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> ExarotonClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
