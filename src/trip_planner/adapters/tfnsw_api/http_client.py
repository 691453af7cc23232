"""HTTP client for Transport for NSW Open Data requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from trip_planner.adapters.api_rate_limiter import ApiRateLimiter
from trip_planner.adapters.api_request_logger import log_api_request
from trip_planner.adapters.tfnsw_api.constants import COMMON_PARAMS, DEFAULT_HEADERS
from trip_planner.domain.errors import ApiError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class TfnswHttpClient:
    """Authenticated GET requests against api.transport.nsw.gov.au.

    JSON endpoints raise ApiError on failure. Binary feed requests return the
    status code alongside the body so the caller decides how to degrade.
    """

    def __init__(
        self,
        session: "ClientSession",
        base_url: str,
        timeout_seconds: int = 15,
        min_delay_seconds: float = 0.0,
    ) -> None:
        """Initialize with an aiohttp session and connection settings."""
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._rate_limiter = ApiRateLimiter.shared("tfnsw_api", min_delay_seconds)

    def url_for(self, path: str) -> str:
        """Absolute URL for an API path."""
        return f"{self._base_url}{path}"

    @staticmethod
    def _headers(api_key: str | None) -> dict[str, str]:
        if not api_key:
            raise ApiError("API key missing")
        return {**DEFAULT_HEADERS, "Authorization": f"apikey {api_key}"}

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        retry_after = response.headers.get("Retry-After")
        extra_info_str = f" [Retry-After: {retry_after}]" if retry_after else ""
        logger.error(
            f"TfNSW API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type}){extra_info_str}"
        )

    async def get_json(self, path: str, params: dict[str, Any], api_key: str | None) -> Any:
        """GET a trip planner endpoint and decode its JSON body.

        Args:
            path: Endpoint path relative to the base URL.
            params: Endpoint-specific query parameters.
            api_key: Credential for the Authorization header.

        Returns:
            Decoded JSON document.

        Raises:
            ApiError: If the key is missing, the request fails, or the status is not 200.
        """
        headers = self._headers(api_key)
        url = self.url_for(path)
        query = {**COMMON_PARAMS, **params}
        log_api_request("GET", url, query, headers)

        await self._rate_limiter.acquire()
        try:
            async with self._session.get(
                url, params=query, headers=headers, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    await self._log_error_response(response, url)
                    reason = response.reason or "request failed"
                    raise ApiError(f"API error: {reason}", response.status)
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ApiError(f"Request to {path} failed: {e}") from e

    async def get_bytes(self, path: str, api_key: str | None) -> tuple[int, bytes]:
        """GET a binary feed and return its status code and body.

        Raises:
            ApiError: If the key is missing or the connection fails.
        """
        headers = {**self._headers(api_key), "Accept": "application/x-google-protobuf"}
        url = self.url_for(path)
        log_api_request("GET", url, None, headers)

        await self._rate_limiter.acquire()
        try:
            async with self._session.get(url, headers=headers, timeout=self._timeout) as response:
                if response.status != 200:
                    await self._log_error_response(response, url)
                    return response.status, b""
                return response.status, await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ApiError(f"Request to {path} failed: {e}") from e
