"""Signed REST helper.

Thin aiohttp wrapper that signs requests with the same signer used for
websocket auth. It returns the raw ``result`` object of Bybit's response
envelope; endpoint-specific response models are out of scope.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import urlencode

import aiohttp

from laakhay.bybit.auth.signer import build_rest_headers
from laakhay.bybit.core import (
    BybitConfig,
    ConfigurationError,
    Credentials,
    ProviderError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

RATE_LIMIT_RET_CODE = 10006


def encode_query(params: dict[str, Any] | None) -> str:
    """Query string exactly as it is sent and signed."""
    if not params:
        return ""
    return urlencode({k: v for k, v in params.items() if v is not None})


def encode_body(body: dict[str, Any] | None) -> str:
    """JSON body exactly as it is sent and signed."""
    if not body:
        return ""
    return json.dumps(body, separators=(",", ":"))


class BybitRESTClient:
    """Async REST client for public and signed Bybit v5 calls."""

    def __init__(
        self,
        *,
        config: BybitConfig | None = None,
        credentials: Credentials | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.config = config or BybitConfig.mainnet()
        self.credentials = credentials
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, headers={"User-Agent": "laakhay-bybit"}
            )
        return self._session

    def _url(self, path: str, query: str = "") -> str:
        url = f"{self.config.rest_endpoint.rstrip('/')}/{path.lstrip('/')}"
        return f"{url}?{query}" if query else url

    def _require_credentials(self) -> Credentials:
        if self.credentials is None:
            raise ConfigurationError("Signed requests require credentials")
        return self.credentials

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Unsigned GET."""
        url = self._url(path, encode_query(params))
        async with self.session.get(url) as response:
            return await self._handle(response)

    async def get_signed(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Signed GET; the query string is the signed payload."""
        credentials = self._require_credentials()
        query = encode_query(params)
        headers = build_rest_headers(credentials, self.config.recv_window, query)
        async with self.session.get(self._url(path, query), headers=headers) as response:
            return await self._handle(response)

    async def post_signed(self, path: str, body: dict[str, Any] | None = None) -> Any:
        """Signed POST; the raw JSON body is the signed payload."""
        credentials = self._require_credentials()
        payload = encode_body(body)
        headers = build_rest_headers(
            credentials, self.config.recv_window, payload, content_type=True
        )
        async with self.session.post(self._url(path), data=payload, headers=headers) as response:
            return await self._handle(response)

    async def server_time(self) -> int:
        """Server time in milliseconds (``/v5/market/time``)."""
        result = await self.get("/v5/market/time")
        return int(result["timeNano"]) // 1_000_000

    async def _handle(self, response: aiohttp.ClientResponse) -> Any:
        if response.status == 429:
            raise RateLimitError("HTTP 429 Too Many Requests", ret_code=None)
        if response.status != 200:
            text = await response.text()
            raise ProviderError(
                f"HTTP {response.status}: {text[:200]}", status_code=response.status
            )

        payload = await response.json(content_type=None)
        ret_code = int(payload.get("retCode", 0))
        if ret_code == RATE_LIMIT_RET_CODE:
            raise RateLimitError(payload.get("retMsg", "Rate limit exceeded"))
        if ret_code != 0:
            message = payload.get("retMsg", "Unknown error")
            logger.warning(f"Bybit returned retCode={ret_code}: {message}")
            raise ProviderError(message, ret_code=ret_code, status_code=response.status)
        return payload.get("result")

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> BybitRESTClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
