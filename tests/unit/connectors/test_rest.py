"""Precise unit tests for BybitRESTClient.

Tests focus on request signing, envelope handling, and error mapping.
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import aiohttp
import pytest
from pydantic import SecretStr

from laakhay.bybit.auth import sign_rest
from laakhay.bybit.connectors import BybitRESTClient
from laakhay.bybit.connectors.rest import encode_body, encode_query
from laakhay.bybit.core import (
    BybitConfig,
    ConfigurationError,
    Credentials,
    ProviderError,
    RateLimitError,
)

CREDENTIALS = Credentials(api_key="XXXXXXXXXX", api_secret=SecretStr("YYYYYYYYYYYYYYYYYYYY"))


class _Response:
    """Minimal stand-in for aiohttp.ClientResponse."""

    def __init__(self, status: int, payload: dict) -> None:
        self.status = status
        self._payload = payload

    async def json(self, content_type=None):
        return self._payload

    async def text(self):
        return json.dumps(self._payload)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return None


def _client(status: int = 200, payload: dict | None = None, **kwargs) -> BybitRESTClient:
    client = BybitRESTClient(**kwargs)
    response = _Response(status, payload or {"retCode": 0, "retMsg": "OK", "result": {}})
    session = MagicMock()
    session.closed = False
    session.get = MagicMock(return_value=response)
    session.post = MagicMock(return_value=response)
    client._session = session
    return client


class TestEncoding:
    """Test payload encoding."""

    def test_query_drops_none(self):
        """Test None params are omitted and order kept."""
        assert encode_query({"category": "linear", "symbol": "BTCUSDT", "limit": None}) == (
            "category=linear&symbol=BTCUSDT"
        )
        assert encode_query(None) == ""

    def test_body_compact(self):
        """Test body JSON has no whitespace."""
        assert encode_body({"category": "linear", "symbol": "BTCUSDT"}) == (
            '{"category":"linear","symbol":"BTCUSDT"}'
        )
        assert encode_body({}) == ""


class TestRequests:
    """Test request construction."""

    @pytest.mark.asyncio
    async def test_public_get(self):
        """Test unsigned GET builds URL and returns result."""
        client = _client(payload={"retCode": 0, "result": {"list": [1]}})
        result = await client.get("/v5/market/tickers", {"category": "linear"})
        assert result == {"list": [1]}
        url = client.session.get.call_args.args[0]
        assert url == "https://api.bybit.com/v5/market/tickers?category=linear"

    @pytest.mark.asyncio
    async def test_signed_get_headers(self):
        """Test signed GET signs the exact query string."""
        client = _client(credentials=CREDENTIALS)
        with patch("laakhay.bybit.auth.signer.now_ms", return_value=1700000000000):
            await client.get_signed(
                "/v5/position/list", {"category": "linear", "symbol": "BTCUSDT"}
            )
        headers = client.session.get.call_args.kwargs["headers"]
        assert headers["X-BAPI-API-KEY"] == "XXXXXXXXXX"
        assert headers["X-BAPI-TIMESTAMP"] == "1700000000000"
        assert headers["X-BAPI-RECV-WINDOW"] == "5000"
        assert headers["X-BAPI-SIGN"] == (
            "728b4bf2e84aaa26a4962a47f72d66c5b027193711f5db1bbd5f78f1d3cc962a"
        )

    @pytest.mark.asyncio
    async def test_signed_post_body(self):
        """Test signed POST sends and signs the same body."""
        client = _client(credentials=CREDENTIALS, config=BybitConfig().with_recv_window(20000))
        with patch("laakhay.bybit.auth.signer.now_ms", return_value=1700000000000):
            await client.post_signed("/v5/order/cancel-all", {"category": "linear"})
        call = client.session.post.call_args
        body = call.kwargs["data"]
        headers = call.kwargs["headers"]
        assert body == '{"category":"linear"}'
        assert headers["Content-Type"] == "application/json"
        assert headers["X-BAPI-RECV-WINDOW"] == "20000"
        assert headers["X-BAPI-SIGN"] == sign_rest(CREDENTIALS, 1700000000000, 20000, body)

    @pytest.mark.asyncio
    async def test_signed_without_credentials(self):
        """Test signed calls require credentials."""
        client = _client()
        with pytest.raises(ConfigurationError):
            await client.get_signed("/v5/position/list")

    @pytest.mark.asyncio
    async def test_server_time(self):
        """Test nanosecond server time is returned in milliseconds."""
        result = {"timeSecond": "1700000000", "timeNano": "1700000000123456789"}
        client = _client(payload={"retCode": 0, "result": result})
        assert await client.server_time() == 1700000000123


class TestErrorMapping:
    """Test envelope and HTTP error mapping."""

    @pytest.mark.asyncio
    async def test_non_zero_ret_code(self):
        """Test retCode != 0 raises ProviderError."""
        client = _client(payload={"retCode": 10001, "retMsg": "params error", "result": {}})
        with pytest.raises(ProviderError) as exc_info:
            await client.get("/v5/market/tickers")
        assert exc_info.value.ret_code == 10001
        assert str(exc_info.value) == "params error"

    @pytest.mark.asyncio
    async def test_rate_limit_ret_code(self):
        """Test retCode 10006 raises RateLimitError."""
        client = _client(payload={"retCode": 10006, "retMsg": "Too many visits!"})
        with pytest.raises(RateLimitError):
            await client.get("/v5/market/tickers")

    @pytest.mark.asyncio
    async def test_http_429(self):
        """Test HTTP 429 raises RateLimitError."""
        client = _client(status=429, payload={})
        with pytest.raises(RateLimitError) as exc_info:
            await client.get("/v5/market/tickers")
        assert exc_info.value.status_code == 429

    @pytest.mark.asyncio
    async def test_http_error(self):
        """Test other HTTP errors raise ProviderError with status."""
        client = _client(status=503, payload={"error": "down"})
        with pytest.raises(ProviderError) as exc_info:
            await client.get("/v5/market/tickers")
        assert exc_info.value.status_code == 503
        assert not isinstance(exc_info.value, RateLimitError)


class TestSession:
    """Test session lifecycle."""

    @pytest.mark.asyncio
    async def test_session_created_lazily(self):
        """Test session property creates a ClientSession."""
        client = BybitRESTClient()
        assert client._session is None
        assert isinstance(client.session, aiohttp.ClientSession)
        await client.close()
        assert client._session.closed

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test async context manager closes the session."""
        async with BybitRESTClient(config=BybitConfig.testnet()) as client:
            session = client.session
        assert session.closed
