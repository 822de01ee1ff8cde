"""HMAC-SHA256 request signing shared by REST and websocket auth.

Canonical strings:
    REST:    ``timestamp + api_key + recv_window + (query_string | json_body)``
    WS auth: ``"GET/realtime" + expiry_ms``

Both are signed over their UTF-8 bytes and rendered as lowercase hex.
"""

from __future__ import annotations

import hashlib
import hmac
import time

from ..core.config import Credentials

WS_AUTH_PREFIX = "GET/realtime"


def now_ms() -> int:
    """Current wall-clock time in milliseconds."""
    return int(time.time() * 1000)


def sign(secret: str | bytes, message: str) -> str:
    """Hex-encoded HMAC-SHA256 of ``message`` keyed by ``secret``."""
    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    return hmac.new(key, message.encode("utf-8"), hashlib.sha256).hexdigest()


def rest_canonical_string(
    timestamp: int | str,
    api_key: str,
    recv_window: int | str,
    payload: str = "",
) -> str:
    return f"{timestamp}{api_key}{recv_window}{payload}"


def sign_rest(
    credentials: Credentials,
    timestamp: int | str,
    recv_window: int | str,
    payload: str = "",
) -> str:
    """Signature for a REST request.

    Args:
        credentials: API key pair
        timestamp: Request timestamp in milliseconds
        recv_window: Receive window in milliseconds
        payload: Query string for GET, raw JSON body for POST

    Returns:
        Lowercase hex signature
    """
    message = rest_canonical_string(timestamp, credentials.api_key, recv_window, payload)
    return sign(credentials.api_secret.get_secret_value(), message)


def sign_ws_auth(credentials: Credentials, expiry_ms: int) -> str:
    """Signature for the websocket ``auth`` operation."""
    return sign(credentials.api_secret.get_secret_value(), f"{WS_AUTH_PREFIX}{expiry_ms}")


def build_rest_headers(
    credentials: Credentials,
    recv_window: int,
    payload: str = "",
    *,
    timestamp: int | None = None,
    content_type: bool = False,
) -> dict[str, str]:
    """``X-BAPI-*`` headers for a signed REST call."""
    ts = now_ms() if timestamp is None else timestamp
    headers = {
        "X-BAPI-API-KEY": credentials.api_key,
        "X-BAPI-TIMESTAMP": str(ts),
        "X-BAPI-RECV-WINDOW": str(recv_window),
        "X-BAPI-SIGN": sign_rest(credentials, ts, recv_window, payload),
    }
    if content_type:
        headers["Content-Type"] = "application/json"
    return headers
