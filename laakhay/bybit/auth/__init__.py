"""Request signing."""

from .signer import (
    WS_AUTH_PREFIX,
    build_rest_headers,
    now_ms,
    sign,
    sign_rest,
    sign_ws_auth,
)

__all__ = [
    "WS_AUTH_PREFIX",
    "build_rest_headers",
    "now_ms",
    "sign",
    "sign_rest",
    "sign_ws_auth",
]
