"""Client configuration: endpoints, receive window and API credentials.

Architecture:
    Configuration is explicit and immutable. ``Credentials`` are passed to the
    signer and to private connections by the caller; nothing in the library
    reads keys from global state except the opt-in ``Credentials.from_env``.

Design Decisions:
    - Pydantic v2 frozen models: validated once, safe to share
    - SecretStr for key material: never leaks into reprs or logs
    - Named constructors for mainnet/testnet instead of string flags
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from .enums import WebsocketAPI
from .exceptions import ConfigurationError

DEFAULT_REST_ENDPOINT = "https://api.bybit.com"
DEFAULT_WS_ENDPOINT = "wss://stream.bybit.com/v5"
TESTNET_REST_ENDPOINT = "https://api-testnet.bybit.com"
TESTNET_WS_ENDPOINT = "wss://stream-testnet.bybit.com/v5"

DEFAULT_RECV_WINDOW_MS = 5000

API_KEY_ENV = "BYBIT_API_KEY"
API_SECRET_ENV = "BYBIT_API_SECRET"


class Credentials(BaseModel):
    """API key pair used for REST signing and private websocket auth."""

    api_key: str = Field(..., min_length=1)
    api_secret: SecretStr

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_env(
        cls,
        key_var: str = API_KEY_ENV,
        secret_var: str = API_SECRET_ENV,
    ) -> Credentials:
        """Build credentials from environment variables.

        Raises:
            ConfigurationError: If either variable is unset or empty
        """
        api_key = os.environ.get(key_var, "")
        api_secret = os.environ.get(secret_var, "")
        if not api_key or not api_secret:
            raise ConfigurationError(f"Both {key_var} and {secret_var} must be set")
        return cls(api_key=api_key, api_secret=SecretStr(api_secret))


class BybitConfig(BaseModel):
    """Endpoints and signing window for one Bybit environment."""

    rest_endpoint: str = DEFAULT_REST_ENDPOINT
    ws_endpoint: str = DEFAULT_WS_ENDPOINT
    recv_window: int = Field(default=DEFAULT_RECV_WINDOW_MS, gt=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def mainnet(cls) -> BybitConfig:
        return cls()

    @classmethod
    def testnet(cls) -> BybitConfig:
        return cls(rest_endpoint=TESTNET_REST_ENDPOINT, ws_endpoint=TESTNET_WS_ENDPOINT)

    def with_recv_window(self, recv_window: int) -> BybitConfig:
        """Return a copy using a different receive window (milliseconds)."""
        return self.model_copy(update={"recv_window": recv_window})

    def ws_url(self, api: WebsocketAPI) -> str:
        """Full websocket URL for an endpoint path."""
        return f"{self.ws_endpoint.rstrip('/')}{api.value}"


@dataclass
class TransportConfig:
    """Socket tuning passed through to ``websockets.connect``."""

    ping_interval: float | None = 20
    ping_timeout: float | None = 10
    open_timeout: float | None = 10
    close_timeout: float = 10
    max_size: int | None = None  # bytes; None = websockets default
    max_queue: int | None = 1024  # number of messages queued; None = unlimited

    def connect_kwargs(self) -> dict[str, object]:
        """Keyword arguments for ``websockets.connect``."""
        kwargs: dict[str, object] = {
            "ping_interval": self.ping_interval,
            "ping_timeout": self.ping_timeout,
            "open_timeout": self.open_timeout,
            "close_timeout": self.close_timeout,
        }
        # Only include size/queue if not None to keep library defaults
        if self.max_size is not None:
            kwargs["max_size"] = self.max_size
        if self.max_queue is not None:
            kwargs["max_queue"] = self.max_queue
        return kwargs
