"""Duplex websocket connection to one Bybit endpoint.

Architecture:
    ``Connection`` owns exactly one socket. It performs the transport
    handshake, the optional application-level ``auth`` exchange, and raw
    frame I/O. It never reconnects: any transport failure surfaces as a
    ``TransportError`` and the connection is finished.

Design Decisions:
    - No ack wait after ``auth``: rejection shows up later as a control
      frame with ``success: false`` or as the server closing the socket
    - No timer-driven app-level ping; ``ping()`` is caller-driven and
      protocol-level pings stay on via ``TransportConfig``
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from ...auth.signer import now_ms, sign_ws_auth
from ...core.config import DEFAULT_RECV_WINDOW_MS, Credentials, TransportConfig
from ...core.enums import OrderOp
from ...core.exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_AUTH_WINDOW_MS = 10_000


def generate_req_id(length: int = 8) -> str:
    """Random request id echoed back by the server on acks."""
    return uuid.uuid4().hex[:length]


class Connection:
    """One open websocket to a public or private endpoint."""

    def __init__(self, url: str, ws: Any, *, private: bool = False) -> None:
        self.url = url
        self.private = private
        self._ws = ws
        self._closed = False

    @classmethod
    async def connect(
        cls,
        url: str,
        *,
        private: bool = False,
        config: TransportConfig | None = None,
    ) -> Connection:
        """Open the socket.

        Raises:
            TransportError: On DNS, TLS, refused-connection or handshake failure
        """
        conf = config or TransportConfig()
        try:
            ws = await websockets.connect(url, **conf.connect_kwargs())
        except (OSError, TimeoutError, WebSocketException) as e:
            raise TransportError(f"Failed to connect to {url}: {e}", url=url) from e
        logger.debug(f"Connected to {url} (private={private})")
        return cls(url, ws, private=private)

    @property
    def is_open(self) -> bool:
        return not self._closed

    async def authenticate(
        self,
        credentials: Credentials,
        validity_window_ms: int | None = None,
    ) -> str:
        """Send the ``auth`` control frame.

        The signature covers ``"GET/realtime" + expiry`` where
        ``expiry = now_ms + validity_window_ms``.

        Returns:
            The ``req_id`` used, so callers can match the ack
        """
        window = DEFAULT_AUTH_WINDOW_MS if validity_window_ms is None else validity_window_ms
        expiry = now_ms() + window
        signature = sign_ws_auth(credentials, expiry)
        req_id = generate_req_id()
        await self.send_json(
            {
                "req_id": req_id,
                "op": "auth",
                "args": [credentials.api_key, expiry, signature],
            }
        )
        logger.debug(f"Sent auth for key {credentials.api_key[:4]}*** expiring at {expiry}")
        return req_id

    async def ping(self) -> str:
        """Send an application-level ``ping``; the pong arrives as a control event."""
        req_id = generate_req_id()
        await self.send_json({"req_id": req_id, "op": "ping"})
        return req_id

    async def send_order(
        self,
        op: OrderOp | str,
        args: list[dict[str, Any]],
        recv_window: int = DEFAULT_RECV_WINDOW_MS,
    ) -> str:
        """Send one order-entry request on an authenticated ``/trade`` socket.

        The frame carries its own ``X-BAPI-TIMESTAMP`` / ``X-BAPI-RECV-WINDOW``
        header; the exchange rejects it once ``recv_window`` has elapsed.

        Returns:
            The ``reqId`` echoed back on the matching ``TradeStreamEvent``

        Raises:
            ValueError: If ``op`` is not an order-entry operation
            TransportError: If the connection is closed or the write fails
        """
        order_op = OrderOp(op)
        if not self.private:
            logger.warning(f"Sending {order_op.value} on unauthenticated {self.url}")
        req_id = generate_req_id(16)
        await self.send_json(
            {
                "reqId": req_id,
                "header": {
                    "X-BAPI-TIMESTAMP": str(now_ms()),
                    "X-BAPI-RECV-WINDOW": str(recv_window),
                },
                "op": order_op.value,
                "args": args,
            }
        )
        logger.debug(f"Sent {order_op.value} ({len(args)} orders) as {req_id}")
        return req_id

    async def send_json(self, payload: dict[str, Any]) -> None:
        await self.send_raw(json.dumps(payload))

    async def send_raw(self, text: str) -> None:
        """Write one text frame.

        Raises:
            TransportError: If the connection is closed or the write fails
        """
        if self._closed:
            raise TransportError("Connection is closed", url=self.url)
        try:
            await self._ws.send(text)
        except ConnectionClosed as e:
            self._closed = True
            raise TransportError(f"Connection closed while sending: {e}", url=self.url) from e
        except (OSError, WebSocketException) as e:
            raise TransportError(f"Send failed: {e}", url=self.url) from e

    async def recv(self) -> Any:
        """Read the next frame, JSON-decoded when possible.

        Non-JSON text frames are returned as raw strings.

        Raises:
            TransportError: When the server closes the socket or the read fails
        """
        if self._closed:
            raise TransportError("Connection is closed", url=self.url)
        try:
            message = await self._ws.recv()
        except ConnectionClosed as e:
            self._closed = True
            raise TransportError(f"Connection closed by server: {e}", url=self.url) from e
        except (OSError, WebSocketException) as e:
            self._closed = True
            raise TransportError(f"Receive failed: {e}", url=self.url) from e

        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")
        try:
            return json.loads(message)
        except json.JSONDecodeError:
            logger.warning(f"Failed to parse message: {message[:200]}")
            return message

    async def close(self) -> None:
        """Close the socket. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._ws.close()
        except (OSError, WebSocketException) as e:
            logger.debug(f"Error while closing {self.url}: {e}")

    async def __aenter__(self) -> Connection:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
