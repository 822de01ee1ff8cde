"""Custom exception hierarchy."""

from __future__ import annotations


class BybitError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(BybitError):
    """Client configuration is incomplete (e.g. missing credentials)."""

    pass


class TransportError(BybitError):
    """Connect, send or receive failure on a streaming connection.

    Terminal for the connection that raised it. The library never retries;
    callers re-run connect -> authenticate -> subscribe themselves.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class DecodeError(BybitError):
    """A frame matched a known topic but its payload failed validation.

    Reported per frame. It never terminates the stream.
    """

    def __init__(self, message: str, topic: str | None = None) -> None:
        super().__init__(message)
        self.topic = topic


class ChannelSendError(BybitError):
    """Event could not be handed to its sink (sink already closed)."""

    pass


class ProviderError(BybitError):
    """Error returned by the Bybit REST API."""

    def __init__(
        self,
        message: str,
        ret_code: int | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.ret_code = ret_code
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Request rate limit exceeded."""

    def __init__(self, message: str, ret_code: int | None = 10006) -> None:
        super().__init__(message, ret_code=ret_code, status_code=429)
