"""Topic string grammar.

Public topics are ``<channel>[.<granularity>].<symbol>``, e.g.
``orderbook.50.BTCUSDT``, ``kline.1.ETHUSDT``, ``tickers.BTCUSDT``.
Private topics are ``<channel>[.<category>]``, e.g. ``position``,
``order.spot``, ``execution.fast.linear``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Category, Channel

_CHANNELS = {channel.value: channel for channel in Channel}


@dataclass(frozen=True)
class Topic:
    """Parsed topic: channel plus its optional granularity, symbol and category.

    Symbols are normalised to upper case, the only case Bybit accepts, so
    ``Topic.parse(Topic.kline("1", "ethusdt").build()).symbol == "ETHUSDT"``.
    """

    channel: Channel
    symbol: str | None = None
    granularity: str | None = None
    category: Category | None = None

    def __post_init__(self) -> None:
        if self.symbol is not None:
            object.__setattr__(self, "symbol", self.symbol.upper())
        if self.channel.is_private:
            if self.symbol is not None or self.granularity is not None:
                raise ValueError(f"{self.channel.value} topics take no symbol or granularity")
            return
        if self.category is not None:
            raise ValueError(f"{self.channel.value} topics take no category")
        if not self.symbol:
            raise ValueError(f"{self.channel.value} topics require a symbol")
        if self.channel.has_granularity and not self.granularity:
            raise ValueError(f"{self.channel.value} topics require a granularity")
        if not self.channel.has_granularity and self.granularity is not None:
            raise ValueError(f"{self.channel.value} topics take no granularity")

    def __str__(self) -> str:
        return self.build()

    def build(self) -> str:
        """Render the wire topic string."""
        if self.channel.is_private:
            if self.category is None:
                return self.channel.value
            return f"{self.channel.value}.{self.category.value}"
        if self.granularity is not None:
            return f"{self.channel.value}.{self.granularity}.{self.symbol}"
        return f"{self.channel.value}.{self.symbol}"

    @classmethod
    def parse(cls, topic: str) -> Topic:
        """Parse a wire topic string.

        Raises:
            ValueError: If the channel is unknown or the segment count is wrong
        """
        channel = channel_of(topic)
        if channel is None:
            raise ValueError(f"Unknown topic channel: {topic!r}")

        rest = topic[len(channel.value) :].lstrip(".")
        parts = rest.split(".") if rest else []

        if channel.is_private:
            if len(parts) > 1:
                raise ValueError(f"Malformed private topic: {topic!r}")
            return cls(channel=channel, category=Category(parts[0]) if parts else None)

        if channel.has_granularity:
            if len(parts) != 2:
                raise ValueError(f"Expected <channel>.<granularity>.<symbol>: {topic!r}")
            return cls(channel=channel, granularity=parts[0], symbol=parts[1])

        if len(parts) != 1:
            raise ValueError(f"Expected <channel>.<symbol>: {topic!r}")
        return cls(channel=channel, symbol=parts[0])

    # Builders

    @classmethod
    def orderbook(cls, depth: int | str, symbol: str) -> Topic:
        return cls(Channel.ORDERBOOK, symbol=symbol, granularity=str(depth))

    @classmethod
    def trades(cls, symbol: str) -> Topic:
        return cls(Channel.PUBLIC_TRADE, symbol=symbol)

    @classmethod
    def tickers(cls, symbol: str) -> Topic:
        return cls(Channel.TICKERS, symbol=symbol)

    @classmethod
    def kline(cls, interval: str, symbol: str) -> Topic:
        return cls(Channel.KLINE, symbol=symbol, granularity=str(interval))

    @classmethod
    def liquidation(cls, symbol: str) -> Topic:
        return cls(Channel.LIQUIDATION, symbol=symbol)

    @classmethod
    def private(cls, channel: Channel, category: Category | None = None) -> Topic:
        return cls(channel, category=category)


def channel_of(topic: str) -> Channel | None:
    """Return the channel a topic string belongs to, or None if unknown."""
    if topic == Channel.FAST_EXECUTION.value or topic.startswith(
        Channel.FAST_EXECUTION.value + "."
    ):
        return Channel.FAST_EXECUTION
    head = topic.split(".", 1)[0]
    return _CHANNELS.get(head)


def symbol_of(topic: str) -> str | None:
    """Trailing symbol of a public topic string (None for private topics)."""
    channel = channel_of(topic)
    if channel is None or channel.is_private:
        return None
    return topic.rsplit(".", 1)[-1] or None
