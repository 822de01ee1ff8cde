#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.bybit.connectors import BybitWSConnector
from laakhay.bybit.core import Category


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream complete Bybit tickers")
    p.add_argument("symbols", nargs="*", default=["BTCUSDT"])
    p.add_argument("--category", default="linear", choices=["linear", "inverse", "spot"])
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    connector = BybitWSConnector()
    symbols = [s.upper() for s in args.symbols]

    async for ticker in connector.stream_tickers(symbols, category=Category(args.category)):
        print(
            f"{ticker.symbol} | last={ticker.last_price} 24h={ticker.price_24h_pcnt} "
            f"vol={ticker.volume_24h}"
        )


if __name__ == "__main__":
    asyncio.run(main())
