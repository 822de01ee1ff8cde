#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.bybit.connectors import BybitWSConnector
from laakhay.bybit.core import Category


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Bybit public trades for symbols")
    p.add_argument("symbols", nargs="*", default=["BTCUSDT"])
    p.add_argument("--category", default="linear", choices=[c.value for c in Category])
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    connector = BybitWSConnector()
    symbols = [s.upper() for s in args.symbols]

    async for trade in connector.stream_trades(symbols, category=Category(args.category)):
        print(
            f"{trade.timestamp} | {trade.symbol} | {trade.side} "
            f"price={trade.price} qty={trade.volume}"
        )


if __name__ == "__main__":
    asyncio.run(main())
