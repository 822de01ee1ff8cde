#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.bybit.connectors import BybitWSConnector
from laakhay.bybit.core import Category


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Bybit order book frames")
    p.add_argument("symbol", nargs="?", default="BTCUSDT")
    p.add_argument("--depth", type=int, default=50, choices=[1, 50, 200, 500])
    p.add_argument("--category", default="linear", choices=[c.value for c in Category])
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    connector = BybitWSConnector()
    subs = [(args.depth, args.symbol.upper())]

    async for event in connector.stream_orderbook(subs, category=Category(args.category)):
        book = event.data
        print(
            f"{event.timestamp} | {event.event_type:8} | {book.symbol} u={book.update_id} "
            f"bid={book.best_bid} ask={book.best_ask}"
        )


if __name__ == "__main__":
    asyncio.run(main())
