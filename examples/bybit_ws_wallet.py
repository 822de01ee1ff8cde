#!/usr/bin/env python3
"""Stream private wallet and order updates.

Requires BYBIT_API_KEY and BYBIT_API_SECRET in the environment.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.bybit.connectors import BybitWSConnector
from laakhay.bybit.core import BybitConfig, Credentials
from laakhay.bybit.models import OrderEvent, WalletEvent


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Bybit wallet and order updates")
    p.add_argument("--testnet", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = BybitConfig.testnet() if args.testnet else BybitConfig.mainnet()
    connector = BybitWSConnector(config=config, credentials=Credentials.from_env())

    async for event in connector.stream(["wallet", "order"]):
        if isinstance(event, WalletEvent):
            for wallet in event.data:
                print(f"wallet | {wallet.account_type} equity={wallet.total_equity}")
        elif isinstance(event, OrderEvent):
            for order in event.data:
                print(f"order  | {order.symbol} {order.side} {order.order_status} qty={order.qty}")
        else:
            print(f"{event.kind.value} | {event}")


if __name__ == "__main__":
    asyncio.run(main())
