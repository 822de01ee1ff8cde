#!/usr/bin/env python3
from __future__ import annotations

import asyncio

from laakhay.bybit.auth import now_ms
from laakhay.bybit.connectors import BybitRESTClient


async def main() -> None:
    async with BybitRESTClient() as client:
        server = await client.server_time()
        print(f"server={server} local={now_ms()} skew={now_ms() - server}ms")


if __name__ == "__main__":
    asyncio.run(main())
