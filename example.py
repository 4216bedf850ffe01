"""Example usage of the Coincheck SDK."""

import asyncio
import os

from coincheck_sdk import APIError, CoincheckClient, LogLevel, PaginationRequest, SortOrder


async def main():
    async with CoincheckClient(
        api_key=os.environ["COINCHECK_API_KEY"],
        api_secret=os.environ["COINCHECK_API_SECRET"],
        log_level=LogLevel.INFO,
    ) as client:
        # ====================================================================
        # Public
        # ====================================================================

        ticker = await client.ticker()
        print(f"BTC/JPY last={ticker.last} bid={ticker.bid} ask={ticker.ask} volume={ticker.volume}")

        # ====================================================================
        # Private
        # ====================================================================

        history = await client.order_history(PaginationRequest(limit=10, order=SortOrder.DESC))
        print(f"\nLast {len(history.items)} transactions:")
        for tx in history.items:
            print(f"  - {tx.created_at:%Y-%m-%d %H:%M} {tx.side} {tx.pair} @ {tx.rate}")

        deposits = await client.deposit_history("BTC")
        print(f"\n{len(deposits.deposits)} BTC deposits")

        try:
            opens = await client.open_orders()
            print(f"{len(opens.orders)} open orders")
        except APIError as e:
            print(f"Could not list open orders: {e.message}")


if __name__ == "__main__":
    asyncio.run(main())
