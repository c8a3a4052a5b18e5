#!/usr/bin/env python3
"""
Basic Usage Example

Reads a user's KYC status, balances and recent transactions with the async
client. Configuration comes from CELSIUS_* environment variables:

    CELSIUS_ENVIRONMENT=staging
    CELSIUS_AUTH_METHOD=user-token
    CELSIUS_PARTNER_KEY=...
    CELSIUS_USER_TOKEN=...   (used by this script only)
"""

import asyncio
import os

from celsius import AsyncCelsius, KycStatus, Pagination, configure_logging, resolve_from_env


async def main():
    configure_logging("INFO")
    user_token = os.environ["CELSIUS_USER_TOKEN"]

    print("Celsius Partner API Example")
    print("=" * 50)

    async with AsyncCelsius(resolve_from_env()) as client:
        print("\n1. KYC status...")
        status = await client.get_kyc_status(user_token)
        print(f"   Status: {status.value}")

        if status != KycStatus.PASSED:
            print("   User must pass KYC before using wallet operations")
            return

        print("\n2. Balances (fetched concurrently)...")
        summary, btc = await asyncio.gather(
            client.get_balance_summary(user_token),
            client.get_coin_balance("BTC", user_token),
        )
        print(f"   All coins: {summary}")
        print(f"   BTC:       {btc}")

        print("\n3. Latest BTC transactions...")
        page = await client.get_coin_transactions("BTC", Pagination(page=1, per_page=5), user_token)
        print(f"   Pagination: {page.pagination}")
        for tx in page:
            print(f"   - {tx}")

        print("\n4. Deposit address...")
        address = await client.get_deposit("BTC", user_token)
        print(f"   BTC deposit address: {address}")


if __name__ == "__main__":
    asyncio.run(main())
