#!/usr/bin/env python3
"""
Error Handling Example

Demonstrates handling each failure kind of the Celsius SDK with the
blocking client.
"""

import os
import sys

from celsius import (
    AuthenticationError,
    Celsius,
    CelsiusError,
    ConfigurationError,
    NetworkError,
    RateLimitError,
    RemoteError,
    SignatureVerificationFailed,
)


def main():
    print("Celsius Error Handling Example")
    print("=" * 50)

    # Example 1: Configuration errors fail at construction
    print("\n1. Configuration errors...")
    try:
        Celsius(auth_method="password", partner_key="x")
    except ConfigurationError as e:
        print(f"   Rejected at construction: {e}")

    client = Celsius(
        environment=os.environ.get("CELSIUS_ENVIRONMENT", "staging"),
        auth_method="user-token",
        partner_key=os.environ.get("CELSIUS_PARTNER_KEY", "missing"),
        timeout=10.0,
    )
    user_token = os.environ.get("CELSIUS_USER_TOKEN", "missing")

    # Example 2: Telling failure kinds apart
    print("\n2. Withdrawing with specific error handling...")

    def safe_withdraw(coin: str, address: str, amount: float) -> str | None:
        """Withdraw, reporting each failure kind differently."""
        try:
            return client.withdraw(coin, {"address": address, "amount": amount}, user_token)

        except SignatureVerificationFailed as e:
            # Response could not be authenticated: possible tampering
            print(f"   ALERT - untrusted response: {e}")
            return None

        except AuthenticationError as e:
            print(f"   Credentials rejected: {e}")
            return None

        except RateLimitError as e:
            print(f"   Rate limited, retry after {e.retry_after}s")
            return None

        except RemoteError as e:
            print(f"   Server refused ({e.status_code}): {e.detail}")
            return None

        except NetworkError as e:
            # Not retried by the SDK
            print(f"   Network failure: {e}")
            return None

    tx_id = safe_withdraw("BTC", "1BoatSLRHtKNngkdXEeobR76b53LETtpyT", 0.001)
    print(f"   Result: {tx_id or 'Failed'}")

    # Example 3: Catch-all
    print("\n3. Catch-all on the base class...")
    try:
        client.get_transaction_status("does-not-exist", user_token)
    except CelsiusError as e:
        print(f"   {type(e).__name__}: {e}")

    client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
