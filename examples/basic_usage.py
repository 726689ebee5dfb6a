"""
Basic usage examples for the engine client library.

This module demonstrates the synchronous and asynchronous clients and the
wallet service. Set ENGINE_URL and ENGINE_TOKEN before running it.
"""

import asyncio
from engine_client import (
    AsyncHttpClient,
    ClientError,
    ConfigurationError,
    HttpClient,
    create_engine_service,
    load_settings,
)


def synchronous_example(base_url: str, token: str):
    """Demonstrate synchronous client usage."""
    print("=== Synchronous Client Example ===\n")

    with HttpClient(base_url, access_token=token) as client:
        try:
            print("Listing wallets...")
            wallets = client.get("backend-wallet/get-all", {"page": 1, "limit": 10})
            print(f"Wallets: {wallets}\n")

            print("Creating wallet...")
            wallet = client.post(
                "/backend-wallet/create",
                {"label": "example", "type": "local"},
                options={"timeout": 30000},
            )
            print(f"Created: {wallet}\n")
        except ClientError as e:
            print(f"Request failed: {e.status_code} - {e.message}")


async def asynchronous_example(base_url: str, token: str):
    """Demonstrate asynchronous client usage."""
    print("=== Asynchronous Client Example ===\n")

    async with AsyncHttpClient(base_url, access_token=token) as client:
        try:
            first, second = await asyncio.gather(
                client.get("/backend-wallet/get-all", {"page": 1}),
                client.get("/backend-wallet/get-all", {"page": 2}),
            )
            print(f"Page 1: {first}\nPage 2: {second}\n")
        except ClientError as e:
            print(f"Request failed: {e.status_code} - {e.message}")


def service_example():
    """Demonstrate the wallet service."""
    print("=== Wallet Service Example ===\n")

    with create_engine_service(load_settings()) as service:
        try:
            print(f"Created: {service.create_wallet('example')}\n")
            print(f"All wallets: {service.get_all_wallets()}\n")
        except ClientError as e:
            print(f"Wallet call failed: {e}")


if __name__ == "__main__":
    try:
        settings = load_settings()
    except ConfigurationError as e:
        raise SystemExit(str(e))

    synchronous_example(settings.base_url, settings.engine_token)
    asyncio.run(asynchronous_example(settings.base_url, settings.engine_token))
    service_example()
