"""
Demo entry point: create a wallet, then list all wallets.

Installed as the ``engine-demo`` console script.
"""

from typing import Optional
import logging
import sys

from .exceptions import ConfigurationError
from .wallets import EngineService, create_engine_service

logger = logging.getLogger(__name__)

DEFAULT_WALLET_LABEL = "USER_ID"


def main(label: str = DEFAULT_WALLET_LABEL, service: Optional[EngineService] = None) -> int:
    """
    Run the demo.

    Args:
        label: Label for the wallet to create
        service: Service to use, built from the environment when omitted

    Returns:
        Process exit code
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if service is not None:
        run_demo(service, label)
        return 0

    try:
        owned_service = create_engine_service()
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1

    with owned_service:
        run_demo(owned_service, label)
    return 0


def run_demo(service: EngineService, label: str) -> None:
    """Create a wallet, then list all wallets, reporting each step."""
    try:
        wallet = service.create_wallet(label)
        print(f"Wallet created:\n{wallet}")
    except Exception as e:
        print(f"Failed to create wallet: {e}", file=sys.stderr)

    try:
        wallets = service.get_all_wallets()
        print(f"All wallets:\n{wallets}")
    except Exception as e:
        print(f"Failed to get wallets: {e}", file=sys.stderr)


def run() -> None:
    """Console script entry point."""
    sys.exit(main(*sys.argv[1:2]))


if __name__ == "__main__":
    run()
