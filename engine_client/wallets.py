"""
Wallet service layer.

EngineService talks to any WalletBackend; HttpWalletBackend implements the
backend over HttpClient against the engine's backend-wallet endpoints.
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable
import logging

from .client import HttpClient
from .settings import EngineSettings, load_settings

logger = logging.getLogger(__name__)

CREATE_WALLET_ENDPOINT = "/backend-wallet/create"
LIST_WALLETS_ENDPOINT = "/backend-wallet/get-all"
LOCAL_WALLET_TYPE = "local"


@runtime_checkable
class WalletBackend(Protocol):
    """Capabilities a wallet backend must provide."""

    def create_wallet(self, label: str) -> Any:
        ...

    def get_all_wallets(self) -> Any:
        ...


class HttpWalletBackend:
    """Wallet backend calling the engine through an HttpClient."""

    def __init__(self, client: HttpClient):
        """
        Initialize the backend.

        Args:
            client: HTTP client bound to the engine base URL
        """
        self.client = client

    def close(self):
        """Close the underlying HTTP client."""
        self.client.close()

    def create_wallet(self, label: str) -> Any:
        """Create a local backend wallet with the given label."""
        return self.client.post(
            CREATE_WALLET_ENDPOINT, {"label": label, "type": LOCAL_WALLET_TYPE}
        )

    def get_all_wallets(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Any:
        """List backend wallets, optionally one page at a time."""
        params: Dict[str, Any] = {}
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        return self.client.get(LIST_WALLETS_ENDPOINT, params)


class EngineService:
    """
    Wallet operations against the engine.

    Failures are logged and re-raised unchanged.

    Example:
        >>> service = create_engine_service()
        >>> wallet = service.create_wallet("user-42")
        >>> wallets = service.get_all_wallets()
    """

    def __init__(self, backend: WalletBackend):
        """
        Initialize the service.

        Args:
            backend: Wallet backend performing the calls
        """
        self._backend = backend

    @property
    def backend(self) -> WalletBackend:
        """The wallet backend used by this service."""
        return self._backend

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and release the backend."""
        self.close()
        return False

    def close(self):
        """Release the backend's resources, if it holds any."""
        close = getattr(self._backend, "close", None)
        if callable(close):
            close()

    def create_wallet(self, label: str) -> Any:
        """
        Create a new wallet with the given label.

        Args:
            label: Label for the new wallet

        Returns:
            The created wallet record
        """
        try:
            return self._backend.create_wallet(label)
        except Exception as e:
            logger.error(f"Error creating wallet: {e}")
            raise

    def get_all_wallets(self) -> Any:
        """
        Get all wallets.

        Returns:
            The wallet records known to the engine
        """
        try:
            return self._backend.get_all_wallets()
        except Exception as e:
            logger.error(f"Error getting wallets: {e}")
            raise


def create_engine_service(settings: Optional[EngineSettings] = None) -> EngineService:
    """
    Create an EngineService backed by the engine's HTTP API.

    Args:
        settings: Engine settings, loaded from the environment when omitted

    Returns:
        A configured EngineService instance

    Raises:
        ConfigurationError: If settings are omitted and the environment is invalid
    """
    if settings is None:
        settings = load_settings()

    client = HttpClient(settings.base_url, access_token=settings.engine_token)
    return EngineService(HttpWalletBackend(client))
