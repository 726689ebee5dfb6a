"""
Engine Client - HTTP client and wallet service for a wallet engine.

This library provides synchronous and asynchronous HTTP clients with a
single normalized error type, and a wallet service built on top of them.

Example (synchronous):
    >>> from engine_client import HttpClient
    >>> client = HttpClient("https://engine.example.com", access_token="your-token")
    >>> wallets = client.get("/backend-wallet/get-all")

Example (asynchronous):
    >>> from engine_client import AsyncHttpClient
    >>> async with AsyncHttpClient("https://engine.example.com") as client:
    ...     wallets = await client.get("/backend-wallet/get-all")

Example (wallet service):
    >>> from engine_client import create_engine_service, load_settings
    >>> service = create_engine_service(load_settings())
    >>> wallet = service.create_wallet("user-42")
"""

from .client import HttpClient
from .async_client import AsyncHttpClient
from .exceptions import ClientError, ConfigurationError
from .auth import Auth, BearerTokenAuth
from .config import ClientConfig, RequestOptions
from .settings import EngineSettings, load_settings
from .wallets import (
    WalletBackend,
    HttpWalletBackend,
    EngineService,
    create_engine_service,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "HttpClient",
    "AsyncHttpClient",
    # Exceptions
    "ClientError",
    "ConfigurationError",
    # Authentication
    "Auth",
    "BearerTokenAuth",
    # Configuration
    "ClientConfig",
    "RequestOptions",
    "EngineSettings",
    "load_settings",
    # Wallets
    "WalletBackend",
    "HttpWalletBackend",
    "EngineService",
    "create_engine_service",
    # Version
    "__version__",
]
