"""
Authentication handlers for the engine client library.

The wallet service authenticates requests with an access token sent as a
bearer token.
"""

from typing import Optional
from abc import ABC, abstractmethod
import httpx


class Auth(ABC):
    """Base class for authentication handlers."""

    @abstractmethod
    def apply(self, request: httpx.Request) -> httpx.Request:
        """
        Apply authentication to a request.

        Args:
            request: The HTTP request to authenticate

        Returns:
            The authenticated request
        """
        pass


class BearerTokenAuth(Auth):
    """Bearer token authentication (access tokens, JWT)."""

    def __init__(self, token: str):
        """
        Initialize Bearer token authentication.

        Args:
            token: The bearer token
        """
        if not token:
            raise ValueError("token must not be empty")
        self.token = token

    def apply(self, request: httpx.Request) -> httpx.Request:
        """Apply bearer token authentication to the request."""
        request.headers["Authorization"] = f"Bearer {self.token}"
        return request


def create_auth(
    access_token: Optional[str] = None,
    auth: Optional[Auth] = None,
) -> Optional[Auth]:
    """
    Create an authentication handler from client arguments.

    Args:
        access_token: Token for BearerTokenAuth
        auth: Custom Auth instance, takes precedence over access_token

    Returns:
        An Auth instance or None if no authentication is configured
    """
    if auth is not None:
        return auth

    if access_token:
        return BearerTokenAuth(access_token)

    return None
