"""
Configuration classes for the engine client library.

This module provides the immutable client configuration and the
request option handling shared by the synchronous and asynchronous clients.
"""

from typing import Optional, Dict, Any, Mapping, TypedDict
from types import MappingProxyType
from dataclasses import dataclass, field
import httpx


class RequestOptions(TypedDict, total=False):
    """
    Options recognized by the client for a single request.

    Attributes:
        json: Send request data as JSON and decode the response body as JSON
        timeout: Request timeout in milliseconds
        headers: Extra request headers
        follow_redirects: Whether to follow redirects
    """

    json: bool
    timeout: float
    headers: Dict[str, str]
    follow_redirects: bool


DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType(
    {
        "json": True,
        "timeout": 10000,
        "follow_redirects": False,
    }
)


def milliseconds_to_timeout(timeout_ms: Optional[float]) -> httpx.Timeout:
    """
    Convert a millisecond timeout option to an httpx.Timeout.

    Args:
        timeout_ms: Timeout in milliseconds, or None to disable timeouts

    Returns:
        httpx.Timeout applied to connect, read, write and pool phases
    """
    if timeout_ms is None:
        return httpx.Timeout(None)
    return httpx.Timeout(timeout_ms / 1000.0)


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for HTTP client instances.

    Attributes:
        base_url: Root URL for all API requests, without a trailing slash
        default_options: Options applied to every request unless overridden
    """

    base_url: str
    default_options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Normalize and freeze configuration after initialization."""
        if not self.base_url:
            raise ValueError("base_url is required")

        # Strip a single trailing slash
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url[:-1])

        options = dict(DEFAULT_OPTIONS)
        options.update(self.default_options)
        object.__setattr__(self, "default_options", MappingProxyType(options))

    def merge_options(self, request_options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Merge default options with request-specific options.

        Args:
            request_options: Request-specific options

        Returns:
            Merged options dict
        """
        options = dict(self.default_options)
        if request_options:
            options.update(request_options)
        return options
