"""
Asynchronous HTTP client implementation.

Same contract as HttpClient, with awaitable requests.
"""

from typing import Optional, Any, Mapping
import httpx
import logging

from .client import BaseHttpClient
from .config import RequestOptions
from .exceptions import error_from_exception

logger = logging.getLogger(__name__)


class AsyncHttpClient(BaseHttpClient):
    """
    Asynchronous HTTP client bound to a fixed base URL.

    Example:
        >>> async with AsyncHttpClient("https://engine.example.com") as client:
        ...     wallets = await client.get("/backend-wallet/get-all")
    """

    _client: Optional[httpx.AsyncClient]

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx async client."""
        if self._client is None:
            self._client = httpx.AsyncClient(verify=self._verify())
        return self._client

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager and clean up resources."""
        await self.close()
        return False

    async def close(self):
        """Close the client and clean up resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Make an asynchronous HTTP request and classify the response.

        Args:
            method: HTTP method (GET or POST)
            endpoint: Endpoint path relative to the base URL
            payload: Query parameters for GET, request body otherwise
            options: Per-call options merged over the client defaults

        Returns:
            The decoded response body

        Raises:
            ClientError: For non-2xx responses and transport failures
        """
        merged_options = self.config.merge_options(options)

        try:
            request = self._build_request(
                self.client, method, endpoint, payload, merged_options
            )
            logger.debug(f"{request.method} {request.url}")
            response = await self.client.send(
                request,
                follow_redirects=merged_options.get("follow_redirects", False),
            )
            logger.info(f"{request.method} {request.url} -> {response.status_code}")
            return self._handle_response(response, merged_options)
        except Exception as e:
            error = error_from_exception(e, method, endpoint)
            if error is e:
                raise
            raise error from e

    async def get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make an asynchronous GET request."""
        return await self.request("GET", endpoint, params, options)

    async def post(
        self,
        endpoint: str,
        data: Optional[Mapping[str, Any]] = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Make an asynchronous POST request."""
        return await self.request("POST", endpoint, data, options)
