"""
Synchronous HTTP client implementation.

This module provides the request logic shared by both clients and the
synchronous client used by the wallet service.
"""

from typing import Optional, Dict, Any, Mapping
import httpx
import logging
import ssl
import certifi

from .config import ClientConfig, RequestOptions, milliseconds_to_timeout
from .auth import Auth, create_auth
from .exceptions import error_from_response, error_from_exception

logger = logging.getLogger(__name__)


def is_json_content(response: httpx.Response) -> bool:
    """Check whether the response declares a JSON content type."""
    content_type = response.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class BaseHttpClient:
    """
    Request building and response classification shared by HttpClient
    and AsyncHttpClient.
    """

    def __init__(
        self,
        base_url: str,
        default_options: Optional[Mapping[str, Any]] = None,
        *,
        auth: Optional[Auth] = None,
        access_token: Optional[str] = None,
        verify_ssl: bool = True,
    ):
        """
        Initialize the client.

        Args:
            base_url: Root URL for all API requests
            default_options: Options applied to every request
                (``json`` defaults to True, ``timeout`` to 10000 ms,
                ``follow_redirects`` to False)
            auth: Custom authentication handler
            access_token: Access token sent as a bearer token
            verify_ssl: Whether to verify SSL certificates
        """
        self.config = ClientConfig(
            base_url=base_url,
            default_options=default_options or {},
        )
        self.auth = create_auth(access_token=access_token, auth=auth)
        self.verify_ssl = verify_ssl

        # Underlying httpx client, created lazily by subclasses
        self._client: Any = None

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _verify(self):
        """Get the SSL verification setting for the underlying client."""
        if self.verify_ssl:
            return ssl.create_default_context(cafile=certifi.where())
        return False

    def build_url(self, endpoint: str) -> str:
        """
        Build the complete URL for an endpoint.

        Args:
            endpoint: Endpoint path, with or without a leading slash

        Returns:
            The base URL joined to the endpoint by exactly one slash
        """
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self.config.base_url}{endpoint}"

    def _build_request(
        self,
        client: Any,
        method: str,
        endpoint: str,
        payload: Optional[Mapping[str, Any]],
        options: Dict[str, Any],
    ) -> httpx.Request:
        """Build an HTTP request from the payload and merged options."""
        url = self.build_url(endpoint)
        payload = dict(payload or {})

        kwargs: Dict[str, Any] = {}
        if method == "GET":
            kwargs["params"] = payload
        elif options.get("json"):
            kwargs["json"] = payload
        else:
            kwargs["data"] = payload

        request = client.build_request(
            method=method,
            url=url,
            headers=options.get("headers"),
            timeout=milliseconds_to_timeout(options.get("timeout")),
            **kwargs,
        )

        if self.auth:
            request = self.auth.apply(request)

        return request

    def _decode_body(self, response: httpx.Response, options: Mapping[str, Any]) -> Any:
        """Decode the response body according to the ``json`` option."""
        if options.get("json") and is_json_content(response):
            try:
                return response.json()
            except ValueError:
                # Not a JSON document, hand back the raw text
                return response.text
        return response.text

    def _handle_response(self, response: httpx.Response, options: Mapping[str, Any]) -> Any:
        """
        Classify a response by status code.

        Args:
            response: The HTTP response
            options: Merged request options

        Returns:
            The decoded response body for 2xx responses

        Raises:
            ClientError: For any status code outside [200, 300)
        """
        body = self._decode_body(response, options)
        if 200 <= response.status_code < 300:
            return body
        raise error_from_response(response, body)


class HttpClient(BaseHttpClient):
    """
    Synchronous HTTP client bound to a fixed base URL.

    Example:
        >>> client = HttpClient("https://engine.example.com", access_token="token")
        >>> wallets = client.get("backend-wallet/get-all")

    Example with context manager:
        >>> with HttpClient("https://engine.example.com") as client:
        ...     wallet = client.post("/backend-wallet/create", {"label": "alice"})
    """

    _client: Optional[httpx.Client]

    @property
    def client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None:
            self._client = httpx.Client(verify=self._verify())
        return self._client

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and clean up resources."""
        self.close()
        return False

    def close(self):
        """Close the client and clean up resources."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Make an HTTP request and classify the response.

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
            response = self.client.send(
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

    def get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """
        Make a GET request.

        Args:
            endpoint: Endpoint path relative to the base URL
            params: Query parameters
            options: Per-call options merged over the client defaults

        Returns:
            The decoded response body
        """
        return self.request("GET", endpoint, params, options)

    def post(
        self,
        endpoint: str,
        data: Optional[Mapping[str, Any]] = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """
        Make a POST request.

        Args:
            endpoint: Endpoint path relative to the base URL
            data: Request body
            options: Per-call options merged over the client defaults

        Returns:
            The decoded response body
        """
        return self.request("POST", endpoint, data, options)
