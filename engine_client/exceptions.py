"""
Exception types for the engine client library.

Every failed request surfaces as a single ClientError carrying the status
code, a message and the original failure context.
"""

from typing import Optional, Any
import httpx

DEFAULT_ERROR_MESSAGE = "Request failed"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


class ClientError(Exception):
    """Failure of a request made through the client."""

    def __init__(self, status_code: int, message: str, cause: Any = None):
        """
        Initialize a ClientError.

        Args:
            status_code: HTTP status code, or 500 for transport failures
            message: Error message
            cause: The failed response or the original exception
        """
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.cause = cause

    @property
    def response(self) -> Optional[httpx.Response]:
        """The HTTP response that caused the error, if there was one."""
        if isinstance(self.cause, httpx.Response):
            return self.cause
        return None

    def __str__(self) -> str:
        return f"{self.status_code} {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, message={self.message!r})"


class ConfigurationError(Exception):
    """Invalid or missing startup configuration."""

    pass


def extract_error_message(body: Any) -> str:
    """
    Extract an error message from a decoded response body.

    Only a top-level string ``message`` field of a mapping body is used.

    Args:
        body: Decoded response body

    Returns:
        The body's message, or the generic failure message
    """
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return DEFAULT_ERROR_MESSAGE


def error_from_response(response: httpx.Response, body: Any) -> ClientError:
    """
    Build the error for a response with a non-2xx status code.

    Args:
        response: HTTP response that failed
        body: The response body as decoded by the client

    Returns:
        ClientError carrying the response status and message
    """
    return ClientError(response.status_code, extract_error_message(body), response)


def error_from_exception(exc: BaseException, method: str, endpoint: str) -> ClientError:
    """
    Normalize a failure raised while making a request.

    Args:
        exc: The caught exception
        method: HTTP method of the request
        endpoint: Endpoint the request was made to

    Returns:
        The exception itself if it is already a ClientError, otherwise a
        status 500 ClientError wrapping it
    """
    if isinstance(exc, ClientError):
        return exc

    reason = str(exc) or UNKNOWN_ERROR_MESSAGE
    return ClientError(500, f"{method} request to {endpoint} failed: {reason}", exc)
