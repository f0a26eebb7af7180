"""
HTTP client configuration and utilities.
"""
from typing import Optional

import httpx

from talenthub.config.settings import settings
from talenthub.core.errors import (
    GENERIC_AUTH_ERROR,
    GENERIC_NETWORK_ERROR,
    AuthFormError,
    AuthRejected,
    TransportFailure,
)


def get_client(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    cookies: Optional[httpx.Cookies] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Get configured async HTTP client for the Auth Service.

    Args:
        base_url: Auth Service base URL (defaults to settings.API_BASE_URL)
        timeout: Request timeout in seconds (defaults to settings.AUTH_REQUEST_TIMEOUT)
        cookies: Cookie jar sent with every request
        transport: Optional transport override

    Returns:
        httpx.AsyncClient instance
    """
    return httpx.AsyncClient(
        base_url=base_url or settings.API_BASE_URL,
        headers={"Content-Type": "application/json", "Accept": "application/json"},
        cookies=cookies,
        timeout=httpx.Timeout(timeout if timeout is not None else settings.AUTH_REQUEST_TIMEOUT),
        transport=transport,
    )


def extract_error_message(response: httpx.Response, default: str = GENERIC_AUTH_ERROR) -> str:
    """
    Read the message out of a failed Auth Service response.

    The body may carry {"error": str} and/or {"message": str}; "error"
    wins when both are present. Anything else falls back to default.
    """
    try:
        payload = response.json()
    except ValueError:
        return default
    if not isinstance(payload, dict):
        return default
    for key in ("error", "message"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return default


def handle_http_error(e: Exception, operation: str, logger) -> AuthFormError:
    """
    Turn an HTTP exception into the error the form shows.

    Args:
        e: Exception that occurred
        operation: Description of the operation
        logger: Logger instance

    Returns:
        AuthRejected or TransportFailure
    """
    if isinstance(e, httpx.HTTPStatusError):
        message = extract_error_message(e.response)
        logger.warning(f"{operation} rejected | status: {e.response.status_code} | {message}")
        return AuthRejected(message, status_code=e.response.status_code)
    if isinstance(e, httpx.TimeoutException):
        logger.error(f"Timeout during {operation}: {e}")
        return TransportFailure("The server took too long to respond. Please try again.")
    if isinstance(e, httpx.RequestError):
        logger.error(f"Network error during {operation}: {e}", exc_info=True)
        return TransportFailure(GENERIC_NETWORK_ERROR)
    logger.error(f"Unexpected error during {operation}: {e}", exc_info=True)
    return TransportFailure(GENERIC_NETWORK_ERROR)
