"""
Authentication API endpoints.
"""
from typing import Any, Dict, Optional

import httpx

from talenthub.api.client import get_client, handle_http_error
from talenthub.config.settings import settings
from talenthub.core.errors import TransportFailure
from talenthub.core.logging import get_logger, mask_email

logger = get_logger(__name__)


class AuthService:
    """
    Client for the remote Auth Service.

    Cookies set by the service are kept on the instance and sent with
    every later request, so the instance doubles as the signed-in session.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.AUTH_REQUEST_TIMEOUT
        self.cookies = httpx.Cookies()
        self._transport = transport

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Sign in an existing user.

        Args:
            email: User email
            password: User password

        Returns:
            Response body
        """
        logger.info(f"Login attempt for email: {mask_email(email)}")
        body = await self._request("POST", "/login", "Login", {"email": email, "password": password})
        logger.info(f"Login successful for email: {mask_email(email)}")
        return body

    async def register(self, email: str, password: str, full_name: str) -> Dict[str, Any]:
        """
        Register a new user.

        Args:
            email: User email
            password: User password
            full_name: Display name
        """
        logger.info(f"Registration attempt for email: {mask_email(email)}")
        body = await self._request(
            "POST",
            "/register",
            "Registration",
            {"email": email, "password": password, "fullName": full_name},
        )
        logger.info(f"Registration successful for email: {mask_email(email)}")
        return body

    async def get_profile(self) -> Dict[str, Any]:
        """
        Fetch the signed-in user's profile with the session cookie.

        The service may wrap the profile as {"data": {...}}.
        """
        body = await self._request("GET", "/profile", "Load profile")
        data = body.get("data")
        return data if isinstance(data, dict) else body

    async def aclose(self) -> None:
        """Forget the session cookies held for the Auth Service."""
        logger.info("Dropping Auth Service session")
        self.cookies.clear()

    async def _request(
        self, method: str, endpoint: str, operation: str, payload: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        try:
            async with get_client(
                self.base_url, self.timeout, cookies=self.cookies, transport=self._transport
            ) as client:
                response = await client.request(method, endpoint, json=payload)
                response.raise_for_status()
                self.cookies.update(client.cookies)
        except httpx.HTTPError as e:
            raise handle_http_error(e, operation, logger) from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"{operation} returned a body that is not JSON | status: {response.status_code}")
            raise TransportFailure("The server sent an unreadable response. Please try again.") from e
        return body if isinstance(body, dict) else {}
