"""
HTTP Client for CLI.

Provides async HTTP client for communicating with the booking service.
Requests made on behalf of a logged-in user carry the session's bearer
token. Each command makes a single attempt; there are no retries.
"""

from typing import Any

import httpx

from ntc_booking.core.config import get_api_settings
from ntc_booking.core.exceptions import ServiceResponseError, TransportError
from ntc_booking.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def decode_body(response: httpx.Response) -> Any:
    """
    Decode a response body.

    Returns:
        Parsed JSON, the raw text when the body is not JSON, or None when empty
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class APIClient:
    """
    HTTP client for booking service communication.

    Features:
    - Base URL and timeout from settings
    - Bearer token header when a session is supplied
    - Structured logging of requests/responses
    - Error responses and transport failures raised as typed errors

    Usage:
        client = APIClient(token=session.token)
        try:
            routes = await client.call("GET", "/admin/routes")
        finally:
            await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Booking service base URL. If None, reads from config/settings/application.yaml.
            timeout: Request timeout in seconds. If None, reads from config/settings/application.yaml.
            token: Bearer token of the logged-in session, if any.
            transport: Custom httpx transport (tests inject httpx.MockTransport).
        """
        if base_url is None or timeout is None:
            try:
                config_base_url, config_timeout = get_api_settings()
            except Exception as e:
                if base_url is None:
                    raise RuntimeError(
                        "Could not determine booking service URL from config/settings/application.yaml"
                    ) from e
                config_base_url, config_timeout = base_url, 30.0
        else:
            config_base_url, config_timeout = base_url, timeout

        self.base_url = (base_url or config_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config_timeout
        self.token = token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self._headers(),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the booking service.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path relative to the base URL (e.g., /admin/routes)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response, whatever its status code

        Raises:
            TransportError: When no response was received
        """
        client = await self._get_client()

        log_with_source(
            logger,
            "cli",
            "debug",
            "API request",
            method=method,
            path=path,
            authenticated=self.token is not None,
        )

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "warning",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise TransportError(str(e) or e.__class__.__name__) from e

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        return response

    async def call(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Make a request and return the decoded body.

        Raises:
            ServiceResponseError: When the service answers with status >= 400
            TransportError: When no response was received
        """
        response = await self.request(method, path, **kwargs)
        payload = decode_body(response)
        if response.is_error:
            raise ServiceResponseError(payload, response.status_code)
        return payload

