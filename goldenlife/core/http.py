"""HTTP clients for the backend API and external services.

Provides a thin wrapper over httpx for the marketplace API (cookie
credentials, normalized errors) and a per-service client for the image
provider used by the proxy app.
"""

import logging
from typing import Any

import httpx

from goldenlife.core.exceptions import ApplicationError, TransportError

logger = logging.getLogger(__name__)

# Default timeout configuration (seconds)
DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_READ_TIMEOUT = 10.0
DEFAULT_WRITE_TIMEOUT = 10.0
DEFAULT_POOL_TIMEOUT = 5.0

# Image generation is slow; the provider routinely takes tens of seconds.
IMAGE_READ_TIMEOUT = 120.0

# Module-level client storage for singleton pattern
_image_client: httpx.AsyncClient | None = None


def create_http_client(
    base_url: str = "",
    max_connections: int = 20,
    max_keepalive_connections: int = 10,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
    write_timeout: float = DEFAULT_WRITE_TIMEOUT,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    Args:
        base_url: Base URL for all requests (empty string for none)
        max_connections: Maximum number of concurrent connections
        max_keepalive_connections: Maximum idle connections to keep alive
        connect_timeout: Timeout for establishing connection
        read_timeout: Timeout for reading response
        write_timeout: Timeout for sending request
        pool_timeout: Timeout for acquiring connection from pool
        transport: Optional transport override (tests use httpx.MockTransport)

    Returns:
        Configured httpx.AsyncClient instance
    """
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=write_timeout,
            pool=pool_timeout,
        ),
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        ),
        transport=transport,
    )


def get_image_client() -> httpx.AsyncClient:
    """Get singleton HTTP client for the image generation provider.

    The client should be closed via close_image_client() during
    application shutdown.
    """
    global _image_client
    if _image_client is None:
        _image_client = create_http_client(
            max_connections=10,
            max_keepalive_connections=5,
            read_timeout=IMAGE_READ_TIMEOUT,
        )
    return _image_client


async def close_image_client() -> None:
    """Close the image provider HTTP client and release resources."""
    global _image_client
    if _image_client is not None:
        await _image_client.aclose()
        _image_client = None


class ApiClient:
    """Request wrapper for the marketplace backend API.

    The underlying httpx client keeps a cookie jar, so session cookies set by
    the API are sent back on every later request. Non-2xx responses are
    returned as-is; only the absence of a response is an error here.
    Retries are left to callers.
    """

    def __init__(self, http_client: httpx.AsyncClient):
        self._client = http_client

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    async def request(
        self, method: str, path: str, body: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Send a request to the API.

        Args:
            method: HTTP method
            path: API path (e.g., "/api/auth/me")
            body: Optional JSON body

        Returns:
            The response, whatever its status code

        Raises:
            TransportError: If no response was received
        """
        try:
            return await self._client.request(method, path, json=body)
        except httpx.RequestError as e:
            logger.warning(
                "API transport failure: %s %s (%s)",
                method,
                path,
                type(e).__name__,
                extra={"method": method, "path": path, "error_type": "transport_error"},
            )
            raise TransportError() from e

    @staticmethod
    def read_json(response: httpx.Response) -> dict[str, Any]:
        """Decode a JSON object body, returning {} for empty or non-object bodies."""
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    @classmethod
    def error_from_response(
        cls, response: httpx.Response, fallback: str
    ) -> ApplicationError:
        """Build an ApplicationError from a non-2xx response.

        The server's `message` field becomes the error message; `code` (or the
        `type` field of the unified error format) becomes the typed code.
        """
        data = cls.read_json(response)
        message = data.get("message")
        code = data.get("code") or data.get("type")
        return ApplicationError(
            message=message if isinstance(message, str) and message else fallback,
            status_code=response.status_code,
            code=code if isinstance(code, str) else None,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
