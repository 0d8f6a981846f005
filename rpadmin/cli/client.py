"""
HTTP Client for the admin console.

Provides an async HTTP client for communicating with the RPNow admin
server. Transport failures are converted to ServerUnreachableError so
callers deal with one error hierarchy.
"""

from typing import Any

import httpx

from rpadmin.core.exceptions import ServerUnreachableError
from rpadmin.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


class APIClient:
    """
    HTTP client for admin server communication.

    Features:
    - Base URL injected at construction
    - X-Frontend-ID header for server-side log routing
    - Structured logging of requests/responses
    - Transport errors raised as ServerUnreachableError

    Usage:
        client = APIClient("http://127.0.0.1:12789")
        response = await client.get("/status")
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Admin server base URL.
            timeout: Request timeout in seconds. Defaults to 30.
            transport: Optional httpx transport, used by tests.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"X-Frontend-ID": "cli"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the admin server.

        Args:
            method: HTTP method (GET, DELETE, etc.)
            path: API path (e.g., /status, /rps/abc)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            ServerUnreachableError: On transport failure
        """
        client = await self._get_client()

        log_with_source(
            logger,
            "cli",
            "debug",
            "API request",
            method=method,
            path=path,
        )

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise ServerUnreachableError(
                f"{method} {self.base_url}{path} failed: {e}"
            ) from e

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

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path, **kwargs)
