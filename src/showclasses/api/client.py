"""Async HTTP client for the show management API."""

from types import TracebackType
from typing import Any

import httpx

from showclasses.config import Settings
from showclasses.errors import NetworkError
from showclasses.logging import get_logger

logger = get_logger(__name__)


class ShowClient:
    """Thin wrapper over httpx.AsyncClient with the fixed Origin header.

    Built once per run and shared by every request. The base URL and header
    set are read-only after construction.

    Usage:
        async with ShowClient(settings) as client:
            response = await client.get("/people/8778", params={"pid": 8778})
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Application settings (base URL and Origin value)
            transport: Optional transport, e.g. httpx.MockTransport in tests
        """
        self.base_url = settings.api_base_url
        self.headers = {"Origin": settings.origin_header}
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            transport=transport,
        )

    async def __aenter__(self) -> "ShowClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Issue a GET to base_url + path.

        Args:
            path: API path (e.g., "/entries/123")
            params: Query parameters

        Returns:
            The raw response, whatever its status

        Raises:
            NetworkError: If the request could not be completed
        """
        try:
            response = await self._client.get(path, params=params)
        except httpx.RequestError as e:
            logger.error("api_request_failed", path=path, error=str(e))
            raise NetworkError(f"Request to {path} failed: {e}") from e

        logger.debug("api_request", path=path, status=response.status_code)
        return response
