from typing import Any, Dict, Optional

import httpx
from loguru import logger


class UpstreamError(Exception):
    """Raised when an upstream provider request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationError(UpstreamError):
    """Exception raised for authentication failures (401, 403)."""

    pass


class BaseClient:
    """Base class for upstream REST API clients.

    The ``httpx.AsyncClient`` is owned by the caller and shared between
    clients; each request is a single GET with no retries.
    """

    provider: str = "upstream"

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def _get_json(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Makes a GET request and returns the decoded JSON body."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"Requesting {self.provider}", url=url)
        try:
            response = await self.client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error(f"Request error for {self.provider}: {e!r}")
            raise UpstreamError(
                str(e) or f"Request to {self.provider} failed"
            ) from e

        if response.status_code in {401, 403}:
            logger.warning(
                f"Authentication error ({response.status_code}) from {self.provider}."
            )
            raise AuthenticationError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
            )

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error from {self.provider}: {e.response.status_code}"
            )
            raise UpstreamError(
                f"Request failed with status code {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {self.provider}: {e}")
            raise UpstreamError(
                f"Invalid JSON response from {self.provider}",
                status_code=response.status_code,
            ) from e
