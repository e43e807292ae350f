from typing import Any, Dict, Optional

import httpx
from loguru import logger

from sportsweather.models.enums import Units
from .base_client import AuthenticationError, BaseClient


class MissingAPIKeyError(AuthenticationError):
    """The weather API key is missing or was rejected by the provider."""

    pass


class OpenWeatherClient(BaseClient):
    """Client for the OpenWeatherMap 5 day / 3 hour forecast API."""

    provider = "OpenWeatherMap"

    def __init__(
        self, client: httpx.AsyncClient, base_url: str, api_key: Optional[str]
    ):
        super().__init__(client, base_url)
        self.api_key = api_key

    async def fetch_forecast(self, location: str, units: Units) -> Dict[str, Any]:
        """Fetch the raw 3-hourly forecast for a free-form location."""
        if not self.api_key:
            logger.error("OpenWeatherMap API key is not set in environment variables.")
            raise MissingAPIKeyError("Weather API key not configured")

        logger.info(f"Fetching forecast for '{location}' ({units.value})")
        try:
            return await self._get_json(
                "forecast",
                params={"q": location, "appid": self.api_key, "units": units.value},
            )
        except AuthenticationError as e:
            if e.status_code == 401:
                raise MissingAPIKeyError(e.message, status_code=401) from e
            raise
