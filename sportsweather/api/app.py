import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from sportsweather.clients.base_client import UpstreamError
from sportsweather.clients.mlb_client import MLBStatsClient
from sportsweather.clients.weather_client import MissingAPIKeyError, OpenWeatherClient
from sportsweather.config.settings import AppSettings
from sportsweather.normalization.errors import TransformError
from sportsweather.normalization.forecast import normalize_forecast
from sportsweather.normalization.standings import normalize_standings
from sportsweather.validation.params import (
    InvalidLeagueError,
    InvalidUnitsError,
    parse_league,
    parse_units,
)
from .formatting import format_response

APP_VERSION = "1.0.0"

STANDINGS_ERROR = "Failed to fetch MLB standings"
WEATHER_ERROR = "Failed to fetch weather data"
MISSING_KEY_ERROR = "Weather API key not configured"
MISSING_KEY_MESSAGE = "Please set OPENWEATHER_API_KEY environment variable"

API_INDEX = {
    "message": "Sports & Weather API",
    "endpoints": {
        "standings": "/standings/{league} - Get MLB standings (league: al, nl, american, national)",
        "weather": "/weather/{location} - Get weather for location",
    },
    "parameters": {
        "pretty": 'Set to "true" to prettify JSON output',
        "units": 'For weather: "imperial" (default) or "metric"',
    },
}


def current_season() -> int:
    return datetime.now().year


def _error(error: str, message: Optional[str] = None, status_code: int = 500) -> JSONResponse:
    content = {"error": error}
    if message is not None:
        content["message"] = message
    return JSONResponse(status_code=status_code, content=content)


def get_mlb_client(request: Request) -> MLBStatsClient:
    return request.app.state.mlb_client


def get_weather_client(request: Request) -> OpenWeatherClient:
    return request.app.state.weather_client


def create_app(
    settings: AppSettings, http_client: Optional[httpx.AsyncClient] = None
) -> FastAPI:
    """Build the API application.

    Args:
        settings: Process-wide configuration.
        http_client: Optional shared client for upstream calls. When omitted,
            one is opened for the lifetime of the app and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = http_client or httpx.AsyncClient(
            follow_redirects=True,
            headers={
                "Accept": "application/json",
                "User-Agent": f"sportsweather/{APP_VERSION}",
            },
        )
        app.state.mlb_client = MLBStatsClient(client, settings.mlb_api_base_url)
        app.state.weather_client = OpenWeatherClient(
            client, settings.openweather_api_base_url, settings.openweather_api_key
        )
        if not settings.has_weather_api_key:
            logger.warning(
                "OPENWEATHER_API_KEY is not set; /weather requests will fail until it is configured."
            )
        try:
            yield
        finally:
            if http_client is None:
                await client.aclose()
                logger.info("Closed upstream HTTP client")

    app = FastAPI(title="Sports & Weather API", version=APP_VERSION, lifespan=lifespan)

    @app.get("/")
    async def index():
        return API_INDEX

    @app.get("/standings/{league}")
    async def standings(
        league: str,
        pretty: Optional[str] = None,
        mlb_client: MLBStatsClient = Depends(get_mlb_client),
    ):
        try:
            resolved = parse_league(league)
        except InvalidLeagueError as e:
            logger.warning(f"Rejected standings request for league '{league}'")
            return _error(e.message, status_code=400)

        season = current_season()
        try:
            raw_data = await mlb_client.fetch_standings(resolved, season)
            result = normalize_standings(raw_data, resolved, season)
        except UpstreamError as e:
            logger.error(f"Standings upstream failure ({e.status_code}): {e.message}")
            return _error(STANDINGS_ERROR, e.message)
        except TransformError:
            return _error(STANDINGS_ERROR, TransformError.message)
        except Exception as e:
            logger.exception(f"Unexpected error building standings: {e}")
            return _error(STANDINGS_ERROR, str(e))

        logger.info(
            f"Served {result.league} standings ({len(result.standings)} divisions)"
        )
        return format_response(result, pretty)

    # ":path" keeps an encoded slash in the location, e.g. "Washington%2FDC"
    @app.get("/weather/{location:path}")
    async def weather(
        location: str,
        pretty: Optional[str] = None,
        units: str = "imperial",
        weather_client: OpenWeatherClient = Depends(get_weather_client),
    ):
        try:
            resolved_units = parse_units(units)
        except InvalidUnitsError as e:
            logger.warning(f"Rejected weather request with units '{units}'")
            return _error(e.message, status_code=400)

        try:
            raw_data = await weather_client.fetch_forecast(location, resolved_units)
            result = normalize_forecast(raw_data, resolved_units)
        except MissingAPIKeyError:
            logger.error("Weather upstream rejected the request: API key missing or invalid")
            return _error(MISSING_KEY_ERROR, MISSING_KEY_MESSAGE)
        except UpstreamError as e:
            logger.error(f"Weather upstream failure ({e.status_code}): {e.message}")
            return _error(WEATHER_ERROR, e.message)
        except TransformError:
            return _error(WEATHER_ERROR, TransformError.message)
        except Exception as e:
            logger.exception(f"Unexpected error building forecast: {e}")
            return _error(WEATHER_ERROR, str(e))

        logger.info(
            f"Served weather for {result.location}, {result.country} ({len(result.forecast)} forecast days)"
        )
        return format_response(result, pretty)

    # Mounted last so the API routes above take precedence at "/"
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
        logger.info(f"Serving static files from {settings.static_dir}")

    return app
