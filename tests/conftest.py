from contextlib import ExitStack
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from sportsweather.api.app import create_app
from sportsweather.config.settings import AppSettings

TEST_API_KEY = "test-api-key-123"

# 2024-05-01T00:00:00Z
MAY_1_2024 = 1714521600
THREE_HOURS = 3 * 3600


def make_settings(**overrides: Any) -> AppSettings:
    values = {
        "openweather_api_key": TEST_API_KEY,
        "static_dir": "__no_static_dir__",
        "mlb_api_base_url": "https://statsapi.test/api/v1",
        "openweather_api_base_url": "https://weather.test/data/2.5",
    }
    values.update(overrides)
    return AppSettings(_env_file=None, **values)


def team_record(name: str, wins: int, losses: int, pct: str, gb: str) -> Dict[str, Any]:
    return {
        "team": {"id": 1, "name": name},
        "wins": wins,
        "losses": losses,
        "winningPercentage": pct,
        "gamesBack": gb,
        "divisionRank": "1",
    }


def standings_payload() -> Dict[str, Any]:
    return {
        "copyright": "test",
        "records": [
            {
                "standingsType": "regularSeason",
                "division": {"id": 201, "link": "/api/v1/divisions/201"},
                "teamRecords": [
                    team_record("New York Yankees", 94, 68, ".580", "-"),
                    team_record("Baltimore Orioles", 91, 71, ".562", "3.0"),
                ],
            },
            {
                "standingsType": "regularSeason",
                "division": {"id": 202},
                "teamRecords": [
                    team_record("Cleveland Guardians", 92, 69, ".571", "-"),
                ],
            },
        ],
    }


def forecast_entry(
    dt: int,
    temp: float = 72.4,
    humidity: int = 65,
    description: str = "clear sky",
    wind: float = 4.1,
) -> Dict[str, Any]:
    return {
        "dt": dt,
        "main": {"temp": temp, "humidity": humidity},
        "weather": [{"id": 800, "main": "Clear", "description": description}],
        "wind": {"speed": wind, "deg": 180},
    }


def forecast_payload(
    entries: Optional[List[Dict[str, Any]]] = None,
    tz_offset: int = 0,
    name: str = "New York",
    country: str = "US",
) -> Dict[str, Any]:
    if entries is None:
        # Five days of 3-hourly entries starting at midnight UTC
        entries = [forecast_entry(MAY_1_2024 + i * THREE_HOURS) for i in range(40)]
    return {
        "cod": "200",
        "cnt": len(entries),
        "list": entries,
        "city": {"name": name, "country": country, "timezone": tz_offset},
    }


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def upstream_calls() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_api(upstream_calls):
    """Factory for a TestClient whose upstream calls go to ``handler``."""
    with ExitStack() as stack:

        def _make(
            handler: Callable[[httpx.Request], httpx.Response],
            settings: Optional[AppSettings] = None,
        ) -> TestClient:
            def recording_handler(request: httpx.Request) -> httpx.Response:
                upstream_calls.append(request)
                return handler(request)

            http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
            app = create_app(settings or make_settings(), http_client=http_client)
            return stack.enter_context(TestClient(app))

        yield _make
