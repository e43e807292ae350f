import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Union

from loguru import logger

from sportsweather.models.enums import Units
from sportsweather.models.weather import CurrentConditions, DayForecast, WeatherResult
from .errors import TransformError

MAX_FORECAST_DAYS = 3

Number = Union[int, float]


def local_date(timestamp: Number, utc_offset_seconds: Number) -> str:
    """Calendar date of a UTC epoch timestamp shifted by a fixed offset.

    The offset is added to the UTC instant and the date is read off the
    shifted instant as if it were UTC. This is not zone-aware: DST changes
    inside the window are ignored, matching what the provider's single
    ``city.timezone`` offset can express.
    """
    shifted = datetime.fromtimestamp(timestamp, tz=timezone.utc) + timedelta(
        seconds=utc_offset_seconds
    )
    return shifted.date().isoformat()


def select_daily_entries(
    entries: List[Dict[str, Any]],
    utc_offset_seconds: Number,
    limit: int = MAX_FORECAST_DAYS,
) -> List[Dict[str, Any]]:
    """Pick the first entry of each local day after the current one.

    ``entries[0]`` is the current observation; its date is never repeated in
    the output. At most ``limit`` entries are returned, in input order.
    """
    if not entries:
        return []

    seen_dates = {local_date(entries[0]["dt"], utc_offset_seconds)}
    selected = []
    for entry in entries[1:]:
        date = local_date(entry["dt"], utc_offset_seconds)
        if date in seen_dates:
            continue
        seen_dates.add(date)
        selected.append(entry)
    return selected[:limit]


def round_half_up(value: Number) -> int:
    # Python's round() is banker's rounding; 2.5 must become 3 and -2.5 become -2
    return math.floor(value + 0.5)


def format_number(value: Number) -> str:
    """Render a number the way it appears in JSON, without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_temperature(value: Number, units: Units) -> str:
    return f"{round_half_up(value)}{units.temperature_suffix}"


def format_wind_speed(value: Number, units: Units) -> str:
    return f"{format_number(value)} {units.speed_suffix}"


def format_humidity(value: Number) -> str:
    return f"{format_number(value)}%"


def format_timestamp(timestamp: Number) -> str:
    """UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    instant = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_forecast(raw_data: Dict[str, Any], units: Units) -> WeatherResult:
    """Reshape an OpenWeatherMap 5 day / 3 hour forecast payload."""
    try:
        entries = raw_data["list"]
        city = raw_data["city"]
        utc_offset = city["timezone"]
        current = entries[0]

        current_conditions = CurrentConditions(
            temperature=format_temperature(current["main"]["temp"], units),
            description=current["weather"][0]["description"],
            humidity=format_humidity(current["main"]["humidity"]),
            windSpeed=format_wind_speed(current["wind"]["speed"], units),
            timestamp=format_timestamp(current["dt"]),
        )

        forecast = [
            DayForecast(
                date=local_date(entry["dt"], utc_offset),
                temperature=format_temperature(entry["main"]["temp"], units),
                description=entry["weather"][0]["description"],
                humidity=format_humidity(entry["main"]["humidity"]),
            )
            for entry in select_daily_entries(entries, utc_offset)
        ]

        result = WeatherResult(
            location=city["name"],
            country=city["country"],
            units=units,
            current=current_conditions,
            forecast=forecast,
        )
    except (KeyError, TypeError, IndexError, ValueError, OverflowError, OSError) as e:
        # ValueError also covers pydantic's ValidationError
        logger.error(f"Malformed forecast payload: {e!r}")
        raise TransformError(f"Malformed forecast payload: {e!r}") from e

    logger.debug(
        f"Normalized forecast for {result.location}: {len(forecast)} upcoming days"
    )
    return result
