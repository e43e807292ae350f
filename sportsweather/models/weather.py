from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .enums import Units


class CurrentConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: str = Field(..., description="Rounded temperature with unit, e.g. '72°F'.")
    description: str
    humidity: str = Field(..., description="Relative humidity, e.g. '65%'.")
    windSpeed: str = Field(..., description="Wind speed with unit, e.g. '4.1 mph'.")
    timestamp: str = Field(..., description="UTC ISO-8601 time of the observation.")


class DayForecast(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Local calendar date, YYYY-MM-DD.")
    temperature: str
    description: str
    humidity: str


class WeatherResult(BaseModel):
    """Current conditions plus up to three upcoming local days."""

    model_config = ConfigDict(frozen=True)

    location: str
    country: str
    units: Units
    current: CurrentConditions
    forecast: List[DayForecast] = []
