from enum import Enum, IntEnum
from typing import Any


class League(str, Enum):
    AL = "AL"
    NL = "NL"

    @property
    def upstream_id(self) -> int:
        """League id used by the MLB Stats API."""
        return 103 if self is League.AL else 104

    @property
    def display_name(self) -> str:
        return "American League" if self is League.AL else "National League"


class Units(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"

    @property
    def temperature_suffix(self) -> str:
        return "°F" if self is Units.IMPERIAL else "°C"

    @property
    def speed_suffix(self) -> str:
        return "mph" if self is Units.IMPERIAL else "m/s"


class Division(IntEnum):
    AL_WEST = 200
    AL_EAST = 201
    AL_CENTRAL = 202
    NL_WEST = 203
    NL_EAST = 204
    NL_CENTRAL = 205

    @property
    def display_name(self) -> str:
        return DIVISION_NAMES[self]


DIVISION_NAMES = {
    Division.AL_WEST: "American League West",
    Division.AL_EAST: "American League East",
    Division.AL_CENTRAL: "American League Central",
    Division.NL_WEST: "National League West",
    Division.NL_EAST: "National League East",
    Division.NL_CENTRAL: "National League Central",
}

UNKNOWN_DIVISION = "Unknown Division"


def division_name(division_id: Any) -> str:
    """Human-readable name for an MLB division id, or ``UNKNOWN_DIVISION``."""
    try:
        if isinstance(division_id, str):
            division_id = int(division_id)
        return Division(division_id).display_name
    except (ValueError, TypeError):
        return UNKNOWN_DIVISION
