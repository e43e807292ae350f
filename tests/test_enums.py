import pytest

from sportsweather.models.enums import (
    UNKNOWN_DIVISION,
    Division,
    League,
    Units,
    division_name,
)


@pytest.mark.parametrize(
    "division_id,expected",
    [
        (200, "American League West"),
        (201, "American League East"),
        (202, "American League Central"),
        (203, "National League West"),
        (204, "National League East"),
        (205, "National League Central"),
    ],
)
def test_known_divisions(division_id, expected):
    assert division_name(division_id) == expected


@pytest.mark.parametrize("division_id", [999, 0, None, "201x", [201]])
def test_unmapped_division_is_unknown(division_id):
    assert division_name(division_id) == UNKNOWN_DIVISION


def test_every_division_has_a_name():
    assert all(division.display_name for division in Division)


def test_league_display_names():
    assert League.AL.display_name == "American League"
    assert League.NL.display_name == "National League"


def test_unit_suffixes():
    assert Units.IMPERIAL.temperature_suffix == "°F"
    assert Units.IMPERIAL.speed_suffix == "mph"
    assert Units.METRIC.temperature_suffix == "°C"
    assert Units.METRIC.speed_suffix == "m/s"


@pytest.mark.parametrize(
    "division_id,expected",
    [("201", "American League East"), ("205", "National League Central"), (201.0, "American League East")],
)
def test_numeric_string_and_float_ids(division_id, expected):
    assert division_name(division_id) == expected
