from typing import Any, Dict

from loguru import logger
from pydantic import ValidationError

from sportsweather.models.enums import League, division_name
from sportsweather.models.standings import DivisionRecord, StandingsResult, TeamRecord
from .errors import TransformError


def _normalize_team(raw_team: Dict[str, Any]) -> TeamRecord:
    return TeamRecord(
        team=raw_team["team"]["name"],
        wins=raw_team["wins"],
        losses=raw_team["losses"],
        winPercentage=raw_team["winningPercentage"],
        gamesBack=raw_team["gamesBack"],
    )


def normalize_standings(
    raw_data: Dict[str, Any], league: League, season: int
) -> StandingsResult:
    """Reshape an MLB Stats API standings payload.

    Divisions and teams keep the upstream order. Win percentage and games
    back are copied as-is, never recalculated.
    """
    try:
        divisions = [
            DivisionRecord(
                division=division_name(record["division"]["id"]),
                teams=[_normalize_team(team) for team in record["teamRecords"]],
            )
            for record in raw_data["records"]
        ]
    except (KeyError, TypeError, IndexError, ValidationError) as e:
        logger.error(f"Malformed standings payload: {e!r}")
        raise TransformError(f"Malformed standings payload: {e!r}") from e

    logger.debug(
        f"Normalized {len(divisions)} divisions for {league.display_name} {season}"
    )
    return StandingsResult(
        league=league.display_name, season=season, standings=divisions
    )
