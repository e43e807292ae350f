from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class TeamRecord(BaseModel):
    """A single team's line in the standings, as reported upstream."""

    model_config = ConfigDict(frozen=True)

    team: str
    wins: StrictInt
    losses: StrictInt
    # Passed through verbatim from upstream, e.g. ".612" and "-" / "3.5".
    # Normally strings; numbers and null are kept as sent.
    winPercentage: Optional[Union[str, int, float]]
    gamesBack: Optional[Union[str, int, float]]


class DivisionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    division: str
    teams: List[TeamRecord] = []


class StandingsResult(BaseModel):
    """Standings for one league and season, grouped by division."""

    model_config = ConfigDict(frozen=True)

    league: str = Field(..., description="League display name, e.g. 'American League'.")
    season: int
    standings: List[DivisionRecord] = []
