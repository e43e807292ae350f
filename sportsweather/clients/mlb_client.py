from typing import Any, Dict

from loguru import logger

from sportsweather.models.enums import League
from .base_client import BaseClient


class MLBStatsClient(BaseClient):
    """Client for the public MLB Stats API."""

    provider = "MLB Stats API"

    async def fetch_standings(self, league: League, season: int) -> Dict[str, Any]:
        """Fetch raw standings for one league and season."""
        logger.info(f"Fetching {league.display_name} standings for {season}")
        return await self._get_json(
            "standings",
            params={"leagueId": league.upstream_id, "season": season},
        )
