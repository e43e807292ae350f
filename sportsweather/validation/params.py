from sportsweather.models.enums import League, Units

LEAGUE_ALIASES = {
    "al": League.AL,
    "american": League.AL,
    "nl": League.NL,
    "national": League.NL,
}


class ParameterValidationError(Exception):
    """Raised when a path or query parameter is outside its accepted set."""

    message = "Invalid parameter"

    def __init__(self, value: str):
        super().__init__(self.message)
        self.value = value


class InvalidLeagueError(ParameterValidationError):
    message = 'Invalid league. Use "al", "nl", "american", or "national"'


class InvalidUnitsError(ParameterValidationError):
    message = 'Invalid units. Use "imperial" or "metric"'


def parse_league(token: str) -> League:
    """Resolve a case-insensitive league alias to a ``League``."""
    league = LEAGUE_ALIASES.get(token.lower())
    if league is None:
        raise InvalidLeagueError(token)
    return league


def parse_units(token: str) -> Units:
    """Accept exactly ``imperial`` or ``metric`` (case-sensitive)."""
    try:
        return Units(token)
    except ValueError:
        raise InvalidUnitsError(token) from None
