"""Conversion of year tokens such as ``1969`` or ``400 BC`` into year numbers.

Years are returned in astronomical numbering: 1 BC is year 0, 2 BC is year -1
and so on, which keeps BC and AD years in chronological order.
"""
import re

# Era designators, English only. The value tells whether the era counts
# backwards from year 1.
ERAS = {
    'AD': False,
    'CE': False,
    'BC': True,
    'BCE': True,
}

PLAIN_YEAR_PATTERN = re.compile(r'[+-]?[0-9]+')
ERA_YEAR_PATTERN = re.compile(r'([0-9]+)\s+([A-Za-z]+)')


class MalformedYearError(ValueError):
    """Raised when a token is neither a plain year nor a year with an era."""

    def __init__(self, token: str):
        super().__init__(f"Malformed year: {token!r}")
        self.token = token


def normalize_year(token: str) -> int:
    """Convert a year token into an astronomical year number."""
    if PLAIN_YEAR_PATTERN.fullmatch(token):
        return int(token)

    match = ERA_YEAR_PATTERN.fullmatch(token)
    if not match:
        raise MalformedYearError(token)

    year = int(match.group(1))
    era = match.group(2).upper()
    if era not in ERAS or year == 0:
        raise MalformedYearError(token)

    if ERAS[era]:
        return 1 - year
    return year


def format_year(year: int) -> str:
    """Render an astronomical year number the way Wikipedia writes it."""
    if year > 0:
        return str(year)
    return f"{1 - year} BC"
