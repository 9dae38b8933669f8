"""Data types shared by the extractor, the query and the command line client."""
import calendar
import datetime
from dataclasses import dataclass

from wikipedia_events.years import format_year

# Any leap year works; it only decides how long February may be.
LEAP_YEAR = 2000


def days_in_month(year: int, month: int) -> int:
    """Length of a month in the proleptic Gregorian calendar."""
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


@dataclass(frozen=True)
class MonthDay:
    """A day of the year without a year, e.g. July 20."""
    month: int
    day: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month out of range: {self.month}")
        if not 1 <= self.day <= days_in_month(LEAP_YEAR, self.month):
            raise ValueError(f"Day out of range for {calendar.month_name[self.month]}: {self.day}")

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]

    def __str__(self):
        return f"{self.month_name} {self.day}"


@dataclass(frozen=True, order=True)
class EventDate:
    """A calendar date whose year may lie before year 1.

    ``datetime.date`` stops at year 1, so BC years are stored in astronomical
    numbering (1 BC is year 0). Instances order chronologically.
    """
    year: int
    month: int
    day: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month out of range: {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise ValueError(
                f"Day out of range for {calendar.month_name[self.month]} {format_year(self.year)}: {self.day}"
            )

    @property
    def month_day(self) -> MonthDay:
        return MonthDay(self.month, self.day)

    def to_date(self) -> datetime.date:
        """Convert to ``datetime.date``; raises ``ValueError`` for years before 1."""
        return datetime.date(self.year, self.month, self.day)

    def __str__(self):
        return f"{calendar.month_name[self.month]} {self.day}, {format_year(self.year)}"


@dataclass(frozen=True)
class Event:
    """A historical event listed on a Wikipedia day page."""
    date: EventDate
    description: str

    def __str__(self):
        return f"{self.date}: {self.description}"
