"""Events that happened on a day of the year, according to Wikipedia."""
from wikipedia_events.config import VERSION as __version__
from wikipedia_events.event_query import EventQuery, build_page_url
from wikipedia_events.extractor import SkippedEntry, SkipReason, extract_events, find_events_list
from wikipedia_events.models import Event, EventDate, MonthDay
from wikipedia_events.years import MalformedYearError, format_year, normalize_year

__all__ = [
    'Event',
    'EventDate',
    'EventQuery',
    'MalformedYearError',
    'MonthDay',
    'SkipReason',
    'SkippedEntry',
    '__version__',
    'build_page_url',
    'extract_events',
    'find_events_list',
    'format_year',
    'normalize_year',
]
