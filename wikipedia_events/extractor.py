"""Extraction of events from the "Events" section of a Wikipedia day page."""
import enum
import logging
from typing import Callable, List, NamedTuple, Optional

from bs4 import BeautifulSoup, Tag

from wikipedia_events.models import Event, EventDate
from wikipedia_events.years import MalformedYearError, normalize_year

logger = logging.getLogger(__name__)

SECTION_ID = 'Events'
# Wikipedia separates the year from the description with an en dash.
SEPARATOR = ' – '
HEADINGS = ('h1', 'h2', 'h3', 'h4', 'h5', 'h6')
LISTS = ('ul', 'ol')


class SkipReason(enum.Enum):
    MALFORMED_ENTRY = 'malformed entry'
    MALFORMED_YEAR = 'malformed year'
    INVALID_DATE = 'invalid date'


class SkippedEntry(NamedTuple):
    """A list item that could not be turned into an event."""
    text: str
    reason: SkipReason


SkipHandler = Callable[[SkippedEntry], None]


def clean_text(text: str) -> str:
    """Collapse whitespace, non-breaking spaces included, into single spaces."""
    return ' '.join(text.split())


def heading_rank(element: Tag) -> Optional[int]:
    """Rank of a heading (1 for h1) or of a ``div.mw-heading`` wrapper, else None."""
    if element.name in HEADINGS:
        return int(element.name[1])
    if element.name == 'div' and 'mw-heading' in element.get('class', []):
        heading = element.find(HEADINGS)
        if heading is not None:
            return int(heading.name[1])
    return None


def find_section_heading(soup: BeautifulSoup, section_id: str = SECTION_ID) -> Optional[Tag]:
    """Find the element that opens a section, given the section's anchor id.

    The anchor is either the heading itself (``<h2 id="Events">``) or an
    element inside it (``<h2><span id="Events">``). Current Wikipedia markup
    wraps headings in ``<div class="mw-heading">``; the wrapper is returned
    then, since the section content follows it.
    """
    marker = soup.find(id=section_id)
    if marker is None:
        return None

    heading = marker if marker.name in HEADINGS else marker.find_parent(HEADINGS)
    if heading is None:
        return None

    wrapper = heading.parent
    if wrapper is not None and wrapper.name == 'div' and heading_rank(wrapper) is not None:
        return wrapper
    return heading


def find_events_list(soup: BeautifulSoup, section_id: str = SECTION_ID) -> Optional[Tag]:
    """Return the first list following the Events heading, or None.

    Only one list is returned. Current day pages split Events into
    subsections (Pre-1600, 1601–1900, 1901–present), each with a list of its
    own; the lists after the first subsection are not read.
    """
    heading = find_section_heading(soup, section_id)
    if heading is None:
        return None

    rank = heading_rank(heading)
    for sibling in heading.find_next_siblings():
        if sibling.name in LISTS:
            return sibling
        sibling_rank = heading_rank(sibling)
        if sibling_rank is not None and sibling_rank <= rank:
            break
    return None


def split_entry(text: str) -> List[str]:
    """Split an entry into its year and description, trimmed."""
    return [part.strip() for part in text.split(SEPARATOR)]


def extract_events(soup: BeautifulSoup, month: int, day: int,
                   on_skip: Optional[SkipHandler] = None) -> List[Event]:
    """Extract the events listed on a day page, in document order.

    Entries that can't be parsed are logged and reported to ``on_skip``; they
    never abort the extraction.
    """
    events_list = find_events_list(soup)
    if events_list is None:
        logger.info("Found 0 event(s): no Events section")
        return []

    items = events_list.find_all('li', recursive=False)
    logger.info(f"Found {len(items)} event(s)")

    def skip(text, reason):
        logger.warning(f"Skipping a {reason.value}: {text!r}")
        if on_skip is not None:
            on_skip(SkippedEntry(text, reason))

    events = []
    for item in items:
        text = clean_text(item.get_text())
        parts = split_entry(text)
        if len(parts) != 2:
            skip(text, SkipReason.MALFORMED_ENTRY)
            continue

        year_token, description = parts
        try:
            year = normalize_year(year_token)
        except MalformedYearError:
            skip(text, SkipReason.MALFORMED_YEAR)
            continue

        try:
            date = EventDate(year, month, day)
        except ValueError:
            skip(text, SkipReason.INVALID_DATE)
            continue

        events.append(Event(date, description))

    return events
