import logging
from typing import List, Optional, Union

import requests
from bs4 import BeautifulSoup

from wikipedia_events.config import Settings, load_settings, parse_timeout
from wikipedia_events.extractor import SkipHandler, extract_events
from wikipedia_events.models import Event, MonthDay

logger = logging.getLogger(__name__)


def build_page_url(month_day: MonthDay, base_url: str) -> str:
    """Address of the Wikipedia page about a day of the year, e.g. .../wiki/July_20."""
    return f"{base_url}/wiki/{month_day.month_name}_{month_day.day}"


class EventQuery:
    """Queries Wikipedia for the events that happened on a day of the year."""

    def __init__(self, timeout: Optional[int] = None, base_url: Optional[str] = None,
                 settings: Optional[Settings] = None):
        settings = settings or load_settings(timeout=timeout, base_url=base_url)
        self.base_url = (base_url or settings.base_url).rstrip('/')
        self.timeout = settings.timeout if timeout is None else timeout
        self.session = requests.Session()
        self.session.headers['User-Agent'] = settings.user_agent

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def timeout(self) -> int:
        """Timeout for retrieving a page, in milliseconds."""
        return self._timeout

    @timeout.setter
    def timeout(self, value: int):
        self._timeout = parse_timeout(value)

    def get_page_content(self, url: str) -> str:
        """Retrieves the markup of a page."""
        logger.info(f"Retrieving web page from {url}")
        try:
            response = self.session.get(url, timeout=self.timeout / 1000)
            response.raise_for_status()
            return response.text
        except requests.RequestException as e:
            logger.error(f"Failed to retrieve {url}: {e}")
            raise

    def query(self, month: Union[int, MonthDay], day: Optional[int] = None,
              on_skip: Optional[SkipHandler] = None) -> List[Event]:
        """Returns the events that happened on the given day of the year.

        Accepts either a month and a day or a single ``MonthDay``. Raises
        ``requests.RequestException`` when the page can't be retrieved and
        ``ValueError`` for a day that doesn't exist in any year.
        """
        if isinstance(month, MonthDay):
            if day is not None:
                raise TypeError("day must not be given together with a MonthDay")
            month_day = month
        elif day is None:
            raise TypeError("day is required when month is an integer")
        else:
            month_day = MonthDay(month, day)

        content = self.get_page_content(build_page_url(month_day, self.base_url))
        soup = BeautifulSoup(content, 'html.parser')
        return extract_events(soup, month_day.month, month_day.day, on_skip=on_skip)
