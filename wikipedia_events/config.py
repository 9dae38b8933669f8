"""Settings read from the environment and an optional ``.env`` file."""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

VERSION = '0.1.0'

DEFAULT_BASE_URL = 'https://en.wikipedia.org'
DEFAULT_TIMEOUT = 5000
DEFAULT_USER_AGENT = f'wikipedia-events/{VERSION}'
DEFAULT_LOG_LEVEL = 'WARNING'


def parse_timeout(value) -> int:
    """Parse a timeout in milliseconds; it has to be a positive integer."""
    try:
        timeout = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout: {value!r}")
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive: {timeout}")
    return timeout


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(timeout: Optional[int] = None, base_url: Optional[str] = None) -> Settings:
    """Build settings from the environment, after loading ``.env`` if present.

    An explicit ``timeout`` or ``base_url`` wins over the environment, whose
    value is then not read at all.
    """
    load_dotenv()
    if timeout is None:
        timeout = os.getenv('EVENT_QUERY_TIMEOUT', DEFAULT_TIMEOUT)
    if base_url is None:
        base_url = os.getenv('WIKIPEDIA_BASE_URL', DEFAULT_BASE_URL)
    return Settings(
        base_url=base_url.rstrip('/'),
        timeout=parse_timeout(timeout),
        user_agent=os.getenv('EVENT_QUERY_USER_AGENT', DEFAULT_USER_AGENT),
        log_level=os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper(),
    )
