from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from concertscout.models import Concert


class FetchError(Exception):
    """The listing page could not be loaded (browser, navigation or HTTP failure)."""


class ExtractionError(Exception):
    """A candidate element is too malformed to read fields from."""


class BaseScraper(ABC):
    # Subclasses must set these class attributes
    source_key: str = ""
    source_name: str = ""

    def __init__(self, scraper_cfg: dict):
        """
        Args:
            scraper_cfg: The [scraper] section from config.toml as a dict.
                         Typically contains at least 'url'.
        """
        self.scraper_cfg = scraper_cfg
        self.url = scraper_cfg.get("url", "")

    @abstractmethod
    def fetch_events(self, today: Optional[date] = None) -> list[Concert]:
        """
        Fetch and return the concerts currently listed by this source.

        `today` is the reference date for relative or unparsable dates;
        None means the current date.
        """
        ...
