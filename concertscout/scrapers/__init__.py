"""
Scraper registry.

To add a new source:
1. Create <source_key>.py with a BaseScraper subclass setting source_key and source_name
2. Reuse scrapers.browser for fetching and scrapers.candidates for discovery
3. Import and register it in the SCRAPERS dict below
"""

from concertscout.scrapers.base import BaseScraper, ExtractionError, FetchError
from concertscout.scrapers.interpark import InterparkScraper

SCRAPERS: dict[str, type[BaseScraper]] = {
    "interpark": InterparkScraper,
}

DEFAULT_SOURCE = "interpark"

__all__ = ["SCRAPERS", "DEFAULT_SOURCE", "BaseScraper", "ExtractionError", "FetchError"]
