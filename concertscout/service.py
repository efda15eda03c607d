"""
Scrape orchestration.

run() is the only entry point that talks to the network. It never raises for
scrape problems: a failed or empty scrape is replaced by the sample set, so
the store always ends up holding something.
"""

import logging
import sqlite3
from datetime import date
from typing import Optional

import concertscout.db as db_module
from concertscout.models import CHEAP_MAX_PRICE, MAX_RECORDS, Concert
from concertscout.samples import sample_concerts
from concertscout.scrapers import DEFAULT_SOURCE, SCRAPERS, BaseScraper

logger = logging.getLogger(__name__)


def scrape(scraper: BaseScraper, today: Optional[date] = None) -> list[Concert]:
    """Run `scraper`, turning any failure into an empty result."""
    try:
        return scraper.fetch_events(today)
    except Exception:
        logger.exception("Error scraping %s", scraper.source_name or type(scraper).__name__)
        return []


def run(
    conn: sqlite3.Connection,
    scraper: Optional[BaseScraper] = None,
    today: Optional[date] = None,
) -> list[Concert]:
    """Scrape, fall back to samples when nothing came back, and store the result."""
    if scraper is None:
        scraper = SCRAPERS[DEFAULT_SOURCE]({})

    concerts = scrape(scraper, today)[:MAX_RECORDS]
    if not concerts:
        logger.warning("No concerts scraped, using sample data")
        concerts = sample_concerts(today)

    db_module.replace_all(conn, concerts)
    logger.info("Stored %d concerts", len(concerts))
    return concerts


def run_samples(conn: sqlite3.Connection, today: Optional[date] = None) -> list[Concert]:
    """Store the sample set without scraping."""
    concerts = sample_concerts(today)
    db_module.replace_all(conn, concerts)
    logger.info("Loaded %d sample concerts", len(concerts))
    return concerts


def cheap_concerts(conn: sqlite3.Connection, max_price: int = CHEAP_MAX_PRICE) -> list[Concert]:
    return db_module.query_cheap(conn, max_price)


def all_concerts(conn: sqlite3.Connection) -> list[Concert]:
    return db_module.query_all(conn)
