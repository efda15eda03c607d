"""
Interpark Ticket scraper — uses Playwright (headless Chromium).

Listing page: https://mticket.interpark.com/Genre/ConcertMain?invisible=N
  - The list is rendered client-side; class names change between revisions,
    so cards are discovered heuristically (see scrapers/candidates.py).
  - Card layout:  .goods-item / [class*="goods"] containing
        title  .title / .goods-title / .name   (else the first link)
        date   .date / .period / .play-date    e.g. "2025.10.31~2025.11.01", "10.31"
        venue  .place / .venue / .play-place
        price  .price                          e.g. "55,000원", "무료"
        link   first <a> whose href contains "goods" (any case)
  - Link layout (no cards found): a[href*="GoodsCode"] with date/venue/price
    elements as siblings under the link's parent.

No artist on the listing page, so every record gets "Various".
"""

import logging
from datetime import date
from typing import Optional
from urllib.parse import urljoin

from bs4 import Tag

from concertscout.models import DEFAULT_ARTIST, MAX_RECORDS, Concert
from concertscout.normalize import normalize_date, normalize_price
from concertscout.scrapers.base import BaseScraper, ExtractionError
from concertscout.scrapers.browser import fetch_rendered, fetch_static
from concertscout.scrapers.candidates import (
    CONTAINER,
    CONTAINER_SELECTOR,
    LINK_SELECTOR,
    select_candidates,
)

logger = logging.getLogger(__name__)

MOBILE_CONCERT_URL = "https://mticket.interpark.com/Genre/ConcertMain?invisible=N"
SOURCE_LABEL = "인터파크 티켓"   # venue used when a card names none

# Card (container) selectors
_ITEM_TITLE = ".title, .goods-title, .name"
_ITEM_DATE = ".date, .period, .play-date"
_ITEM_VENUE = ".place, .venue, .play-place"
_ITEM_PRICE = ".price"

# Link-parent selectors are looser: class names only need to contain the token
_LINK_DATE = "[class*='date'], [class*='period'], .play-date"
_LINK_VENUE = "[class*='place'], [class*='venue'], .play-place"
_LINK_PRICE = "[class*='price']"


def _clean(text: str) -> str:
    return " ".join(text.split())


def _first_text(scope: Optional[Tag], selector: str) -> str:
    """Text of the first element under `scope` matching `selector` that has any."""
    if scope is None:
        return ""
    for el in scope.select(selector):
        text = _clean(el.get_text(" "))
        if text:
            return text
    return ""


def _anchors(element: Tag) -> list[Tag]:
    if element.name == "a":
        return [element]
    return element.select("a")


def _goods_href(element: Tag) -> str:
    """href of the first anchor pointing at a goods (product) page, or ""."""
    for a in _anchors(element):
        href = (a.get("href") or "").strip()
        if "goods" in href.lower():
            return href
    return ""


def extract_from_item(element: Tag, base_url: str, today: Optional[date] = None) -> Optional[Concert]:
    """Build a Concert from a card element, or None when no title can be found."""
    title = _first_text(element, _ITEM_TITLE)
    if not title:
        anchors = _anchors(element)
        if anchors:
            title = _clean(anchors[0].get_text(" ")) or anchors[0].get("title", "").strip()
    if not title:
        return None

    href = _goods_href(element)
    url = urljoin(base_url, href) if href else ""

    return Concert(
        title=title,
        artist=DEFAULT_ARTIST,
        venue=_first_text(element, _ITEM_VENUE) or SOURCE_LABEL,
        date=normalize_date(_first_text(element, _ITEM_DATE), today),
        price=normalize_price(_first_text(element, _ITEM_PRICE)),
        url=url,
        source=InterparkScraper.source_name,
    )


def extract_from_link(link: Tag, base_url: str, today: Optional[date] = None) -> Optional[Concert]:
    """Build a Concert from a goods-code anchor, reading details from its parent."""
    href = (link.get("href") or "").strip()
    if not href:
        raise ExtractionError("goods link has no href")
    url = urljoin(base_url, href)

    title = _clean(link.get_text(" ")) or link.get("title", "").strip()
    if not title:
        return None

    parent = link.parent
    return Concert(
        title=title,
        artist=DEFAULT_ARTIST,
        venue=_first_text(parent, _LINK_VENUE) or SOURCE_LABEL,
        date=normalize_date(_first_text(parent, _LINK_DATE), today),
        price=normalize_price(_first_text(parent, _LINK_PRICE)),
        url=url,
        source=InterparkScraper.source_name,
    )


class InterparkScraper(BaseScraper):
    source_key = "interpark"
    source_name = "Interpark"

    def __init__(self, scraper_cfg: dict):
        super().__init__(scraper_cfg)
        self.url = self.url or MOBILE_CONCERT_URL
        self.render = scraper_cfg.get("render", True)
        self.timeout_ms = scraper_cfg.get("timeout_ms", 30_000)
        self.settle_timeout_ms = scraper_cfg.get("settle_timeout_ms", 3_000)
        self.max_records = scraper_cfg.get("max_records", MAX_RECORDS)

    def fetch_html(self) -> str:
        if not self.render:
            return fetch_static(self.url)
        return fetch_rendered(
            self.url,
            ready_selector=f"{CONTAINER_SELECTOR}, {LINK_SELECTOR}",
            timeout_ms=self.timeout_ms,
            settle_timeout_ms=self.settle_timeout_ms,
        )

    def fetch_events(self, today: Optional[date] = None) -> list[Concert]:
        logger.info("Starting Interpark concert scraping")
        concerts = self.extract_concerts(self.fetch_html(), today)
        logger.info("Scraped %d concerts from Interpark", len(concerts))
        return concerts

    def extract_concerts(self, html: str, today: Optional[date] = None) -> list[Concert]:
        """Run candidate discovery and field extraction over listing HTML."""
        concerts: list[Concert] = []
        seen: set = set()

        for candidate in select_candidates(html):
            if len(concerts) >= self.max_records:
                break
            extract = extract_from_item if candidate.strategy == CONTAINER else extract_from_link
            try:
                concert = extract(candidate.element, self.url, today)
            except Exception:
                logger.debug("Skipping unreadable %s candidate", candidate.strategy, exc_info=True)
                continue
            if concert is None:
                continue
            # Nested container matches repeat their inner card; link-less cards are keyed on content
            key = concert.url or (concert.title, concert.venue, concert.date, concert.price)
            if key in seen:
                continue
            seen.add(key)
            concerts.append(concert)

        return concerts
