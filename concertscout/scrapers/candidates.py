"""
Candidate discovery on listing markup.

Listing markup changes between site revisions, so two strategies are tried in
order and the first one that finds anything wins:

  1. container - elements whose class looks like a product/goods card
  2. link      - anchors whose href carries a goods code
"""

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

CONTAINER = "container"
LINK = "link"

CONTAINER_SELECTOR = ".goodsItem, .goods-item, .product-item, [class*='goods']"
LINK_SELECTOR = "a[href*='GoodsCode'], a[href*='goodsCode']"


@dataclass
class Candidate:
    element: Tag
    strategy: str      # CONTAINER or LINK


def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def select_candidates(html: str) -> list[Candidate]:
    """Return candidate listing elements in document order."""
    if not html or not html.strip():
        return []

    soup = parse(html)

    items = soup.select(CONTAINER_SELECTOR)
    logger.info("Found %d goods items", len(items))
    if items:
        return [Candidate(el, CONTAINER) for el in items]

    links = soup.select(LINK_SELECTOR)
    logger.info("Found %d links with goods code", len(links))
    return [Candidate(el, LINK) for el in links]
