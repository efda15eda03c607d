"""
Page fetching.

fetch_rendered() drives headless Chromium through Playwright for listings that
are filled in client-side; fetch_static() is a plain requests GET for pages
that ship their markup directly. Both raise FetchError on failure.
"""

import logging
from typing import Optional

import requests

from concertscout.scrapers.base import FetchError

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
VIEWPORT = {"width": 1920, "height": 1080}
# Sandboxing is unavailable when running inside most containers
_CHROMIUM_ARGS = ["--no-sandbox", "--disable-gpu", "--disable-dev-shm-usage"]


def fetch_rendered(
    url: str,
    *,
    ready_selector: Optional[str] = None,
    timeout_ms: int = 30_000,
    settle_timeout_ms: int = 3_000,
) -> str:
    """
    Load `url` in a headless browser and return the rendered HTML.

    When `ready_selector` is given, waits until a matching element is attached,
    for at most `settle_timeout_ms`; if it never appears the markup is returned
    as-is and the caller decides what an empty page means. Without a selector
    the page simply gets `settle_timeout_ms` to settle.
    """
    from playwright.sync_api import Error as PlaywrightError
    from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
    from playwright.sync_api import sync_playwright

    logger.info("Loading %s in headless Chromium", url)
    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True, args=_CHROMIUM_ARGS)
            try:
                context = browser.new_context(viewport=VIEWPORT, user_agent=USER_AGENT)
                page = context.new_page()
                page.goto(url, timeout=timeout_ms, wait_until="domcontentloaded")
                if ready_selector:
                    try:
                        page.wait_for_selector(
                            ready_selector, state="attached", timeout=settle_timeout_ms,
                        )
                    except PlaywrightTimeoutError:
                        logger.info(
                            "No element matched %r within %d ms; using current markup",
                            ready_selector, settle_timeout_ms,
                        )
                else:
                    page.wait_for_timeout(settle_timeout_ms)
                html = page.content()
            finally:
                browser.close()
    except PlaywrightError as exc:
        raise FetchError(f"Browser failed to load {url}: {exc}") from exc

    logger.debug("Fetched %d characters of rendered HTML", len(html))
    return html


def fetch_static(url: str, *, timeout: float = 15) -> str:
    """GET `url` without rendering and return the response body."""
    logger.info("Fetching %s", url)
    try:
        response = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"HTTP fetch failed for {url}: {exc}") from exc
    return response.text
