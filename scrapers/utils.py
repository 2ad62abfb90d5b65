"""Headless browser helpers for pages rendered client-side."""

from __future__ import annotations

import logging
from typing import Optional

from constants import (
    HEADLESS,
    HEADING_TIMEOUT_MS,
    NAVIGATION_TIMEOUT_MS,
    SETTLE_INTERVAL_MS,
    SETTLE_MAX_POLLS,
)

logger = logging.getLogger(__name__)

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


def wait_until_stable(page, selector: str, interval_ms: int = SETTLE_INTERVAL_MS, max_polls: int = SETTLE_MAX_POLLS) -> int:
    """Poll the number of elements matching *selector* until it stops changing.

    Returns as soon as two consecutive reads agree. After ``max_polls`` reads
    without agreement a warning is logged and the last count is returned.
    """

    previous: Optional[int] = None
    count = 0
    for _ in range(max_polls):
        page.wait_for_timeout(interval_ms)
        count = page.locator(selector).count()
        if count == previous:
            logger.info("Page settled with %d elements matching %s", count, selector)
            return count
        previous = count

    logger.warning(
        "Page still changing after %d polls (%d elements matching %s)",
        max_polls,
        count,
        selector,
    )
    return count


def render_page(
    url: str,
    wait_selector: Optional[str] = None,
    stable_selector: Optional[str] = None,
    *,
    headless: bool = HEADLESS,
    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS,
    wait_timeout_ms: int = HEADING_TIMEOUT_MS,
    settle_interval_ms: int = SETTLE_INTERVAL_MS,
    settle_max_polls: int = SETTLE_MAX_POLLS,
) -> str:
    """Load *url* in headless Chromium and return the rendered HTML.

    A missing ``wait_selector`` is only logged. Navigation and evaluation
    errors propagate; the browser is closed either way.
    """

    from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
    from playwright.sync_api import sync_playwright

    with sync_playwright() as playwright:
        logger.info("Launching browser...")
        browser = playwright.chromium.launch(headless=headless, args=BROWSER_ARGS)
        try:
            page = browser.new_page()
            logger.info("Fetching %s", url)
            page.goto(url, wait_until="networkidle", timeout=navigation_timeout_ms)

            if wait_selector:
                try:
                    page.wait_for_selector(wait_selector, timeout=wait_timeout_ms)
                except PlaywrightTimeoutError:
                    logger.warning("No %s elements found on %s", wait_selector, url)

            if stable_selector:
                wait_until_stable(page, stable_selector, settle_interval_ms, settle_max_polls)
            else:
                page.wait_for_timeout(settle_interval_ms)

            return page.content()
        finally:
            browser.close()
