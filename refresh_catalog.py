#!/usr/bin/env python3
"""
Refresh lib/devices.json from the Quad Cortex device list page.

Usage:
    python refresh_catalog.py
"""

import logging
import sys

from catalog import save_devices, summarize_by_category
from constants import DEVICE_LIST_URL, DEVICES_PATH
from scrapers.devices import scrape_devices

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        devices = scrape_devices(DEVICE_LIST_URL)
    except Exception:
        logger.exception("Error scraping device list")
        return 1

    logger.info("Scraped %d devices", len(devices))
    output_path = save_devices(devices, DEVICES_PATH)
    logger.info("Successfully wrote %d devices to %s", len(devices), output_path)

    logger.info("\nSummary by category:")
    for category, count in summarize_by_category(devices):
        logger.info("  %s: %d devices", category, count)

    return 0


if __name__ == "__main__":
    sys.exit(main())
