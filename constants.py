"""Shared settings for the device extractor and the search view."""

from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent

DEVICE_LIST_URL = os.environ.get("DEVICE_LIST_URL", "https://neuraldsp.com/device-list")
DEVICES_PATH = Path(os.environ.get("DEVICES_PATH", PROJECT_ROOT / "lib" / "devices.json"))

# Devices announced on the page but not shipped in CorOS yet.
EXCLUDED_CATEGORY = "Announced devices that have not yet been released"

# The device list is styled-components markup, so rows and cells are only
# identifiable by their generated class names.
HEADING_SELECTOR = "h2"
ROW_SELECTOR = "div.sc-97391185-0.vdqnr"
CELL_SELECTOR = "div.sc-eb3d5477-0.ijbjQB"

HEADLESS = os.environ.get("HEADLESS", "true").lower() != "false"
NAVIGATION_TIMEOUT_MS = int(os.environ.get("NAVIGATION_TIMEOUT_MS", 30000))
HEADING_TIMEOUT_MS = int(os.environ.get("HEADING_TIMEOUT_MS", 10000))
SETTLE_INTERVAL_MS = int(os.environ.get("SETTLE_INTERVAL_MS", 1000))
SETTLE_MAX_POLLS = int(os.environ.get("SETTLE_MAX_POLLS", 5))
