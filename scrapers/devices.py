"""Quad Cortex device list scraper.

The device list is a React page without tables. Each category is an ``h2``
followed by a container div; inside it every device is a row div whose cell
divs hold, in order: Name, Based on, Added in CorOS, Previous name, Updated
in CorOS, Replaces. Only the first two columns are kept.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from bs4 import BeautifulSoup
from bs4.element import Tag

from constants import CELL_SELECTOR, DEVICE_LIST_URL, HEADING_SELECTOR, ROW_SELECTOR

from .utils import render_page

logger = logging.getLogger(__name__)

Device = Dict[str, str]


def _text(tag: Tag) -> str:
    return tag.get_text().strip()


def _rows_for_heading(heading: Tag, heading_selector: str, row_selector: str) -> List[Tag]:
    """Return the rows of the first following sibling that holds any.

    The walk stops at the next heading, so a category without its own
    container yields nothing instead of borrowing the next one's rows.
    """

    for sibling in heading.find_next_siblings():
        if sibling.css.match(heading_selector):
            break
        rows = sibling.select(row_selector)
        if rows:
            return rows
    return []


def _parse_row(row: Tag, category: str, cell_selector: str) -> Device | None:
    cells = row.select(cell_selector)
    if len(cells) < 2:
        return None

    name = _text(cells[0])
    if not name:
        return None

    return {"category": category, "name": name, "basedOn": _text(cells[1])}


def extract_devices(
    html: str,
    heading_selector: str = HEADING_SELECTOR,
    row_selector: str = ROW_SELECTOR,
    cell_selector: str = CELL_SELECTOR,
) -> List[Device]:
    """Return device records from a rendered device list document.

    Records come out in heading order, then row order. Headings without text,
    rows with fewer than two cells and rows without a name are skipped.
    """

    soup = BeautifulSoup(html, "html.parser")
    devices: List[Device] = []

    for heading in soup.select(heading_selector):
        category = _text(heading)
        if not category:
            continue

        for row in _rows_for_heading(heading, heading_selector, row_selector):
            device = _parse_row(row, category, cell_selector)
            if device:
                devices.append(device)

    return devices


def scrape_devices(url: str = DEVICE_LIST_URL) -> List[Device]:
    html = render_page(url, wait_selector=HEADING_SELECTOR, stable_selector=ROW_SELECTOR)
    devices = extract_devices(html)
    if not devices:
        logger.warning("No devices could be extracted from %s", url)
    return devices
