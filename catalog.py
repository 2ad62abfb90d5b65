"""Reading and writing the local device catalog."""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from constants import DEVICES_PATH

logger = logging.getLogger(__name__)

Device = Dict[str, str]
PathLike = Union[str, Path]


def _coerce_device(item: object) -> Device | None:
    if not isinstance(item, dict) or not item.get("name"):
        return None

    return {
        "category": str(item.get("category") or ""),
        "name": str(item["name"]),
        "basedOn": str(item.get("basedOn") or ""),
    }


def load_devices(path: PathLike = DEVICES_PATH) -> List[Device]:
    """Return the catalog stored at *path*.

    A missing file yields an empty catalog. Entries that are not objects or
    have no name are dropped; a missing ``basedOn`` becomes an empty string.
    """

    path = Path(path)
    if not path.exists():
        logger.warning("Device catalog %s not found; run refresh_catalog.py first", path)
        return []

    with path.open(encoding="utf-8") as handle:
        data = json.load(handle)

    if not isinstance(data, list):
        raise ValueError(f"Device catalog {path} must contain a JSON array")

    devices = [device for device in map(_coerce_device, data) if device]
    logger.info("Loaded %d devices from %s", len(devices), path)
    return devices


def save_devices(devices: Iterable[Device], path: PathLike = DEVICES_PATH) -> Path:
    """Replace the catalog at *path* with *devices*, creating its directory."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(list(devices), indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def summarize_by_category(devices: Iterable[Device]) -> List[Tuple[str, int]]:
    """Return ``(category, count)`` pairs, largest first, ties in page order."""

    return Counter(device["category"] for device in devices).most_common()
