"""Search entrypoints for the device finder."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from constants import DEVICE_LIST_URL, EXCLUDED_CATEGORY

Device = Dict[str, str]

SEARCH_PLACEHOLDER = "Search devices by name, category, or based on..."
COPY_ACTION_TITLE = "Copy 'Based On' to Clipboard"
OPEN_ACTION_TITLE = "Open Quad Cortex device list in browser"


def has_reference(device: Device) -> bool:
    return bool((device.get("basedOn") or "").strip())


def _matches(device: Device, query: str) -> bool:
    if query in device["name"].lower() or query in device["category"].lower():
        return True
    return has_reference(device) and query in device["basedOn"].lower()


def filter_devices(
    devices: Iterable[Device], query: str, excluded_category: str = EXCLUDED_CATEGORY
) -> List[Device]:
    """Return devices matching *query*, never including *excluded_category*.

    An empty query matches every remaining device. Otherwise the query is a
    case-insensitive substring of the name, the category or a non-blank
    ``basedOn`` value.
    """

    released = [device for device in devices if device["category"] != excluded_category]
    if not query:
        return released

    needle = query.lower()
    return [device for device in released if _matches(device, needle)]


def group_by_category(devices: Iterable[Device]) -> List[Tuple[str, List[Device]]]:
    grouped: Dict[str, List[Device]] = {}
    for device in devices:
        grouped.setdefault(device["category"], []).append(device)

    return sorted(grouped.items(), key=lambda pair: pair[0])


def device_actions(device: Device, reference_url: str = DEVICE_LIST_URL) -> List[Dict[str, str]]:
    actions: List[Dict[str, str]] = []
    if has_reference(device):
        actions.append(
            {"type": "copy_to_clipboard", "title": COPY_ACTION_TITLE, "content": device["basedOn"]}
        )
    actions.append({"type": "open_in_browser", "title": OPEN_ACTION_TITLE, "url": reference_url})
    return actions


def present_device(device: Device, index: int, reference_url: str = DEVICE_LIST_URL) -> Dict[str, object]:
    category = device["category"]
    return {
        "key": f"{category}-{device['name']}-{index}",
        "title": device["name"],
        "subtitle": device.get("basedOn") or "",
        "accessories": [{"text": category}],
        "actions": device_actions(device, reference_url),
    }


def search_devices(
    devices: Iterable[Device],
    query: str,
    excluded_category: str = EXCLUDED_CATEGORY,
    reference_url: str = DEVICE_LIST_URL,
) -> List[Dict[str, object]]:
    """Return list sections for *query*, one per category in alphabetical order.

    Everything is recomputed from *devices* on each call, so the query is the
    only state a caller has to keep.
    """

    matches = filter_devices(devices, query, excluded_category)
    return [
        {
            "title": category,
            "items": [present_device(device, index, reference_url) for index, device in enumerate(members)],
        }
        for category, members in group_by_category(matches)
    ]
