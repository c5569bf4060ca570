# travel_admin/services/package_normalizer.py
"""
Stored package rows <-> public package records.

Read side: decode the JSON columns, reconcile the historical column layouts
(combined `inclusion` vs. split `included`/`excluded`, `title` vs. `name`) and
turn every stored image path into an absolute URL.

Write side: split the public `inclusion` object back into the `included` /
`excluded` columns and encode the structured fields. Image paths are stored
exactly as given. `booking_information` and `cancellation_policy` have no
column and are dropped.
"""
from __future__ import annotations

import copy
from typing import Any, Mapping

from travel_admin.services.asset_url import resolve
from travel_admin.services.field_coder import DecodeAttempt, decode, decode_first, encode

DEFAULT_INCLUSION: dict[str, Any] = {
    "included": [],
    "excluded": [],
    "booking_information": "",
    "cancellation_policy": "",
}

DEFAULT_SUMMARY: dict[str, Any] = {
    "description": "",
    "activities": [],
    "locations": [],
}


def _complete(value: Any, default: Mapping[str, Any]) -> dict[str, Any]:
    # decoded objects may predate some members or hold nulls; non-objects are unusable
    if not isinstance(value, Mapping):
        return copy.deepcopy(dict(default))
    merged = copy.deepcopy(dict(default))
    merged.update((k, v) for k, v in value.items() if v is not None)
    return merged


def _combined_inclusion(row: Mapping[str, Any]) -> dict[str, Any]:
    return _complete(decode(row.get("inclusion"), DEFAULT_INCLUSION), DEFAULT_INCLUSION)


def _split_inclusion(row: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "included": decode(row.get("included"), []),
        "excluded": decode(row.get("excluded"), []),
        "booking_information": "",
        "cancellation_policy": "",
    }


def _combined_summary(row: Mapping[str, Any]) -> dict[str, Any]:
    return _complete(decode(row.get("summary"), DEFAULT_SUMMARY), DEFAULT_SUMMARY)


INCLUSION_LAYOUTS = (
    DecodeAttempt(("inclusion",), _combined_inclusion),
    DecodeAttempt(("included", "excluded"), _split_inclusion),
)

SUMMARY_LAYOUTS = (
    DecodeAttempt(("summary",), _combined_summary),
)


def _is_path(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _resolve_image_entry(entry: Any, base_url: str) -> Any:
    if isinstance(entry, str):
        return resolve(entry, base_url)
    if isinstance(entry, Mapping) and _is_path(entry.get("url")):
        return {**entry, "url": resolve(entry["url"], base_url)}
    return entry


def _resolve_highlight(highlight: Any, base_url: str) -> Any:
    if isinstance(highlight, Mapping) and _is_path(highlight.get("img")):
        return {**highlight, "img": resolve(highlight["img"], base_url)}
    return highlight


def _resolve_day(day: Any, base_url: str) -> Any:
    if not isinstance(day, Mapping):
        return day

    out = dict(day)
    if _is_path(day.get("image")):
        out["image"] = resolve(day["image"], base_url)
    if isinstance(day.get("highlight"), list):
        out["highlight"] = [_resolve_highlight(h, base_url) for h in day["highlight"]]
    return out


def normalize_for_read(row: Mapping[str, Any], base_url: str) -> dict[str, Any]:
    """Project a stored package row onto the public package shape. Never raises."""
    pkg = dict(row)

    pkg["images"] = decode(row.get("images"), [])
    pkg["itinerary"] = decode(row.get("itinerary"), [])
    pkg["inclusion"] = decode_first(row, INCLUSION_LAYOUTS, DEFAULT_INCLUSION)
    pkg["summary"] = decode_first(row, SUMMARY_LAYOUTS, DEFAULT_SUMMARY)

    if not pkg.get("name") and pkg.get("title"):
        pkg["name"] = pkg["title"]

    image = row.get("image")
    pkg["image"] = resolve(image, base_url) if image is None or isinstance(image, str) else image

    if isinstance(pkg["images"], list):
        pkg["images"] = [_resolve_image_entry(e, base_url) for e in pkg["images"]]

    if isinstance(pkg["itinerary"], list):
        pkg["itinerary"] = [_resolve_day(d, base_url) for d in pkg["itinerary"]]

    return pkg


def split_for_write(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Map validated package input onto the `packages` columns.
    Validation (required name/slug/country/days) happens in the request schema.
    """
    inclusion = data.get("inclusion") or {}

    row = {
        "name": data.get("name") or data.get("title"),
        "slug": data.get("slug"),
        "country": data.get("country"),
        "days": data.get("days"),
        "image": data.get("image") or None,
        "price": data.get("price") or None,
        "description": data.get("description") or None,
        "itinerary": encode(data.get("itinerary")),
        "included": encode(inclusion.get("included") or []),
        "excluded": encode(inclusion.get("excluded") or []),
        "summary": encode(data.get("summary")),
        "images": encode(data.get("images")),
    }
    if data.get("stars") is not None:
        row["stars"] = data["stars"]
    return row
