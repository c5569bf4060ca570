# travel_admin/services/field_coder.py
"""
JSON-in-TEXT columns.

Packages keep their structured fields (images, itinerary, inclusion lists,
summary) as JSON text. Rows written by older versions of the admin may hold
malformed text or an older column layout, and those rows must keep serving, so
decoding never raises: anything unreadable becomes the caller's default.
"""
from __future__ import annotations

import copy
import json
import logging
from typing import Any, Callable, Iterable, Mapping, NamedTuple

logger = logging.getLogger(__name__)


def decode(raw: Any, default: Any = None) -> Any:
    """
    Decode a stored JSON text value.
    - None                  -> default
    - already list/dict/... -> returned as-is
    - valid JSON text       -> parsed value
    - anything else         -> default
    """
    if raw is None:
        return copy.deepcopy(default)
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        logger.debug("Unreadable JSON column value %.60r, using default", raw)
        return copy.deepcopy(default)


def _is_populated(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, Mapping)):
        return len(value) > 0
    return True


def encode(value: Any) -> str | None:
    """
    Encode a structured value for storage, or None when there is nothing
    worth persisting (empty list, empty dict, dict with only blank members).
    """
    if not _is_populated(value):
        return None
    if isinstance(value, Mapping) and not any(_is_populated(v) for v in value.values()):
        return None
    return json.dumps(value)


class DecodeAttempt(NamedTuple):
    """One historical layout of a field: the columns it lives in and how to read them."""

    keys: tuple[str, ...]
    build: Callable[[Mapping[str, Any]], Any]


def decode_first(row: Mapping[str, Any], attempts: Iterable[DecodeAttempt], default: Any) -> Any:
    """
    Try each layout in priority order. A layout applies when any of its columns
    is present in the row, even when the stored value is NULL; the first one
    that applies wins. No layout present -> default.
    """
    for attempt in attempts:
        if any(key in row for key in attempt.keys):
            return attempt.build(row)
    return copy.deepcopy(default)
