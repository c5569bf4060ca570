# travel_admin/services/asset_url.py
from __future__ import annotations

_ABSOLUTE_PREFIXES = ("http://", "https://")


def resolve(path: str | None, base_url: str) -> str:
    """
    Turn a stored image path into a URL a browser can load.
    - empty / None        -> ""  (no image)
    - http(s)://...       -> unchanged
    - /assets/x.jpg       -> {base_url}/assets/x.jpg
    - assets/x.jpg        -> {base_url}/assets/x.jpg
    """
    if not path:
        return ""
    if path.startswith(_ABSOLUTE_PREFIXES):
        return path

    base = base_url.rstrip("/")
    if path.startswith("/"):
        return f"{base}{path}"
    return f"{base}/{path}"
