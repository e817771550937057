from typing import Optional
from urllib.parse import urljoin, urlparse


def is_absolute(url: str) -> bool:
    parsed = urlparse(url)
    return bool(parsed.scheme and parsed.netloc) or url.startswith("//")


def resolve_artwork_url(artwork_url: Optional[str], asset_base: str) -> Optional[str]:
    """
    Turn a record's artwork reference into something an image viewer can open.

    Absolute URLs pass through untouched. Anything else is a path relative to
    the static-asset base. Empty references resolve to ``None``.
    """
    if not artwork_url or not artwork_url.strip():
        return None
    artwork_url = artwork_url.strip()
    if is_absolute(artwork_url):
        return artwork_url
    base = asset_base.rstrip("/") + "/"
    return urljoin(base, artwork_url.lstrip("/"))
