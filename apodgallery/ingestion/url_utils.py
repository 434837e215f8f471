"""URL helpers for detail pages and embedded video players."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import parse_qsl, urljoin, urlparse


VIDEO_HOST_MARKERS = ("youtube", "vimeo")

YOUTUBE_THUMBNAIL = "https://img.youtube.com/vi/{video_id}/hqdefault.jpg"

_EMBED_ID = re.compile(r"embed/([A-Za-z0-9_-]+)")


def absolute_url(base: str, ref: Optional[str]) -> Optional[str]:
    """Resolve `ref` against `base` unless it is already absolute.

    - Absolute http(s) URLs pass through untouched
    - Protocol-relative (`//host/x`) and relative refs are joined onto base
    """
    if not ref:
        return None
    ref = ref.strip()
    if not ref:
        return None
    if ref.startswith("http"):
        return ref
    return urljoin(base, ref)


def is_video_embed(src: Optional[str]) -> bool:
    s = (src or "").lower()
    return any(marker in s for marker in VIDEO_HOST_MARKERS)


def youtube_video_id(url: str) -> Optional[str]:
    """Extract a YouTube id from an embed path or a `v=` query parameter."""
    if not url:
        return None
    m = _EMBED_ID.search(url)
    if m:
        return m.group(1)
    for k, v in parse_qsl(urlparse(url).query, keep_blank_values=False):
        if k == "v" and v:
            return v
    return None


def video_thumbnail_url(url: str) -> Optional[str]:
    """Thumbnail for a recognized provider; None when it cannot be derived."""
    host = (urlparse(url or "").netloc or "").lower()
    if "youtube" not in host:
        return None
    vid = youtube_video_id(url)
    if not vid:
        return None
    return YOUTUBE_THUMBNAIL.format(video_id=vid)
