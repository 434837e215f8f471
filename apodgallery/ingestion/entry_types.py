"""Shared ingestion data types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


SERVICE_VERSION = "v1"

MEDIA_IMAGE = "image"
MEDIA_VIDEO = "video"
MEDIA_UNKNOWN = "unknown"


@dataclass(frozen=True)
class EntryStub:
    """One archive line (pre-hydration).

    `date` is ISO `YYYY-MM-DD`; `href` is relative to the archive base URL.
    """

    date: str
    title: str
    href: str


@dataclass(frozen=True)
class MediaInfo:
    media_type: str = MEDIA_UNKNOWN
    url: Optional[str] = None
    hdurl: Optional[str] = None
    thumbnail_url: Optional[str] = None


@dataclass(frozen=True)
class Record:
    """Hydrated entry, the unit persisted into Views."""

    title: str
    date: str
    href: str
    media_type: str = MEDIA_UNKNOWN
    url: Optional[str] = None
    hdurl: Optional[str] = None
    thumbnail_url: Optional[str] = None
    explanation: str = ""
    service_version: str = SERVICE_VERSION

    @classmethod
    def from_stub(cls, stub: EntryStub, media: MediaInfo, explanation: str) -> "Record":
        return cls(
            title=stub.title,
            date=stub.date,
            href=stub.href,
            media_type=media.media_type,
            url=media.url,
            hdurl=media.hdurl,
            thumbnail_url=media.thumbnail_url,
            explanation=explanation,
        )

    @classmethod
    def degraded(cls, stub: EntryStub) -> "Record":
        """Record used when the detail page could not be hydrated."""
        return cls(title=stub.title, date=stub.date, href=stub.href)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Record":
        return cls(
            title=str(data.get("title") or ""),
            date=str(data.get("date") or ""),
            href=str(data.get("href") or ""),
            media_type=data.get("media_type") or MEDIA_UNKNOWN,
            url=data.get("url"),
            hdurl=data.get("hdurl"),
            thumbnail_url=data.get("thumbnail_url"),
            explanation=data.get("explanation") or "",
            service_version=data.get("service_version") or SERVICE_VERSION,
        )

    @property
    def is_video(self) -> bool:
        return self.media_type == MEDIA_VIDEO
