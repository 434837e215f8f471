"""Detail page hydration.

Policy:
- One GET per entry, no retries.
- Any failure degrades the Record (media_type "unknown") instead of raising.
- The pacing policy runs after every entry, success or failure.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup

from apodgallery.extraction.explanation import ExplanationStrategy, longest_paragraph_explanation
from apodgallery.extraction.fetch import HTML_PARSER
from apodgallery.ingestion.entry_types import MEDIA_IMAGE, MEDIA_VIDEO, EntryStub, MediaInfo, Record
from apodgallery.ingestion.pacing import Pacer, no_delay
from apodgallery.ingestion.url_utils import absolute_url, is_video_embed, video_thumbnail_url

logger = logging.getLogger(__name__)


Fetcher = Callable[[str], str]


def extract_media(soup: BeautifulSoup, base_url: str) -> MediaInfo:
    """Detect the primary media: video iframe first, then the first image."""
    for iframe in soup.find_all("iframe"):
        src = iframe.get("src") or ""
        if is_video_embed(src):
            return MediaInfo(media_type=MEDIA_VIDEO, url=src, thumbnail_url=video_thumbnail_url(src))

    img = soup.find("img")
    if img is None:
        return MediaInfo()
    url = absolute_url(base_url, img.get("src"))
    hdurl = None
    parent = img.parent
    if parent is not None and parent.name == "a":
        hdurl = absolute_url(base_url, parent.get("href"))
    return MediaInfo(media_type=MEDIA_IMAGE, url=url, hdurl=hdurl)


def parse_detail(
    stub: EntryStub,
    html: str,
    base_url: str,
    *,
    explanation_strategy: ExplanationStrategy = longest_paragraph_explanation,
) -> Record:
    """Build a Record from already-fetched detail HTML (no I/O)."""
    soup = BeautifulSoup(html or "", HTML_PARSER)
    media = extract_media(soup, base_url)
    return Record.from_stub(stub, media, explanation_strategy(soup))


def hydrate_entry(
    stub: EntryStub,
    *,
    fetch: Fetcher,
    base_url: str,
    pace: Pacer = no_delay,
    explanation_strategy: Optional[ExplanationStrategy] = None,
) -> Record:
    strategy = explanation_strategy or longest_paragraph_explanation
    try:
        html = fetch(absolute_url(base_url, stub.href) or base_url)
        return parse_detail(stub, html, base_url, explanation_strategy=strategy)
    except Exception as e:
        logger.error("hydrate failed for %s: %s", stub.href, e)
        return Record.degraded(stub)
    finally:
        pace()
