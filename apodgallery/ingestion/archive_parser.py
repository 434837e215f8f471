"""Archive index parsing.

The APOD archive lists one anchor per day. Anchor text looks like
"2025 January 3 - Some Title"; everything else on the page is ignored.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import List, Optional

from bs4 import BeautifulSoup

from apodgallery.extraction.fetch import HTML_PARSER
from apodgallery.ingestion.entry_types import EntryStub

logger = logging.getLogger(__name__)


ENTRY_PATTERN = re.compile(r"^(\d{4})\s+(\w+)\s+(\d{1,2})\s+-\s+(.+)$")

# English month names, resolved without touching the process locale.
MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}


def month_number(name: str) -> Optional[int]:
    """Resolve a full or three-letter English month name (case-insensitive)."""
    n = (name or "").strip().lower()
    if not n:
        return None
    if n in MONTHS:
        return MONTHS[n]
    if len(n) == 3:
        for full, num in MONTHS.items():
            if full.startswith(n):
                return num
    return None


def parse_entry_date(year: str, month_name: str, day: str) -> Optional[date]:
    month = month_number(month_name)
    if month is None:
        return None
    try:
        return date(int(year), month, int(day))
    except ValueError:
        return None


def parse_archive(html: str, year: int) -> List[EntryStub]:
    """Return one EntryStub per matching anchor for `year`, in document order.

    Duplicate dates are kept as-is.
    """
    soup = BeautifulSoup(html or "", HTML_PARSER)
    out: List[EntryStub] = []
    for a in soup.find_all("a"):
        text = a.get_text().strip()
        m = ENTRY_PATTERN.match(text)
        if not m:
            continue
        yyyy, month_name, dd, title = m.groups()
        if int(yyyy) != year:
            continue
        d = parse_entry_date(yyyy, month_name, dd)
        if d is None:
            logger.debug("dropping archive entry with invalid date: %r", text)
            continue
        out.append(EntryStub(date=d.isoformat(), title=title, href=a.get("href") or ""))
    return out
