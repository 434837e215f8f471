"""Gallery state and the pure transforms applied to it before rendering."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from apodgallery.ingestion.entry_types import Record


STATUS_LOAD_FAILED = "Could not load local JSON. Did the scraper run?"
STATUS_NO_RESULTS = "No results for that range."

MIN_DATE_NUM = 0
MAX_DATE_NUM = 99999999


def date_num(value: str) -> int:
    """'2025-03-31' -> 20250331."""
    digits = (value or "").replace("-", "").strip()
    if not digits.isdigit():
        raise ValueError(f"not a date: {value!r}")
    return int(digits)


@dataclass(frozen=True)
class DateRange:
    """Inclusive date bounds; either side may be open."""

    start: Optional[str] = None
    end: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return not self.start and not self.end

    def contains(self, value: str) -> bool:
        lo = date_num(self.start) if self.start else MIN_DATE_NUM
        hi = date_num(self.end) if self.end else MAX_DATE_NUM
        return lo <= date_num(value) <= hi


def filter_records(records: Sequence[Record], date_range: Optional[DateRange]) -> List[Record]:
    if date_range is None or date_range.is_open:
        return list(records)
    return [r for r in records if date_range.contains(r.date)]


def newest_first(records: Sequence[Record]) -> List[Record]:
    return sorted(records, key=lambda r: date_num(r.date), reverse=True)


@dataclass(frozen=True)
class GalleryState:
    view: Optional[str] = None
    records: List[Record] = field(default_factory=list)
    date_range: Optional[DateRange] = None
    selected: Optional[Record] = None
    status: str = ""
    fact: str = ""

    def visible(self) -> List[Record]:
        """Records to display: filtered, then newest first."""
        return newest_first(filter_records(self.records, self.date_range))

    def with_records(self, view: str, records: Sequence[Record]) -> "GalleryState":
        state = replace(self, view=view, records=list(records), selected=None, status="")
        if not state.visible():
            state = replace(state, status=STATUS_NO_RESULTS)
        return state

    def with_load_error(self, view: str) -> "GalleryState":
        return replace(self, view=view, records=[], selected=None, status=STATUS_LOAD_FAILED)

    def select(self, record: Optional[Record]) -> "GalleryState":
        return replace(self, selected=record)
