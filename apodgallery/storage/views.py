"""Derive and persist the three Views.

Each run overwrites every View file; nothing is merged with a previous run.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from typing import Dict, Iterable, List

from apodgallery.ingestion.entry_types import Record


VIEW_ALL = "all"
VIEW_LATEST = "latest"
VIEW_LAST7 = "last7"
VIEW_NAMES = (VIEW_ALL, VIEW_LATEST, VIEW_LAST7)

LAST_N = 7


def view_filename(view: str, year: int) -> str:
    if view == VIEW_ALL:
        return f"apod-{year}.json"
    if view in (VIEW_LATEST, VIEW_LAST7):
        return f"{view}.json"
    raise ValueError(f"unknown view: {view!r}")


def sort_newest_first(records: Iterable[Record]) -> List[Record]:
    """Stable sort by ISO date, descending; equal dates keep input order."""
    return sorted(records, key=lambda r: r.date, reverse=True)


def build_views(records: Iterable[Record]) -> Dict[str, List[Record]]:
    ordered = sort_newest_first(records)
    return {
        VIEW_ALL: ordered,
        VIEW_LATEST: ordered[:1],
        VIEW_LAST7: ordered[:LAST_N],
    }


def record_to_dict(record: Record) -> dict:
    return asdict(record)


def write_view(path: str, records: Iterable[Record]) -> None:
    payload = [record_to_dict(r) for r in records]
    tmp = f"{path}.tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    os.replace(tmp, path)


def write_views(output_dir: str, views: Dict[str, List[Record]], *, year: int) -> List[str]:
    """Write every View into `output_dir` (created if missing); return written paths."""
    os.makedirs(output_dir, exist_ok=True)
    written = []
    for name in VIEW_NAMES:
        path = os.path.join(output_dir, view_filename(name, year))
        write_view(path, views.get(name, []))
        written.append(path)
    return written


def read_view(path: str) -> List[Record]:
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    return [Record.from_dict(item) for item in payload]
