#!/usr/bin/env python3
"""Render a scraped View into a static gallery page.

Usage:
    python3 render_gallery.py                                   # data/apod-<year>.json -> public_html/
    python3 render_gallery.py --view last7
    python3 render_gallery.py --start 2025-03-01 --end 2025-03-31
    python3 render_gallery.py --source https://example.org/data --view latest
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from datetime import date
from pathlib import Path

from apodgallery.config import Settings
from apodgallery.gallery.render import load_gallery, write_site
from apodgallery.gallery.state import DateRange, GalleryState
from apodgallery.storage.views import VIEW_ALL, VIEW_NAMES


ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _date_arg(value: str) -> str:
    if not ISO_DATE.match(value or ""):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a calendar date: {value!r}") from None
    return value


def main() -> int:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Render an APOD View into a static HTML gallery")
    parser.add_argument("--source", default=settings.output_dir, help="Directory or http(s) base URL holding the View files")
    parser.add_argument("--view", choices=VIEW_NAMES, default=VIEW_ALL, help="Which View to render")
    parser.add_argument("--start", type=_date_arg, default=None, help="Inclusive start date (YYYY-MM-DD)")
    parser.add_argument("--end", type=_date_arg, default=None, help="Inclusive end date (YYYY-MM-DD)")
    parser.add_argument("--year", type=int, default=settings.target_year, help="Year of the full-year View")
    parser.add_argument("--out", default="public_html", help="Output directory")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    state = GalleryState(date_range=DateRange(start=args.start, end=args.end))
    state = load_gallery(state, source=args.source, view=args.view, year=args.year)
    index = write_site(state, Path(args.out))

    print(f"[gallery] view={args.view} shown={len(state.visible())} -> {index}")
    if state.status:
        print(f"[gallery] {state.status}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
