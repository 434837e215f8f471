"""Scrape-and-hydrate pipeline.

archive page -> EntryStubs -> sequential hydration -> sorted Records -> Views.
Hydration is strictly one entry at a time; the pacing policy bounds the request
rate against the origin.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Dict, List, Optional

import requests

from apodgallery.config import Settings
from apodgallery.extraction.detail import Fetcher, hydrate_entry
from apodgallery.extraction.explanation import get_strategy
from apodgallery.extraction.fetch import fetch_html
from apodgallery.ingestion.archive_parser import parse_archive
from apodgallery.ingestion.entry_types import MEDIA_UNKNOWN, Record
from apodgallery.ingestion.pacing import Pacer, pacer_for
from apodgallery.storage.views import build_views, write_views

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    records: List[Record]
    views: Dict[str, List[Record]]
    written: List[str]

    @property
    def degraded_count(self) -> int:
        return sum(1 for r in self.records if r.media_type == MEDIA_UNKNOWN)


def http_fetcher(settings: Settings, session: Optional[requests.Session] = None) -> Fetcher:
    return partial(
        fetch_html,
        session=session,
        user_agent=settings.user_agent,
        timeout=settings.http_timeout,
    )


def run_pipeline(
    settings: Settings,
    *,
    fetch: Optional[Fetcher] = None,
    pace: Optional[Pacer] = None,
) -> PipelineResult:
    """Run one full scrape. Archive fetch errors propagate; entry errors do not."""
    fetch = fetch or http_fetcher(settings)
    pace = pace or pacer_for(settings.delay_ms)
    strategy = get_strategy(settings.explanation_strategy)

    logger.info("Fetching archive %s", settings.archive_url)
    html = fetch(settings.archive_url)
    entries = parse_archive(html, settings.target_year)
    logger.info("Found %d entries in %d.", len(entries), settings.target_year)

    hydrated: List[Record] = []
    for i, stub in enumerate(entries, start=1):
        hydrated.append(
            hydrate_entry(
                stub,
                fetch=fetch,
                base_url=settings.base_url,
                pace=pace,
                explanation_strategy=strategy,
            )
        )
        if i % 25 == 0 or i == len(entries):
            logger.info("hydrated %d/%d", i, len(entries))

    views = build_views(hydrated)
    written = write_views(settings.output_dir, views, year=settings.target_year)
    result = PipelineResult(records=views["all"], views=views, written=written)
    logger.info(
        "Done. Wrote %s (%d records, %d degraded)",
        ", ".join(written),
        len(result.records),
        result.degraded_count,
    )
    return result
