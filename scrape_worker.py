#!/usr/bin/env python3
"""APOD scrape worker.

Runs one scrape of the APOD archive for the configured year and writes:
- apod-<year>.json (every entry, newest first)
- latest.json (most recent entry)
- last7.json (7 most recent entries)

Configuration comes from the environment / .env (see apodgallery.config).
"""

from __future__ import annotations

import logging
import sys

from apodgallery.config import Settings
from apodgallery.ingestion.pipeline import run_pipeline

logger = logging.getLogger("scrape_worker")


def main() -> int:
    settings = Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    try:
        run_pipeline(settings)
    except Exception:
        logger.exception("scrape failed")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
