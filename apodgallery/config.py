"""Runtime settings, read from the environment (and `.env` when present)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


ARCHIVE_URL = "https://apod.nasa.gov/apod/archivepixFull.html"
BASE_URL = "https://apod.nasa.gov/apod/"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring invalid %s=%r, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    archive_url: str = ARCHIVE_URL
    base_url: str = BASE_URL
    target_year: int = 2025
    output_dir: str = "data"
    delay_ms: int = 350
    http_timeout: int = 30
    user_agent: str = "APOD-class-scraper / educational"
    explanation_strategy: str = "longest_paragraph"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        return cls(
            archive_url=os.environ.get("APOD_ARCHIVE_URL", ARCHIVE_URL).strip() or ARCHIVE_URL,
            base_url=os.environ.get("APOD_BASE_URL", BASE_URL).strip() or BASE_URL,
            target_year=_env_int("APOD_TARGET_YEAR", 2025),
            output_dir=os.environ.get("APOD_OUTPUT_DIR", "data").strip() or "data",
            delay_ms=_env_int("APOD_DELAY_MS", 350),
            http_timeout=_env_int("APOD_HTTP_TIMEOUT", 30),
            user_agent=os.environ.get("APOD_USER_AGENT", "").strip() or "APOD-class-scraper / educational",
            explanation_strategy=(os.environ.get("APOD_EXPLANATION_STRATEGY") or "longest_paragraph").strip().lower(),
            log_level=(os.environ.get("APOD_LOG_LEVEL") or "INFO").strip().upper(),
        )
