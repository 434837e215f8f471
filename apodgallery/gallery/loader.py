"""Load a persisted View for the gallery.

Views are overwritten in place by every scrape, so HTTP loads always bypass
intermediate caches (`?v=<epoch ms>` plus `Cache-Control: no-store`).
"""

from __future__ import annotations

import json
import os
import time
from typing import Any, Callable, List, Optional

import requests

from apodgallery.contracts.view_contract import validate_view
from apodgallery.ingestion.entry_types import Record
from apodgallery.storage.views import view_filename


class ViewLoadError(Exception):
    pass


def _is_http(location: str) -> bool:
    return location.startswith("http://") or location.startswith("https://")


def view_location(source: str, view: str, year: int) -> str:
    name = view_filename(view, year)
    if _is_http(source):
        return source.rstrip("/") + "/" + name
    return os.path.join(source, name)


def _load_http(
    url: str,
    *,
    session: Optional[requests.Session],
    timeout: int,
    clock: Callable[[], float],
) -> Any:
    http = session or requests
    try:
        resp = http.get(
            url,
            params={"v": str(int(clock() * 1000))},
            headers={"Cache-Control": "no-store", "Pragma": "no-cache"},
            timeout=timeout,
        )
        resp.raise_for_status()
        return resp.json()
    except (requests.RequestException, ValueError) as e:
        raise ViewLoadError(f"could not load {url}: {e}") from e


def _load_file(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise ViewLoadError(f"could not load {path}: {e}") from e


def load_view(
    source: str,
    view: str,
    *,
    year: int,
    session: Optional[requests.Session] = None,
    timeout: int = 20,
    clock: Callable[[], float] = time.time,
) -> List[Record]:
    """Load and validate one View from a directory or an http(s) base URL."""
    location = view_location(source, view, year)
    if _is_http(location):
        payload = _load_http(location, session=session, timeout=timeout, clock=clock)
    else:
        payload = _load_file(location)
    errors = validate_view(payload)
    if errors:
        raise ViewLoadError(f"{location} is not a valid view: " + "; ".join(errors[:5]))
    return [Record.from_dict(item) for item in payload]
