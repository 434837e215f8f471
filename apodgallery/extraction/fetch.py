"""HTML fetch for archive and detail pages."""

from __future__ import annotations

from typing import Optional

import requests


DEFAULT_USER_AGENT = "APOD-class-scraper / educational"

# APOD pages leave <p> unclosed; lxml closes a <p> when the next block opens.
HTML_PARSER = "lxml"


class FetchError(Exception):
    """Raised when a page cannot be retrieved as usable HTML."""

    def __init__(self, message: str, *, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def fetch_html(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: int = 30,
    max_bytes: int = 2_000_000,
) -> str:
    """GET `url` and return the decoded body.

    Raises FetchError on transport errors, non-2xx status, oversize or empty bodies.
    """
    if not url:
        raise FetchError("empty_url", url=url)
    http = session or requests
    try:
        with http.get(
            url,
            headers={"User-Agent": user_agent},
            timeout=(5, timeout),
            allow_redirects=True,
            stream=True,
        ) as resp:
            status_code = resp.status_code
            if status_code < 200 or status_code >= 300:
                raise FetchError(f"Fetch failed {status_code}: {url}", url=url, status_code=status_code)
            # Size guardrail: read up to max_bytes
            content = b""
            for chunk in resp.iter_content(chunk_size=64 * 1024):
                if not chunk:
                    continue
                content += chunk
                if len(content) > max_bytes:
                    raise FetchError(f"Response too large: {url}", url=url, status_code=status_code)
            encoding = resp.encoding
    except requests.RequestException as e:
        raise FetchError(f"Fetch failed: {url}: {e}", url=url) from e
    try:
        html = content.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        html = content.decode("utf-8", errors="replace")
    if not html.strip():
        raise FetchError(f"Empty response: {url}", url=url, status_code=status_code)
    return html
