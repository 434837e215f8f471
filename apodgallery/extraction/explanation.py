"""Explanation text strategies.

APOD detail pages carry no markup identifying the description, so the default
strategy takes the longest paragraph in the body. It is crude on purpose and
kept swappable.
"""

from __future__ import annotations

from typing import Callable, Dict

import trafilatura
from bs4 import BeautifulSoup


ExplanationStrategy = Callable[[BeautifulSoup], str]


def longest_paragraph_explanation(soup: BeautifulSoup) -> str:
    """Text of the longest <p> under <body>; first one wins on ties."""
    root = soup.body or soup
    best = ""
    for p in root.find_all("p"):
        t = p.get_text().strip()
        if len(t) > len(best):
            best = t
    return best


def main_text_explanation(soup: BeautifulSoup) -> str:
    """Main-text extraction via trafilatura, falling back to the longest paragraph."""
    text = trafilatura.extract(str(soup), include_comments=False, include_tables=False)
    if text and text.strip():
        return text.strip()
    return longest_paragraph_explanation(soup)


STRATEGIES: Dict[str, ExplanationStrategy] = {
    "longest_paragraph": longest_paragraph_explanation,
    "main_text": main_text_explanation,
}


def get_strategy(name: str) -> ExplanationStrategy:
    try:
        return STRATEGIES[(name or "").strip().lower()]
    except KeyError:
        raise ValueError(f"unknown explanation strategy: {name!r}") from None
