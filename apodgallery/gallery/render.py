"""Static HTML rendering of a GalleryState.

Cards link to in-page detail panels (`#entry-N`); CSS `:target` opens the
panel, so the output needs no JavaScript and no server.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

import requests
from jinja2 import Environment
from markupsafe import Markup

from apodgallery.gallery.facts import random_fact
from apodgallery.gallery.loader import ViewLoadError, load_view
from apodgallery.gallery.state import GalleryState
from apodgallery.ingestion.archive_parser import MONTHS
from apodgallery.ingestion.entry_types import Record

logger = logging.getLogger(__name__)

_jinja_env = Environment(autoescape=True)
Template = _jinja_env.from_string

PLACEHOLDER_THUMB = "assets/video-placeholder.svg"


def format_date(value: str) -> str:
    """'2025-01-03' -> 'January 3, 2025'; unparseable input is returned as-is."""
    try:
        d = date.fromisoformat(value)
    except (TypeError, ValueError):
        return value or ""
    return f"{list(MONTHS)[d.month - 1].capitalize()} {d.day}, {d.year}"


def card_image(record: Record) -> str:
    if record.is_video:
        return record.thumbnail_url or PLACEHOLDER_THUMB
    return record.url or PLACEHOLDER_THUMB


def detail_image(record: Record) -> Optional[str]:
    return record.hdurl or record.url


_jinja_env.filters["longdate"] = format_date
_jinja_env.globals.update(card_image=card_image, detail_image=detail_image)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

SHARED_CSS = """\
*, *::before, *::after { box-sizing: border-box; }
body {
  margin: 0; padding: 24px;
  font-family: system-ui, -apple-system, sans-serif;
  font-size: 15px; line-height: 1.6;
  background: #0b0d17; color: #d0d4e0;
}
a { color: #7db8e0; text-decoration: none; }
h1 { font-size: 1.5em; font-weight: 500; margin: 0 0 4px; }
.status { min-height: 1.4em; color: #e0b070; }
.fact { color: #8890a8; font-size: 0.9em; margin-bottom: 20px; }
.range { color: #667; font-size: 0.85em; }

.gallery {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(220px, 1fr));
  gap: 14px;
}
.card { background: #151a2c; border-radius: 8px; overflow: hidden; }
.card a { display: block; color: inherit; }
.thumb-wrap { aspect-ratio: 4 / 3; overflow: hidden; position: relative; background: #000; }
.thumb { width: 100%; height: 100%; object-fit: cover; display: block; }
.card.video .thumb-wrap::after {
  content: "\\25B6"; position: absolute; top: 50%; left: 50%;
  transform: translate(-50%, -50%);
  color: rgba(255,255,255,0.9); font-size: 2em;
}
.meta { padding: 8px 12px; }
.meta h3 { font-size: 1em; margin: 0; }
.date { color: #8890a8; font-size: 0.85em; margin: 2px 0 0; }

.modal {
  display: none; position: fixed; inset: 0;
  background: rgba(0,0,0,0.85); padding: 4vh 4vw; overflow-y: auto;
}
.modal:target, .modal.open { display: block; }
.modal-body { max-width: 1000px; margin: 0 auto; background: #151a2c; border-radius: 8px; padding: 20px; }
.modal-close { float: right; font-size: 1.4em; color: #aaa; }
.modal-media img { max-width: 100%; max-height: 75vh; display: block; margin: 12px auto; }
.modal-media iframe { width: 100%; aspect-ratio: 16 / 9; border: 0; }
.explanation { white-space: pre-line; }
"""

PLACEHOLDER_SVG = """\
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 320 240">
<rect width="320" height="240" fill="#0b0d17"/>
<text x="160" y="130" font-family="sans-serif" font-size="28" fill="#7db8e0" text-anchor="middle">APOD video</text>
</svg>
"""

DETAIL_TEMPLATE = Template("""\
<section class="modal{% if open %} open{% endif %}" id="{{ anchor }}">
<div class="modal-body">
  <a class="modal-close" href="#" aria-label="Close">&times;</a>
  <h2>{{ record.title or '(Untitled)' }}</h2>
  <p class="date">{{ record.date|longdate }}</p>
  <div class="modal-media">
  {% if record.is_video %}
    <iframe src="{{ record.url }}" allowfullscreen></iframe>
  {% elif detail_image(record) %}
    <img src="{{ detail_image(record) }}" alt="{{ record.title }}">
  {% endif %}
  </div>
  <p class="explanation">{{ record.explanation }}</p>
</div>
</section>
""")

INDEX_TEMPLATE = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>APOD Gallery{% if state.view %} &middot; {{ state.view }}{% endif %}</title>
<link rel="stylesheet" href="assets/style.css">
</head>
<body>
<h1>Astronomy Picture of the Day</h1>
{% if state.date_range and not state.date_range.is_open %}<p class="range">{{ state.date_range.start or '…' }} &ndash; {{ state.date_range.end or '…' }}</p>{% endif %}
<p class="fact">{{ state.fact }}</p>
<p class="status">{{ state.status }}</p>
<div class="gallery">
{% for record in records %}<article class="card{% if record.is_video %} video{% endif %}">
<a href="#entry-{{ loop.index }}">
<div class="thumb-wrap"><img class="thumb" src="{{ card_image(record) }}" alt="{{ record.title or 'APOD image' }}{% if record.is_video %} (Video thumbnail){% endif %}" loading="lazy"></div>
<div class="meta"><h3>{{ record.title or '(Untitled)' }}</h3><p class="date">{{ record.date|longdate }}</p></div>
</a>
</article>
{% endfor %}
</div>
{% for panel in panels %}{{ panel }}{% endfor %}
</body>
</html>
""")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_detail(record: Record, *, anchor: str = "entry", expanded: bool = False) -> str:
    return DETAIL_TEMPLATE.render(record=record, anchor=anchor, open=expanded)


def render_gallery(state: GalleryState) -> str:
    records = state.visible()
    panels = [
        Markup(render_detail(r, anchor=f"entry-{i}", expanded=(state.selected is not None and r == state.selected)))
        for i, r in enumerate(records, start=1)
    ]
    return INDEX_TEMPLATE.render(state=state, records=records, panels=panels)


def load_gallery(
    state: GalleryState,
    *,
    source: str,
    view: str,
    year: int,
    session: Optional[requests.Session] = None,
) -> GalleryState:
    """Load `view` into `state`. Load failures become the status line, never exceptions."""
    state = GalleryState(view=view, date_range=state.date_range, fact=random_fact())
    try:
        records = load_view(source, view, year=year, session=session)
    except ViewLoadError as e:
        logger.error("%s", e)
        return state.with_load_error(view)
    return state.with_records(view, records)


def write_site(state: GalleryState, out_dir: Path) -> Path:
    assets_dir = out_dir / "assets"
    assets_dir.mkdir(parents=True, exist_ok=True)
    (assets_dir / "style.css").write_text(SHARED_CSS, encoding="utf-8")
    (assets_dir / "video-placeholder.svg").write_text(PLACEHOLDER_SVG, encoding="utf-8")
    index = out_dir / "index.html"
    index.write_text(render_gallery(state), encoding="utf-8")
    return index
