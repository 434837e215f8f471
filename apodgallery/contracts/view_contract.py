"""View document contract.

A View is the JSON array written by the scraper and read by the gallery:
`apod-<year>.json`, `latest.json` and `last7.json`. This module defines:
- A JSON Schema for one View document
- A validator returning human-readable errors

Records may carry extra keys; readers ignore them.
"""

from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator


_NULLABLE_STRING = {"type": ["string", "null"]}

RECORD_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["title", "date", "href", "media_type", "url", "explanation"],
    "properties": {
        "title": {"type": "string"},
        "date": {"type": "string", "pattern": r"^\d{4}-\d{2}-\d{2}$"},
        "href": {"type": "string"},
        "media_type": {"type": "string", "enum": ["image", "video", "unknown"]},
        "url": _NULLABLE_STRING,
        "hdurl": _NULLABLE_STRING,
        "thumbnail_url": _NULLABLE_STRING,
        "explanation": {"type": "string"},
        "service_version": {"type": "string", "minLength": 1},
    },
    "additionalProperties": True,
}

VIEW_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": RECORD_SCHEMA,
}


_VALIDATOR = Draft202012Validator(VIEW_SCHEMA)


def validate_view(payload: Any) -> List[str]:
    """Return a list of human-readable validation errors (empty means valid)."""
    errors = []
    for e in sorted(_VALIDATOR.iter_errors(payload), key=lambda x: [str(p) for p in x.path]):
        path = ".".join(str(p) for p in e.path) if e.path else "<root>"
        errors.append(f"{path}: {e.message}")
    return errors
