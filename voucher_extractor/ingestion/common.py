"""Shared helpers for turning raw PDF text into searchable strings and numbers."""
from __future__ import annotations

import re

NUMBER_PATTERN = r"\d[\d,]*(?:\.\d+)?"


def normalize_text(raw: str) -> str:
    """Collapse every whitespace run into a single space and trim the ends."""

    return re.sub(r"\s+", " ", raw or "").strip()


def clean_amount(raw: str | None) -> float:
    """Convert ``1,234.50`` style strings into floats, returning 0 for blanks."""

    if not raw:
        return 0.0
    normalized = raw.replace(",", "").strip()
    try:
        return float(normalized)
    except ValueError:
        return 0.0
