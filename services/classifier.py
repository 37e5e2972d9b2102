"""
services/classifier.py – Compatibility code → category / label mapping.

Codes follow the emulator's compatibility list:

    0 Perfect   1 Great   2 Good   3 OK   4 Poor   5 Bad   99 Untested

Any other integer is labelled "Unknown" and banded by value so that every
code still lands in exactly one category.
"""

from typing import Dict

from models.listing_state import Category

# ── Configuration ────────────────────────────────────────────────────────────

UNTESTED_CODE: int = 99
PERFECT_MAX: int = 1
PLAYABLE_MAX: int = 3

LABELS: Dict[int, str] = {
    0: "Perfect",
    1: "Great",
    2: "Good",
    3: "OK",
    4: "Poor",
    5: "Bad",
    UNTESTED_CODE: "Untested",
}

UNKNOWN_LABEL: str = "Unknown"

# ── Public API ───────────────────────────────────────────────────────────────


def classify(code: int) -> Category:
    """Return the category a compatibility code belongs to."""
    if code == UNTESTED_CODE:
        return Category.UNTESTED
    if code <= PERFECT_MAX:
        return Category.PERFECT
    if code <= PLAYABLE_MAX:
        return Category.PLAYABLE
    return Category.UNPLAYABLE


def label_for(code: int) -> str:
    return LABELS.get(code, UNKNOWN_LABEL)


def badge_text(code: int) -> str:
    """Badge caption, e.g. "Great (1)"."""
    return f"{label_for(code)} ({code})"
