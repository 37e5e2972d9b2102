"""
services/filter_service.py – In-memory search and category filtering.

All functions are pure: they take the collection and a FilterState and return
a fresh tuple, so applying the same state twice yields the same view.
"""

from collections import Counter
from typing import Dict, Iterable, Mapping, Tuple

from models.compat_entry import CompatEntry
from models.listing_state import Category, FilterState
from services.classifier import classify


def normalise_term(term: str) -> str:
    return term.lower()


def matches_search(entry: CompatEntry, term: str) -> bool:
    """
    Case-insensitive substring match against the title and every release id.

    Only the empty term matches everything; whitespace is matched literally.
    """
    q = normalise_term(term)
    if not q:
        return True
    if q in entry.title.lower():
        return True
    return any(q in release.id.lower() for release in entry.releases)


def matches_category(entry: CompatEntry, toggles: Mapping[Category, bool]) -> bool:
    return bool(toggles.get(classify(entry.compatibility), False))


def apply_filters(
    entries: Iterable[CompatEntry], state: FilterState
) -> Tuple[CompatEntry, ...]:
    """
    Compute the filtered view.

    Parameters
    ----------
    entries : Full collection, in source order.
    state   : Active search term and category toggles.

    Returns
    -------
    Entries matching both the search term and an enabled category, order kept.
    """
    toggles = state.category_toggles
    if not any(toggles.values()):
        return ()
    return tuple(
        e
        for e in entries
        if matches_category(e, toggles) and matches_search(e, state.search_term)
    )


def count_by_category(entries: Iterable[CompatEntry]) -> Dict[Category, int]:
    """Totals per category; every category is present, possibly with 0."""
    counts = Counter(classify(e.compatibility) for e in entries)
    return {c: counts.get(c, 0) for c in Category}
