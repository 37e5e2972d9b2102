"""
models/listing_state.py – Explicit state for the listing controller.

Every user event replaces the state with a new frozen instance; filter and
render functions receive it as an argument instead of reading shared fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from models.compat_entry import CompatEntry


class Category(str, Enum):
    """Compatibility category, in display order."""

    PERFECT = "perfect"
    PLAYABLE = "playable"
    UNPLAYABLE = "unplayable"
    UNTESTED = "untested"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class LoadStatus(str, Enum):
    """
    Lifecycle of the single list load.

    IDLE → LOADING → LOADED → READY, or LOADING → FAILED.  READY is re-entered
    on every filter change; there is no way back to IDLE.
    """

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    READY = "ready"
    FAILED = "failed"


def _all_enabled() -> Mapping[Category, bool]:
    return MappingProxyType({c: True for c in Category})


@dataclass(frozen=True)
class FilterState:
    """
    Search term plus per-category toggles.

    Attributes
    ----------
    search_term      : Raw text typed by the user; matched case-insensitively.
    category_toggles : Category -> enabled.  Missing categories are disabled.
    """

    search_term: str = ""
    category_toggles: Mapping[Category, bool] = field(default_factory=_all_enabled)

    def with_search(self, term: str) -> "FilterState":
        return replace(self, search_term=term)

    def with_category(self, category: Category, enabled: bool) -> "FilterState":
        toggles = dict(self.category_toggles)
        toggles[Category(category)] = bool(enabled)
        return replace(self, category_toggles=MappingProxyType(toggles))

    def is_enabled(self, category: Category) -> bool:
        return bool(self.category_toggles.get(category, False))


@dataclass(frozen=True)
class ListingState:
    """
    Everything the listing shows at one moment.

    Attributes
    ----------
    status  : Where the load currently stands.
    entries : Full collection; empty until the load completes.
    filters : Active search term and category toggles.
    view    : Entries matching *filters*, in collection order.
    error   : Reason the load failed, when status is FAILED.
    """

    status: LoadStatus = LoadStatus.IDLE
    entries: Tuple[CompatEntry, ...] = ()
    filters: FilterState = field(default_factory=FilterState)
    view: Tuple[CompatEntry, ...] = ()
    error: Optional[str] = None
