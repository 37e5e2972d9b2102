"""
services/listing_controller.py – Load / filter / render state machine.

    Idle → Loading → Loaded → Ready ⟲ (every search or toggle change)
                  ↘ Failed

The load itself runs elsewhere (see workers/load_worker.py); the caller
reports its outcome through begin_load, complete_load and fail_load.  The
controller owns one ListingState and replaces it on every event.  Filter
and render work is delegated to the pure functions in filter_service and
render_service; listeners are called with the new state after each change.
"""

import logging
from dataclasses import replace
from typing import Callable, Iterable, List, Optional

from models.compat_entry import CompatEntry
from models.listing_state import Category, FilterState, ListingState, LoadStatus
from services import filter_service, render_service
from services.exceptions import InvalidTransitionError
from services.render_service import RenderedView

logger = logging.getLogger(__name__)

Listener = Callable[[ListingState], None]


class ListingController:
    """
    Holds the listing state for one page lifetime.

    Exactly one load is allowed; search and toggle changes are synchronous and
    recompute the whole view each time.
    """

    def __init__(self, filters: Optional[FilterState] = None) -> None:
        self._state = ListingState(filters=filters or FilterState())
        self._listeners: List[Listener] = []

    @property
    def state(self) -> ListingState:
        return self._state

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    # ── Loading ───────────────────────────────────────────────────────────────

    def begin_load(self) -> None:
        self._require(LoadStatus.IDLE, LoadStatus.LOADING)
        self._update(status=LoadStatus.LOADING)

    def complete_load(self, entries: Iterable[CompatEntry]) -> None:
        self._require(LoadStatus.LOADING, LoadStatus.LOADED)
        collection = tuple(entries)
        self._state = ListingState(
            status=LoadStatus.LOADED, entries=collection, filters=self._state.filters
        )
        self._update(
            status=LoadStatus.READY,
            view=filter_service.apply_filters(collection, self._state.filters),
        )

    def fail_load(self, error: str) -> None:
        self._require(LoadStatus.LOADING, LoadStatus.FAILED)
        logger.error("Compatibility list unavailable: %s", error)
        self._update(status=LoadStatus.FAILED, entries=(), view=(), error=error)

    # ── Filter events ─────────────────────────────────────────────────────────

    def set_search(self, term: str) -> None:
        self._refilter(self._state.filters.with_search(term))

    def set_category(self, category: Category, enabled: bool) -> None:
        self._refilter(self._state.filters.with_category(category, enabled))

    def render(self) -> RenderedView:
        return render_service.render_view(self._state)

    # ── Internals ─────────────────────────────────────────────────────────────

    def _refilter(self, filters: FilterState) -> None:
        view = filter_service.apply_filters(self._state.entries, filters)
        self._update(filters=filters, view=view)

    def _require(self, expected: LoadStatus, target: LoadStatus) -> None:
        if self._state.status is not expected:
            raise InvalidTransitionError(self._state.status.value, target.value)

    def _update(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in self._listeners:
            listener(self._state)
