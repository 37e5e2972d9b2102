"""
services/render_service.py – Turn a filtered view into display markup.

Produces the results count and the list of item rows as HTML fragments.
Every piece of text that comes from the data file is escaped before it is
inserted; nothing here touches widgets.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence
from urllib.parse import quote_plus

from models.compat_entry import CompatEntry
from models.listing_state import Category, ListingState, LoadStatus
from services.classifier import badge_text, classify

# ── Configuration ────────────────────────────────────────────────────────────

# Issue tracker search; the url-quoted title is appended.
ISSUE_SEARCH_URL: str = "https://github.com/azahar-emu/azahar/issues?q="

NO_RESULTS_HTML: str = (
    '<div class="no-results">'
    "<h3>No games found</h3>"
    "<p>Try adjusting your search term or filter settings.</p>"
    "</div>"
)

# ── Types ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RenderedRow:
    title: str
    game_id: str
    badge: str
    category: Category
    issue_url: str


@dataclass(frozen=True)
class RenderedView:
    """
    Everything the page needs to repaint itself.

    Attributes
    ----------
    count_text      : Number of visible entries, as text.
    list_html       : Markup for the list container.
    loading_visible : Whether the loading banner should be shown.
    error_visible   : Whether the error banner should be shown.
    error_message   : Reason for the failure, when there is one.
    """

    count_text: str
    list_html: str
    loading_visible: bool = False
    error_visible: bool = False
    error_message: Optional[str] = None


# ── Public API ───────────────────────────────────────────────────────────────


def issue_search_url(title: str) -> str:
    return ISSUE_SEARCH_URL + quote_plus(title)


def build_row(entry: CompatEntry) -> RenderedRow:
    return RenderedRow(
        title=entry.title,
        game_id=entry.primary_id,
        badge=badge_text(entry.compatibility),
        category=classify(entry.compatibility),
        issue_url=issue_search_url(entry.title),
    )


def build_rows(view: Iterable[CompatEntry]) -> List[RenderedRow]:
    return [build_row(e) for e in view]


def render_count(view: Sequence[CompatEntry]) -> str:
    return str(len(view))


def render_row(row: RenderedRow) -> str:
    esc = html.escape
    return (
        '<div class="game-item">'
        '<div class="game-info">'
        f"<h3>{esc(row.title)}</h3>"
        f'<div class="game-id">ID: {esc(row.game_id)}</div>'
        f'<a class="issue-link" href="{esc(row.issue_url, quote=True)}">'
        "Search issues</a>"
        "</div>"
        f'<div class="compatibility-badge compatibility-{row.category.value}">'
        f"{esc(row.badge)}"
        "</div>"
        "</div>"
    )


def render_list(view: Sequence[CompatEntry]) -> str:
    """List container markup; the fixed placeholder when *view* is empty."""
    if not view:
        return NO_RESULTS_HTML
    return "\n".join(render_row(row) for row in build_rows(view))


def render_view(state: ListingState) -> RenderedView:
    """Render the whole listing for *state*."""
    failed = state.status is LoadStatus.FAILED
    return RenderedView(
        count_text=render_count(state.view),
        list_html=render_list(state.view),
        loading_visible=state.status in (LoadStatus.IDLE, LoadStatus.LOADING),
        error_visible=failed,
        error_message=state.error if failed else None,
    )
