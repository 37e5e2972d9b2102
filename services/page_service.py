"""
services/page_service.py – Fill a host page with the rendered listing.

The host page is any HTML document that provides the element ids below.  The
rendered count and list are written into it, banners are shown or hidden and
the filter controls reflect the current state, so the result can be saved as
a standalone snapshot of the listing.
"""

from pathlib import Path
from typing import Dict

from bs4 import BeautifulSoup, Tag

from models.listing_state import Category, FilterState
from services.exceptions import ExportError, PageTemplateError
from services.render_service import RenderedView

# ── Configuration ────────────────────────────────────────────────────────────

SEARCH_INPUT_ID: str = "searchInput"
LOADING_ID: str = "loadingMessage"
ERROR_ID: str = "errorMessage"
COUNT_ID: str = "gameCount"
LIST_ID: str = "gameList"

TOGGLE_IDS: Dict[Category, str] = {
    Category.PERFECT: "filterPerfect",
    Category.PLAYABLE: "filterPlayable",
    Category.UNPLAYABLE: "filterUnplayable",
    Category.UNTESTED: "filterUntested",
}

REQUIRED_IDS = (SEARCH_INPUT_ID, LOADING_ID, ERROR_ID, COUNT_ID, LIST_ID, *TOGGLE_IDS.values())

DEFAULT_PAGE_TEMPLATE: str = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Compatibility List</title>
<style>
body { font-family: sans-serif; background: #0f1117; color: #e2e8f0; margin: 2em; }
.game-item { display: flex; justify-content: space-between; padding: .6em 1em;
             border-bottom: 1px solid #2d3748; }
.game-id { color: #718096; font-size: .85em; }
.issue-link { color: #4f8ef7; font-size: .85em; }
.compatibility-badge { border-radius: 4px; padding: .2em .6em; align-self: center; }
.compatibility-perfect { background: #48bb78; }
.compatibility-playable { background: #ecc94b; color: #1a1d27; }
.compatibility-unplayable { background: #fc8181; }
.compatibility-untested { background: #4a5568; }
.no-results { text-align: center; color: #718096; }
</style>
</head>
<body>
<input type="text" id="searchInput" placeholder="Search by title or title id...">
<label><input type="checkbox" id="filterPerfect" checked> Perfect</label>
<label><input type="checkbox" id="filterPlayable" checked> Playable</label>
<label><input type="checkbox" id="filterUnplayable" checked> Unplayable</label>
<label><input type="checkbox" id="filterUntested" checked> Untested</label>
<div id="loadingMessage">Loading compatibility data...</div>
<div id="errorMessage" style="display: none">Failed to load compatibility data.</div>
<p>Showing <span id="gameCount">0</span> games</p>
<div id="gameList"></div>
</body>
</html>
"""

# ── Public API ───────────────────────────────────────────────────────────────


def populate_page(
    rendered: RenderedView,
    filters: FilterState,
    template: str = DEFAULT_PAGE_TEMPLATE,
) -> str:
    """
    Return *template* with the listing written into it.

    Raises
    ------
    PageTemplateError
        If the template lacks one of the required element ids.
    """
    soup = BeautifulSoup(template, "html.parser")
    elements = _require_elements(soup)

    elements[COUNT_ID].string = rendered.count_text

    container = elements[LIST_ID]
    container.clear()
    fragment = BeautifulSoup(rendered.list_html, "html.parser")
    for child in list(fragment.contents):
        container.append(child.extract())

    _set_visible(elements[LOADING_ID], rendered.loading_visible)
    _set_visible(elements[ERROR_ID], rendered.error_visible)
    if rendered.error_visible and rendered.error_message:
        elements[ERROR_ID]["title"] = rendered.error_message

    elements[SEARCH_INPUT_ID]["value"] = filters.search_term
    for category, element_id in TOGGLE_IDS.items():
        checkbox = elements[element_id]
        if filters.is_enabled(category):
            checkbox["checked"] = ""
        elif checkbox.has_attr("checked"):
            del checkbox["checked"]

    return str(soup)


def export_page(
    path: Path,
    rendered: RenderedView,
    filters: FilterState,
    template: str = DEFAULT_PAGE_TEMPLATE,
) -> Path:
    """
    Write the populated page to *path* (UTF-8).

    Raises
    ------
    ExportError on any filesystem error.
    """
    markup = populate_page(rendered, filters, template)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markup, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Failed to write page to '{path}': {exc}") from exc
    return path


# ── Private helpers ───────────────────────────────────────────────────────────


def _require_elements(soup: BeautifulSoup) -> Dict[str, Tag]:
    found: Dict[str, Tag] = {}
    missing = []
    for element_id in REQUIRED_IDS:
        element = soup.find(id=element_id)
        if element is None:
            missing.append(element_id)
        else:
            found[element_id] = element
    if missing:
        raise PageTemplateError(
            "Host page is missing required element id(s): " + ", ".join(missing)
        )
    return found


def _set_visible(element: Tag, visible: bool) -> None:
    styles = [
        s.strip()
        for s in element.get("style", "").split(";")
        if s.strip() and not s.strip().lower().startswith("display")
    ]
    styles.append("display: block" if visible else "display: none")
    element["style"] = "; ".join(styles)
