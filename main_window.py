"""
main_window.py – CompatList main window.

Layout
------
  ┌──────────────────────────────────────────────────────┐
  │  [Search bar]                        [Export HTML…]  │  ← TOP
  │  ☑ Perfect  ☑ Playable  ☑ Unplayable  ☑ Untested     │
  ├──────────────────────────────────────────────────────┤
  │  Loading / error banner                              │
  │  Showing N games                                     │
  │  Game list (QTextBrowser, rendered HTML)             │
  ├──────────────────────────────────────────────────────┤
  │  Status log (QPlainTextEdit, read-only)              │  ← BOTTOM
  └──────────────────────────────────────────────────────┘

Widget object names mirror the host page element ids so the window and an
exported page describe the same controls.
"""

from __future__ import annotations

import datetime
import html
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import Slot
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QCheckBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QStatusBar,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from models.listing_state import Category, ListingState, LoadStatus
from services import filter_service, page_service
from services.exceptions import ExportError
from services.listing_controller import ListingController
from services.loader_service import LoadResult
from workers.load_worker import LoadWorker

# ── Colour palette ─────────────────────────────────────────────────────────────
_BG         = "#0f1117"
_BG2        = "#1a1d27"
_BG3        = "#22263a"
_ACCENT     = "#4f8ef7"
_TEXT       = "#e2e8f0"
_TEXT_DIM   = "#718096"
_SUCCESS    = "#48bb78"
_WARNING    = "#ecc94b"
_ERROR      = "#fc8181"
_BORDER     = "#2d3748"

_STYLESHEET = f"""
QMainWindow, QWidget {{
    background-color: {_BG};
    color: {_TEXT};
    font-family: 'Segoe UI', 'Consolas', monospace;
    font-size: 13px;
}}

/* ── Search bar ─────────────────────────────────────────────────────────── */
QLineEdit#searchInput {{
    background-color: {_BG2};
    border: 1px solid {_BORDER};
    border-radius: 6px;
    padding: 8px 14px;
    font-size: 14px;
    color: {_TEXT};
    selection-background-color: {_ACCENT};
}}
QLineEdit#searchInput:focus {{
    border-color: {_ACCENT};
}}

/* ── Game list ──────────────────────────────────────────────────────────── */
QTextBrowser#gameList {{
    background-color: {_BG2};
    border: 1px solid {_BORDER};
    border-radius: 6px;
    padding: 4px;
}}

/* ── Banners ────────────────────────────────────────────────────────────── */
QLabel#loadingMessage {{
    color: {_TEXT_DIM};
    padding: 6px;
}}
QLabel#errorMessage {{
    background-color: {_BG3};
    border: 1px solid {_ERROR};
    border-radius: 6px;
    color: {_ERROR};
    padding: 8px;
}}

/* ── Buttons ────────────────────────────────────────────────────────────── */
QPushButton {{
    background-color: {_BG3};
    border: 1px solid {_BORDER};
    border-radius: 5px;
    padding: 7px 14px;
    color: {_TEXT};
}}
QPushButton:hover {{
    background-color: {_ACCENT};
    border-color: {_ACCENT};
    color: white;
}}

/* ── Log area ───────────────────────────────────────────────────────────── */
QPlainTextEdit#logArea {{
    background-color: {_BG};
    border: 1px solid {_BORDER};
    border-radius: 6px;
    padding: 6px;
    font-family: 'Consolas', 'Courier New', monospace;
    font-size: 12px;
    color: {_TEXT_DIM};
}}

/* ── Status bar ─────────────────────────────────────────────────────────── */
QStatusBar {{
    background: {_BG2};
    color: {_TEXT_DIM};
    border-top: 1px solid {_BORDER};
    font-size: 11px;
}}
"""

# QTextBrowser understands a subset of CSS only (no flexbox).
_LIST_STYLESHEET = f"""
.game-item {{ margin-bottom: 10px; }}
h3 {{ margin: 0; color: {_TEXT}; }}
.game-id {{ color: {_TEXT_DIM}; }}
a.issue-link {{ color: {_ACCENT}; }}
.compatibility-perfect {{ color: {_SUCCESS}; font-weight: bold; }}
.compatibility-playable {{ color: {_WARNING}; font-weight: bold; }}
.compatibility-unplayable {{ color: {_ERROR}; font-weight: bold; }}
.compatibility-untested {{ color: {_TEXT_DIM}; font-weight: bold; }}
.no-results {{ color: {_TEXT_DIM}; }}
"""


class MainWindow(QMainWindow):
    """Primary application window."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("CompatList  ·  Compatibility List")
        self.setMinimumSize(820, 600)
        self.resize(1000, 760)
        self.setStyleSheet(_STYLESHEET)

        self._controller = ListingController()
        self._worker: Optional[LoadWorker] = None
        self._toggles: Dict[Category, QCheckBox] = {}

        self._build_ui()
        self._connect_signals()
        self._controller.add_listener(self._repaint)
        self._start_load()

    # ── UI construction ───────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QWidget()
        self.setCentralWidget(root)
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(24, 24, 24, 16)
        root_layout.setSpacing(12)

        # ── Zone A: Search & filters ───────────────────────────────────────
        top = QHBoxLayout()
        top.setSpacing(16)

        self._search_bar = QLineEdit()
        self._search_bar.setObjectName(page_service.SEARCH_INPUT_ID)
        self._search_bar.setPlaceholderText("Search by title or title id...")
        self._search_bar.setClearButtonEnabled(True)
        self._search_bar.setMinimumHeight(40)
        self._search_bar.setFont(QFont("Segoe UI", 15))

        self._export_btn = QPushButton("Export HTML…")
        self._export_btn.setFixedHeight(40)
        self._export_btn.setMinimumWidth(140)

        top.addWidget(self._search_bar, 7)
        top.addWidget(self._export_btn, 1)
        root_layout.addLayout(top)

        toggles = QHBoxLayout()
        toggles.setSpacing(20)
        for category in Category:
            box = QCheckBox(category.display_name)
            box.setObjectName(page_service.TOGGLE_IDS[category])
            box.setChecked(self._controller.state.filters.is_enabled(category))
            self._toggles[category] = box
            toggles.addWidget(box)
        toggles.addStretch()
        root_layout.addLayout(toggles)

        # ── Zone B: Listing ────────────────────────────────────────────────
        self._loading_banner = QLabel("Loading compatibility data…")
        self._loading_banner.setObjectName(page_service.LOADING_ID)
        root_layout.addWidget(self._loading_banner)

        self._error_banner = QLabel(
            "Failed to load compatibility data. Please try again later."
        )
        self._error_banner.setObjectName(page_service.ERROR_ID)
        self._error_banner.setWordWrap(True)
        self._error_banner.hide()
        root_layout.addWidget(self._error_banner)

        self._count_label = QLabel()
        self._count_label.setObjectName(page_service.COUNT_ID)
        root_layout.addWidget(self._count_label)

        self._game_list = QTextBrowser()
        self._game_list.setObjectName(page_service.LIST_ID)
        self._game_list.setOpenExternalLinks(True)
        self._game_list.document().setDefaultStyleSheet(_LIST_STYLESHEET)
        root_layout.addWidget(self._game_list, stretch=1)

        # ── Zone C: Status & Monitoring ─────────────────────────────────────
        self._log_area = QPlainTextEdit()
        self._log_area.setObjectName("logArea")
        self._log_area.setReadOnly(True)
        self._log_area.setMaximumBlockCount(500)
        self._log_area.setFixedHeight(110)
        root_layout.addWidget(self._log_area)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

    # ── Signal wiring ─────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._search_bar.textChanged.connect(self._on_search_changed)
        for category, box in self._toggles.items():
            box.toggled.connect(
                lambda checked, c=category: self._controller.set_category(c, checked)
            )
        self._export_btn.clicked.connect(self._on_export)

    # ── Slots ─────────────────────────────────────────────────────────────────

    def _start_load(self) -> None:
        self._controller.begin_load()
        self._set_status("Fetching compatibility list…")

        self._worker = LoadWorker(parent=self)
        self._worker.status.connect(self._log)
        self._worker.loaded.connect(self._on_loaded)
        self._worker.failed.connect(self._on_failed)
        self._worker.start()

    @Slot(object)
    def _on_loaded(self, result: LoadResult) -> None:
        self._controller.complete_load(result.entries)
        self._log(f"Compatibility list loaded: {len(result.entries)} titles.", success=True)
        self._set_status(f"{len(result.entries)} games loaded from {result.source}.")

    @Slot(str)
    def _on_failed(self, msg: str) -> None:
        self._controller.fail_load(msg)
        self._log(msg, error=True)
        self._set_status("Compatibility list load failed.")

    @Slot(str)
    def _on_search_changed(self, text: str) -> None:
        self._controller.set_search(text)

    @Slot()
    def _on_export(self) -> None:
        filename, _ = QFileDialog.getSaveFileName(
            self, "Export Listing", "compatibility_list.html", "HTML files (*.html)"
        )
        if not filename:
            return
        try:
            path = page_service.export_page(
                Path(filename),
                self._controller.render(),
                self._controller.state.filters,
            )
        except ExportError as exc:
            self._log(str(exc), error=True)
            QMessageBox.critical(self, "Export Error", str(exc))
            return
        self._log(f"Exported listing to {path}", success=True)

    # ── UI helpers ────────────────────────────────────────────────────────────

    def _repaint(self, state: ListingState) -> None:
        rendered = self._controller.render()
        self._loading_banner.setVisible(rendered.loading_visible)
        self._error_banner.setVisible(rendered.error_visible)
        if rendered.error_message:
            self._error_banner.setToolTip(rendered.error_message)
        self._count_label.setText(f"Showing {rendered.count_text} games")
        self._game_list.setHtml(rendered.list_html)

        if state.status is LoadStatus.READY:
            counts = filter_service.count_by_category(state.entries)
            for category, box in self._toggles.items():
                box.setText(f"{category.display_name} ({counts[category]})")

    def _set_status(self, msg: str) -> None:
        self._status_bar.showMessage(msg)

    @Slot(str)
    def _log(self, msg: str, *, error: bool = False, success: bool = False) -> None:
        ts = datetime.datetime.now().strftime("%H:%M:%S")
        msg = html.escape(msg)
        if error:
            prefix = f'<span style="color:{_ERROR}">[{ts}] ✗  {msg}</span>'
        elif success:
            prefix = f'<span style="color:{_SUCCESS}">[{ts}] ✓  {msg}</span>'
        else:
            prefix = f'<span style="color:{_TEXT_DIM}">[{ts}]  {msg}</span>'
        self._log_area.appendHtml(prefix)
        # Scroll to bottom.
        sb = self._log_area.verticalScrollBar()
        sb.setValue(sb.maximum())
