"""
workers/load_worker.py – Background QThread that performs the single list load.

Signal contract
---------------
  status(str)     : Human-readable status message — for the log area
  loaded(object)  : LoadResult on success
  failed(str)     : User-friendly error message on failure

The async loader runs in its own event loop on the worker thread so the GUI
thread stays responsive; state changes happen on the GUI side in the slots
connected to these signals.
"""

import asyncio
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QThread, Signal

from services import loader_service
from services.exceptions import CompatListError, EntryParseError, LoadError


class LoadWorker(QThread):
    """
    Fetches the compatibility list on a background thread.

    Instantiate, connect signals, then call start().
    """

    # ── Signals ───────────────────────────────────────────────────────────────
    status = Signal(str)        # status log message
    loaded = Signal(object)     # LoadResult
    failed = Signal(str)        # user-facing error message

    def __init__(
        self,
        primary_url: str = loader_service.PRIMARY_URL,
        fallback: Optional[Union[str, Path]] = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._primary_url = primary_url
        self._fallback = fallback

    # ── QThread entry point ───────────────────────────────────────────────────

    def run(self) -> None:
        self.status.emit(f"Fetching compatibility list from: {self._primary_url}")
        try:
            result = asyncio.run(
                loader_service.load_entries_async(self._primary_url, self._fallback)
            )
        except EntryParseError as exc:
            self.failed.emit(f"Compatibility list is malformed:\n{exc}")
        except LoadError as exc:
            self.failed.emit(f"Failed to load compatibility data:\n{exc}")
        except CompatListError as exc:
            self.failed.emit(f"Error:\n{exc}")
        except Exception as exc:  # noqa: BLE001
            # Catch-all so the worker thread never silently dies.
            self.failed.emit(f"Unexpected error:\n{type(exc).__name__}: {exc}")
        else:
            if result.fell_back:
                self.status.emit(f"Primary source unavailable, used fallback: {result.source}")
            self.loaded.emit(result)
