"""
main.py – CompatList application entry point.
Bootstraps the PySide6 QApplication and launches the main window.
"""

import logging
import sys
import os

# ── PyInstaller binary path resolution ──────────────────────────────────────
if hasattr(sys, "_MEIPASS"):
    BASE_PATH = sys._MEIPASS
else:
    BASE_PATH = os.path.abspath(".")

# Expose globally so services can locate the bundled compatibility list
os.environ["COMPATLIST_BASE"] = BASE_PATH

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from main_window import MainWindow


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("CompatList")
    app.setApplicationDisplayName("CompatList – Compatibility List Viewer")
    app.setOrganizationName("CompatList")

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
