"""
Path utilities for the application data directory.

Only diagnostic output (crash reports) lives here; rosters and settings
are never written to disk.
"""
from __future__ import annotations

import os
import platform
from pathlib import Path

APP_DIR_NAME = "Group Generator"


def get_app_data_dir() -> Path:
    """
    Get the application data directory.

    Uses Qt's AppLocalDataLocation when a QApplication is available,
    otherwise the platform's conventional location.
    """
    from PySide6.QtCore import QStandardPaths
    from PySide6.QtWidgets import QApplication

    if QApplication.instance() is not None:
        location = QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppLocalDataLocation
        )
        if location:
            return Path(location)

    system = platform.system()
    if system == "Windows":
        base = os.environ.get("LOCALAPPDATA", os.environ.get("APPDATA"))
        return Path(base) / APP_DIR_NAME if base else Path.home() / ".group_generator"
    if system == "Darwin":
        return Path.home() / "Library/Application Support" / APP_DIR_NAME
    return Path.home() / ".local/share" / APP_DIR_NAME
