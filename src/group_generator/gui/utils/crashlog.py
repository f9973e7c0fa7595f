"""
Crashlog utilities for capturing unhandled exceptions in the GUI process.

An exception escaping a Qt slot would otherwise only reach stderr. The
handler installed here logs it, writes a crash report, and shows a dialog
before exiting.
"""
from __future__ import annotations

import logging
import platform
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

# Global reference to original excepthook
_original_excepthook: Optional[Callable] = None

# Maximum number of crash logs to keep
MAX_CRASH_LOGS = 5


def get_crashlog_dir() -> Path:
    """Get the directory for crash logs."""
    from group_generator.gui.utils.paths import get_app_data_dir
    crash_dir = get_app_data_dir() / "crash_logs"
    crash_dir.mkdir(parents=True, exist_ok=True)
    return crash_dir


def _rotate_crash_logs() -> None:
    """
    Maintain a maximum of MAX_CRASH_LOGS files.

    Deletes oldest logs so a new report fits under the limit.
    """
    crash_dir = get_crashlog_dir()
    logs = sorted(crash_dir.glob("crash_*.log"), key=lambda p: p.stat().st_mtime)

    while len(logs) >= MAX_CRASH_LOGS:
        oldest = logs.pop(0)
        try:
            oldest.unlink()
        except OSError as e:
            logger.warning(f"Could not remove old crash log {oldest}: {e}")


def format_crash_report(tb_text: str, app_version: str) -> str:
    """Build the crash report body."""
    lines: List[str] = [
        "Group Generator Crash Report",
        "=" * 50,
        f"Timestamp: {datetime.now().isoformat()}",
        f"Version: {app_version}",
        f"Python: {sys.version}",
        f"Platform: {platform.platform()}",
        "",
        "Exception:",
        "-" * 50,
        tb_text,
    ]
    return "\n".join(lines)


def write_crash_report(tb_text: str, app_version: str) -> Optional[Path]:
    """
    Write a crash report to the crash log directory.

    Returns:
        Path of the written report, or None if it could not be written.
    """
    try:
        _rotate_crash_logs()
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        crash_file = get_crashlog_dir() / f"crash_{timestamp}.log"
        crash_file.write_text(format_crash_report(tb_text, app_version), encoding="utf-8")
        return crash_file
    except OSError as e:
        logger.error(f"Could not write crash report: {e}")
        return None


def install_crash_handler(app_version: str = "unknown") -> None:
    """
    Install the Python exception handler (sys.excepthook).

    Call this early in application startup, before any GUI code.

    Args:
        app_version: Application version string for crash reports.
    """
    global _original_excepthook
    _original_excepthook = sys.excepthook

    def crash_handler(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            _original_excepthook(exc_type, exc_value, exc_tb)
            return

        tb_text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
        logger.critical(f"Unhandled exception:\n{tb_text}")

        crash_file = write_crash_report(tb_text, app_version)
        _show_crash_dialog(crash_file, tb_text)
        sys.exit(1)

    sys.excepthook = crash_handler


def uninstall_crash_handler() -> None:
    """Restore the excepthook that was active before install_crash_handler."""
    global _original_excepthook
    if _original_excepthook is not None:
        sys.excepthook = _original_excepthook
        _original_excepthook = None


def _show_crash_dialog(crash_file: Optional[Path], traceback_text: str) -> None:
    """
    Show a crash dialog to the user with the log location.

    This function blocks until the user acknowledges the dialog.
    """
    from PySide6.QtWidgets import QApplication, QMessageBox
    from PySide6.QtCore import Qt

    app = QApplication.instance()
    if not app:
        return  # No Qt app running

    if crash_file and crash_file.exists():
        info_text = (
            f"A crash report has been saved to:\n{crash_file}\n\n"
            "Please include this file when reporting the issue."
        )
    else:
        info_text = (
            "Could not save crash report.\n\n"
            "Please copy the details below when reporting the issue."
        )

    msg = QMessageBox()
    msg.setIcon(QMessageBox.Icon.Critical)
    msg.setWindowTitle("Group Generator - Unexpected Error")
    msg.setText("The application encountered an unexpected error and needs to close.")
    msg.setInformativeText(info_text)
    msg.setDetailedText(traceback_text)
    msg.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg.setWindowModality(Qt.WindowModality.ApplicationModal)
    msg.exec()
