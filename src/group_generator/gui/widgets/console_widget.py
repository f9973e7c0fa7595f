"""
Console widget showing the application's log records.
"""
from datetime import datetime
from typing import Dict, Set

from PySide6.QtCore import Slot
from PySide6.QtGui import QColor, QFont, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import QApplication, QGroupBox, QMenu, QPlainTextEdit, QSizePolicy, QVBoxLayout

from group_generator.gui.styles.theme import Fonts, get_colors
from group_generator.gui.utils.icons import MaterialIcons

# Log levels hidden from the console, lower case
CONSOLE_SUPPRESSED_LEVELS: Set[str] = set()

MAX_CONSOLE_LINES = 1000

# Level -> palette attribute; anything else uses TEXT_PRIMARY
LEVEL_COLORS: Dict[str, str] = {
    "critical": "ERROR",
    "error": "ERROR",
    "warning": "WARNING",
    "warn": "WARNING",
    "success": "SUCCESS",
}


class ConsoleWidget(QGroupBox):
    """Read-only, colour-coded log view capped at MAX_CONSOLE_LINES."""

    def __init__(self, parent=None):
        super().__init__("Console Log", parent)
        self.suppressed_levels: Set[str] = set(CONSOLE_SUPPRESSED_LEVELS)
        self._formats: Dict[str, QTextCharFormat] = {}

        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setMaximumBlockCount(MAX_CONSOLE_LINES)
        font = QFont(Fonts.MONO_FONT.split(",")[0])
        font.setPointSize(int(Fonts.CONSOLE.replace("pt", "")))
        self.text_edit.setFont(font)
        layout.addWidget(self.text_edit)

        self.update_theme()

    def _format_for(self, level: str) -> QTextCharFormat:
        return self._formats.get(LEVEL_COLORS.get(level, "TEXT_PRIMARY"), self._formats["TEXT_PRIMARY"])

    @Slot(str, str)
    def append_log(self, level: str, message: str):
        """Append ``message`` with a timestamp, coloured by ``level``."""
        key = level.lower()
        if key in self.suppressed_levels:
            return

        line = f"[{datetime.now():%H:%M:%S}] [{level.upper()}] {message}"
        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        if not self.text_edit.document().isEmpty():
            cursor.insertBlock()
        cursor.insertText(line, self._format_for(key))
        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

    def contextMenuEvent(self, event):
        menu = QMenu(self)
        copy_all = menu.addAction(MaterialIcons.content_copy(), "Copy All")
        menu.addSeparator()
        clear = menu.addAction(MaterialIcons.delete(), "Clear")

        chosen = menu.exec(event.globalPos())
        if chosen is copy_all:
            QApplication.clipboard().setText(self.text_edit.toPlainText())
        elif chosen is clear:
            self.clear()

    def clear(self):
        self.text_edit.clear()

    def update_theme(self):
        C = get_colors()
        self.setStyleSheet(f"""
            QGroupBox {{
                background-color: {C.SURFACE};
                border: none;
                border-top: 1px solid {C.BORDER};
                margin-top: 24px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 8px;
                padding: 0 4px;
                color: {C.TEXT_SECONDARY};
            }}
            QPlainTextEdit {{
                border: none;
                background-color: {C.SURFACE};
            }}
        """)

        # Existing lines keep their colour; only new lines pick up the palette
        for attr in set(LEVEL_COLORS.values()) | {"TEXT_PRIMARY"}:
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(getattr(C, attr)))
            self._formats[attr] = fmt
