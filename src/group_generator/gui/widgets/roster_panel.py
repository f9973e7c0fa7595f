"""
Roster panel: attendance list with a present/total counter.
"""
from typing import List

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea
from PySide6.QtCore import Signal

from group_generator.core.models import Roster
from group_generator.gui.widgets.student_row import StudentRow


class RosterPanel(QWidget):
    """
    Lists every student with a clickable attendance row.

    Emits ``attendanceToggled(index)``; the window applies the toggle to
    its state and calls set_roster() with the result.
    """

    attendanceToggled = Signal(int)

    def __init__(self, roster: Roster, parent=None):
        super().__init__(parent)

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)
        self.layout.setSpacing(8)

        header = QHBoxLayout()
        title = QLabel("Students")
        title.setObjectName("caption")
        header.addWidget(title)
        header.addStretch()
        self.counter_label = QLabel()
        self.counter_label.setObjectName("caption")
        header.addWidget(self.counter_label)
        self.layout.addLayout(header)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setMaximumHeight(320)
        container = QWidget()
        self.rows_layout = QVBoxLayout(container)
        self.rows_layout.setContentsMargins(0, 0, 4, 0)
        self.rows_layout.setSpacing(6)
        self.scroll.setWidget(container)
        self.layout.addWidget(self.scroll)

        self.rows: List[StudentRow] = []
        for index, student in enumerate(roster):
            row = StudentRow(student.name, student.is_present)
            row.clicked.connect(lambda i=index: self.attendanceToggled.emit(i))
            self.rows_layout.addWidget(row)
            self.rows.append(row)
        self.rows_layout.addStretch()

        self.set_roster(roster)

    def set_roster(self, roster: Roster) -> None:
        """Sync rows and counter with ``roster`` (same students, same order)."""
        for row, student in zip(self.rows, roster):
            row.setPresent(student.is_present)
        self.counter_label.setText(f"{roster.present_count}/{roster.total_count}")

    def update_theme(self):
        for row in self.rows:
            row.update_theme()
