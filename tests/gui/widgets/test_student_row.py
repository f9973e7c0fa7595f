"""Unit tests for roster rows and the roster panel."""

import pytest
from PySide6.QtCore import Qt, QPoint
from PySide6.QtTest import QTest

from group_generator.core.models import Roster
from group_generator.gui.widgets.roster_panel import RosterPanel
from group_generator.gui.widgets.student_row import StudentRow


class TestStudentRowClick:
    """StudentRow reports clicks but never changes itself."""

    def test_click_emits_signal(self, qtbot):
        row = StudentRow("RL")
        qtbot.addWidget(row)
        row.show()

        with qtbot.waitSignal(row.clicked, timeout=1000):
            QTest.mouseClick(row, Qt.MouseButton.LeftButton, pos=QPoint(10, row.height() // 2))

        assert row.isPresent() is True

    def test_drag_off_does_not_emit(self, qtbot):
        row = StudentRow("RL")
        qtbot.addWidget(row)
        row.show()

        clicks = []
        row.clicked.connect(lambda: clicks.append(True))

        center = QPoint(row.width() // 2, row.height() // 2)
        outside = QPoint(row.width() * 2, row.height() // 2)
        QTest.mousePress(row, Qt.MouseButton.LeftButton, pos=center)
        QTest.mouseRelease(row, Qt.MouseButton.LeftButton, pos=outside)

        assert clicks == []

    def test_disabled_row_ignores_clicks(self, qtbot):
        row = StudentRow("RL")
        qtbot.addWidget(row)
        row.show()
        row.setEnabled(False)

        clicks = []
        row.clicked.connect(lambda: clicks.append(True))
        QTest.mouseClick(row, Qt.MouseButton.LeftButton, pos=QPoint(10, 10))

        assert clicks == []

    def test_set_present(self, qtbot):
        row = StudentRow("RL")
        qtbot.addWidget(row)

        row.setPresent(False)

        assert row.isPresent() is False
        assert row.name == "RL"


class TestRosterPanel:
    def test_counter_and_rows(self, qtbot):
        roster = Roster.from_names(["A", "B", "C"])
        panel = RosterPanel(roster)
        qtbot.addWidget(panel)

        assert [r.name for r in panel.rows] == ["A", "B", "C"]
        assert panel.counter_label.text() == "3/3"

    def test_row_click_emits_index(self, qtbot):
        panel = RosterPanel(Roster.from_names(["A", "B", "C"]))
        qtbot.addWidget(panel)
        panel.show()

        with qtbot.waitSignal(panel.attendanceToggled, timeout=1000) as blocker:
            panel.rows[1].clicked.emit()

        assert blocker.args == [1]

    def test_set_roster_syncs_rows(self, qtbot):
        roster = Roster.from_names(["A", "B", "C"])
        panel = RosterPanel(roster)
        qtbot.addWidget(panel)

        panel.set_roster(roster.toggle(2))

        assert panel.rows[2].isPresent() is False
        assert panel.counter_label.text() == "2/3"
