"""
Integration tests for the Group Generator window.

Drive the window through its widgets and check both the AppState it holds
and what it renders.
"""

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from group_generator.config import AppConfig
from group_generator.gui.main_window import MainWindow
from group_generator.gui.widgets.results_panel import ResultsPanel


@pytest.fixture
def window(qtbot, config, identity_rng, fixed_namer):
    win = MainWindow(config, rng=identity_rng, namer=fixed_namer)
    qtbot.addWidget(win)
    win.show()
    return win


class TestMainWindowActions:
    def test_initial_render(self, window, config):
        assert window.windowTitle() == "Group Generator"
        assert window.stepper.value() == config.default_group_size
        assert window.roster_panel.counter_label.text() == "7/7"
        assert window.results_panel.stack.currentIndex() == ResultsPanel.PAGE_EMPTY

    def test_toggle_attendance_updates_counter(self, window):
        window.roster_panel.rows[0].clicked.emit()

        assert window.state.roster[0].is_present is False
        assert window.roster_panel.counter_label.text() == "6/7"
        assert window.roster_panel.rows[0].isPresent() is False

    def test_stepper_changes_group_size(self, window):
        QTest.mouseClick(window.stepper.plus_btn, Qt.MouseButton.LeftButton)
        assert window.state.group_size == 4
        assert window.stepper.value() == 4

        for _ in range(5):
            window.stepper.decrementRequested.emit()
        assert window.state.group_size == 1
        assert not window.stepper.minus_btn.isEnabled()

    def test_generate_without_delay(self, window):
        QTest.mouseClick(window.generate_btn, Qt.MouseButton.LeftButton)

        assert [g.members for g in window.state.groups] == [
            ("Ana", "Dee", "Gus"),
            ("Ben", "Eli"),
            ("Cy", "Fay"),
        ]
        assert window.results_panel.stack.currentIndex() == ResultsPanel.PAGE_RESULTS
        assert window.results_panel.cards[0].title_label.text() == "Group 1: Team 1"

    def test_generate_error_shown(self, window):
        for _ in range(10):
            window.stepper.incrementRequested.emit()

        window.generate_btn.click()

        assert window.state.groups == ()
        assert not window.results_panel.error_label.isHidden()
        assert "larger than the number of present students (7)" in window.results_panel.error_label.text()


class TestDelayedReveal:
    @pytest.fixture
    def delayed_window(self, qtbot, identity_rng, fixed_namer):
        config = AppConfig(students=("A", "B", "C", "D"), reveal_delay_ms=50)
        win = MainWindow(config, rng=identity_rng, namer=fixed_namer)
        qtbot.addWidget(win)
        win.show()
        return win

    def test_shows_loading_then_groups(self, qtbot, delayed_window):
        delayed_window.generate_btn.click()

        assert delayed_window.state.is_generating is True
        assert not delayed_window.generate_btn.isEnabled()
        assert delayed_window.results_panel.stack.currentIndex() == ResultsPanel.PAGE_LOADING

        qtbot.waitUntil(lambda: not delayed_window.state.is_generating, timeout=2000)

        assert len(delayed_window.state.groups) == 2
        assert delayed_window.generate_btn.isEnabled()
        assert delayed_window.results_panel.stack.currentIndex() == ResultsPanel.PAGE_RESULTS

    def test_error_is_not_delayed(self, delayed_window):
        for i in range(4):
            delayed_window.roster_panel.rows[i].clicked.emit()

        delayed_window.generate_btn.click()

        assert delayed_window.state.is_generating is False
        assert delayed_window.state.error == "No students are present"


class TestMainWindowLogging:
    def test_generation_logged_to_console(self, qtbot, window):
        window.generate_btn.click()

        qtbot.waitUntil(
            lambda: "Generated 3 groups" in window.console.text_edit.toPlainText(),
            timeout=2000,
        )

    def test_theme_toggle(self, window):
        window.dark_mode_action.trigger()
        assert window.dark_mode_action.isChecked() is False

        window.dark_mode_action.trigger()
        assert window.dark_mode_action.isChecked() is True
