"""
Main Window for the Group Generator GUI.
"""
import logging
import queue
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QPushButton,
    QLabel, QFrame, QApplication, QMessageBox
)
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction

from group_generator import __version__
from group_generator.config import AppConfig
from group_generator.naming import GroupNamer
from group_generator.partitioning import RandomSource
from group_generator.state import (
    AppState,
    initial_state,
    toggle_attendance,
    increment_group_size,
    decrement_group_size,
    begin_generation,
    generate_groups,
    apply_result,
)
from group_generator.gui.styles.theme import apply_theme, apply_shadow, get_styles
from group_generator.gui.utils.icons import MaterialIcons
from group_generator.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler, drain_queue
from group_generator.gui.widgets.console_widget import ConsoleWidget
from group_generator.gui.widgets.group_size_stepper import GroupSizeStepper
from group_generator.gui.widgets.results_panel import ResultsPanel
from group_generator.gui.widgets.roster_panel import RosterPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Group Generator window.

    Holds the single AppState; every user action replaces it with the
    result of a pure update function and re-renders.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        rng: Optional[RandomSource] = None,
        namer: Optional[GroupNamer] = None,
    ):
        super().__init__()

        self.config = config or AppConfig()
        self._rng = rng
        self._namer = namer
        self.state: AppState = initial_state(self.config)
        self._pending: Optional[AppState] = None

        self.setWindowTitle(self.config.window_title)
        self.resize(1000, 720)
        self.setMinimumSize(760, 560)

        # --- Menu Bar ---
        file_menu = self.menuBar().addMenu("File")
        exit_action = QAction("Quit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        settings_menu = self.menuBar().addMenu("Settings")
        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.setChecked(self.config.dark_mode)
        self.dark_mode_action.triggered.connect(self._apply_theme)
        settings_menu.addAction(self.dark_mode_action)

        help_menu = self.menuBar().addMenu("Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # Initialize Logging
        self.log_queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        # Central Widget
        self.central_widget = QWidget()
        self.central_widget.setObjectName("central")
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        self.splitter = QSplitter(Qt.Orientation.Vertical)
        self.main_layout.addWidget(self.splitter)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(24, 20, 24, 16)
        content_layout.setSpacing(20)

        self.title_label = QLabel("Group Generator")
        self.title_label.setObjectName("mainTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        content_layout.addWidget(self.title_label)

        panels = QHBoxLayout()
        panels.setSpacing(20)
        content_layout.addLayout(panels, 1)

        # --- Settings panel ---
        self.settings_panel = QFrame()
        self.settings_panel.setObjectName("panel")
        settings_layout = QVBoxLayout(self.settings_panel)
        settings_layout.setContentsMargins(20, 20, 20, 20)
        settings_layout.setSpacing(16)

        settings_title = QLabel("Settings")
        settings_title.setObjectName("panelTitle")
        settings_layout.addWidget(settings_title)

        self.stepper = GroupSizeStepper(self.state.group_size)
        self.stepper.incrementRequested.connect(self._on_increment)
        self.stepper.decrementRequested.connect(self._on_decrement)
        settings_layout.addWidget(self.stepper)

        self.generate_btn = QPushButton("  Generate Groups")
        self.generate_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.generate_btn.clicked.connect(self._on_generate)
        settings_layout.addWidget(self.generate_btn)

        self.roster_panel = RosterPanel(self.state.roster)
        self.roster_panel.attendanceToggled.connect(self._on_attendance_toggled)
        settings_layout.addWidget(self.roster_panel, 1)

        panels.addWidget(self.settings_panel, 1)

        # --- Results panel ---
        self.groups_panel = QFrame()
        self.groups_panel.setObjectName("panel")
        groups_layout = QVBoxLayout(self.groups_panel)
        groups_layout.setContentsMargins(20, 20, 20, 20)
        groups_layout.setSpacing(16)

        groups_title = QLabel("Generated Groups")
        groups_title.setObjectName("panelTitle")
        groups_layout.addWidget(groups_title)

        self.results_panel = ResultsPanel()
        groups_layout.addWidget(self.results_panel, 1)

        panels.addWidget(self.groups_panel, 2)

        for panel in (self.settings_panel, self.groups_panel):
            apply_shadow(panel, blur_radius=24, y_offset=4)

        self.splitter.addWidget(content)

        self.console = ConsoleWidget()
        self.splitter.addWidget(self.console)
        self.splitter.setStretchFactor(0, 4)
        self.splitter.setStretchFactor(1, 1)

        self._apply_theme(self.config.dark_mode)
        self._render()
        logger.info(f"Loaded roster of {self.state.total_count} students")

    # ─────────────────────────────────────────────────────────────────────
    # User actions
    # ─────────────────────────────────────────────────────────────────────

    def _on_attendance_toggled(self, index: int):
        self.state = toggle_attendance(self.state, index)
        self._render()

    def _on_increment(self):
        self.state = increment_group_size(self.state)
        self._render()

    def _on_decrement(self):
        self.state = decrement_group_size(self.state)
        self._render()

    def _on_generate(self):
        if self.state.is_generating:
            return

        result = generate_groups(self.state, self._rng, self._namer)
        if result.error or self.config.reveal_delay_ms == 0:
            # Errors are shown straight away
            self.state = result
            self._render()
            return

        self._pending = result
        self.state = begin_generation(self.state)
        self._render()
        QTimer.singleShot(self.config.reveal_delay_ms, self._reveal_pending)

    def _reveal_pending(self):
        if self._pending is None:
            return
        self.state = apply_result(self.state, self._pending)
        self._pending = None
        self._render()

    # ─────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────

    def _render(self):
        """Push the current state into every widget."""
        self.stepper.set_value(self.state.group_size)
        self.roster_panel.set_roster(self.state.roster)
        self.generate_btn.setEnabled(not self.state.is_generating)
        self.results_panel.show_state(self.state)

    def _apply_theme(self, is_dark: bool):
        """Apply the selected theme stylesheet."""
        app = QApplication.instance()
        apply_theme(app, is_dark)

        S = get_styles()
        self.generate_btn.setStyleSheet(S.BUTTON_PRIMARY)
        self.generate_btn.setIcon(MaterialIcons.shuffle())
        for panel in (self.settings_panel, self.groups_panel):
            panel.setStyleSheet(S.PANEL)

        self.stepper.update_theme()
        self.roster_panel.update_theme()
        self.results_panel.update_theme()
        self.console.update_theme()

    def _drain_log_queue(self):
        for text, level in drain_queue(self.log_queue):
            self.console.append_log(level, text)

    def _show_about(self):
        QMessageBox.about(
            self,
            "About Group Generator",
            "<h3>Group Generator</h3>"
            f"<p>Version: {__version__}</p>"
            "<p>Randomly splits the students who are present into groups.</p>"
        )

    def closeEvent(self, event):
        self.log_timer.stop()
        detach_queue_handler(self._log_handler)
        super().closeEvent(event)
