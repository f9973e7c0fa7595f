"""
Results panel: placeholder, shuffling indicator, group cards and errors.
"""
from typing import List, Sequence

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QLabel, QFrame, QScrollArea, QStackedWidget
)
from PySide6.QtCore import Qt

from group_generator.gui.styles.theme import get_styles
from group_generator.state import AppState, NamedGroup


class GroupCard(QFrame):
    """Card listing one generated group under its "Group N: Name" title."""

    def __init__(self, group: NamedGroup, parent=None):
        super().__init__(parent)
        self.setObjectName("groupCard")
        self.group = group

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 12)
        layout.setSpacing(6)

        self.title_label = QLabel(group.title)
        self.title_label.setObjectName("groupTitle")
        layout.addWidget(self.title_label)

        self.member_labels: List[QLabel] = []
        for member in group.members:
            label = QLabel(f"•  {member}")
            label.setObjectName("groupMember")
            layout.addWidget(label)
            self.member_labels.append(label)
        layout.addStretch()

        self.update_theme()

    def update_theme(self):
        self.setStyleSheet(get_styles().GROUP_CARD)


class ResultsPanel(QWidget):
    """
    Renders the result part of an AppState.

    Pages: placeholder before the first generation, a shuffling indicator
    while generating, and a two-column grid of GroupCards.
    """

    PAGE_EMPTY = 0
    PAGE_LOADING = 1
    PAGE_RESULTS = 2

    COLUMNS = 2

    def __init__(self, parent=None):
        super().__init__(parent)

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)
        self.layout.setSpacing(12)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        self.layout.addWidget(self.error_label)

        self.stack = QStackedWidget()
        self.layout.addWidget(self.stack, 1)

        self.placeholder_label = QLabel('Click "Generate Groups" to begin')
        self.placeholder_label.setObjectName("caption")
        self.placeholder_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.stack.addWidget(self.placeholder_label)

        self.loading_label = QLabel("Shuffling...")
        self.loading_label.setObjectName("caption")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.stack.addWidget(self.loading_label)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.grid_container = QWidget()
        self.grid = QGridLayout(self.grid_container)
        self.grid.setContentsMargins(0, 0, 4, 0)
        self.grid.setSpacing(12)
        self.grid.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.scroll.setWidget(self.grid_container)
        self.stack.addWidget(self.scroll)

        self.cards: List[GroupCard] = []
        self.update_theme()

    def show_state(self, state: AppState) -> None:
        """Render the error banner and the page that matches ``state``."""
        if state.error:
            self.error_label.setText(state.error)
            self.error_label.show()
        else:
            self.error_label.clear()
            self.error_label.hide()

        if state.is_generating:
            self._set_groups(())
            self.stack.setCurrentIndex(self.PAGE_LOADING)
        elif state.groups:
            self._set_groups(state.groups)
            self.stack.setCurrentIndex(self.PAGE_RESULTS)
        else:
            self._set_groups(())
            self.stack.setCurrentIndex(self.PAGE_EMPTY)

    def _set_groups(self, groups: Sequence[NamedGroup]) -> None:
        if tuple(card.group for card in self.cards) == tuple(groups):
            return
        for card in self.cards:
            self.grid.removeWidget(card)
            card.deleteLater()
        self.cards = []
        for group in groups:
            card = GroupCard(group)
            row, col = divmod(group.index, self.COLUMNS)
            self.grid.addWidget(card, row, col)
            self.cards.append(card)

    def update_theme(self):
        self.error_label.setStyleSheet(get_styles().ERROR_BANNER)
        for card in self.cards:
            card.update_theme()
