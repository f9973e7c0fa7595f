"""
Group size stepper: minus button, current value, plus button.
"""
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Signal

from group_generator.gui.styles.theme import get_styles
from group_generator.gui.utils.icons import MaterialIcons


class GroupSizeStepper(QWidget):
    """
    Shows the group size and requests changes to it.

    The stepper never changes its own value; the owner applies the request
    to the application state and calls set_value().
    """

    incrementRequested = Signal()
    decrementRequested = Signal()

    def __init__(self, value: int = 1, parent=None):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        label = QLabel("Group Size")
        label.setObjectName("caption")
        layout.addWidget(label)
        layout.addStretch()

        self.minus_btn = QPushButton()
        self.minus_btn.setToolTip("Smaller groups")
        self.minus_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.minus_btn.clicked.connect(self.decrementRequested.emit)
        layout.addWidget(self.minus_btn)

        self.value_label = QLabel()
        self.value_label.setFixedWidth(32)
        self.value_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.value_label)

        self.plus_btn = QPushButton()
        self.plus_btn.setToolTip("Larger groups")
        self.plus_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.plus_btn.clicked.connect(self.incrementRequested.emit)
        layout.addWidget(self.plus_btn)

        self.update_theme()
        self.set_value(value)

    def value(self) -> int:
        return int(self.value_label.text())

    def set_value(self, value: int) -> None:
        self.value_label.setText(str(value))
        # Group size never drops below 1
        self.minus_btn.setEnabled(value > 1)

    def update_theme(self):
        S = get_styles()
        for btn in (self.minus_btn, self.plus_btn):
            btn.setStyleSheet(S.BUTTON_ROUND)
        self.minus_btn.setIcon(MaterialIcons.minus())
        self.plus_btn.setIcon(MaterialIcons.plus())
