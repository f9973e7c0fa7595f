"""
Clickable roster row showing one student's attendance.
"""
from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, Signal, QRectF, QPropertyAnimation, QEasingCurve, Property
from PySide6.QtGui import QPainter, QColor, QBrush, QPen, QFont

from group_generator.gui.styles.theme import Fonts, get_colors


class StudentRow(QWidget):
    """
    Attendance row: a status dot and the student's name.

    Absent students are drawn dimmed with the name struck through. The row
    only reports clicks; the owner decides what the new attendance is and
    calls setPresent().
    """

    clicked = Signal()

    def __init__(self, name: str, is_present: bool = True, parent=None):
        super().__init__(parent)

        self._name = name
        self._present = is_present

        self.setFixedHeight(34)
        self.setMinimumWidth(120)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setAccessibleName(name)

        self.update_theme()

        # 1.0 = fully present, 0.0 = absent; drives the fade
        self._presence = 1.0 if is_present else 0.0
        self._animation = QPropertyAnimation(self, b"presence", self)
        self._animation.setDuration(200)
        self._animation.setEasingCurve(QEasingCurve.Type.InOutQuad)

    @Property(float)
    def presence(self):
        return self._presence

    @presence.setter
    def presence(self, value):
        self._presence = value
        self.update()

    @property
    def name(self) -> str:
        return self._name

    def isPresent(self) -> bool:
        return self._present

    def setPresent(self, present: bool):
        if self._present != present:
            self._present = present
            self._start_animation()
            self.update()

    def _start_animation(self):
        self._animation.stop()
        self._animation.setStartValue(self._presence)
        self._animation.setEndValue(1.0 if self._present else 0.0)
        self._animation.start()

    def mouseReleaseEvent(self, event):
        if not self.isEnabled():
            return

        if event.button() == Qt.MouseButton.LeftButton:
            # Ignore drag-off releases
            if self.rect().contains(event.position().toPoint()):
                self.clicked.emit()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w, h = self.width(), self.height()
        opacity = 0.5 + 0.5 * self._presence
        painter.setOpacity(opacity)

        # Row background
        bg = self._bg_present if self._present else self._bg_absent
        painter.setBrush(QBrush(bg))
        painter.setPen(QPen(self._border, 1))
        painter.drawRoundedRect(QRectF(0.5, 0.5, w - 1, h - 1), 8, 8)

        # Status dot
        dot = 12
        dot_rect = QRectF(12, (h - dot) / 2, dot, dot)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(self._dot_on if self._present else self._dot_off))
        painter.drawEllipse(dot_rect)

        # Name
        font = QFont(self.font())
        font.setStrikeOut(not self._present)
        font.setWeight(QFont.Weight.Medium)
        painter.setFont(font)
        painter.setPen(self._text_on if self._present else self._text_off)
        text_rect = QRectF(dot_rect.right() + 10, 0, w - dot_rect.right() - 16, h)
        painter.drawText(text_rect, Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft, self._name)

    def update_theme(self):
        """Update colors when theme changes."""
        C = get_colors()
        self._bg_present = QColor(C.CARD)
        self._bg_absent = QColor(C.SURFACE)
        self._border = QColor(C.BORDER)
        self._dot_on = QColor(C.TOGGLE_BG)
        self._dot_off = QColor(C.DISABLED_BG)
        self._text_on = QColor(C.TEXT_PRIMARY)
        self._text_off = QColor(C.TEXT_DISABLED)
        self.update()
