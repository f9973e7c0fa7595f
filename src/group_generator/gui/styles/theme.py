"""
Theme definitions for the Group Generator GUI.
"""


class Colors:
    """Light palette - zinc greys with blue accents."""

    PRIMARY_BLUE = "#2563EB"
    PRIMARY_BLUE_HOVER = "#1D4ED8"
    PRIMARY_BLUE_PRESSED = "#1E40AF"

    BACKGROUND = "#F4F4F5"         # zinc-100
    SURFACE = "#FFFFFF"
    CARD = "#FAFAFA"               # zinc-50
    HOVER = "#E4E4E7"              # zinc-200
    DISABLED_BG = "#E4E4E7"

    TEXT_PRIMARY = "#18181B"
    TEXT_SECONDARY = "#71717A"     # zinc-500
    TEXT_DISABLED = "#A1A1AA"
    TEXT_ON_PRIMARY = "#FFFFFF"

    BORDER = "#D4D4D8"             # zinc-300
    BORDER_FOCUS = "#3B82F6"

    ERROR = "#DC2626"
    ERROR_BG = "#FEF2F2"
    SUCCESS = "#16A34A"
    WARNING = "#D97706"
    INFO = "#2563EB"

    TOGGLE_BG = "#3B82F6"


class ColorsDark:
    """Dark palette - near-black background with blue accents."""

    PRIMARY_BLUE = "#2563EB"
    PRIMARY_BLUE_HOVER = "#3B82F6"
    PRIMARY_BLUE_PRESSED = "#1D4ED8"

    BACKGROUND = "#000000"
    SURFACE = "#18181B"           # zinc-900
    CARD = "#27272A"              # zinc-800
    HOVER = "#3F3F46"             # zinc-700
    DISABLED_BG = "#3F3F46"

    TEXT_PRIMARY = "#FFFFFF"
    TEXT_SECONDARY = "#A1A1AA"    # zinc-400
    TEXT_DISABLED = "#71717A"     # zinc-500
    TEXT_ON_PRIMARY = "#FFFFFF"

    BORDER = "#3F3F46"
    BORDER_FOCUS = "#3B82F6"

    ERROR = "#F87171"
    ERROR_BG = "#2A1215"
    SUCCESS = "#3FB950"
    WARNING = "#D29922"
    INFO = "#58A6FF"

    TOGGLE_BG = "#3B82F6"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    MONO_FONT = "Consolas, Monaco, Menlo, 'Courier New', monospace"

    # Sizes
    H1 = "22pt"
    H2 = "16pt"
    BODY = "13pt"
    SMALL = "11pt"
    CONSOLE = "11pt"

    # Weights
    WEIGHT_REGULAR = "400"
    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


def _build_styles(C):
    """Build the QSS fragments for a palette."""

    class _Styles:
        BUTTON_PRIMARY = f"""
            QPushButton {{
                background-color: {C.PRIMARY_BLUE};
                color: {C.TEXT_ON_PRIMARY};
                border-radius: 18px;
                padding: 8px 16px;
                font-weight: {Fonts.WEIGHT_MEDIUM};
                border: none;
                qproperty-iconSize: 16px 16px;
            }}
            QPushButton:hover {{
                background-color: {C.PRIMARY_BLUE_HOVER};
            }}
            QPushButton:pressed {{
                background-color: {C.PRIMARY_BLUE_PRESSED};
            }}
            QPushButton:disabled {{
                background-color: {C.DISABLED_BG};
                color: {C.TEXT_DISABLED};
            }}
        """

        BUTTON_ROUND = f"""
            QPushButton {{
                background-color: {C.CARD};
                color: {C.TEXT_SECONDARY};
                border: none;
                border-radius: 14px;
                min-width: 28px; max-width: 28px;
                min-height: 28px; max-height: 28px;
            }}
            QPushButton:hover {{
                background-color: {C.HOVER};
            }}
            QPushButton:disabled {{
                color: {C.TEXT_DISABLED};
            }}
        """

        PANEL = f"""
            QFrame#panel {{
                background-color: {C.SURFACE};
                border: 1px solid {C.BORDER};
                border-radius: 24px;
            }}
        """

        GROUP_CARD = f"""
            QFrame#groupCard {{
                background-color: {C.CARD};
                border: 1px solid {C.BORDER};
                border-radius: 16px;
            }}
            QLabel#groupTitle {{
                font-weight: {Fonts.WEIGHT_MEDIUM};
                color: {C.TEXT_PRIMARY};
            }}
            QLabel#groupMember {{
                color: {C.TEXT_SECONDARY};
            }}
        """

        ERROR_BANNER = f"""
            QLabel {{
                background-color: {C.ERROR_BG};
                color: {C.ERROR};
                border: 1px solid {C.ERROR};
                border-radius: 8px;
                padding: 6px 10px;
            }}
        """

        SCROLLBAR = f"""
            QScrollBar:vertical {{
                border: none;
                background: transparent;
                width: 10px;
                margin: 0px;
            }}
            QScrollBar::handle:vertical {{
                background: {C.HOVER};
                min-height: 20px;
                border-radius: 5px;
                margin: 2px;
            }}
            QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
                height: 0px;
                subcontrol-origin: margin;
            }}
            QScrollBar::add-page:vertical, QScrollBar::sub-page:vertical {{
                background: none;
            }}
        """

        GLOBAL = f"""
            QMainWindow, QWidget#central {{
                background-color: {C.BACKGROUND};
            }}
            QWidget {{
                color: {C.TEXT_PRIMARY};
                font-size: {Fonts.BODY};
            }}
            QLabel#mainTitle {{
                font-size: {Fonts.H1};
                font-weight: {Fonts.WEIGHT_MEDIUM};
            }}
            QLabel#panelTitle {{
                font-size: {Fonts.H2};
                font-weight: {Fonts.WEIGHT_MEDIUM};
            }}
            QLabel#caption {{
                font-size: {Fonts.SMALL};
                color: {C.TEXT_SECONDARY};
            }}
            QScrollArea {{
                background: transparent;
                border: none;
            }}
        """

    return _Styles


Styles = _build_styles(Colors)
StylesDark = _build_styles(ColorsDark)

GLOBAL_STYLESHEET = Styles.GLOBAL + Styles.SCROLLBAR
GLOBAL_STYLESHEET_DARK = StylesDark.GLOBAL + StylesDark.SCROLLBAR


def apply_theme(app, is_dark: bool = False) -> None:
    """
    Apply the appropriate stylesheet (light or dark) to the QApplication.
    """
    set_dark_mode(is_dark)
    if is_dark:
        app.setStyleSheet(GLOBAL_STYLESHEET_DARK)
    else:
        app.setStyleSheet(GLOBAL_STYLESHEET)

# Module-level dark mode state (set explicitly when theme changes)
_is_dark_mode = False

def set_dark_mode(is_dark: bool):
    """Explicitly set the dark mode state. Called by MainWindow._apply_theme."""
    global _is_dark_mode
    _is_dark_mode = is_dark

def is_dark_mode() -> bool:
    return _is_dark_mode

def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors


def get_styles():
    """Get the appropriate styles based on current theme."""
    return StylesDark if _is_dark_mode else Styles

def apply_shadow(widget, blur_radius=20, x_offset=2, y_offset=4, color=None):
    """Apply a soft shadow to a widget."""
    from PySide6.QtWidgets import QGraphicsDropShadowEffect
    from PySide6.QtGui import QColor

    if color is None:
        color = QColor(0, 0, 0, 45)

    shadow = QGraphicsDropShadowEffect(widget)
    shadow.setBlurRadius(blur_radius)
    shadow.setXOffset(x_offset)
    shadow.setYOffset(y_offset)
    shadow.setColor(color)
    widget.setGraphicsEffect(shadow)
