"""
Entry point for the PySide6 GUI.
"""
import logging
import sys
from typing import Optional

from group_generator.config import AppConfig


def run(config: Optional[AppConfig] = None) -> int:
    """
    Main entry point for the GUI application.

    Returns:
        The Qt event loop's exit code.
    """
    from PySide6.QtWidgets import QApplication
    from group_generator import __version__
    from group_generator.gui.main_window import MainWindow
    from group_generator.gui.utils.crashlog import install_crash_handler
    from group_generator.gui.utils.logging_utils import configure_console_logging

    configure_console_logging(logging.INFO)
    install_crash_handler(app_version=__version__)

    app = QApplication(sys.argv)
    app.setApplicationName("Group Generator")
    app.setApplicationDisplayName("Group Generator")
    app.setOrganizationName("Group Generator")

    window = MainWindow(config)
    window.show()

    return app.exec()


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
