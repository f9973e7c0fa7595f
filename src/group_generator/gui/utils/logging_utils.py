"""
Routing of ``group_generator`` log records into the GUI console.

Records are put on a plain ``queue.Queue`` as ``(message, level)`` pairs and
the main window drains it from a QTimer, so logging never touches widgets.
"""
from __future__ import annotations

import logging
from queue import Empty, Queue
from typing import Iterator, Optional, Tuple

APP_LOGGER_NAME = "group_generator"

# The console has no DEBUG colour
_GUI_LEVEL_NAMES = {"DEBUG": "INFO"}


class QueueLogHandler(logging.Handler):
    """Logging handler that forwards formatted records to a queue."""

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _GUI_LEVEL_NAMES.get(record.levelname, record.levelname)
            self.log_queue.put((self.format(record), level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(
    log_queue: Queue,
    logger_name: Optional[str] = APP_LOGGER_NAME,
    level: int = logging.INFO,
) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to ``logger_name`` (root logger if None).

    The logger's own level is lowered to ``level`` when needed so records
    reach the handler.

    Returns:
        The attached handler, for detach_queue_handler.
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue, level)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = APP_LOGGER_NAME) -> None:
    logging.getLogger(logger_name).removeHandler(handler)


def drain_queue(log_queue: Queue) -> Iterator[Tuple[str, str]]:
    """Yield every queued ``(message, level)`` without blocking."""
    while True:
        try:
            item = log_queue.get_nowait()
        except Empty:
            return
        log_queue.task_done()
        if isinstance(item, tuple) and len(item) == 2:
            yield item
        else:
            yield str(item), "INFO"


def configure_console_logging(level: int = logging.INFO) -> None:
    """Send log records to stderr with timestamps (launcher use)."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
