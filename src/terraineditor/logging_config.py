"""
Logging Configuration
Sets up the 'terraineditor' logger and routes Qt's own diagnostics into it.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QMessageLogContext, QtMsgType, qInstallMessageHandler

# Libraries that log per mesh update; kept at WARNING unless debugging
NOISY_LOGGERS = ("pyvista", "vtkmodules")

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

qt_logger = logging.getLogger("terraineditor.qt")


def forward_qt_message(mode: QtMsgType, context: Optional[QMessageLogContext], message: str) -> None:
    """Qt message handler writing to the 'terraineditor.qt' logger."""
    category = getattr(context, "category", None) if context is not None else None
    prefix = f"[{category}] " if category and category != "default" else ""
    qt_logger.log(_QT_LEVELS.get(mode, logging.WARNING), f"{prefix}{message}")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'terraineditor' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("terraineditor")
    logger.setLevel(level)

    # main() may run more than once per process (tests, restarts)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    third_party_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    qInstallMessageHandler(forward_qt_message)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
