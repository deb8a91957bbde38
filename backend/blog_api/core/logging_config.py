"""
Logging configuration for the application.

WHAT: ``setup_logging`` configures the root logger with a console handler
and, optionally, a file handler. Modules log through
``logging.getLogger(__name__)`` and never configure handlers themselves.

WHY: Configuring once at application start keeps every module's log lines in
the same format: timestamp, logger name, level and message.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure the root logger.

    If the root logger already has handlers it is left alone, so calling
    ``create_app`` repeatedly (tests do) does not duplicate output.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
        logfile: Optional path to also log to, relative to the working directory
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
