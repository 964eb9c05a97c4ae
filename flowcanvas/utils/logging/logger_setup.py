"""Module: logger_setup.py

Date: 2026-10-19

ConfigureLogger installs the application-wide handlers: a UTF-8 console
handler (with DevOnlyFilter) and a rotating file handler under the user
logs directory. Settings come from flowcanvas.config.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flowcanvas.config import (
    LOG_CONSOLE_LEVEL,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from flowcanvas.utils.logging.logger_factory import DevOnlyFilter


class ConfigureLogger:
    """Configures application-wide logging.

    Does nothing when the root logger already has handlers, so calling it
    twice (or under a test runner that installs its own capture handlers)
    never duplicates output.
    """

    def __init__(self, log_name: str = "flowcanvas", log_dir: str | Path | None = None):
        """Initialize and configure the root logger.

        Args:
            log_name: Base name for the log file
            log_dir: Directory for log files (defaults to the user logs dir)

        """
        self.logger = logging.getLogger()
        self.log_file: Path | None = None

        if self.logger.hasHandlers():
            return

        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels

        if LOG_TO_CONSOLE:
            self._setup_console_handler(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))

        if LOG_TO_FILE:
            if log_dir is None:
                from flowcanvas.utils.paths import AppPaths

                log_dir = AppPaths.get_logs_dir()
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = log_dir / f"{log_name}_{timestamp}.log"
            self._setup_file_handler(self.log_file, getattr(logging, LOG_FILE_LEVEL, logging.INFO))

    def _setup_console_handler(self, level: int) -> None:
        """Sets up console handler with UTF-8 output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)

    def _setup_file_handler(self, path: Path, level: int) -> None:
        """Sets up rotating file output."""
        file_handler = RotatingFileHandler(
            path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        self.logger.addHandler(file_handler)
