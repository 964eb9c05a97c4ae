"""Module: logger_factory.py

Date: 2026-10-19

Logger factory with caching.
Provides one logger per module name, a global level override and the
DevOnlyFilter that keeps diagnostic chatter out of the console.
"""

from __future__ import annotations

import logging
import threading

from flowcanvas.config import SHOW_DEV_ONLY_IN_CONSOLE


class DevOnlyFilter(logging.Filter):
    """Hide records logged with ``extra={"dev_only": True}``.

    File handlers do not install this filter, so dev-only records still
    reach the log files.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains a single logger instance per module name. Loggers propagate
    to the root logger, which owns every handler.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically ``__name__`` of the calling module

        Returns:
            Cached logger instance

        """
        name = name or "flowcanvas"
        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)
                logger.propagate = True
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[name] = logger
            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Get list of all cached logger names."""
        with cls._lock:
            return list(cls._loggers.keys())

    @classmethod
    def clear_cache(cls) -> None:
        """Forget all cached loggers and the global level."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting a cached logger."""
    return LoggerFactory.get_logger(name)
