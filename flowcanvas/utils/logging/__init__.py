"""Logging utilities package.

Logger factory, console filter and handler setup.
"""

from flowcanvas.utils.logging.logger_factory import DevOnlyFilter, LoggerFactory, get_cached_logger
from flowcanvas.utils.logging.logger_setup import ConfigureLogger

__all__ = [
    "ConfigureLogger",
    "DevOnlyFilter",
    "LoggerFactory",
    "get_cached_logger",
]
