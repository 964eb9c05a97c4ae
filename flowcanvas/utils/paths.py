"""Module: paths.py

Date: 2026-10-19

Per-user paths for flowcanvas.

Platform-specific behavior:
- Windows: %LOCALAPPDATA%/flowcanvas/
- Linux: $XDG_DATA_HOME/flowcanvas/ or ~/.local/share/flowcanvas/
- macOS: ~/Library/Application Support/flowcanvas/

Only the canvas preference record and log files live here; history and
selection are never written to disk.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path

from flowcanvas.config import APP_NAME
from flowcanvas.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class AppPaths:
    """Centralized path lookup. Directories are created on first access.

    Directory Structure:
        <user_data_dir>/
        ├── config.json          # Canvas preferences
        └── logs/                # Log files
    """

    _user_data_dir: Path | None = None

    @classmethod
    def _get_platform_data_dir(cls) -> Path:
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("LOCALAPPDATA")
            if not base:
                base = Path(os.environ.get("USERPROFILE", "")) / "AppData" / "Local"
            return Path(base) / APP_NAME

        if system == "Darwin":
            return Path.home() / "Library" / "Application Support" / APP_NAME

        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            return Path(xdg_data) / APP_NAME
        return Path.home() / ".local" / "share" / APP_NAME

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """Get the user data directory, creating it if necessary."""
        if cls._user_data_dir is None:
            cls._user_data_dir = cls._get_platform_data_dir()
            logger.info("[AppPaths] User data directory: %s", cls._user_data_dir)

        cls._user_data_dir.mkdir(parents=True, exist_ok=True)
        return cls._user_data_dir

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config.json file."""
        return cls.get_user_data_dir() / "config.json"

    @classmethod
    def get_logs_dir(cls) -> Path:
        """Get path to logs directory."""
        logs_dir = cls.get_user_data_dir() / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        return logs_dir
