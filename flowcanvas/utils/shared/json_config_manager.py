"""Module: json_config_manager.py

Date: 2026-10-19

JSON-backed preference storage.

Preferences are grouped in named categories, each with its own defaults.
JSONConfigManager writes every registered category into one config.json
(keeping the previous file as config.json.bak) together with a _metadata
block. Graph content, history and selection are never stored here.
"""

from __future__ import annotations

import json
import shutil
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Generic, TypeVar

from flowcanvas.config import APP_NAME, APP_VERSION, CANVAS_DEFAULTS, EDGE_TYPES, THEMES
from flowcanvas.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

T = TypeVar("T")


class ConfigCategory(Generic[T]):
    """Base class for configuration categories with defaults."""

    def __init__(self, name: str, defaults: dict[str, Any]):
        self.name = name
        self.defaults = defaults
        self._data = dict(defaults)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with fallback to default."""
        return self._data.get(key, default if default is not None else self.defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def update(self, data: dict[str, Any]) -> None:
        """Update multiple configuration values at once."""
        for key, value in data.items():
            self.set(key, value)

    def reset(self) -> None:
        """Reset all values to defaults."""
        self._data = dict(self.defaults)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load from dictionary, applying defaults for missing keys."""
        self._data = dict(self.defaults)
        self._data.update(data)


class CanvasPreferences(ConfigCategory[Any]):
    """Canvas preferences: snapping, grid, default line type, panels, theme."""

    def __init__(self) -> None:
        defaults = dict(CANVAS_DEFAULTS)
        defaults["grid"] = list(CANVAS_DEFAULTS["grid"])
        super().__init__("canvas", defaults)

    def set(self, key: str, value: Any) -> None:
        """Set a preference, validating known keys.

        Raises:
            ValueError: If the value is not acceptable for key

        """
        self._data[key] = self._validate(key, value)

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load stored values, keeping defaults for anything invalid."""
        self._data = dict(self.defaults)
        for key, value in data.items():
            try:
                self._data[key] = self._validate(key, value)
            except ValueError as e:
                logger.warning("[CanvasPreferences] Ignoring stored '%s': %s", key, e)

    @staticmethod
    def _validate(key: str, value: Any) -> Any:
        if key == "line_type" and value not in EDGE_TYPES:
            raise ValueError(f"unknown line type {value!r}")
        if key == "theme" and value not in THEMES:
            raise ValueError(f"unknown theme {value!r}")
        if key == "grid":
            try:
                gx, gy = (float(v) for v in value)
            except (TypeError, ValueError):
                raise ValueError("grid must be a pair of numbers") from None
            if gx <= 0 or gy <= 0:
                raise ValueError("grid spacing must be positive")
            return [gx, gy]
        if key in ("snap", "show_minimap", "show_controls", "show_inspector"):
            return bool(value)
        return value

    # Convenience setters used by toolbar actions

    def set_snap(self, enabled: bool) -> None:
        self.set("snap", enabled)

    def toggle_snap(self) -> bool:
        self.set("snap", not self.get("snap"))
        return self.get("snap")

    def set_grid(self, x: float, y: float) -> None:
        self.set("grid", [x, y])

    def set_line_type(self, line_type: str) -> None:
        self.set("line_type", line_type)

    def toggle_minimap(self) -> bool:
        self.set("show_minimap", not self.get("show_minimap"))
        return self.get("show_minimap")

    def toggle_controls(self) -> bool:
        self.set("show_controls", not self.get("show_controls"))
        return self.get("show_controls")

    def toggle_inspector(self) -> bool:
        self.set("show_inspector", not self.get("show_inspector"))
        return self.get("show_inspector")

    def set_theme(self, theme: str) -> None:
        self.set("theme", theme)

    def toggle_theme(self) -> str:
        self.set("theme", "dark" if self.get("theme") == "light" else "light")
        return self.get("theme")


class JSONConfigManager:
    """JSON configuration file holding every registered category."""

    def __init__(self, app_name: str = APP_NAME, config_dir: str | Path | None = None):
        self.app_name = app_name
        self.config_dir = Path(config_dir or self._get_default_config_dir())
        self.config_file = self.config_dir / "config.json"
        self.backup_file = self.config_dir / "config.json.bak"

        self._lock = threading.RLock()
        self._categories: dict[str, ConfigCategory[Any]] = {}

        self.config_dir.mkdir(parents=True, exist_ok=True)

        logger.info(
            "[JSONConfigManager] Initialized for '%s' with dir: %s",
            app_name,
            self.config_dir,
            extra={"dev_only": True},
        )

    def _get_default_config_dir(self) -> str:
        from flowcanvas.utils.paths import AppPaths

        return str(AppPaths.get_user_data_dir())

    def register_category(self, category: ConfigCategory[Any]) -> None:
        with self._lock:
            self._categories[category.name] = category

    def get_category(
        self, category_name: str, create_if_not_exists: bool = False
    ) -> ConfigCategory[Any] | None:
        """Get configuration category by name."""
        category = self._categories.get(category_name)
        if not category and create_if_not_exists:
            logger.debug("Category '%s' not found, creating it dynamically.", category_name)
            new_category: ConfigCategory[Any] = ConfigCategory(category_name, {})
            self.register_category(new_category)
            return new_category
        return category

    def list_categories(self) -> list[str]:
        return list(self._categories.keys())

    def load(self) -> bool:
        """Load configuration from the JSON file.

        Returns:
            True if the file was read (or there is none yet), False on error

        """
        with self._lock:
            from flowcanvas.config import DEBUG_RESET_CONFIG

            if DEBUG_RESET_CONFIG and self.config_file.exists():
                logger.info("[DEBUG] Deleting config file for fresh start: %s", self.config_file)
                self.config_file.unlink()
                self.backup_file.unlink(missing_ok=True)

            if not self.config_file.exists():
                logger.info(
                    "[JSONConfigManager] No config file found, using defaults",
                    extra={"dev_only": True},
                )
                return True

            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("[JSONConfigManager] Failed to load configuration: %s", e)
                return False

            if not isinstance(data, dict):
                logger.error("[JSONConfigManager] Configuration file is not a JSON object")
                return False

            for category_name, category in self._categories.items():
                if isinstance(data.get(category_name), dict):
                    category.from_dict(data[category_name])

            logger.info(
                "[JSONConfigManager] Configuration loaded successfully",
                extra={"dev_only": True},
            )
            return True

    def save(self, create_backup: bool = True) -> bool:
        """Save configuration to the JSON file."""
        with self._lock:
            data: dict[str, Any] = {
                name: category.to_dict() for name, category in self._categories.items()
            }
            data["_metadata"] = {
                "last_saved": datetime.now().isoformat(),
                "version": f"v{APP_VERSION}",
                "app_name": self.app_name,
            }

            try:
                if create_backup and self.config_file.exists():
                    shutil.copy2(self.config_file, self.backup_file)
                with open(self.config_file, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
            except OSError as e:
                logger.error("[JSONConfigManager] Failed to save configuration: %s", e)
                return False

            logger.debug("[JSONConfigManager] Configuration saved successfully")
            return True

    def restore_from_backup(self) -> bool:
        """Replace config.json with the backup and reload it."""
        with self._lock:
            if not self.backup_file.exists():
                logger.warning("[JSONConfigManager] No backup file to restore from")
                return False
            try:
                shutil.copy2(self.backup_file, self.config_file)
            except OSError as e:
                logger.error("[JSONConfigManager] Failed to restore backup: %s", e)
                return False
            logger.info("[JSONConfigManager] Configuration restored from backup")
            return self.load()


def create_preferences_manager(config_dir: str | Path | None = None) -> JSONConfigManager:
    """Build a manager with the canvas category registered and loaded."""
    manager = JSONConfigManager(config_dir=config_dir)
    manager.register_category(CanvasPreferences())
    manager.load()
    return manager
