"""Module: flowcanvas.config

Date: 2026-10-19

Configuration package for flowcanvas.

This package organizes configuration into logical modules:
- app: Application info, debug flags, logging
- features: History limits, entity type sets, canvas preference defaults
- shortcuts: Keyboard shortcuts

All settings are re-exported from this module:
    from flowcanvas.config import APP_NAME, HISTORY_SETTINGS
"""

from flowcanvas.config.app import *  # noqa: F401, F403
from flowcanvas.config.features import *  # noqa: F401, F403
from flowcanvas.config.shortcuts import *  # noqa: F401, F403
