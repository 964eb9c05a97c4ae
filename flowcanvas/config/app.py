"""Module: flowcanvas.config.app

Date: 2026-10-19

Application-level configuration: app info, debug flags, logging settings.
"""

# =====================================
# DEBUG SETTINGS
# =====================================

# Config reset - if True, deletes config.json on load
DEBUG_RESET_CONFIG = False

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "flowcanvas"
APP_VERSION = "0.4.0"

# =====================================
# LOGGING CONFIGURATION
# =====================================

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 5_000_000  # 5MB per file
LOG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
