"""Module: flowcanvas.config.shortcuts

Date: 2026-10-19

Keyboard shortcuts configuration.

Qt maps "Ctrl" to the Command key on macOS, so these strings describe the
platform's primary modifier.
"""

# =====================================
# KEYBOARD SHORTCUTS CONFIGURATION
# =====================================

# History shortcuts (suppressed while an editable text field has focus)
HISTORY_SHORTCUTS = {
    "UNDO": "Ctrl+Z",
    "REDO": "Ctrl+Shift+Z",
    "REDO_ALT": "Ctrl+Y",
}

# Canvas shortcuts (work when the canvas has focus)
CANVAS_SHORTCUTS = {
    "DELETE_SELECTION": "Delete",
    "CLEAR_SELECTION": "Escape",
}
