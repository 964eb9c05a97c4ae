"""Module: flowcanvas.config.features

Date: 2026-10-19

Feature configuration: history limits, entity type sets, canvas defaults.
"""

# =====================================
# UNDO / REDO
# =====================================

HISTORY_SETTINGS = {
    # Maximum number of past snapshots kept in memory (oldest evicted first)
    "MAX_DEPTH": 50,
}

# =====================================
# GRAPH ENTITIES
# =====================================

NODE_TYPES = ("default", "input", "output")

EDGE_TYPES = ("smoothstep", "straight", "bezier")
DEFAULT_EDGE_TYPE = "smoothstep"

# Marker attached to edges created by connect()
EDGE_MARKER_END = {"type": "arrowclosed"}

# Position used by add_node() when the caller has no viewport center
DEFAULT_NODE_POSITION = (80.0, 80.0)

# =====================================
# CANVAS PREFERENCES
# =====================================

THEMES = ("light", "dark")

CANVAS_DEFAULTS = {
    "snap": True,
    "grid": [16, 16],
    "line_type": DEFAULT_EDGE_TYPE,
    "show_minimap": True,
    "show_controls": True,
    "show_inspector": True,
    "theme": "light",
}
