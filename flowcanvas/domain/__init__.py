"""Domain layer - Qt-free value types for the node graph editor.

Components:
    Position, Node, Edge, GraphSnapshot: immutable graph values
    KeyboardModifier, HistoryAction: keyboard input types
"""

from flowcanvas.domain.graph import (
    Edge,
    GraphSnapshot,
    Node,
    Position,
    round_half_up,
    snap_position,
)
from flowcanvas.domain.keyboard import HistoryAction, KeyboardModifier, resolve_history_action

__all__ = [
    "Edge",
    "GraphSnapshot",
    "HistoryAction",
    "KeyboardModifier",
    "Node",
    "Position",
    "resolve_history_action",
    "round_half_up",
    "snap_position",
]
