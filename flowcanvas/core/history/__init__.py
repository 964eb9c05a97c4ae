"""Package: history

Date: 2026-10-19

Linear undo/redo over graph snapshots.

Components:
    fingerprint: Snapshot identity string used to drop no-op commits
    GraphHistory: past/present/future stack with a bounded depth
"""

from flowcanvas.core.history.fingerprint import fingerprint
from flowcanvas.core.history.history_stack import GraphHistory

__all__ = [
    "GraphHistory",
    "fingerprint",
]
