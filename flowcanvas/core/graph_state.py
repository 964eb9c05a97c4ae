"""Graph State Owner interfaces.

The live node and edge arrays belong to the canvas hosting the editor. The
core never keeps a reference to them: it reads a snapshot when it needs the
current state and hands back a replacement snapshot to apply.

LiveGraph is the in-memory owner used when no canvas is attached (tests,
headless tools, scripting).

Date:
    2026-10-19
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from PyQt5.QtCore import QObject, pyqtSignal

from flowcanvas.domain.graph import GraphSnapshot


@runtime_checkable
class GraphStateOwner(Protocol):
    """Interface for whatever holds the live graph."""

    def snapshot(self) -> GraphSnapshot:
        """Return the current nodes and edges."""

    def replace(self, snapshot: GraphSnapshot) -> None:
        """Make snapshot the current nodes and edges."""


class LiveGraph(QObject):
    """In-memory graph owner."""

    graph_changed = pyqtSignal()

    def __init__(self, snapshot: GraphSnapshot | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self._snapshot = snapshot if snapshot is not None else GraphSnapshot.empty()

    def snapshot(self) -> GraphSnapshot:
        return self._snapshot

    def replace(self, snapshot: GraphSnapshot) -> None:
        if snapshot is self._snapshot:
            return
        self._snapshot = snapshot
        self.graph_changed.emit()
