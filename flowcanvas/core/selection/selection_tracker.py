"""Module: selection_tracker.py

Date: 2026-10-19

Selection Tracker - selected node and edge identities.

Selection is independent of history: changes here are never recorded as
undo steps and never persisted. Plain clicks replace the selection,
modifier clicks extend it, a canvas background click clears it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from PyQt5.QtCore import QObject, pyqtSignal

from flowcanvas.domain.graph import GraphSnapshot
from flowcanvas.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _to_ids(items: Iterable[Any] | None) -> dict[str, None]:
    """Collect identities from entities or plain id strings, keeping order."""
    ids: dict[str, None] = {}
    for item in items or ():
        ids[item if isinstance(item, str) else item.id] = None
    return ids


class SelectionTracker(QObject):
    """Owns the selected node/edge identity sets.

    Ids are kept in insertion order; duplicates are impossible.
    """

    # Emitted with (node_ids, edge_ids) whenever either set changes
    selection_changed = pyqtSignal(list, list)

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._node_ids: dict[str, None] = {}
        self._edge_ids: dict[str, None] = {}

    # =====================================
    # State Queries
    # =====================================

    @property
    def selected_node_ids(self) -> tuple[str, ...]:
        return tuple(self._node_ids)

    @property
    def selected_edge_ids(self) -> tuple[str, ...]:
        return tuple(self._edge_ids)

    def is_node_selected(self, node_id: str) -> bool:
        return node_id in self._node_ids

    def is_edge_selected(self, edge_id: str) -> bool:
        return edge_id in self._edge_ids

    def is_empty(self) -> bool:
        return not self._node_ids and not self._edge_ids

    # =====================================
    # Selection State Management
    # =====================================

    def set_selection(self, nodes: Iterable[Any] | None = None, edges: Iterable[Any] | None = None) -> None:
        """Replace both sets with the identities of the given entities (or ids)."""
        self._apply(_to_ids(nodes), _to_ids(edges))

    def extend_selection(self, nodes: Iterable[Any] | None = None, edges: Iterable[Any] | None = None) -> None:
        """Union the given identities into the current sets."""
        self._apply(
            {**self._node_ids, **_to_ids(nodes)},
            {**self._edge_ids, **_to_ids(edges)},
        )

    def select_node(self, node_id: str, extend: bool = False) -> None:
        """Node click: replace the selection, or extend it when a modifier is held."""
        if extend:
            self.extend_selection(nodes=[node_id])
        else:
            self.set_selection(nodes=[node_id])

    def select_edge(self, edge_id: str, extend: bool = False) -> None:
        """Edge click: replace the selection, or extend it when a modifier is held."""
        if extend:
            self.extend_selection(edges=[edge_id])
        else:
            self.set_selection(edges=[edge_id])

    def clear(self) -> None:
        """Empty both sets (canvas background click)."""
        self._apply({}, {})

    def prune(self, snapshot: GraphSnapshot) -> None:
        """Drop ids that no longer name an entity of snapshot."""
        node_ids = set(snapshot.node_ids())
        edge_ids = set(snapshot.edge_ids())
        self._apply(
            {i: None for i in self._node_ids if i in node_ids},
            {i: None for i in self._edge_ids if i in edge_ids},
        )

    def _apply(self, node_ids: dict[str, None], edge_ids: dict[str, None]) -> None:
        if list(node_ids) == list(self._node_ids) and list(edge_ids) == list(self._edge_ids):
            return  # No change

        self._node_ids = node_ids
        self._edge_ids = edge_ids
        logger.debug(
            "[SelectionTracker] %d nodes, %d edges selected",
            len(node_ids),
            len(edge_ids),
            extra={"dev_only": True},
        )
        self.selection_changed.emit(list(node_ids), list(edge_ids))
