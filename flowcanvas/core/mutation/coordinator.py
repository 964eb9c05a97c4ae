"""Module: coordinator.py

Date: 2026-10-19

Mutation Coordinator - every change to the live graph goes through here.

Each operation builds a replacement snapshot, hands it to the graph owner
and, depending on the EditMode, records it in history:

    EditMode.APPLY   update the live graph only (typing, dragging)
    EditMode.COMMIT  update the live graph and checkpoint it in history

Patching merges fields shallowly onto the matched entity, except ``data``
(merged key by key) and ``position`` (merged per axis). Entities other than
the patched one are reused as they are. An unknown target id is a benign
miss: nothing changes and the call returns False.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from flowcanvas.config import (
    DEFAULT_NODE_POSITION,
    EDGE_MARKER_END,
    EDGE_TYPES,
    NODE_TYPES,
)
from flowcanvas.domain.graph import Edge, GraphSnapshot, Node, Position, snap_position
from flowcanvas.utils.logging.logger_factory import get_cached_logger
from flowcanvas.utils.shared.json_config_manager import CanvasPreferences

if TYPE_CHECKING:
    from flowcanvas.core.graph_state import GraphStateOwner
    from flowcanvas.core.history.history_stack import GraphHistory

logger = get_cached_logger(__name__)

_NODE_ID_PATTERN = re.compile(r"^n(\d+)$")


class EditMode(Enum):
    """How an edit interacts with history."""

    APPLY = "apply"
    COMMIT = "commit"

    @classmethod
    def from_commit_flag(cls, commit: bool) -> EditMode:
        return cls.COMMIT if commit else cls.APPLY


class EntityKind(Enum):
    NODE = "node"
    EDGE = "edge"


def _normalize_type(value: Any, allowed: tuple[str, ...]) -> str | None:
    if value is None or value == "":
        return None
    if value not in allowed:
        raise ValueError(f"unknown type {value!r}, expected one of {', '.join(allowed)}")
    return value


def _merge_position(current: Position, value: Any) -> Position:
    if isinstance(value, Position):
        return value
    if not isinstance(value, Mapping):
        raise ValueError("position must be an object with x/y")
    # Position rejects non-numeric, bool and non-finite axes with ValueError
    return Position(value.get("x", current.x), value.get("y", current.y))


def _merge_data(current: dict[str, Any], value: Any) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError("data must be an object")
    return {**current, **value}


def merge_node(node: Node, fields: Mapping[str, Any]) -> Node:
    """Return node with fields merged in.

    Raises:
        ValueError: If a field has the wrong shape or an unknown type tag

    """
    updates: dict[str, Any] = {}
    extra = dict(node.extra)
    for key, value in fields.items():
        if key == "id":
            continue  # identity is immutable
        if key == "data":
            updates["data"] = _merge_data(node.data, value)
        elif key == "position":
            updates["position"] = _merge_position(node.position, value)
        elif key == "type":
            updates["type"] = _normalize_type(value, NODE_TYPES)
        else:
            extra[key] = value
    if extra != node.extra:
        updates["extra"] = extra
    return replace(node, **updates) if updates else node


def merge_edge(edge: Edge, fields: Mapping[str, Any]) -> Edge:
    """Return edge with fields merged in.

    Raises:
        ValueError: If a field has the wrong shape or an unknown type tag

    """
    updates: dict[str, Any] = {}
    extra = dict(edge.extra)
    for key, value in fields.items():
        if key == "id":
            continue  # identity is immutable
        if key == "data":
            updates["data"] = _merge_data(edge.data, value)
        elif key == "type":
            updates["type"] = _normalize_type(value, EDGE_TYPES)
        elif key in ("source", "target"):
            if not isinstance(value, str) or not value:
                raise ValueError(f"{key} must be a node id")
            updates[key] = value
        else:
            extra[key] = value
    if extra != edge.extra:
        updates["extra"] = extra
    return replace(edge, **updates) if updates else edge


class MutationCoordinator:
    """Applies edits to the live graph and decides what reaches history."""

    def __init__(
        self,
        graph: GraphStateOwner,
        history: GraphHistory,
        preferences: CanvasPreferences | None = None,
    ):
        """Initialize the coordinator.

        Args:
            graph: Owner of the live nodes/edges
            history: History receiving committed snapshots
            preferences: Canvas preferences (snap, grid, default line type)

        """
        self.graph = graph
        self.history = history
        self.preferences = preferences if preferences is not None else CanvasPreferences()
        self._next_node_index = 1

    # -------------------------------------------------------------------------
    # Patching
    # -------------------------------------------------------------------------

    def patch(
        self,
        kind: EntityKind,
        target_id: str,
        fields: Mapping[str, Any],
        mode: EditMode = EditMode.COMMIT,
    ) -> bool:
        """Merge fields onto one node or edge.

        Returns:
            True if the entity was found and the edit applied

        """
        if kind is EntityKind.NODE:
            return self.patch_node(target_id, fields, mode)
        return self.patch_edge(target_id, fields, mode)

    def patch_node(
        self, node_id: str, fields: Mapping[str, Any], mode: EditMode = EditMode.COMMIT
    ) -> bool:
        current = self.graph.snapshot()
        nodes = list(current.nodes)
        for index, node in enumerate(nodes):
            if node.id != node_id:
                continue
            try:
                nodes[index] = merge_node(node, fields)
            except ValueError as e:
                logger.warning("[MutationCoordinator] Rejected patch for node %s: %s", node_id, e)
                return False
            self._publish(GraphSnapshot(nodes, current.edges), mode)
            return True

        logger.debug("[MutationCoordinator] Patch target node not found: %s", node_id)
        return False

    def patch_edge(
        self, edge_id: str, fields: Mapping[str, Any], mode: EditMode = EditMode.COMMIT
    ) -> bool:
        current = self.graph.snapshot()
        edges = list(current.edges)
        for index, edge in enumerate(edges):
            if edge.id != edge_id:
                continue
            try:
                edges[index] = merge_edge(edge, fields)
            except ValueError as e:
                logger.warning("[MutationCoordinator] Rejected patch for edge %s: %s", edge_id, e)
                return False
            self._publish(GraphSnapshot(current.nodes, edges), mode)
            return True

        logger.debug("[MutationCoordinator] Patch target edge not found: %s", edge_id)
        return False

    def move_node(self, node_id: str, x: float, y: float, mode: EditMode = EditMode.COMMIT) -> bool:
        """Move a node, snapping to the grid when snapping is enabled.

        Drags call this with APPLY while moving and COMMIT on release.
        """
        try:
            position = Position(x, y)
            if self.preferences.get("snap"):
                position = snap_position(x, y, self.preferences.get("grid"))
        except ValueError as e:
            logger.warning("[MutationCoordinator] Rejected move for node %s: %s", node_id, e)
            return False
        return self.patch_node(node_id, {"position": position}, mode)

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    def add_node(
        self,
        position: tuple[float, float] | None = None,
        label: str | None = None,
        node_type: str | None = None,
        mode: EditMode = EditMode.COMMIT,
    ) -> Node:
        """Append a new node with a fresh ``n<k>`` id.

        Args:
            position: Canvas position (defaults to DEFAULT_NODE_POSITION)
            label: Display label (defaults to "Node <id>")
            node_type: One of NODE_TYPES, or None for the default look
            mode: APPLY or COMMIT

        Returns:
            The created node

        Raises:
            ValueError: If node_type is not a known node type or the position
                is not a pair of finite numbers

        """
        node_type = _normalize_type(node_type, NODE_TYPES)
        x, y = position if position is not None else DEFAULT_NODE_POSITION
        node_position = Position(x, y)
        current = self.graph.snapshot()
        node_id = self._new_node_id(current)
        node = Node(
            id=node_id,
            position=node_position,
            type=node_type,
            data={"label": label if label is not None else f"Node {node_id}"},
        )
        self._publish(GraphSnapshot((*current.nodes, node), current.edges), mode)
        logger.info("[MutationCoordinator] Added node %s", node_id)
        return node

    def connect(
        self,
        source: str,
        target: str,
        line_type: str | None = None,
        straight: bool = False,
        mode: EditMode = EditMode.COMMIT,
    ) -> Edge | None:
        """Connect two nodes with a new edge.

        Args:
            source: Source node id
            target: Target node id
            line_type: Edge type (defaults to the preferred line type)
            straight: Force a straight edge (Shift held while connecting)
            mode: APPLY or COMMIT

        Returns:
            The created edge, or None when the connection already exists

        Raises:
            ValueError: If line_type is not a known edge type

        """
        if straight:
            line_type = "straight"
        elif line_type is None:
            line_type = self.preferences.get("line_type")
        line_type = _normalize_type(line_type, EDGE_TYPES)

        current = self.graph.snapshot()
        if any(e.source == source and e.target == target for e in current.edges):
            logger.debug("[MutationCoordinator] Connection %s->%s already exists", source, target)
            return None

        node_ids = set(current.node_ids())
        if source not in node_ids or target not in node_ids:
            logger.debug(
                "[MutationCoordinator] Connecting unknown endpoint(s) %s->%s", source, target
            )

        edge_id = f"e{source}-{target}"
        existing_ids = set(current.edge_ids())
        suffix = 1
        while edge_id in existing_ids:
            suffix += 1
            edge_id = f"e{source}-{target}-{suffix}"

        edge = Edge(
            id=edge_id,
            source=source,
            target=target,
            type=line_type,
            extra={"markerEnd": dict(EDGE_MARKER_END)},
        )
        self._publish(GraphSnapshot(current.nodes, (*current.edges, edge)), mode)
        logger.info("[MutationCoordinator] Connected %s -> %s (%s)", source, target, line_type)
        return edge

    def remove_nodes(self, node_ids: Iterable[str], mode: EditMode = EditMode.COMMIT) -> int:
        """Remove nodes and every edge attached to them.

        Returns:
            Number of nodes removed

        """
        doomed = set(node_ids)
        current = self.graph.snapshot()
        nodes = [n for n in current.nodes if n.id not in doomed]
        removed = len(current.nodes) - len(nodes)
        if not removed:
            return 0
        edges = [e for e in current.edges if e.source not in doomed and e.target not in doomed]
        self._publish(GraphSnapshot(nodes, edges), mode)
        logger.info(
            "[MutationCoordinator] Removed %d node(s), %d attached edge(s)",
            removed,
            len(current.edges) - len(edges),
        )
        return removed

    def remove_edges(self, edge_ids: Iterable[str], mode: EditMode = EditMode.COMMIT) -> int:
        """Remove edges by id.

        Returns:
            Number of edges removed

        """
        doomed = set(edge_ids)
        current = self.graph.snapshot()
        edges = [e for e in current.edges if e.id not in doomed]
        removed = len(current.edges) - len(edges)
        if removed:
            self._publish(GraphSnapshot(current.nodes, edges), mode)
            logger.info("[MutationCoordinator] Removed %d edge(s)", removed)
        return removed

    def replace_graph(self, snapshot: GraphSnapshot, mode: EditMode = EditMode.COMMIT) -> None:
        """Swap in a whole new graph (e.g. a loaded file)."""
        self._publish(snapshot, mode)

    def commit(self, force: bool = False) -> None:
        """Checkpoint the current live graph (ends a run of APPLY edits).

        force records the checkpoint even when only content outside the
        fingerprint changed, such as an edge label.
        """
        self.history.commit(self.graph.snapshot(), force=force)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _publish(self, snapshot: GraphSnapshot, mode: EditMode) -> None:
        self.graph.replace(snapshot)
        if mode is EditMode.COMMIT:
            self.history.commit(snapshot)

    def _new_node_id(self, snapshot: GraphSnapshot) -> str:
        # Ids are never reused within a session, even after undo removes a node
        for node_id in snapshot.node_ids():
            match = _NODE_ID_PATTERN.match(node_id)
            if match:
                self._next_node_index = max(self._next_node_index, int(match.group(1)) + 1)
        existing = set(snapshot.node_ids())
        while f"n{self._next_node_index}" in existing:
            self._next_node_index += 1
        node_id = f"n{self._next_node_index}"
        self._next_node_index += 1
        return node_id
