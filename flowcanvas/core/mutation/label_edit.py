"""Module: label_edit.py

Date: 2026-10-19

Inspector-side editing of labels and type tags.

A label edit is a burst of keystrokes that should land in history as a
single step. LabelEditSession applies every keystroke live (EditMode.APPLY)
and commits the final draft once when the field loses focus or Enter is
pressed (EditMode.COMMIT). Finishing an edit that changed nothing produces a
commit whose fingerprint equals the present one, so history drops it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from flowcanvas.core.mutation.coordinator import EditMode, EntityKind
from flowcanvas.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from flowcanvas.core.mutation.coordinator import MutationCoordinator
    from flowcanvas.core.selection.selection_tracker import SelectionTracker
    from flowcanvas.domain.graph import Edge, GraphSnapshot, Node

logger = get_cached_logger(__name__)


@dataclass(frozen=True)
class InspectorView:
    """What the inspector panel should show for the current selection."""

    node: Node | None = None
    edge: Edge | None = None
    node_count: int = 0
    edge_count: int = 0

    @property
    def active(self) -> bool:
        return self.node_count > 0 or self.edge_count > 0


def inspect(selection: SelectionTracker, snapshot: GraphSnapshot) -> InspectorView:
    """Resolve the selection against the graph.

    Selected ids missing from the graph are ignored. A single selected node
    or edge is exposed for editing; larger selections only report counts.
    """
    nodes = [n for n in snapshot.nodes if selection.is_node_selected(n.id)]
    edges = [e for e in snapshot.edges if selection.is_edge_selected(e.id)]
    return InspectorView(
        node=nodes[0] if len(nodes) == 1 else None,
        edge=edges[0] if len(edges) == 1 else None,
        node_count=len(nodes),
        edge_count=len(edges),
    )


class LabelEditSession:
    """Draft state for one label field."""

    def __init__(self, coordinator: MutationCoordinator):
        self.coordinator = coordinator
        self.kind: EntityKind | None = None
        self.target_id: str | None = None
        self.draft = ""

    @property
    def is_active(self) -> bool:
        return self.target_id is not None

    def begin(self, kind: EntityKind, target_id: str) -> str:
        """Start editing target_id, seeding the draft from its current label.

        Returns:
            The seeded draft text

        """
        snapshot = self.coordinator.graph.snapshot()
        entity = (
            snapshot.find_node(target_id)
            if kind is EntityKind.NODE
            else snapshot.find_edge(target_id)
        )
        self.kind = kind
        self.target_id = target_id
        self.draft = entity.label if entity is not None else ""
        return self.draft

    def update(self, text: str) -> bool:
        """Apply a keystroke to the live graph without touching history."""
        if not self.is_active:
            return False
        self.draft = text
        return self._patch(EditMode.APPLY)

    def finish(self) -> bool:
        """Commit the draft as one history step."""
        if not self.is_active:
            return False
        if self.kind is EntityKind.EDGE:
            # Edge labels are not part of the fingerprint
            applied = self._patch(EditMode.APPLY)
            if applied:
                self.coordinator.commit(force=True)
            return applied
        return self._patch(EditMode.COMMIT)

    def cancel(self) -> None:
        self.kind = None
        self.target_id = None
        self.draft = ""

    def set_type(self, kind: EntityKind, target_id: str, type_tag: str | None) -> bool:
        """Change the type tag of a node or edge, committing immediately."""
        return self.coordinator.patch(kind, target_id, {"type": type_tag}, EditMode.COMMIT)

    def _patch(self, mode: EditMode) -> bool:
        assert self.kind is not None and self.target_id is not None
        return self.coordinator.patch(self.kind, self.target_id, {"data": {"label": self.draft}}, mode)
