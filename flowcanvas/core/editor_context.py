"""Module: editor_context.py

Date: 2026-10-19

EditorContext - one editing session over one graph.

The context owns the history, the selection and the mutation coordinator for
a single graph owner and passes them around explicitly; nothing here is a
process-wide singleton, so several editors (or tests) can coexist.

Typical wiring:

    context = EditorContext(graph=canvas_adapter, preferences=prefs)
    context.start()
    context.mutations.add_node()
    context.undo()
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from flowcanvas.core.graph_state import GraphStateOwner, LiveGraph
from flowcanvas.core.history.history_stack import GraphHistory
from flowcanvas.core.mutation.coordinator import EditMode, MutationCoordinator
from flowcanvas.core.mutation.label_edit import InspectorView, LabelEditSession, inspect
from flowcanvas.core.selection.selection_tracker import SelectionTracker
from flowcanvas.domain.graph import GraphSnapshot
from flowcanvas.persistence.graph_json import (
    InvalidGraphError,
    graph_to_json,
    parse_graph,
    read_graph_from_file,
    write_graph_to_file,
)
from flowcanvas.utils.logging.logger_factory import get_cached_logger
from flowcanvas.utils.shared.json_config_manager import CanvasPreferences

logger = get_cached_logger(__name__)


class EditorContext:
    """Explicit container for the per-graph editing components."""

    def __init__(
        self,
        graph: GraphStateOwner | None = None,
        preferences: CanvasPreferences | None = None,
        notify: Callable[[str], None] | None = None,
        max_depth: int | None = None,
    ):
        """Create the editing components for one graph.

        Args:
            graph: Owner of the live graph (an in-memory LiveGraph if None)
            preferences: Canvas preferences (defaults if None)
            notify: Callback showing a blocking message to the user
            max_depth: History depth override

        """
        self.graph: GraphStateOwner = graph if graph is not None else LiveGraph()
        self.preferences = preferences if preferences is not None else CanvasPreferences()
        self.history = GraphHistory(max_depth=max_depth)
        self.selection = SelectionTracker()
        self.mutations = MutationCoordinator(self.graph, self.history, self.preferences)
        self.label_session = LabelEditSession(self.mutations)
        self._notify = notify

    def start(self) -> None:
        """Begin the session with the current graph as the first present."""
        self.history.init(self.graph.snapshot())
        self.selection.clear()

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def undo(self) -> GraphSnapshot | None:
        """Restore the previous snapshot into the graph owner."""
        return self._restore(self.history.undo())

    def redo(self) -> GraphSnapshot | None:
        """Restore the next snapshot into the graph owner."""
        return self._restore(self.history.redo())

    def _restore(self, snapshot: GraphSnapshot | None) -> GraphSnapshot | None:
        if snapshot is None:
            return None
        self.label_session.cancel()
        self.graph.replace(snapshot)
        self.selection.prune(snapshot)
        return snapshot

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def click_node(self, node_id: str, extend: bool = False) -> None:
        self.selection.select_node(node_id, extend=extend)

    def click_edge(self, edge_id: str, extend: bool = False) -> None:
        self.selection.select_edge(edge_id, extend=extend)

    def click_background(self) -> None:
        self.selection.clear()

    def inspector(self) -> InspectorView:
        return inspect(self.selection, self.graph.snapshot())

    def delete_selection(self) -> bool:
        """Remove the selected nodes and edges as one history step.

        Returns:
            True if anything was removed

        """
        node_ids = self.selection.selected_node_ids
        edge_ids = self.selection.selected_edge_ids
        removed = self.mutations.remove_edges(edge_ids, EditMode.APPLY)
        removed += self.mutations.remove_nodes(node_ids, EditMode.APPLY)
        self.selection.clear()
        if not removed:
            return False
        self.mutations.commit()
        return True

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def to_json(self) -> str:
        return graph_to_json(self.graph.snapshot())

    def save_file(self, path: str | Path) -> bool:
        try:
            write_graph_to_file(self.graph.snapshot(), path)
        except OSError as e:
            self._report(f"Could not save {path}: {e}")
            return False
        return True

    def load_json(self, text: str) -> bool:
        """Replace the graph with a JSON document.

        Invalid documents are reported through notify and leave the graph,
        history and selection untouched.
        """
        try:
            snapshot = parse_graph(text)
        except InvalidGraphError as e:
            self._report(str(e))
            return False
        self._apply_loaded(snapshot)
        return True

    def load_file(self, path: str | Path) -> bool:
        try:
            snapshot = read_graph_from_file(path)
        except (OSError, InvalidGraphError) as e:
            self._report(f"Could not load {path}: {e}")
            return False
        self._apply_loaded(snapshot)
        return True

    def _apply_loaded(self, snapshot: GraphSnapshot) -> None:
        self.label_session.cancel()
        self.mutations.replace_graph(snapshot, EditMode.COMMIT)
        self.selection.clear()
        logger.info(
            "[EditorContext] Loaded graph with %d node(s), %d edge(s)",
            len(snapshot.nodes),
            len(snapshot.edges),
        )

    def _report(self, message: str) -> None:
        logger.warning("[EditorContext] %s", message)
        if self._notify is not None:
            self._notify(message)
