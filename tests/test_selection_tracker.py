"""
Module: test_selection_tracker.py

Date: 2026-10-19

Tests for SelectionTracker.
"""

from flowcanvas.core.selection import SelectionTracker
from flowcanvas.domain.graph import Edge, GraphSnapshot, Node


class TestSelectionTracker:
    """Replace, extend, clear and prune."""

    def setup_method(self):
        self.tracker = SelectionTracker()

    def test_starts_empty(self):
        assert self.tracker.is_empty()
        assert self.tracker.selected_node_ids == ()
        assert self.tracker.selected_edge_ids == ()

    def test_set_selection_replaces_both_sets(self):
        self.tracker.set_selection(["n1", "n2"], ["e1"])
        self.tracker.set_selection(["n3"], [])
        assert self.tracker.selected_node_ids == ("n3",)
        assert self.tracker.selected_edge_ids == ()

    def test_set_selection_accepts_entities(self):
        self.tracker.set_selection([Node("n1")], [Edge("e1", "n1", "n2")])
        assert self.tracker.is_node_selected("n1")
        assert self.tracker.is_edge_selected("e1")

    def test_duplicates_collapse_in_order(self):
        self.tracker.set_selection(["n2", "n1", "n2"])
        assert self.tracker.selected_node_ids == ("n2", "n1")

    def test_extend_selection_unions(self):
        self.tracker.set_selection(["n1"])
        self.tracker.extend_selection(["n2", "n1"], ["e1"])
        assert self.tracker.selected_node_ids == ("n1", "n2")
        assert self.tracker.selected_edge_ids == ("e1",)

    def test_select_node_without_extend_replaces(self):
        self.tracker.set_selection(["n1"], ["e1"])
        self.tracker.select_node("n2")
        assert self.tracker.selected_node_ids == ("n2",)
        assert self.tracker.selected_edge_ids == ()

    def test_select_edge_with_extend_keeps_nodes(self):
        self.tracker.set_selection(["n1"])
        self.tracker.select_edge("e1", extend=True)
        assert self.tracker.selected_node_ids == ("n1",)
        assert self.tracker.selected_edge_ids == ("e1",)

    def test_clear(self):
        self.tracker.set_selection(["n1"], ["e1"])
        self.tracker.clear()
        assert self.tracker.is_empty()

    def test_prune_drops_missing_ids(self):
        self.tracker.set_selection(["n1", "gone"], ["e1", "e-gone"])
        self.tracker.prune(GraphSnapshot((Node("n1"),), (Edge("e1", "n1", "n1"),)))
        assert self.tracker.selected_node_ids == ("n1",)
        assert self.tracker.selected_edge_ids == ("e1",)


class TestSelectionSignals:
    """selection_changed emission."""

    def test_emits_on_change(self, qtbot):
        tracker = SelectionTracker()
        with qtbot.waitSignal(tracker.selection_changed) as blocker:
            tracker.set_selection(["n1"], ["e1"])
        assert blocker.args == [["n1"], ["e1"]]

    def test_silent_when_unchanged(self, qtbot):
        tracker = SelectionTracker()
        tracker.set_selection(["n1"])
        with qtbot.assertNotEmitted(tracker.selection_changed):
            tracker.set_selection(["n1"])
            tracker.extend_selection(["n1"])
