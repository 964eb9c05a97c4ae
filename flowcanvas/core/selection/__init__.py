"""Selection tracking for graph entities."""

from flowcanvas.core.selection.selection_tracker import SelectionTracker

__all__ = ["SelectionTracker"]
