"""Package: flowcanvas

Date: 2026-10-19

Node-graph editor core: snapshot history with undo/redo, selection tracking,
live/committed entity editing, JSON persistence and canvas preferences.

Usage:
    from flowcanvas.core.editor_context import EditorContext

    context = EditorContext()
    context.start()
    context.mutations.add_node()
    context.undo()
"""

__version__ = "0.4.0"
