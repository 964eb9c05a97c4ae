"""Package: core

Date: 2026-10-19

History, selection and mutation coordination for the graph editor.
"""

from flowcanvas.core.editor_context import EditorContext
from flowcanvas.core.graph_state import GraphStateOwner, LiveGraph

__all__ = [
    "EditorContext",
    "GraphStateOwner",
    "LiveGraph",
]
