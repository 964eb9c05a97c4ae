"""Package: mutation

Date: 2026-10-19

Edits to the live graph and their history checkpoints.
"""

from flowcanvas.core.mutation.coordinator import (
    EditMode,
    EntityKind,
    MutationCoordinator,
    merge_edge,
    merge_node,
)
from flowcanvas.core.mutation.label_edit import InspectorView, LabelEditSession, inspect

__all__ = [
    "EditMode",
    "EntityKind",
    "InspectorView",
    "LabelEditSession",
    "MutationCoordinator",
    "inspect",
    "merge_edge",
    "merge_node",
]
