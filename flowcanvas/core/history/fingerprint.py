"""Module: fingerprint.py

Date: 2026-10-19

Snapshot fingerprinting.

A fingerprint is a compact, order-sensitive string identity of a snapshot,
used by GraphHistory to drop no-op commits. It covers node id, rounded
position, type and label, and edge id, endpoints and type. Positions are
rounded to whole pixels so sub-pixel drag jitter still deduplicates.

Format:
    <id>:<x>:<y>:<type>:<label>|<id>:<x>:...//<id>:<source>-><target>:<type>|...
"""

from __future__ import annotations

from flowcanvas.domain.graph import Edge, GraphSnapshot, Node

ENTITY_SEPARATOR = "|"
SECTION_SEPARATOR = "//"


def node_key(node: Node) -> str:
    x, y = node.position.rounded()
    return f"{node.id}:{x}:{y}:{node.type or ''}:{node.label}"


def edge_key(edge: Edge) -> str:
    return f"{edge.id}:{edge.source}->{edge.target}:{edge.type or ''}"


def fingerprint(snapshot: GraphSnapshot) -> str:
    """Derive the identity string of a snapshot. Pure and total."""
    nodes_part = ENTITY_SEPARATOR.join(node_key(n) for n in snapshot.nodes)
    edges_part = ENTITY_SEPARATOR.join(edge_key(e) for e in snapshot.edges)
    return nodes_part + SECTION_SEPARATOR + edges_part
