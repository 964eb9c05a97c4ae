"""Module: graph.py

Date: 2026-10-19

Graph value types.

A GraphSnapshot is an ordered pair of node and edge tuples. All types are
frozen dataclasses: edits produce new values via ``dataclasses.replace``,
and history stores deep copies so the nested ``data``/``extra`` dicts can
never be shared with live editable state.

JSON entity shapes:
    node: {"id", "position": {"x", "y"}, "type"?, "data": {"label", ...}, ...}
    edge: {"id", "source", "target", "type"?, "data"?, ...}

Keys outside the known fields are kept in ``extra`` so that a load/save
round trip is lossless (e.g. ``markerEnd``, ``draggable``, ``selected``).
"""

from __future__ import annotations

import copy
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from flowcanvas.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

NODE_FIELDS = ("id", "position", "type", "data")
EDGE_FIELDS = ("id", "source", "target", "type", "data")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Matches the rounding the canvas uses for drag positions, so -0.5 -> 0
    and 2.5 -> 3 (unlike Python's banker's rounding).
    """
    return math.floor(value + 0.5)


def check_coordinate(value: Any) -> float | int:
    """Validate one position axis.

    Raises:
        ValueError: If value is not a finite number representable as a float
            (bools are rejected)

    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"coordinate must be a number, got {value!r}")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        raise ValueError(f"coordinate out of range: {value!r}") from None
    if not finite:
        raise ValueError(f"coordinate must be finite, got {value!r}")
    return value


def _coerce_number(value: Any, axis: str) -> float | int:
    """Lenient axis conversion used when loading documents.

    Numeric strings are parsed; anything else unusable becomes 0 with a warning.
    """
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            pass
        else:
            value = int(parsed) if parsed.is_integer() else parsed
    try:
        return check_coordinate(value)
    except ValueError as e:
        logger.warning("[Graph] Position %s replaced with 0 (%s)", axis, e)
        return 0


def _require_str(raw: Mapping[str, Any], key: str, kind: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{kind} is missing a string '{key}'")
    return value


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


@dataclass(frozen=True)
class Position:
    """Canvas position of a node."""

    x: float = 0
    y: float = 0

    def __post_init__(self) -> None:
        check_coordinate(self.x)
        check_coordinate(self.y)

    @classmethod
    def from_dict(cls, raw: Any) -> Position:
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            _coerce_number(raw["x"], "x") if "x" in raw else 0,
            _coerce_number(raw["y"], "y") if "y" in raw else 0,
        )

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    def rounded(self) -> tuple[int, int]:
        return round_half_up(self.x), round_half_up(self.y)


def snap_position(x: float, y: float, grid: Iterable[float]) -> Position:
    """Snap a position to the nearest grid intersection.

    Args:
        x: Horizontal coordinate
        y: Vertical coordinate
        grid: (spacing_x, spacing_y); non-positive spacing leaves that axis as is

    Returns:
        Snapped Position

    """
    gx, gy = tuple(grid)[:2]
    if gx > 0:
        x = round_half_up(x / gx) * gx
    if gy > 0:
        y = round_half_up(y / gy) * gy
    return Position(x, y)


@dataclass(frozen=True)
class Node:
    """A typed node. ``id`` never changes after creation."""

    id: str
    position: Position = field(default_factory=Position)
    type: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        label = self.data.get("label")
        return str(label) if label else ""

    @classmethod
    def from_dict(cls, raw: Any) -> Node:
        """Build a Node from its JSON shape.

        Raises:
            ValueError: If raw is not an object or has no string id

        """
        if not isinstance(raw, Mapping):
            raise ValueError("node entry is not an object")
        data = raw.get("data")
        return cls(
            id=_require_str(raw, "id", "node"),
            position=Position.from_dict(raw.get("position")),
            type=_optional_str(raw.get("type")),
            data=copy.deepcopy(dict(data)) if isinstance(data, Mapping) else {},
            extra={k: copy.deepcopy(v) for k, v in raw.items() if k not in NODE_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id}
        if self.type is not None:
            out["type"] = self.type
        out["position"] = self.position.to_dict()
        out["data"] = copy.deepcopy(self.data)
        out.update(copy.deepcopy(self.extra))
        return out


@dataclass(frozen=True)
class Edge:
    """A directed connection between two nodes. ``id`` never changes."""

    id: str
    source: str
    target: str
    type: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        label = self.data.get("label")
        return str(label) if label else ""

    @classmethod
    def from_dict(cls, raw: Any) -> Edge:
        """Build an Edge from its JSON shape.

        Raises:
            ValueError: If raw is not an object or lacks id/source/target strings

        """
        if not isinstance(raw, Mapping):
            raise ValueError("edge entry is not an object")
        data = raw.get("data")
        return cls(
            id=_require_str(raw, "id", "edge"),
            source=_require_str(raw, "source", "edge"),
            target=_require_str(raw, "target", "edge"),
            type=_optional_str(raw.get("type")),
            data=copy.deepcopy(dict(data)) if isinstance(data, Mapping) else {},
            extra={k: copy.deepcopy(v) for k, v in raw.items() if k not in EDGE_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "source": self.source, "target": self.target}
        if self.type is not None:
            out["type"] = self.type
        if self.data:
            out["data"] = copy.deepcopy(self.data)
        out.update(copy.deepcopy(self.extra))
        return out


@dataclass(frozen=True)
class GraphSnapshot:
    """Complete, self-contained copy of the graph at one point in time."""

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store tuples
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

    @classmethod
    def empty(cls) -> GraphSnapshot:
        return cls()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> GraphSnapshot:
        """Build a snapshot from a ``{"nodes": [...], "edges": [...]}`` document.

        Raises:
            ValueError: If either key is missing or not a list, or an entity is invalid

        """
        nodes = raw.get("nodes")
        edges = raw.get("edges")
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise ValueError("expected an object with 'nodes' and 'edges' lists")
        return cls(
            nodes=tuple(Node.from_dict(n) for n in nodes),
            edges=tuple(Edge.from_dict(e) for e in edges),
        )

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    def copy(self) -> GraphSnapshot:
        """Return a structural copy sharing no mutable state with self."""
        return copy.deepcopy(self)

    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    def edge_ids(self) -> list[str]:
        return [e.id for e in self.edges]

    def find_node(self, node_id: str) -> Node | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def find_edge(self, edge_id: str) -> Edge | None:
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None

    def dangling_edges(self) -> list[Edge]:
        """Edges whose source or target names no node in this snapshot."""
        ids = set(self.node_ids())
        return [e for e in self.edges if e.source not in ids or e.target not in ids]
