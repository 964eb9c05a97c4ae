"""JSON persistence for graph snapshots.

The saved document is an object with exactly two keys, ``nodes`` and
``edges``, each a list of entity objects. Anything else is rejected here,
before it can reach the live graph or history.

This module lives outside ``flowcanvas.core`` so that core stays IO-free.

Date:
    2026-10-19
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from flowcanvas.domain.graph import GraphSnapshot
from flowcanvas.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

JSON_INDENT = 2


class InvalidGraphError(ValueError):
    """Raised when a graph document is not valid JSON or has the wrong shape."""


def validate_graph_document(data: Any) -> dict[str, Any]:
    """Check the top-level shape of a parsed graph document.

    Raises:
        InvalidGraphError: If data is not an object with list-valued
            ``nodes`` and ``edges``

    """
    if not isinstance(data, dict):
        raise InvalidGraphError("graph file does not contain a JSON object")
    if not isinstance(data.get("nodes"), list) or not isinstance(data.get("edges"), list):
        raise InvalidGraphError("invalid graph file: expected 'nodes' and 'edges' arrays")
    return data


def parse_graph(text: str) -> GraphSnapshot:
    """Parse JSON text into a snapshot.

    Raises:
        InvalidGraphError: On invalid JSON, wrong shape, or entities without
            string ids / endpoints

    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidGraphError(f"not a valid JSON document ({e.msg})") from None

    validate_graph_document(data)
    try:
        snapshot = GraphSnapshot.from_dict(data)
    except ValueError as e:
        raise InvalidGraphError(f"invalid graph file: {e}") from None

    dangling = snapshot.dangling_edges()
    if dangling:
        logger.warning(
            "[GraphJSON] %d edge(s) reference missing nodes: %s",
            len(dangling),
            ", ".join(e.id for e in dangling),
        )
    return snapshot


def read_graph_from_file(filename: str | Path) -> GraphSnapshot:
    """Read a snapshot from disk.

    Raises:
        OSError: If the file cannot be read
        InvalidGraphError: If the content is not UTF-8 text or not a valid
            graph document

    """
    try:
        with open(filename, encoding="utf-8") as file:
            raw_data = file.read()
    except UnicodeDecodeError:
        raise InvalidGraphError(f"{os.path.basename(filename)}: not UTF-8 text") from None

    try:
        return parse_graph(raw_data)
    except InvalidGraphError as e:
        raise InvalidGraphError(f"{os.path.basename(filename)}: {e}") from None


def graph_to_json(snapshot: GraphSnapshot) -> str:
    return json.dumps(snapshot.to_dict(), indent=JSON_INDENT, ensure_ascii=False)


def write_graph_to_file(snapshot: GraphSnapshot, filename: str | Path) -> None:
    """Write a snapshot to disk."""
    with open(filename, "w", encoding="utf-8") as file:
        file.write(graph_to_json(snapshot))
    logger.info("[GraphJSON] Saved %d node(s), %d edge(s) to %s",
                len(snapshot.nodes), len(snapshot.edges), filename)
