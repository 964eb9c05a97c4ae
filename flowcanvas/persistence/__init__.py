"""Package: persistence

Date: 2026-10-19

Reading and writing graph documents.
"""

from flowcanvas.persistence.graph_json import (
    InvalidGraphError,
    graph_to_json,
    parse_graph,
    read_graph_from_file,
    validate_graph_document,
    write_graph_to_file,
)

__all__ = [
    "InvalidGraphError",
    "graph_to_json",
    "parse_graph",
    "read_graph_from_file",
    "validate_graph_document",
    "write_graph_to_file",
]
