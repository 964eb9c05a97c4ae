"""
Module: test_graph_json.py

Date: 2026-10-19

Tests for graph document parsing and writing.
"""

import json

import pytest

from flowcanvas.domain.graph import GraphSnapshot, Position
from flowcanvas.persistence import (
    InvalidGraphError,
    graph_to_json,
    parse_graph,
    read_graph_from_file,
    validate_graph_document,
    write_graph_to_file,
)


@pytest.mark.parametrize(
    "text",
    [
        '{"foo": 1}',
        "[]",
        '{"nodes": []}',
        '{"nodes": {}, "edges": []}',
        "not json",
        '{"nodes": [{"position": {"x": 1}}], "edges": []}',
        '{"nodes": [], "edges": [{"id": "e1", "source": "a"}]}',
    ],
)
def test_invalid_documents_rejected(text):
    with pytest.raises(InvalidGraphError):
        parse_graph(text)


def test_invalid_graph_error_is_value_error():
    assert issubclass(InvalidGraphError, ValueError)


def test_validate_returns_document():
    doc = {"nodes": [], "edges": []}
    assert validate_graph_document(doc) is doc


def test_parse_minimal():
    assert parse_graph('{"nodes": [], "edges": []}') == GraphSnapshot.empty()


def test_dangling_edges_are_loaded_with_warning(caplog):
    snapshot = parse_graph(
        json.dumps({"nodes": [{"id": "n1"}], "edges": [{"id": "e1", "source": "n1", "target": "x"}]})
    )
    assert snapshot.edge_ids() == ["e1"]
    assert "reference missing nodes" in caplog.text


def test_json_has_two_keys_and_indent(sample_graph):
    text = graph_to_json(sample_graph)
    assert set(json.loads(text)) == {"nodes", "edges"}
    assert '\n  "nodes"' in text


def test_file_round_trip(tmp_path, sample_graph):
    path = tmp_path / "graph.json"
    write_graph_to_file(sample_graph, path)
    assert read_graph_from_file(path) == sample_graph


def test_read_invalid_file_names_it(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"foo": 1}', encoding="utf-8")
    with pytest.raises(InvalidGraphError, match="broken.json"):
        read_graph_from_file(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_graph_from_file(tmp_path / "missing.json")


def test_read_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"nodes": [], "edges": [], "note": "caf\xe9"}')
    with pytest.raises(InvalidGraphError, match="latin1.json: not UTF-8"):
        read_graph_from_file(path)


def test_out_of_range_coordinates_load_as_zero():
    snapshot = parse_graph(
        '{"nodes": [{"id": "n1", "position": {"x": 1e400, "y": %d}}], "edges": []}' % 10**400
    )
    assert snapshot.nodes[0].position == Position(0, 0)
