from pathlib import Path

import pytest

from pathgraph.domain.errors import (
    ConflictingEdgeError,
    GraphFileError,
    GraphFileFormatError,
    NegativeWeightError,
)
from pathgraph.domain.models import Edge
from pathgraph.graph.load_graph import load_graph, read_edges, read_vertex_labels


DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_graph_contains_all_vertices():
    vertices_txt = DATA_DIR / "vertices.txt"
    edges_txt = DATA_DIR / "edges.txt"

    graph = load_graph(vertices_txt, edges_txt)

    for label in vertices_txt.read_text(encoding="utf-8").split():
        assert label in graph


def test_tokens_may_span_lines(tmp_path):
    vertices = _write(tmp_path, "v.txt", "A B\n\n  C\tD\n")
    edges = _write(tmp_path, "e.txt", "A B\n1 B C 2\n")

    assert read_vertex_labels(vertices) == ["A", "B", "C", "D"]
    assert read_edges(edges) == [Edge("A", "B", 1), Edge("B", "C", 2)]


def test_empty_edge_file(tmp_path):
    edges = _write(tmp_path, "e.txt", "")

    assert read_edges(edges) == []


def test_incomplete_triple_is_a_format_error(tmp_path):
    edges = _write(tmp_path, "e.txt", "A B 1\nB C\n")

    with pytest.raises(GraphFileFormatError) as excinfo:
        read_edges(edges)

    assert "#2" in str(excinfo.value)
    assert excinfo.value.file_path == str(edges)


def test_non_integer_weight_is_a_format_error(tmp_path):
    edges = _write(tmp_path, "e.txt", "A B 1.5\n")

    with pytest.raises(GraphFileFormatError):
        read_edges(edges)


def test_missing_file_raises_graph_file_error(tmp_path):
    with pytest.raises(GraphFileError) as excinfo:
        read_vertex_labels(tmp_path / "missing.txt")

    assert not isinstance(excinfo.value, GraphFileFormatError)
    assert isinstance(excinfo.value.cause, OSError)


def test_negative_weight_reaches_graph_validation(tmp_path):
    vertices = _write(tmp_path, "v.txt", "A B")
    edges = _write(tmp_path, "e.txt", "A B -2")

    assert read_edges(edges) == [Edge("A", "B", -2)]
    with pytest.raises(NegativeWeightError):
        load_graph(vertices, edges)


def test_construction_errors_propagate(tmp_path):
    vertices = _write(tmp_path, "v.txt", "A B")
    edges = _write(tmp_path, "e.txt", "A B 5 A B 6")

    with pytest.raises(ConflictingEdgeError):
        load_graph(vertices, edges)
