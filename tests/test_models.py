import dataclasses

import pytest

from pathgraph.domain.errors import GraphFileError, UnknownVertexError
from pathgraph.domain.models import Edge, NotReachable, Path, Vertex


def test_vertex_identity_is_its_label():
    assert Vertex("A") == Vertex("A")
    assert Vertex("A") != Vertex("a")
    assert len({Vertex("A"), Vertex("A"), Vertex("B")}) == 2
    assert str(Vertex("A")) == "A"


@pytest.mark.parametrize("label", ["", None, 3])
def test_vertex_rejects_invalid_labels(label):
    with pytest.raises(ValueError):
        Vertex(label)


def test_edge_helpers():
    edge = Edge("A", "B", 4)

    assert edge.endpoints == ("A", "B")
    assert not edge.is_self_loop
    assert Edge("A", "A", 0).is_self_loop
    assert str(edge) == "A -> B (4)"


def test_path_equality_compares_labels_and_cost():
    assert Path(("A", "B"), 3) == Path(("A", "B"), 3)
    assert Path(("A", "B"), 3) != Path(("A", "B"), 4)
    assert Path(("A", "B"), 3) != Path(("A", "C", "B"), 3)


def test_path_accessors():
    path = Path(("A", "B", "C"), 5)

    assert path.source == "A"
    assert path.destination == "C"
    assert path.hops == 2
    assert len(path) == 3
    assert list(path) == ["A", "B", "C"]
    assert str(path) == "A B C"
    assert path.is_reachable


def test_path_is_immutable():
    path = Path(("A",), 0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        path.cost = 1  # type: ignore[misc]


def test_path_rejects_invalid_shape():
    with pytest.raises(ValueError):
        Path((), 0)
    with pytest.raises(ValueError):
        Path(("A",), -1)


def test_not_reachable_value():
    result = NotReachable("A", "B")

    assert not result.is_reachable
    assert result == NotReachable("A", "B")
    assert str(result) == "does not exist"


def test_errors_render_message_and_cause():
    error = UnknownVertexError("No such vertex: 'Z'", label="Z")
    assert str(error) == "No such vertex: 'Z'"

    wrapped = GraphFileError("Cannot read", file_path="x", cause=OSError("boom"))
    assert str(wrapped) == "Cannot read: boom"
    assert wrapped.file_path == "x"
