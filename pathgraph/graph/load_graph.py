"""Graph loading from whitespace-separated text files.

The vertex file is a sequence of labels. The edge file is a sequence of
``source destination weight`` triples with an integer weight. Tokens may
be split across lines in any way.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from ..domain.errors import GraphFileError, GraphFileFormatError
from ..domain.models import Edge
from .graph import Graph

PathLike = Union[str, Path]


def _read_tokens(path: PathLike) -> List[str]:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read().split()
    except OSError as e:
        raise GraphFileError(
            f"Cannot read graph file {path}",
            file_path=str(path),
            cause=e,
        )


def read_vertex_labels(path: PathLike) -> List[str]:
    """Return every label listed in a vertex file, in file order."""
    return _read_tokens(path)


def read_edges(path: PathLike) -> List[Edge]:
    """Parse an edge file into ``Edge`` values.

    Raises:
        GraphFileError: If the file cannot be read.
        GraphFileFormatError: If the tokens do not form complete
            triples, or a weight is not an integer.
    """
    tokens = _read_tokens(path)
    edges: List[Edge] = []
    for index in range(0, len(tokens), 3):
        triple = tokens[index : index + 3]
        number = index // 3 + 1
        if len(triple) < 3:
            raise GraphFileFormatError(
                f"Incomplete edge #{number} in {path}: {' '.join(triple)!r}",
                file_path=str(path),
            )
        source, destination, weight = triple
        try:
            edges.append(Edge(source, destination, int(weight)))
        except ValueError as e:
            raise GraphFileFormatError(
                f"Edge #{number} in {path} has a non-integer weight {weight!r}",
                file_path=str(path),
                cause=e,
            )
    return edges


def load_graph(vertices_path: PathLike, edges_path: PathLike) -> Graph:
    """Read both files and build the graph they describe.

    Construction errors (negative weight, unknown endpoint, conflicting
    edge) propagate unchanged from ``Graph``.
    """
    return Graph(read_vertex_labels(vertices_path), read_edges(edges_path))
