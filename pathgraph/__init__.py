"""Top-level package for pathgraph.

A small directed-graph library: validated, immutable graph construction
over labelled vertices and non-negatively weighted edges, plus a
Dijkstra engine answering shortest-path queries by vertex label.
"""

from .domain import (
    ConflictingEdgeError,
    Edge,
    GraphConstructionError,
    GraphFileError,
    GraphFileFormatError,
    InvalidWeightError,
    NegativeWeightError,
    NotReachable,
    Path,
    PathGraphError,
    ShortestPathResult,
    UnknownEndpointError,
    UnknownVertexError,
    Vertex,
)
from .graph import (
    NO_EDGE,
    Graph,
    build_graph,
    load_graph,
    shortest_distances,
    shortest_path,
)

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "NO_EDGE",
    "build_graph",
    "load_graph",
    "shortest_path",
    "shortest_distances",
    "Vertex",
    "Edge",
    "Path",
    "NotReachable",
    "ShortestPathResult",
    "PathGraphError",
    "GraphConstructionError",
    "InvalidWeightError",
    "NegativeWeightError",
    "UnknownEndpointError",
    "ConflictingEdgeError",
    "UnknownVertexError",
    "GraphFileError",
    "GraphFileFormatError",
]
