"""Graph construction and path-finding.

This subpackage contains the validated, immutable Graph, the Dijkstra
query engine that runs on top of it, and helpers to build a Graph from
vertex and edge files.
"""

from .dijkstra import shortest_distances, shortest_path
from .graph import NO_EDGE, Graph, build_graph
from .load_graph import load_graph, read_edges, read_vertex_labels

__all__ = [
    "Graph",
    "NO_EDGE",
    "build_graph",
    "shortest_path",
    "shortest_distances",
    "load_graph",
    "read_edges",
    "read_vertex_labels",
]
