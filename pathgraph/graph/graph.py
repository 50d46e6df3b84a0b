"""Validated, immutable directed graph.

This module defines the Graph used throughout the project. A Graph is
built once from a collection of vertex labels and a collection of
weighted edges; construction either succeeds with every invariant in
place or raises a construction error and produces nothing.

Invariants after construction:

* every edge has both endpoints in the vertex set and a weight >= 0;
* edges sharing ``(source, destination)`` share their weight, and only
  one of them is kept;
* every vertex has an adjacency entry, possibly empty.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, Union

from ..domain.errors import (
    ConflictingEdgeError,
    InvalidWeightError,
    NegativeWeightError,
    UnknownEndpointError,
    UnknownVertexError,
)
from ..domain.models import Edge, Vertex

logger = logging.getLogger(__name__)

# Returned by edge_cost() when there is no a -> b edge.
NO_EDGE = -1

VertexLike = Union[str, Vertex]
EdgeLike = Union[Edge, Tuple[str, str, int]]
Neighbor = Tuple[str, int]


def _as_label(item: VertexLike) -> str:
    if isinstance(item, Vertex):
        return item.label
    return Vertex(item).label


def _as_edge(item: EdgeLike) -> Edge:
    if isinstance(item, Edge):
        return item
    source, destination, weight = item
    return Edge(source, destination, weight)


class Graph:
    """Directed graph over string labels with non-negative integer weights.

    Accessors hand out fresh lists or immutable tuples, so nothing a
    caller does with a returned value can alter the graph.

    Raises:
        InvalidWeightError: If an edge weight is not an integer.
        NegativeWeightError: If an edge has a weight below zero.
        UnknownEndpointError: If an edge endpoint is not a known vertex.
        ConflictingEdgeError: If two edges share endpoints but not weight.
    """

    __slots__ = ("_vertices", "_edges", "_adjacency", "_costs")

    def __init__(
        self, vertices: Iterable[VertexLike], edges: Iterable[EdgeLike]
    ) -> None:
        labels = tuple(dict.fromkeys(_as_label(v) for v in vertices))
        edge_list = tuple(_as_edge(e) for e in edges)

        _validate(set(labels), edge_list)

        costs: Dict[Tuple[str, str], int] = {}
        canonical: List[Edge] = []
        adjacency: Dict[str, List[Neighbor]] = {label: [] for label in labels}
        for edge in edge_list:
            if edge.endpoints in costs:
                continue
            costs[edge.endpoints] = edge.weight
            canonical.append(edge)
            adjacency[edge.source].append((edge.destination, edge.weight))

        self._vertices: Tuple[str, ...] = labels
        self._edges: Tuple[Edge, ...] = tuple(canonical)
        self._adjacency: Mapping[str, Tuple[Neighbor, ...]] = MappingProxyType(
            {label: tuple(pairs) for label, pairs in adjacency.items()}
        )
        self._costs: Mapping[Tuple[str, str], int] = MappingProxyType(costs)

        logger.debug(
            "Graph built",
            extra={
                "vertices": len(self._vertices),
                "edges": len(self._edges),
                "duplicates_dropped": len(edge_list) - len(self._edges),
            },
        )

    def vertices(self) -> List[str]:
        """Return the vertex labels.

        Returns:
            A new list on every call, in first-seen order.
        """
        return list(self._vertices)

    def edges(self) -> List[Edge]:
        """Return the canonical edges, duplicates collapsed.

        Returns:
            A new list on every call, in input order.
        """
        return list(self._edges)

    def adjacent_vertices(self, label: str) -> List[str]:
        """Return the labels ``w`` for which an edge ``label -> w`` exists.

        Args:
            label: A vertex of the graph.

        Returns:
            A new list of neighbor labels, empty if there are none.

        Raises:
            UnknownVertexError: If ``label`` is not in the graph.
        """
        return [neighbor for neighbor, _ in self.neighbors(label)]

    def neighbors(self, label: str) -> Tuple[Neighbor, ...]:
        """Return the outgoing ``(neighbor, weight)`` pairs of ``label``.

        Raises:
            UnknownVertexError: If ``label`` is not in the graph.
        """
        self._require(label)
        return self._adjacency[label]

    def edge_cost(self, source: str, destination: str) -> int:
        """Return the weight of the edge ``source -> destination``.

        Args:
            source: Tail vertex label.
            destination: Head vertex label.

        Returns:
            The edge weight, or ``NO_EDGE`` (-1) if there is no such edge.

        Raises:
            UnknownVertexError: If either label is not in the graph.
        """
        self._require(source)
        self._require(destination)
        return self._costs.get((source, destination), NO_EDGE)

    def has_vertex(self, label: str) -> bool:
        """Check if ``label`` is a vertex of the graph."""
        return label in self._adjacency

    def _require(self, label: str) -> None:
        if label not in self._adjacency:
            raise UnknownVertexError(f"No such vertex: {label!r}", label=label)

    def __contains__(self, label: object) -> bool:
        return label in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"


def _validate(labels: set[str], edges: Tuple[Edge, ...]) -> None:
    """Raise the first construction error found, scanning edges in order.

    For each edge the checks run as: non-integer weight, negative weight,
    unknown endpoint, conflicting weight against any other edge of the
    input.
    """
    weights_by_pair: Dict[Tuple[str, str], List[int]] = {}
    for edge in edges:
        seen = weights_by_pair.setdefault(edge.endpoints, [])
        if edge.weight not in seen:
            seen.append(edge.weight)

    for edge in edges:
        if isinstance(edge.weight, bool) or not isinstance(edge.weight, int):
            raise InvalidWeightError(
                f"Weight {edge.weight!r} on edge "
                f"{edge.source} -> {edge.destination} is not an integer",
                edge=edge,
            )
        if edge.weight < 0:
            raise NegativeWeightError(
                f"Negative weight {edge.weight} on edge "
                f"{edge.source} -> {edge.destination}",
                edge=edge,
            )
        for label in edge.endpoints:
            if label not in labels:
                raise UnknownEndpointError(
                    f"Edge {edge.source} -> {edge.destination} references "
                    f"unknown vertex {label!r}",
                    edge=edge,
                    label=label,
                )
        weights = weights_by_pair[edge.endpoints]
        if len(weights) > 1:
            raise ConflictingEdgeError(
                f"Conflicting weights {weights} on edge "
                f"{edge.source} -> {edge.destination}",
                edge=edge,
                weights=tuple(weights),
            )


def build_graph(vertices: Iterable[VertexLike], edges: Iterable[EdgeLike]) -> Graph:
    """Validate the inputs and build an immutable Graph.

    Parameters
    ----------
    vertices:
        Vertex labels (or ``Vertex`` values). Repeated labels denote the
        same vertex.
    edges:
        ``Edge`` values or ``(source, destination, weight)`` triples.

    Returns
    -------
    Graph
        The validated graph with its adjacency index.
    """
    return Graph(vertices, edges)
