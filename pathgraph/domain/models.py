"""Immutable domain models for pathgraph.

All models are frozen dataclasses with slots. They carry no search
state: tentative distances and predecessor links live only inside a
single shortest-path call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union


@dataclass(frozen=True, slots=True)
class Vertex:
    """A graph vertex, identified solely by its label.

    Labels are compared exactly (case-sensitive, no normalisation).
    """

    label: str

    def __post_init__(self) -> None:
        """Reject labels that cannot identify a vertex."""
        if not isinstance(self.label, str):
            raise ValueError(f"Vertex label must be a string, got {self.label!r}")
        if not self.label:
            raise ValueError("Vertex label must be a non-empty string")

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted edge between two vertex labels.

    The weight is not checked here; ``Graph`` validates it together with
    the endpoints so that construction errors surface in a fixed order.

    Attributes:
        source: Label of the tail vertex
        destination: Label of the head vertex
        weight: Cost of traversing the edge
    """

    source: str
    destination: str
    weight: int

    @property
    def endpoints(self) -> Tuple[str, str]:
        """Return the ``(source, destination)`` pair."""
        return (self.source, self.destination)

    @property
    def is_self_loop(self) -> bool:
        """Check if the edge starts and ends on the same vertex."""
        return self.source == self.destination

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination} ({self.weight})"


@dataclass(frozen=True, slots=True)
class Path:
    """Result of a successful shortest-path query.

    Attributes:
        vertices: Labels from source to destination, both inclusive
        cost: Sum of the weights of the traversed edges
    """

    vertices: Tuple[str, ...]
    cost: int

    def __post_init__(self) -> None:
        """Validate the path shape."""
        if not self.vertices:
            raise ValueError("A path holds at least one vertex")
        if self.cost < 0:
            raise ValueError(f"Path cost must be non-negative, got {self.cost}")

    @property
    def is_reachable(self) -> bool:
        return True

    @property
    def source(self) -> str:
        """Return the first label of the path."""
        return self.vertices[0]

    @property
    def destination(self) -> str:
        """Return the last label of the path."""
        return self.vertices[-1]

    @property
    def hops(self) -> int:
        """Return the number of edges traversed."""
        return len(self.vertices) - 1

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vertices)

    def __str__(self) -> str:
        return " ".join(self.vertices)


@dataclass(frozen=True, slots=True)
class NotReachable:
    """Query outcome when no directed walk leads from source to destination.

    Attributes:
        source: Label the query started from
        destination: Label that could not be reached
    """

    source: str
    destination: str

    @property
    def is_reachable(self) -> bool:
        return False

    def __str__(self) -> str:
        return "does not exist"


ShortestPathResult = Union[Path, NotReachable]
