"""Typed domain errors for pathgraph.

Construction errors are raised while a Graph is being built and mean no
Graph is produced. Query errors are raised by lookups on an existing
Graph and leave it untouched and reusable.

A missing path is not an error: the engine returns a ``NotReachable``
value for it (see ``domain.models``).

All errors inherit from PathGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .models import Edge


@dataclass
class PathGraphError(Exception):
    """Base error for the pathgraph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphConstructionError(PathGraphError):
    """The vertex and edge collections do not describe a valid graph.

    Attributes:
        edge: The first offending edge, in input order
    """

    edge: Optional[Edge] = None


@dataclass
class InvalidWeightError(GraphConstructionError):
    """An edge carries a weight that is not an integer."""


@dataclass
class NegativeWeightError(GraphConstructionError):
    """An edge carries a weight below zero."""


@dataclass
class UnknownEndpointError(GraphConstructionError):
    """An edge references a label missing from the vertex collection.

    Attributes:
        label: The endpoint label that was not found
    """

    label: str = ""


@dataclass
class ConflictingEdgeError(GraphConstructionError):
    """Two edges share source and destination but not their weight.

    Attributes:
        weights: The distinct weights found for that pair, in input order
    """

    weights: Tuple[int, ...] = ()


@dataclass
class UnknownVertexError(PathGraphError):
    """A query names a label that is not a vertex of the graph.

    Attributes:
        label: The label that was not found
    """

    label: str = ""


@dataclass
class GraphFileError(PathGraphError):
    """A vertex or edge file could not be read.

    Attributes:
        file_path: Path to the file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class GraphFileFormatError(GraphFileError):
    """An edge file holds a malformed ``source destination weight`` triple."""
