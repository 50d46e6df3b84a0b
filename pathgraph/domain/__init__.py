"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the library. No external dependencies.
"""

from .errors import (
    ConflictingEdgeError,
    GraphConstructionError,
    GraphFileError,
    GraphFileFormatError,
    InvalidWeightError,
    NegativeWeightError,
    PathGraphError,
    UnknownEndpointError,
    UnknownVertexError,
)
from .models import Edge, NotReachable, Path, ShortestPathResult, Vertex

__all__ = [
    # Models
    "Vertex",
    "Edge",
    "Path",
    "NotReachable",
    "ShortestPathResult",
    # Errors
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
