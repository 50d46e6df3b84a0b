"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the query service and the adapters
that load and search graphs, so either side can be swapped in tests.
"""

from .graph import GraphRepositoryPort, RouteSolverPort

__all__ = [
    "GraphRepositoryPort",
    "RouteSolverPort",
]
