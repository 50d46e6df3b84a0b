"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts between the query service and
the concrete ways of obtaining a graph and searching it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import ShortestPathResult
    from ..graph.graph import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for loading and caching the graph
    from persistent storage.
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            The validated, immutable graph.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: Graph,
        departure: str,
        arrival: str,
    ) -> ShortestPathResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The graph to search.
            departure: Source vertex label.
            arrival: Destination vertex label.

        Returns:
            A Path, or NotReachable if ``arrival`` cannot be reached.
        """
        ...
