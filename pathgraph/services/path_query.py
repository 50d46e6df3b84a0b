"""Path query service - Main orchestrator.

This service ties a graph repository to a route solver so a frontend
only deals with vertex labels and query results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import PathGraphError, UnknownVertexError
from ..domain.models import ShortestPathResult
from ..graph.graph import Graph
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


@dataclass
class PathQueryService:
    """Main service for answering shortest-path queries.

    Attributes:
        graph_repository: Loads the graph
        route_solver: Computes shortest paths
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> Graph:
        """Return the graph queries run against, loading it if needed."""
        return self.graph_repository.load()

    def query(self, start: str, destination: str) -> ShortestPathResult:
        """Find the shortest path between two vertex labels.

        Args:
            start: Source vertex label.
            destination: Destination vertex label.

        Returns:
            A Path, or NotReachable if no directed path exists.

        Raises:
            UnknownVertexError: If either label is not in the graph.
            PathGraphError: If the graph cannot be loaded.
        """
        self._logger.info(
            "Starting path query",
            extra={"start": start, "destination": destination},
        )
        return self.route_solver.solve(self.graph, start, destination)

    def query_safe(
        self, start: str, destination: str
    ) -> tuple[Optional[ShortestPathResult], Optional[str]]:
        """Find the shortest path, returning an error message instead of raising.

        Args:
            start: Source vertex label.
            destination: Destination vertex label.

        Returns:
            Tuple of (result or None, error message or None).
        """
        try:
            return self.query(start, destination), None
        except UnknownVertexError:
            return None, "no such vertex"
        except PathGraphError as e:
            self._logger.error("Path query failed", extra={"error": str(e)})
            return None, f"Error: {e}"
