"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py behind RouteSolverPort and adds
logging of each query and its outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import NotReachable, ShortestPathResult
from ...graph.dijkstra import shortest_path
from ...graph.graph import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
            A Path, or NotReachable if no path exists.

        Raises:
            UnknownVertexError: If departure or arrival is not in the graph.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        result = shortest_path(graph, departure, arrival)

        if isinstance(result, NotReachable):
            self._logger.info(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            return result

        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": len(result),
                "cost": result.cost,
            },
        )
        return result
