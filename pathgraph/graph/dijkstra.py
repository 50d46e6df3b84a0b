"""Shortest-path computation using Dijkstra's algorithm.

The search state (tentative distances, predecessors, settled set and
frontier heap) is local to each call. Nothing is stored on the Graph,
so queries can be repeated or interleaved freely and always observe
the same graph.
"""

from __future__ import annotations

import heapq
import logging
import math
from typing import Dict, List, Optional, Set, Tuple

from ..domain.models import NotReachable, Path, ShortestPathResult
from .graph import Graph

logger = logging.getLogger(__name__)


def _dijkstra(
    graph: Graph, start: str, end: Optional[str] = None
) -> Tuple[Dict[str, float], Dict[str, str]]:
    """Run Dijkstra from ``start``, stopping once ``end`` is settled.

    Returns the distance map (``math.inf`` for vertices not reached) and
    the predecessor map. The start vertex has no predecessor.
    """
    distances: Dict[str, float] = {label: math.inf for label in graph}
    previous: Dict[str, str] = {}
    distances[start] = 0

    heap: List[Tuple[float, str]] = [(0, start)]
    settled: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Stale entry for a vertex already settled at a smaller distance
        if u in settled:
            continue

        settled.add(u)

        if u == end:
            break

        for v, weight in graph.neighbors(u):
            if v in settled:
                continue
            new_distance = current_distance + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    logger.debug(
        "Dijkstra finished",
        extra={"start": start, "end": end, "settled": len(settled)},
    )
    return distances, previous


def _require(graph: Graph, label: str) -> None:
    # Graph raises UnknownVertexError for labels it does not hold
    graph.neighbors(label)


def shortest_path(graph: Graph, start: str, end: str) -> ShortestPathResult:
    """Compute the cheapest directed path between two vertices.

    Parameters
    ----------
    graph:
        A graph produced by ``build_graph``.
    start:
        Label of the source vertex.
    end:
        Label of the destination vertex.

    Returns
    -------
    Path or NotReachable
        The labels from ``start`` to ``end`` (inclusive) with the total
        weight, or ``NotReachable`` if no directed walk exists. When
        ``start == end`` the result is ``Path((start,), 0)`` whatever
        self-loops the graph holds.

    Raises
    ------
    UnknownVertexError
        If ``start`` or ``end`` is not a vertex of ``graph``.
    """
    _require(graph, start)
    _require(graph, end)

    if start == end:
        return Path((start,), 0)

    distances, previous = _dijkstra(graph, start, end)

    if math.isinf(distances[end]):
        return NotReachable(start, end)

    path: List[str] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)

    path.reverse()
    return Path(tuple(path), int(distances[end]))


def shortest_distances(graph: Graph, source: str) -> Dict[str, int]:
    """Return the shortest distance from ``source`` to every reachable vertex.

    Vertices that cannot be reached are left out of the mapping; the
    source itself is always present with distance 0.

    Raises
    ------
    UnknownVertexError
        If ``source`` is not a vertex of ``graph``.
    """
    _require(graph, source)
    distances, _ = _dijkstra(graph, source)
    return {
        label: int(distance)
        for label, distance in distances.items()
        if not math.isinf(distance)
    }
