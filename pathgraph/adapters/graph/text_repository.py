"""Text-file Graph Repository adapter.

This adapter wraps the loading logic of graph/load_graph.py and adds:
- Configuration injection (paths from config)
- Caching of the built graph
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...graph.graph import Graph
from ...graph.load_graph import load_graph


@dataclass
class TextGraphRepository:
    """Graph repository that loads from a vertex file and an edge file.

    This adapter implements GraphRepositoryPort. The graph is built on
    the first call to load() and reused afterwards.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the graph from the configured files.

        Returns:
            The validated graph.

        Raises:
            GraphFileError: If a file is missing or unreadable.
            GraphFileFormatError: If the edge file is malformed.
            GraphConstructionError: If the files describe an invalid graph.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "vertices_path": str(self.config.vertices_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        graph = load_graph(self.config.vertices_path, self.config.edges_path)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": len(graph), "edges": len(graph.edges())},
        )
        return graph

    def clear_cache(self) -> None:
        """Drop the cached graph so the next load() rereads the files."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
