"""Interactive shortest-path frontend.

Loads a graph from a vertex file and an edge file, then repeatedly asks
for a start and a destination vertex and prints the cheapest path
between them.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .adapters.graph import DijkstraRouteSolver, TextGraphRepository
from .config import AppConfig, ObservabilityConfig, get_config
from .domain.errors import (
    GraphConstructionError,
    GraphFileError,
    GraphFileFormatError,
    UnknownVertexError,
)
from .domain.models import NotReachable
from .services import PathQueryService

EXIT_OK = 0
EXIT_NO_SUCH_VERTEX = 1
EXIT_FILE_NOT_FOUND = 2
EXIT_FILE_FORMAT = 3
EXIT_INVALID_GRAPH = 4

EXIT_WORDS = {"exit", "quit"}

logger = logging.getLogger(__name__)


def configure_logging(config: ObservabilityConfig, level: Optional[str] = None) -> None:
    """Configure the root logger from the observability settings."""
    logging.basicConfig(
        level=(level or config.level).upper(),
        format=config.format,
        stream=sys.stderr,
    )


def _ask(prompt: str, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    """Prompt for one label; None on end of input or an exit word."""
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    answer = line.strip()
    if answer in EXIT_WORDS:
        return None
    return answer


def run_session(service: PathQueryService, stdin: TextIO, stdout: TextIO) -> int:
    """Answer queries read from ``stdin`` until the user stops.

    Returns:
        The process exit code.
    """
    graph = service.graph
    print(f"Vertices are [{', '.join(graph.vertices())}]", file=stdout)
    print(f"Edges are [{', '.join(str(e) for e in graph.edges())}]", file=stdout)

    while True:
        start = _ask("Start vertex? (exit to quit) ", stdin, stdout)
        if start is None:
            return EXIT_OK
        if start not in graph:
            print("no such vertex", file=stdout)
            return EXIT_NO_SUCH_VERTEX

        destination = _ask("Destination vertex? ", stdin, stdout)
        if destination is None:
            return EXIT_OK

        try:
            result = service.query(start, destination)
        except UnknownVertexError:
            print("no such vertex", file=stdout)
            return EXIT_NO_SUCH_VERTEX

        if isinstance(result, NotReachable):
            print("does not exist", file=stdout)
            continue

        print(f"Shortest path from {start} to {destination}:", file=stdout)
        print(result, file=stdout)
        print(result.cost, file=stdout)


def _build_service(
    config: AppConfig, vertices: Optional[str], edges: Optional[str]
) -> PathQueryService:
    graph_config = config.graph
    if vertices or edges:
        # Relative paths resolve against the working directory
        graph_config = graph_config.model_copy(
            update={
                "data_dir": Path.cwd(),
                "vertices_file": vertices or str(graph_config.vertices_path),
                "edges_file": edges or str(graph_config.edges_path),
            }
        )
    return PathQueryService(
        graph_repository=TextGraphRepository(graph_config),
        route_solver=DijkstraRouteSolver(),
    )


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Entry point for the ``pathgraph`` command-line tool."""
    parser = argparse.ArgumentParser(
        prog="pathgraph",
        description="Interactive shortest paths over a weighted directed graph",
    )
    parser.add_argument(
        "vertices", nargs="?", default=None, help="Vertex file (labels)"
    )
    parser.add_argument(
        "edges", nargs="?", default=None, help="Edge file (source destination weight)"
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log verbosity (overrides PATHGRAPH_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    config = get_config()
    configure_logging(config.observability, args.log_level)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    service = _build_service(config, args.vertices, args.edges)

    try:
        return run_session(service, stdin, stdout)
    except GraphFileFormatError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_FILE_FORMAT
    except GraphFileError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_FILE_NOT_FOUND
    except GraphConstructionError as exc:
        logger.debug("Invalid graph", extra={"edge": str(exc.edge)})
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_INVALID_GRAPH


if __name__ == "__main__":
    sys.exit(main())
