"""Tests for the text graph repository and the Dijkstra solver adapter."""

import logging

import pytest

from pathgraph.adapters.graph import DijkstraRouteSolver, TextGraphRepository
from pathgraph.config import GraphConfig
from pathgraph.domain.errors import GraphFileError, UnknownVertexError
from pathgraph.domain.models import NotReachable, Path
from pathgraph.graph.graph import build_graph


@pytest.fixture
def graph_config(tmp_path):
    (tmp_path / "vertices.txt").write_text("A B C\n", encoding="utf-8")
    (tmp_path / "edges.txt").write_text("A B 1\nB C 1\n", encoding="utf-8")
    return GraphConfig(data_dir=tmp_path)


class TestTextGraphRepository:
    """Test suite for TextGraphRepository."""

    def test_load_builds_graph_from_config_paths(self, graph_config):
        repo = TextGraphRepository(graph_config)

        graph = repo.load()

        assert graph.vertices() == ["A", "B", "C"]
        assert graph.edge_cost("B", "C") == 1

    def test_load_is_cached_until_cleared(self, graph_config):
        repo = TextGraphRepository(graph_config)
        first = repo.load()

        (graph_config.edges_path).write_text("A C 9\n", encoding="utf-8")
        assert repo.load() is first

        repo.clear_cache()
        reloaded = repo.load()
        assert reloaded is not first
        assert reloaded.edge_cost("A", "C") == 9

    def test_missing_file_raises(self, tmp_path):
        repo = TextGraphRepository(GraphConfig(data_dir=tmp_path / "nowhere"))

        with pytest.raises(GraphFileError):
            repo.load()

    def test_load_logs_graph_size(self, graph_config, caplog):
        repo = TextGraphRepository(graph_config)

        with caplog.at_level(logging.INFO, logger="pathgraph.adapters.graph"):
            repo.load()

        assert any(r.getMessage() == "Graph loaded" for r in caplog.records)


class TestDijkstraRouteSolver:
    """Test suite for DijkstraRouteSolver."""

    @pytest.fixture
    def graph(self):
        return build_graph(["A", "B", "C"], [("A", "B", 2), ("B", "C", 3)])

    def test_solve_returns_path(self, graph):
        assert DijkstraRouteSolver().solve(graph, "A", "C") == Path(("A", "B", "C"), 5)

    def test_solve_returns_not_reachable(self, graph, caplog):
        with caplog.at_level(logging.INFO, logger="pathgraph.adapters.graph"):
            result = DijkstraRouteSolver().solve(graph, "C", "A")

        assert result == NotReachable("C", "A")
        assert any(r.getMessage() == "No route found" for r in caplog.records)

    def test_solve_unknown_vertex_raises(self, graph):
        with pytest.raises(UnknownVertexError):
            DijkstraRouteSolver().solve(graph, "A", "Z")
