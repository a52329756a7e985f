"""Tests for algorithm selection in find_shortest_path."""

import logging
from io import StringIO

import numpy as np
import pytest

from wpaths import PathConfig, configure_logging, debug_context
from wpaths.graphs import Algorithm, Graph, PathStatus, find_shortest_path
from wpaths.graphs import dispatch as dispatch_module
from wpaths.graphs.types import PathResult


class TestFindShortestPath:
    """Tests for the dispatcher."""

    def test_non_negative_graph_uses_dijkstra(self, five_vertex_graph):
        """Test routing to Dijkstra."""
        result = find_shortest_path(five_vertex_graph, 1, 5)

        assert result.algorithm is Algorithm.DIJKSTRA
        assert result.path == [1, 3, 5]
        assert result.distance == 5

    def test_negative_graph_uses_spfa(self, negative_edge_graph):
        """Test routing to SPFA."""
        result = find_shortest_path(negative_edge_graph, 1, 4)

        assert result.algorithm is Algorithm.SPFA
        assert result.path == [1, 2, 3, 4]
        assert result.distance == -3

    def test_negative_cycle(self, negative_cycle_graph):
        """Test negative cycle propagation."""
        result = find_shortest_path(negative_cycle_graph, 1, 3)

        assert result.status is PathStatus.NEGATIVE_CYCLE
        assert result.algorithm is Algorithm.SPFA
        assert result.path is None
        assert result.distance is None

    def test_unreachable(self):
        """Test unreachable propagation."""
        G = Graph(3)
        G.add_edge(1, 2, 1)

        result = find_shortest_path(G, 1, 3)
        assert result.status is PathStatus.UNREACHABLE
        assert result.algorithm is Algorithm.DIJKSTRA

    @pytest.mark.parametrize("source, target", [(0, 1), (1, 0), (6, 1), (1, 6), (-2, 3)])
    def test_invalid_vertices(self, five_vertex_graph, source, target):
        """Test that out-of-range vertices short-circuit."""
        result = find_shortest_path(five_vertex_graph, source, target)

        assert result.status is PathStatus.INVALID_VERTEX
        assert result.algorithm is None
        assert result.path is None
        assert result.distance is None

    def test_invalid_vertices_run_nothing(self, five_vertex_graph, monkeypatch):
        """Test that no algorithm is invoked for invalid input."""

        def fail(*args, **kwargs):
            raise AssertionError("algorithm should not run")

        monkeypatch.setattr(dispatch_module, "_dijkstra_query", fail)
        monkeypatch.setattr(dispatch_module, "spfa", fail)

        assert find_shortest_path(five_vertex_graph, 9, 1).status is PathStatus.INVALID_VERTEX

    def test_result_returned_unmodified(self, five_vertex_graph, monkeypatch):
        """Test that the chosen algorithm's result passes through as is."""
        sentinel = PathResult(PathStatus.OK, 1, 5, [1, 5], 99, Algorithm.DIJKSTRA, "stub")
        monkeypatch.setattr(dispatch_module, "_dijkstra_query", lambda *a, **k: sentinel)

        assert find_shortest_path(five_vertex_graph, 1, 5) is sentinel

    def test_debug_mode_verifies_paths(self, five_vertex_graph, monkeypatch):
        """Test that debug mode rejects inconsistent results."""
        bogus = PathResult(PathStatus.OK, 1, 5, [1, 5], 99, Algorithm.DIJKSTRA, "stub")
        monkeypatch.setattr(dispatch_module, "_dijkstra_query", lambda *a, **k: bogus)

        assert find_shortest_path(five_vertex_graph, 1, 5) is bogus
        with debug_context(True):
            with pytest.raises(ValueError, match="Inconsistent"):
                find_shortest_path(five_vertex_graph, 1, 5)

    def test_numpy_integer_vertices(self, five_vertex_graph):
        """Test that numpy integer endpoints are valid and reported as ints."""
        result = find_shortest_path(five_vertex_graph, np.int64(1), np.int64(5))

        assert result.status is PathStatus.OK
        assert result.path == [1, 3, 5]
        assert result.distance == 5
        assert type(result.source) is int
        assert type(result.target) is int

    def test_dijkstra_route_rejects_small_infinity(self):
        """Test that a sentinel below the longest possible path is refused."""
        G = Graph(3)
        G.add_edge(1, 2, 10)
        G.add_edge(2, 3, 10)

        with pytest.raises(ValueError, match="too small"):
            find_shortest_path(G, 1, 3, config=PathConfig(infinity=20))

    def test_debug_mode_accepts_real_results(self, negative_edge_graph):
        """Test that genuine results pass debug verification."""
        with debug_context(True):
            assert find_shortest_path(negative_edge_graph, 1, 4).distance == -3

    def test_repeated_queries_identical(self, negative_edge_graph):
        """Test idempotence of queries on an unmodified graph."""
        first = find_shortest_path(negative_edge_graph, 1, 4)
        second = find_shortest_path(negative_edge_graph, 1, 4)
        assert first == second

    def test_queries_do_not_mutate_graph(self, negative_edge_graph):
        """Test that adjacency is unchanged by a query."""
        before = list(negative_edge_graph.edges())
        find_shortest_path(negative_edge_graph, 1, 4)
        assert list(negative_edge_graph.edges()) == before

    def test_algorithm_choice_is_logged(self, negative_edge_graph, five_vertex_graph):
        """Test that the dispatcher logs its choice at DEBUG level."""
        captured = StringIO()
        configure_logging(level=logging.DEBUG, stream=captured)

        find_shortest_path(negative_edge_graph, 1, 4)
        find_shortest_path(five_vertex_graph, 1, 5)

        output = captured.getvalue()
        assert "Using SPFA" in output
        assert "Using Dijkstra" in output

    def test_undirected_choice_is_logged(self):
        """Test the undirected negative-edge message."""
        G = Graph(2, directed=False)
        G.add_edge(1, 2, -1)
        captured = StringIO()
        configure_logging(level=logging.DEBUG, stream=captured)

        result = find_shortest_path(G, 1, 2)

        assert result.status is PathStatus.NEGATIVE_CYCLE
        assert "detect negative cycles" in captured.getvalue()
        assert "Negative cycle detected" in captured.getvalue()
