"""Tests for graph utility functions."""

from wpaths.graphs import Algorithm, PathResult, PathStatus, format_result, reconstruct_path


class TestReconstructPath:
    """Tests for reconstruct_path function."""

    def test_reconstruct_path_simple(self):
        """Test path reconstruction from parent pointers."""
        parent = [None, None, 1, 2, 3]
        assert reconstruct_path(parent, 1, 4) == [1, 2, 3, 4]

    def test_reconstruct_path_source(self):
        """Test path reconstruction to source itself."""
        parent = [None, None, 1]
        assert reconstruct_path(parent, 1, 1) == [1]

    def test_reconstruct_path_unreachable(self):
        """Test reconstruction for a vertex with no parent."""
        parent = [None, None, 1, None]
        assert reconstruct_path(parent, 1, 3) is None

    def test_reconstruct_path_cycle(self):
        """Test that a cyclic parent map does not loop forever."""
        parent = [None, None, 3, 2]
        assert reconstruct_path(parent, 1, 3) is None


class TestFormatResult:
    """Tests for format_result function."""

    def test_format_ok(self):
        """Test rendering of a found path."""
        result = PathResult(PathStatus.OK, 1, 5, [1, 3, 5], 5, Algorithm.DIJKSTRA)
        assert format_result(result) == [
            "Shortest path from 1 to 5: [1, 3, 5]",
            "Total distance: 5",
        ]

    def test_format_failures(self):
        """Test rendering of each failure status."""
        cycle = PathResult(PathStatus.NEGATIVE_CYCLE, 1, 3)
        unreachable = PathResult(PathStatus.UNREACHABLE, 1, 3)
        invalid = PathResult(PathStatus.INVALID_VERTEX, 0, 3)

        assert format_result(cycle) == ["Negative cycle detected"]
        assert format_result(unreachable) == ["No path exists from 1 to 3"]
        assert format_result(invalid) == ["Invalid vertices: 0, 3"]
