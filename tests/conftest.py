"""Pytest configuration and shared fixtures for wpaths tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graph tests
- The sample graphs used across the shortest-path test modules
- Logging and debug-mode isolation between tests
"""

import logging
import os

import numpy as np
import pytest

from wpaths import Graph, configure_logging, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_global_state():
    """Auto-use fixture restoring debug mode and log level after each test."""
    yield
    set_debug_enabled(False)
    configure_logging(level=logging.WARNING)


@pytest.fixture
def five_vertex_graph() -> Graph:
    """Directed graph whose shortest 1 -> 5 path is [1, 3, 5] with distance 5."""
    G = Graph(5, directed=True)
    G.add_edge(1, 2, 10)
    G.add_edge(1, 3, 3)
    G.add_edge(2, 3, 1)
    G.add_edge(2, 4, 2)
    G.add_edge(3, 2, 4)
    G.add_edge(3, 4, 8)
    G.add_edge(3, 5, 2)
    G.add_edge(4, 5, 7)
    return G


@pytest.fixture
def negative_edge_graph() -> Graph:
    """Directed graph whose shortest 1 -> 4 path is [1, 2, 3, 4] with distance -3."""
    G = Graph(4, directed=True)
    G.add_edge(1, 2, 3)
    G.add_edge(2, 3, -8)
    G.add_edge(1, 3, 5)
    G.add_edge(3, 4, 2)
    return G


@pytest.fixture
def negative_cycle_graph() -> Graph:
    """Directed 3-cycle 1 -> 2 -> 3 -> 1 with total weight -1."""
    G = Graph(3, directed=True)
    G.add_edge(1, 2, 2)
    G.add_edge(2, 3, 3)
    G.add_edge(3, 1, -6)
    return G


def random_graph(
    rng: np.random.Generator,
    n: int,
    num_edges: int,
    low: int = 0,
    high: int = 20,
    directed: bool = True,
) -> Graph:
    """Build a random graph with integer weights drawn from [low, high)."""
    G = Graph(n, directed=directed)
    for _ in range(num_edges):
        u, v = rng.integers(1, n + 1, size=2)
        G.add_edge(int(u), int(v), int(rng.integers(low, high)))
    return G


def random_dag(rng: np.random.Generator, n: int, num_edges: int, low: int, high: int) -> Graph:
    """Build a random DAG (arcs only go from lower to higher id); never has a cycle."""
    G = Graph(n, directed=True)
    for _ in range(num_edges):
        u, v = sorted(int(x) for x in rng.choice(np.arange(1, n + 1), size=2, replace=False))
        G.add_edge(u, v, int(rng.integers(low, high)))
    return G


@pytest.fixture
def make_random_graph(rng):
    """Factory fixture: ``make_random_graph(n, num_edges, low=0, high=20, directed=True)``."""

    def _make(n, num_edges, low=0, high=20, directed=True):
        return random_graph(rng, n, num_edges, low=low, high=high, directed=directed)

    return _make


@pytest.fixture
def make_random_dag(rng):
    """Factory fixture: ``make_random_dag(n, num_edges, low, high)``."""

    def _make(n, num_edges, low=-10, high=20):
        return random_dag(rng, n, num_edges, low, high)

    return _make
