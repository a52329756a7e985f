"""
Example: Shortest Paths in wpaths

This example builds three small directed graphs and lets the dispatcher pick
an algorithm for each: Dijkstra for non-negative weights, SPFA for negative
weights, and SPFA again to detect a negative cycle. It finishes with the
all-pairs matrix from Johnson's algorithm.
"""

import logging

from wpaths import (
    Graph,
    PathStatus,
    configure_logging,
    find_shortest_path,
    format_result,
    get_logger,
    johnson,
)


def example_non_negative_weights():
    """Example: Dijkstra on a graph with non-negative weights."""
    print("=" * 60)
    print("Example 1: Non-negative weights")
    print("=" * 60)

    G = Graph(5, directed=True)
    G.add_edge(1, 2, 10)
    G.add_edge(1, 3, 3)
    G.add_edge(2, 3, 1)
    G.add_edge(2, 4, 2)
    G.add_edge(3, 2, 4)
    G.add_edge(3, 4, 8)
    G.add_edge(3, 5, 2)
    G.add_edge(4, 5, 7)

    result = find_shortest_path(G, 1, 5)
    print(f"Algorithm: {result.algorithm.value}")
    for line in format_result(result):
        print(line)
    print()


def example_negative_weights():
    """Example: SPFA on a graph with a negative edge."""
    print("=" * 60)
    print("Example 2: Negative weights")
    print("=" * 60)

    G = Graph(4, directed=True)
    G.add_edge(1, 2, 3)
    G.add_edge(2, 3, -8)
    G.add_edge(1, 3, 5)
    G.add_edge(3, 4, 2)

    result = find_shortest_path(G, 1, 4)
    print(f"Algorithm: {result.algorithm.value}")
    for line in format_result(result):
        print(line)

    all_pairs = johnson(G)
    print("All-pairs distances (Johnson):")
    for u in G.vertices():
        row = [
            str(all_pairs.distance(u, v)) if all_pairs.is_reachable(u, v) else "inf"
            for v in G.vertices()
        ]
        print(f"  {u}: " + " ".join(f"{cell:>4}" for cell in row))
    print()


def example_negative_cycle():
    """Example: negative cycle detection."""
    print("=" * 60)
    print("Example 3: Negative cycle")
    print("=" * 60)

    G = Graph(3, directed=True)
    G.add_edge(1, 2, 2)
    G.add_edge(2, 3, 3)
    G.add_edge(3, 1, -6)

    result = find_shortest_path(G, 1, 3)
    for line in format_result(result):
        print(line)
    if result.status == PathStatus.NEGATIVE_CYCLE:
        print("As expected, negative cycle detected")

    if not johnson(G).ok:
        print("Johnson's algorithm refuses the graph as well")
    print()


if __name__ == "__main__":
    configure_logging(level=logging.INFO)
    get_logger(__name__).info("Running shortest path examples")

    example_non_negative_weights()
    example_negative_weights()
    example_negative_cycle()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
