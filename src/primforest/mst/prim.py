"""
Minimum spanning forest via Prim's algorithm.

A disconnected graph needs one run of Prim's algorithm per connected component;
a connected graph needs exactly one.  The frontier of each run is a binary heap
of candidate edges with lazy deletion: entries whose target has already been
absorbed are skipped when popped, so no decrease-key is needed.
"""
from __future__ import annotations

import heapq
import logging
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)

WeightedEdge = Tuple[int, int]
Graph = Sequence[Sequence[WeightedEdge]]
Forest = List[List[WeightedEdge]]
# (weight, source-in-tree, candidate); weight first so heapq orders by it
FrontierEntry = Tuple[int, int, int]


def _is_visited(visited: List[bool], v: int) -> bool:
    # Negative indices would silently wrap on a Python list.
    if v < 0 or v >= len(visited):
        raise IndexError(f"vertex index {v} out of range for graph with {len(visited)} vertices")
    return visited[v]


def _push_unvisited(
    frontier: List[FrontierEntry],
    u: int,
    graph: Graph,
    visited: List[bool],
) -> None:
    for v, w in graph[u]:
        if not _is_visited(visited, v):
            heapq.heappush(frontier, (w, u, v))


def _expand_component(
    frontier: List[FrontierEntry],
    absorbed: int,
    visited: List[bool],
    forest: Forest,
    graph: Graph,
) -> int:
    """
    Grow the tree of one component from a non-empty frontier.

    Mutates *frontier*, *visited* and *forest* in place and returns the updated
    number of absorbed vertices.  Stops as soon as the frontier is empty or the
    whole graph has been absorbed.
    """
    n = len(graph)
    while frontier:
        w, u, v = heapq.heappop(frontier)
        if visited[v]:
            continue

        visited[v] = True
        absorbed += 1
        forest[u].append((v, w))

        if absorbed >= n:
            break

        _push_unvisited(frontier, v, graph, visited)
    return absorbed


def prim_algorithm(graph: Graph) -> Forest:
    """
    Minimum spanning forest of an undirected weighted graph.

    Args:
      graph: adjacency list, graph[u] = [(v, w), ...].  Vertices are 0..n-1 and
        every undirected edge is expected in both endpoints' lists.  Weights
        may be negative.

    Returns:
      forest[u] = [(v, w), ...], the edges through which u absorbed v.  The
      outer list has one (possibly empty) entry per vertex.

    Raises:
      IndexError: a neighbor index is outside 0..n-1.

    Components are spanned in increasing order of their lowest vertex.  The
    input is never mutated.
    """
    n = len(graph)
    visited = [False] * n
    forest: Forest = [[] for _ in range(n)]
    absorbed = 0

    for i in range(n):
        if visited[i]:
            continue

        visited[i] = True
        absorbed += 1
        before = absorbed

        frontier: List[FrontierEntry] = []
        _push_unvisited(frontier, i, graph, visited)
        if frontier:
            absorbed = _expand_component(frontier, absorbed, visited, forest, graph)

        logger.debug("component rooted at %d: %d vertices", i, absorbed - before + 1)

        if absorbed >= n:
            if i < n - 1:
                logger.debug("all %d vertices absorbed after root %d, stopping early", n, i)
            break

    return forest
