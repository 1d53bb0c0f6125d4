from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from primforest.mst.prim import Forest, Graph


def weighted_edges_from_adj(adj: Graph) -> List[Tuple[int, int, int]]:
    """
    Return undirected edges as (u, v, w) with u < v.

    Each edge is read from the lower endpoint's list only, so a symmetric
    adjacency list yields every edge once.
    """
    eds: List[Tuple[int, int, int]] = []
    for u, neigh in enumerate(adj):
        for v, w in neigh:
            if v > u:
                eds.append((u, v, w))
    return eds


def weighted_adj_from_edges(
    edges: Iterable[Tuple[int, int, int]],
    n: int,
) -> List[List[Tuple[int, int]]]:
    """
    Build a symmetric 0..n-1 adjacency list from (u, v, w) edges.

    Parallel edges collapse to the lightest one.  Self-loops are dropped.
    Neighbor lists are sorted by neighbor index.
    """
    if n < 0:
        raise ValueError("n must be >= 0.")

    best: List[Dict[int, int]] = [{} for _ in range(n)]
    for u, v, w in edges:
        for x in (u, v):
            if x < 0 or x >= n:
                raise IndexError(f"edge ({u}, {v}) has endpoint outside 0..{n - 1}")
        if u == v:
            continue
        if v not in best[u] or w < best[u][v]:
            best[u][v] = w
            best[v][u] = w

    return [sorted(d.items()) for d in best]


def is_symmetric(adj: Graph) -> bool:
    """
    True iff every (v, w) in adj[u] has a matching (u, w) in adj[v].

    Out-of-range neighbors make the list asymmetric rather than raising.
    """
    n = len(adj)
    entries = [set(map(tuple, neigh)) for neigh in adj]
    for u, neigh in enumerate(adj):
        for v, w in neigh:
            if v < 0 or v >= n or (u, w) not in entries[v]:
                return False
    return True


def forest_edges(forest: Forest) -> List[Tuple[int, int, int]]:
    """Flatten a forest into (parent, child, w) triples in parent order."""
    return [(u, v, w) for u, children in enumerate(forest) for v, w in children]


def forest_weight(forest: Forest) -> int:
    """Sum of the weights of every edge selected into *forest*."""
    return sum(w for children in forest for _, w in children)
