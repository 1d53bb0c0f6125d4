from __future__ import annotations

from typing import List, Set

from primforest.graph.adjlist import is_symmetric
from primforest.mst.prim import Forest, Graph


def connected_components_adj(adj: Graph) -> List[Set[int]]:
    """
    Return the vertex sets of the connected components of *adj*.

    Components are ordered by their lowest vertex, and isolated vertices come
    back as singletons.  Edges are treated as undirected even if only one
    endpoint lists them.
    """
    n = len(adj)
    und: List[Set[int]] = [set() for _ in range(n)]
    for u, neigh in enumerate(adj):
        for v, _ in neigh:
            if v < 0 or v >= n:
                raise IndexError(f"vertex index {v} out of range for graph with {n} vertices")
            und[u].add(v)
            und[v].add(u)

    seen = [False] * n
    components: List[Set[int]] = []
    for start in range(n):
        if seen[start]:
            continue
        comp: Set[int] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if seen[node]:
                continue
            seen[node] = True
            comp.add(node)
            for nbr in und[node]:
                if not seen[nbr]:
                    stack.append(nbr)
        components.append(comp)
    return components


def is_spanning_forest(adj: Graph, forest: Forest) -> bool:
    """
    Check that *forest* is a spanning forest of *adj*.

    Semantics:
      - forest has one entry per vertex
      - every forest edge (u, v, w) appears in adj[u] with the same weight
      - the forest is acyclic
      - the forest's components coincide with the graph's components

    Raises ValueError unless *adj* is symmetric (see is_symmetric).
    """
    if not is_symmetric(adj):
        raise ValueError("is_spanning_forest needs a symmetric adjacency list.")

    n = len(adj)
    if len(forest) != n:
        return False

    parent = list(range(n))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, children in enumerate(forest):
        listed = set(map(tuple, adj[u]))
        for v, w in children:
            if (v, w) not in listed:
                return False
            ru, rv = find(u), find(v)
            if ru == rv:
                return False
            parent[ru] = rv

    for comp in connected_components_adj(adj):
        roots = {find(x) for x in comp}
        if len(roots) != 1:
            return False
    return True
