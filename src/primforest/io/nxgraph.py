from __future__ import annotations

from typing import Hashable, List, Optional, Sequence, Tuple
import networkx as nx

from primforest.mst.prim import Forest


def nx_to_adjlist(
    G: nx.Graph,
    weight: str = "weight",
    default: int = 1,
) -> Tuple[List[List[Tuple[int, int]]], List[Hashable]]:
    """
    Convert an undirected NetworkX graph into a 0..n-1 weighted adjacency list.

    Returns:
      (adj, nodes) where nodes[i] is the NetworkX node behind index i, in
      G.nodes() order, and adj[i] = sorted [(j, w), ...].

    Edges without the *weight* attribute get *default*.  Multigraphs keep the
    lightest of their parallel edges.
    """
    if G.is_directed():
        raise ValueError("Directed graphs are not supported; convert with G.to_undirected().")

    nodes = list(G.nodes())
    index = {node: i for i, node in enumerate(nodes)}
    best: List[dict] = [{} for _ in nodes]
    for a, b, data in G.edges(data=True):
        if a == b:
            continue
        u, v = index[a], index[b]
        w = data.get(weight, default)
        if v not in best[u] or w < best[u][v]:
            best[u][v] = w
            best[v][u] = w

    adj = [sorted(d.items()) for d in best]
    return adj, nodes


def forest_to_nx(
    forest: Forest,
    nodes: Optional[Sequence[Hashable]] = None,
    weight: str = "weight",
) -> nx.Graph:
    """
    Build an nx.Graph holding every vertex of *forest* and its selected edges.

    If *nodes* is given (as returned by nx_to_adjlist), vertex i is relabelled
    to nodes[i].
    """
    if nodes is not None and len(nodes) != len(forest):
        raise ValueError("nodes must have one entry per forest vertex.")

    label = (lambda i: nodes[i]) if nodes is not None else (lambda i: i)
    T = nx.Graph()
    T.add_nodes_from(label(i) for i in range(len(forest)))
    for u, children in enumerate(forest):
        for v, w in children:
            T.add_edge(label(u), label(v), **{weight: w})
    return T
