from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from primforest.graph.adjlist import weighted_edges_from_adj, forest_weight
from primforest.mst.prim import Forest, Graph
from .layouts import base_layout


def draw_forest(
    adj: Graph,
    forest: Forest,
    *,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 2.5,
    save_path: str | None = None,
    ax=None,
) -> nx.Graph:
    """
    Draw the graph with the edges of *forest* highlighted.

    Non-forest edges are drawn thin and light grey; every edge is labelled
    with its weight.  If save_path is set the figure is written there and
    closed, otherwise it is shown (unless an *ax* was supplied by the caller).

    Returns the nx.Graph that was drawn.
    """
    G = nx.Graph()
    G.add_nodes_from(range(len(adj)))
    for u, v, w in weighted_edges_from_adj(adj):
        G.add_edge(u, v, weight=w)

    selected = {frozenset((u, v)) for u, children in enumerate(forest) for v, _ in children}
    tree_edges = [e for e in G.edges() if frozenset(e) in selected]
    other_edges = [e for e in G.edges() if frozenset(e) not in selected]

    own_figure = ax is None
    if own_figure:
        fig, ax = plt.subplots(figsize=(8, 6))
    else:
        fig = ax.figure

    pos = base_layout(G, seed=seed)
    ax.set_title(f"|V|={G.number_of_nodes()}  forest edges={len(tree_edges)}  weight={forest_weight(forest)}")
    ax.set_axis_off()

    nx.draw_networkx_nodes(G, pos, ax=ax, node_size=node_size)
    nx.draw_networkx_labels(G, pos, ax=ax)
    nx.draw_networkx_edges(G, pos, ax=ax, edgelist=other_edges, edge_color="lightgrey", width=1.0)
    nx.draw_networkx_edges(G, pos, ax=ax, edgelist=tree_edges, edge_color="tab:green", width=edge_width)
    nx.draw_networkx_edge_labels(G, pos, ax=ax, edge_labels=nx.get_edge_attributes(G, "weight"))

    if save_path:
        fig.savefig(save_path, dpi=200)
        if own_figure:
            plt.close(fig)
    elif own_figure:
        plt.tight_layout()
        plt.show()

    return G
