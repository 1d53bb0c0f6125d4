"""
primforest: minimum spanning forests of weighted adjacency-list graphs via
Prim's algorithm, plus small helpers for building, checking, converting and
drawing them.
"""

from .mst.prim import prim_algorithm

# Adjacency-list helpers
from .graph.adjlist import (
    weighted_edges_from_adj,
    weighted_adj_from_edges,
    is_symmetric,
    forest_edges,
    forest_weight,
)

# Shared utilities
from .utils.connectivity import connected_components_adj, is_spanning_forest
from .io.nxgraph import nx_to_adjlist, forest_to_nx
from .viz.draw import draw_forest

__all__ = [
    # MST
    "prim_algorithm",
    # Adjacency lists
    "weighted_edges_from_adj",
    "weighted_adj_from_edges",
    "is_symmetric",
    "forest_edges",
    "forest_weight",
    # Utils
    "connected_components_adj",
    "is_spanning_forest",
    # IO
    "nx_to_adjlist",
    "forest_to_nx",
    # Viz
    "draw_forest",
]
