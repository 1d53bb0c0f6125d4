from .adjlist import (
    weighted_edges_from_adj,
    weighted_adj_from_edges,
    is_symmetric,
    forest_edges,
    forest_weight,
)

__all__ = [
    "weighted_edges_from_adj",
    "weighted_adj_from_edges",
    "is_symmetric",
    "forest_edges",
    "forest_weight",
]
