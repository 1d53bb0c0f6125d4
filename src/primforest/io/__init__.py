from .nxgraph import nx_to_adjlist, forest_to_nx

__all__ = [
    "nx_to_adjlist",
    "forest_to_nx",
]
