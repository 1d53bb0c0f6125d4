from .connectivity import connected_components_adj, is_spanning_forest

__all__ = [
    "connected_components_adj",
    "is_spanning_forest",
]
