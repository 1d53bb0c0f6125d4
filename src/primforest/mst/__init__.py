from .prim import prim_algorithm, Forest, Graph, WeightedEdge

__all__ = [
    "prim_algorithm",
    "Forest",
    "Graph",
    "WeightedEdge",
]
