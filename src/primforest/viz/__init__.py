from .layouts import base_layout
from .draw import draw_forest

__all__ = [
    "base_layout",
    "draw_forest",
]
