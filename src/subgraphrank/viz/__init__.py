from .draw import base_layout, draw_graph, draw_samples

__all__ = [
    "base_layout",
    "draw_graph",
    "draw_samples",
]
