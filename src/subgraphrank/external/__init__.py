from .graphviz import (
    GRAPHVIZ_DOT,
    graphviz_available,
    to_dot,
    dot_graph,
)

__all__ = [
    "GRAPHVIZ_DOT",
    "graphviz_available",
    "to_dot",
    "dot_graph",
]
