from __future__ import annotations

import networkx as nx


def create_random_graph(node_count: int, seed: int | None = None, p: float = 0.5) -> nx.Graph:
    """
    Erdos-Renyi G(n, p) graph on nodes 0..node_count-1.
    """
    if node_count < 0:
        raise ValueError(f"node_count must be non-negative, got {node_count}")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"edge probability must lie in [0, 1], got {p}")
    return nx.gnp_random_graph(node_count, p, seed=seed)
