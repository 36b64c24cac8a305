from .generate import create_random_graph
from .sampler import (
    SubgraphSample,
    generate_subgraph_single,
    induced_subgraph,
    node_indices,
    sample_subgraphs,
)

__all__ = [
    "create_random_graph",
    "SubgraphSample",
    "generate_subgraph_single",
    "induced_subgraph",
    "node_indices",
    "sample_subgraphs",
]
