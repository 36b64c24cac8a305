"""
subgraphrank: combinatorial-number-system unranking of k-combinations and
rank-addressed sampling of induced subgraphs.
"""

from .errors import (
    UnrankError,
    InvalidArguments,
    InvalidSubsetSize,
    InvalidRank,
    TooManyRequested,
)

# Core
from .combinatorics.binomial import coefficient
from .combinatorics.cache import CoefficientCache
from .combinatorics.unrank import unrank_one, rank_one
from .combinatorics.batch import unrank_all, unrank_many, unrank_parallel

# Graphs
from .graphs.generate import create_random_graph
from .graphs.sampler import (
    SubgraphSample,
    generate_subgraph_single,
    induced_subgraph,
    node_indices,
    sample_subgraphs,
)

# Rendering
from .external.graphviz import graphviz_available, to_dot, dot_graph
from .viz.draw import draw_graph, draw_samples

__all__ = [
    # Errors
    "UnrankError",
    "InvalidArguments",
    "InvalidSubsetSize",
    "InvalidRank",
    "TooManyRequested",
    # Core
    "coefficient",
    "CoefficientCache",
    "unrank_one",
    "rank_one",
    "unrank_all",
    "unrank_many",
    "unrank_parallel",
    # Graphs
    "create_random_graph",
    "SubgraphSample",
    "generate_subgraph_single",
    "induced_subgraph",
    "node_indices",
    "sample_subgraphs",
    # Rendering
    "graphviz_available",
    "to_dot",
    "dot_graph",
    "draw_graph",
    "draw_samples",
]
