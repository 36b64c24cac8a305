from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Callable, Hashable, List, Optional, Sequence, Tuple

import networkx as nx

from subgraphrank.combinatorics.batch import unrank_many
from subgraphrank.combinatorics.cache import CoefficientCache
from subgraphrank.combinatorics.unrank import check_rank, unrank_one, validate_request
from subgraphrank.errors import TooManyRequested

Extractor = Callable[[nx.Graph, Sequence[Hashable]], nx.Graph]


@dataclass(frozen=True)
class SubgraphSample:
    """
    Result of sample_subgraphs.

    ranks:      requested ranks, in request order
    subgraphs:  induced subgraphs that were extracted, in request order
    kept_ranks: rank of each entry of subgraphs
    skipped:    (rank, reason) for every extraction that failed
    """

    k: int
    ranks: Tuple[int, ...]
    subgraphs: Tuple[nx.Graph, ...]
    kept_ranks: Tuple[int, ...]
    skipped: Tuple[Tuple[int, str], ...]

    @property
    def complete(self) -> bool:
        return not self.skipped


def node_indices(graph: nx.Graph) -> List[Hashable]:
    """The graph's nodes in iteration order; this is the base set for ranking."""
    return list(graph.nodes())


def induced_subgraph(graph: nx.Graph, combination: Sequence[Hashable]) -> nx.Graph:
    """
    Copy of graph with every node outside combination removed.

    Node order follows graph, so for a combination decoded from
    node_indices(graph) the result's nodes equal the combination.
    """
    keep = set(combination)
    missing = keep.difference(graph.nodes())
    if missing:
        raise KeyError(f"nodes not in graph: {sorted(missing, key=repr)}")
    H = graph.copy()
    H.remove_nodes_from([v for v in graph.nodes() if v not in keep])
    return H


def generate_subgraph_single(
    graph: nx.Graph,
    k: int,
    rank: int,
    cache: Optional[CoefficientCache] = None,
) -> nx.Graph:
    """Induced subgraph on the k-combination of graph's nodes at rank."""
    return induced_subgraph(graph, unrank_one(node_indices(graph), k, rank, cache))


def _random_ranks(total: int, count: int, rng: random.Random) -> List[int]:
    """count distinct ranks drawn uniformly from range(total)."""
    if total <= sys.maxsize:
        return rng.sample(range(total), count)
    seen: set[int] = set()
    out: List[int] = []
    while len(out) < count:
        r = rng.randrange(total)
        if r not in seen:
            seen.add(r)
            out.append(r)
    return out


def sample_subgraphs(
    graph: nx.Graph,
    k: int,
    ranks: Optional[Sequence[int]] = None,
    *,
    count: Optional[int] = None,
    seed: Optional[int] = None,
    processes: Optional[int] = 1,
    mode: str = "process",
    extract: Extractor = induced_subgraph,
) -> SubgraphSample:
    """
    Sample induced subgraphs on k nodes, one per rank.

    Pass explicit ranks, or count to draw that many distinct ranks at random
    (seeded by seed), or neither to take every rank. Asking for more ranks
    than C(node_count, k) raises TooManyRequested; asking for exactly
    C(node_count, k) is allowed and covers every rank once.

    Extractions that raise or return a graph without exactly k nodes are
    skipped; they are listed in the result's skipped field and reported on
    stderr.
    """
    if ranks is not None and count is not None:
        raise ValueError("pass either ranks or count, not both")

    base = node_indices(graph)
    total = validate_request(len(base), k)

    if ranks is not None:
        wanted = list(ranks)
        if len(wanted) > total:
            raise TooManyRequested(len(wanted), total)
        wanted = [check_rank(r, total) for r in wanted]
    elif count is not None:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count > total:
            raise TooManyRequested(count, total)
        wanted = _random_ranks(total, count, random.Random(seed))
    else:
        wanted = list(range(total))

    combos = unrank_many(base, k, wanted, processes=processes, mode=mode)

    subgraphs: List[nx.Graph] = []
    kept: List[int] = []
    skipped: List[Tuple[int, str]] = []
    for rank, comb in zip(wanted, combos):
        try:
            H = extract(graph, comb)
        except (nx.NetworkXError, KeyError, ValueError) as e:
            skipped.append((rank, f"{type(e).__name__}: {e}"))
            continue
        if H.number_of_nodes() != k:
            skipped.append((rank, f"expected {k} nodes, got {H.number_of_nodes()}"))
            continue
        subgraphs.append(H)
        kept.append(rank)

    if skipped:
        print(
            f"[sample k={k}] skipped {len(skipped)} of {len(wanted)} extractions",
            file=sys.stderr,
        )

    return SubgraphSample(
        k=k,
        ranks=tuple(wanted),
        subgraphs=tuple(subgraphs),
        kept_ranks=tuple(kept),
        skipped=tuple(skipped),
    )
