from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from subgraphrank.graphs.sampler import SubgraphSample


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable layout:
      - planar_layout if planar
      - otherwise spring_layout
    """
    if G.number_of_nodes() == 0:
        return {}
    is_planar, _ = nx.check_planarity(G)
    if is_planar:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def draw_graph(
    G: nx.Graph,
    *,
    ax=None,
    pos: dict | None = None,
    seed: int = 7,
    title: str | None = None,
    node_size: int = 300,
    edge_width: float = 1.2,
):
    """
    Draw G with node identifiers as labels. Returns the positions used.
    """
    if ax is None:
        ax = plt.gca()
    if pos is None:
        pos = base_layout(G, seed=seed)
    ax.set_axis_off()
    if title is not None:
        ax.set_title(title)
    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        with_labels=True,
        node_size=node_size,
        width=edge_width,
    )
    return pos


def draw_samples(
    G: nx.Graph,
    sample: SubgraphSample,
    *,
    seed: int = 7,
    save_prefix: str | None = None,
) -> list[str]:
    """
    Draw G, then each sampled subgraph at the positions its nodes had in G.

    If save_prefix is set, saves PNG files:
      {save_prefix}-graph.png, {save_prefix}-0.png, {save_prefix}-1.png, ...
    and returns their paths; otherwise shows each figure.
    """
    saved: list[str] = []

    fig, ax = plt.subplots(figsize=(6, 6))
    pos = draw_graph(
        G,
        ax=ax,
        seed=seed,
        title=f"|V|={G.number_of_nodes()}  |E|={G.number_of_edges()}",
    )
    saved += _finish(fig, save_prefix, "graph")

    for i, (rank, H) in enumerate(zip(sample.kept_ranks, sample.subgraphs)):
        fig, ax = plt.subplots(figsize=(6, 6))
        draw_graph(
            H,
            ax=ax,
            pos={v: pos[v] for v in H.nodes()},
            title=f"rank {rank}   |V|={H.number_of_nodes()}  |E|={H.number_of_edges()}",
        )
        saved += _finish(fig, save_prefix, str(i))

    return saved


def _finish(fig, save_prefix: str | None, suffix: str) -> list[str]:
    plt.tight_layout()
    if save_prefix:
        path = f"{save_prefix}-{suffix}.png"
        plt.savefig(path, dpi=200)
        plt.close(fig)
        return [path]
    plt.show()
    return []
