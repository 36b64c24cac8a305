from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import networkx as nx


GRAPHVIZ_DOT = os.environ.get("GRAPHVIZ_DOT", "dot")


def graphviz_available() -> bool:
    """Returns True iff the Graphviz dot executable appears runnable."""
    return shutil.which(GRAPHVIZ_DOT) is not None


def _quote(x: object) -> str:
    s = str(x).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{s}"'


# ---------------------------------------------------------------------------
# DOT text
# ---------------------------------------------------------------------------

def to_dot(
    graph: nx.Graph,
    *,
    node_labels: bool = True,
    edge_labels: bool = False,
    name: str = "G",
) -> str:
    """
    Serialize an undirected graph to DOT.

    node_labels: label each node with its identifier (otherwise blank).
    edge_labels: label each edge with its 'weight' attribute, if any.
    """
    lines = [f"graph {_quote(name)} {{"]
    for v in graph.nodes():
        label = str(v) if node_labels else ""
        lines.append(f"    {_quote(v)} [ label = {_quote(label)} ]")
    for u, v, data in graph.edges(data=True):
        attrs = ""
        if edge_labels and "weight" in data:
            attrs = f" [ label = {_quote(data['weight'])} ]"
        lines.append(f"    {_quote(u)} -- {_quote(v)}{attrs}")
    lines.append("}")
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def dot_graph(
    graph: nx.Graph,
    filename: str | os.PathLike,
    *,
    fmt: str = "png",
    node_labels: bool = True,
    edge_labels: bool = False,
) -> tuple[Path, Path]:
    """
    Write {filename}.dot and render it to {filename}.{fmt} with Graphviz.

    Returns (dot_path, image_path).
    """
    if not graphviz_available():
        raise RuntimeError(
            "Graphviz not available (need 'dot' in PATH, or set GRAPHVIZ_DOT)."
        )
    dot_path = Path(f"{filename}.dot")
    img_path = Path(f"{filename}.{fmt}")
    dot_path.write_text(to_dot(graph, node_labels=node_labels, edge_labels=edge_labels))

    p = subprocess.run(
        [GRAPHVIZ_DOT, f"-T{fmt}", str(dot_path), "-o", str(img_path)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    if p.returncode != 0:
        raise RuntimeError(
            f"dot failed for {dot_path} with return code {p.returncode}\n"
            f"stderr={p.stderr.decode('utf-8', errors='replace')}"
        )
    return dot_path, img_path
