"""Tests for the rendering collaborators (Graphviz and matplotlib)."""
import matplotlib

matplotlib.use("Agg")

import networkx as nx
import pytest

from subgraphrank.external.graphviz import graphviz_available, to_dot, dot_graph
from subgraphrank.graphs.generate import create_random_graph
from subgraphrank.graphs.sampler import sample_subgraphs
from subgraphrank.viz.draw import draw_samples


# --- DOT text (always works) ---

def test_to_dot_path():
    text = to_dot(nx.path_graph(3))
    assert text.startswith('graph "G" {')
    assert '"0" [ label = "0" ]' in text
    assert '"0" -- "1"' in text
    assert '"1" -- "2"' in text
    assert text.rstrip().endswith("}")


def test_to_dot_without_node_labels():
    text = to_dot(nx.path_graph(2), node_labels=False)
    assert '"0" [ label = "" ]' in text


def test_to_dot_edge_labels_and_quoting():
    G = nx.Graph()
    G.add_edge('a"b', "c", weight=3)
    text = to_dot(G, edge_labels=True)
    assert '"a\\"b" -- "c" [ label = "3" ]' in text


# --- dot executable ---

@pytest.mark.skipif(not graphviz_available(), reason="graphviz not available")
def test_dot_graph_writes_png(tmp_path):
    dot_path, png_path = dot_graph(nx.cycle_graph(4), tmp_path / "cycle")
    assert dot_path.exists()
    assert png_path.exists()
    assert png_path.stat().st_size > 0


def test_dot_graph_missing_executable(monkeypatch, tmp_path):
    import subgraphrank.external.graphviz as gv

    monkeypatch.setattr(gv, "GRAPHVIZ_DOT", "definitely-not-a-dot-binary")
    with pytest.raises(RuntimeError):
        gv.dot_graph(nx.path_graph(2), tmp_path / "g")


# --- matplotlib ---

def test_draw_samples_saves_pngs(tmp_path):
    G = create_random_graph(6, seed=10)
    sample = sample_subgraphs(G, 3, [0, 5, 19])
    paths = draw_samples(G, sample, save_prefix=str(tmp_path / "sub"))
    assert len(paths) == 4
    assert paths[0].endswith("sub-graph.png")
    for p in paths:
        assert (tmp_path / p.split("/")[-1]).exists()
