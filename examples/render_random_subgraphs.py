from subgraphrank.external.graphviz import dot_graph, graphviz_available
from subgraphrank.graphs import create_random_graph, sample_subgraphs


if __name__ == "__main__":
    graph = create_random_graph(10, seed=10)
    sample = sample_subgraphs(graph, 5, count=5, seed=10, processes=2)

    for rank, subgraph in zip(sample.kept_ranks, sample.subgraphs):
        print(rank, list(subgraph.nodes()), list(subgraph.edges()))

    # Requires Graphviz in PATH: dot
    if graphviz_available():
        dot_graph(graph, "graph1")
        for index, subgraph in enumerate(sample.subgraphs):
            dot_graph(subgraph, f"subgraph-{index}")
