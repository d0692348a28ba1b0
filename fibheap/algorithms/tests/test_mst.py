import networkx as nx
import pytest

import fibheap as fh


def total_weight(T):
    return sum(w for _, _, w in T.edges(data="weight"))


class TestPrim:
    def setup_method(self):
        # Example from Wikipedia: https://en.wikipedia.org/wiki/Kruskal's_algorithm
        edges = [
            (0, 1, 7), (0, 3, 5), (1, 2, 8), (1, 3, 9), (1, 4, 7), (2, 4, 5),
            (3, 4, 15), (3, 5, 6), (4, 5, 8), (4, 6, 9), (5, 6, 11),
        ]
        self.G = nx.Graph()
        self.G.add_weighted_edges_from(edges)
        self.minimum_spanning_edgelist = [
            (0, 1, {"weight": 7}),
            (0, 3, {"weight": 5}),
            (1, 4, {"weight": 7}),
            (2, 4, {"weight": 5}),
            (3, 5, {"weight": 6}),
            (4, 6, {"weight": 9}),
        ]

    def test_minimum_tree(self):
        T = fh.prim_mst(self.G)
        edges = sorted((min(u, v), max(u, v), d) for u, v, d in T.edges(data=True))
        assert edges == self.minimum_spanning_edgelist
        assert sorted(T) == sorted(self.G)

    def test_matches_networkx(self):
        G = nx.gnm_random_graph(50, 200, seed=3)
        for i, (u, v) in enumerate(G.edges()):
            G[u][v]["weight"] = (i * 53) % 17
        T = fh.prim_mst(G)
        expected = nx.minimum_spanning_tree(G)
        assert nx.is_forest(T)
        assert T.number_of_edges() == expected.number_of_edges()
        assert total_weight(T) == total_weight(expected)

    def test_forest(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(0, 1, 2), (1, 2, 1), (0, 2, 3), (3, 4, 4)])
        G.add_node(5, color="red")
        T = fh.prim_mst(G)
        assert nx.is_forest(T)
        assert nx.number_connected_components(T) == 3
        assert total_weight(T) == 7
        assert T.nodes[5] == {"color": "red"}

    def test_edges_weight_attribute(self):
        G = nx.Graph()
        G.add_edge(0, 1, distance=3)
        G.add_edge(1, 2, distance=1)
        G.add_edge(0, 2, distance=2)
        edges = list(fh.prim_mst_edges(G, weight="distance"))
        assert sorted(w for _, _, w in edges) == [1, 2]
        T = fh.prim_mst(G, weight="distance")
        assert sorted(w for _, _, w in T.edges(data="distance")) == [1, 2]

    def test_weight_function(self):
        T = fh.prim_mst(self.G, weight=lambda u, v, d: -d["weight"])
        weights = sorted(w for _, _, w in T.edges(data="weight"))
        assert weights == [-15, -11, -9, -9, -8, -7]
        assert nx.is_tree(T)

    def test_multigraph(self):
        G = nx.MultiGraph()
        G.add_edge(0, 1, weight=4)
        G.add_edge(0, 1, weight=1)
        G.add_edge(1, 2, weight=2)
        T = fh.prim_mst(G)
        assert total_weight(T) == 3

    def test_directed(self):
        with pytest.raises(fh.FibonacciHeapException):
            fh.prim_mst(nx.DiGraph([(0, 1)]))
