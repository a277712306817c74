"""Tests for graphcore/spanning.py"""

import itertools

from graphcore import CandidateOrder, DisjointSet, Graph


def undirected(edges) -> set[frozenset]:
    return {frozenset(edge.endpoints) for edge in edges}


def spanning_weight_lower_bound(labels, weighted_pairs) -> float:
    """Cheapest total weight over every spanning tree, by exhaustive search."""
    best = float("inf")
    for subset in itertools.combinations(weighted_pairs, len(labels) - 1):
        ds = DisjointSet()
        for label in labels:
            ds.make_set(label)
        for a, b, _ in subset:
            ds.union_sets(a, b)
        if len(ds.groups()) == 1:
            best = min(best, sum(weight for _, _, weight in subset))
    return best


class TestKruskal:
    def test_triangle_scenario(self):
        """(A,B,1), (B,C,2), (A,C,5): the heavy edge is left out."""
        graph = Graph[str]("ABC")
        graph.add_bidirectional_edge("A", "B", 1)
        graph.add_bidirectional_edge("B", "C", 2)
        graph.add_bidirectional_edge("A", "C", 5)

        tree = graph.kruskal_mst("A")

        assert undirected(tree) == {frozenset("AB"), frozenset("BC")}
        assert sum(edge.weight for edge in tree) == 3
        assert [str(edge) for edge in tree] == ["A -> B (1)", "B -> C (2)"]

    def test_source_first_ordering(self):
        """The literal ranking takes every edge out of the source before lighter ones."""
        graph = Graph[str]("ABC")
        graph.add_bidirectional_edge("A", "B", 1)
        graph.add_bidirectional_edge("B", "C", 2)
        graph.add_bidirectional_edge("A", "C", 5)

        tree = graph.kruskal_mst("A", CandidateOrder.SOURCE_THEN_WEIGHT)

        assert [str(edge) for edge in tree] == ["A -> B (1)", "A -> C (5)"]

    def test_source_wins_weight_ties(self):
        graph = Graph[str]("BCA")
        graph.add_edge("B", "C", 1)
        graph.add_edge("A", "B", 1)
        graph.add_edge("A", "C", 1)

        tree = graph.kruskal_mst("A")

        assert [str(edge) for edge in tree] == ["A -> B (1)", "A -> C (1)"]

    def test_restricted_to_source_component(self):
        graph = Graph[str]("ABCXY")
        graph.add_bidirectional_edge("A", "B", 3)
        graph.add_bidirectional_edge("B", "C", 1)
        graph.add_bidirectional_edge("X", "Y", 1)

        assert undirected(graph.kruskal_mst("A")) == {frozenset("AB"), frozenset("BC")}
        assert undirected(graph.kruskal_mst("Y")) == {frozenset("XY")}

    def test_isolated_source(self):
        graph = Graph[str]("ABZ")
        graph.add_bidirectional_edge("A", "B", 1)
        assert graph.kruskal_mst("Z") == []

    def test_missing_source(self):
        graph = Graph[str]("AB")
        graph.add_bidirectional_edge("A", "B", 1)
        assert graph.kruskal_mst("Q") == []

    def test_empty_graph(self):
        assert Graph[str]().kruskal_mst("A") == []

    def test_directed_edges_join_components(self):
        """Union-find ignores direction, so an edge into the source still counts."""
        graph = Graph[str]("AB")
        graph.add_edge("B", "A", 4)
        assert [str(edge) for edge in graph.kruskal_mst("A")] == ["B -> A (4)"]

    def test_minimum_spanning_tree(self):
        labels = "ABCDE"
        pairs = [
            ("A", "B", 4),
            ("A", "C", 1),
            ("B", "C", 2),
            ("B", "D", 5),
            ("C", "D", 8),
            ("C", "E", 10),
            ("D", "E", 2),
            ("A", "E", 7),
        ]
        graph = Graph[str](labels)
        for a, b, weight in pairs:
            graph.add_bidirectional_edge(a, b, weight)

        tree = graph.kruskal_mst("C")

        assert len(tree) == len(labels) - 1
        ds = DisjointSet[str]()
        for label in labels:
            ds.make_set(label)
        for edge in tree:
            assert not ds.connected(*edge.endpoints)
            ds.union_sets(*edge.endpoints)
        assert len(ds.groups()) == 1
        assert sum(edge.weight for edge in tree) == spanning_weight_lower_bound(
            labels, pairs
        )

    def test_result_is_a_copy(self):
        graph = Graph[str]("AB")
        graph.add_bidirectional_edge("A", "B", 1)
        (edge,) = graph.kruskal_mst("A")
        edge.weight = 99
        edge.selected = True
        assert graph.get_edge_weight("A", "B") == 1
        assert not graph.outgoing_edges("A")[0].selected

    def test_graph_unchanged(self):
        graph = Graph[str]("ABC")
        graph.add_bidirectional_edge("A", "B", 1)
        graph.add_bidirectional_edge("B", "C", 2)
        before = [str(edge) for edge in graph.edges()]
        graph.kruskal_mst("B")
        assert [str(edge) for edge in graph.edges()] == before
