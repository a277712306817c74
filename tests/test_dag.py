"""Tests for graphcore/dag.py"""

from graphcore import Graph, SortStatus


def build(edges, labels=()) -> Graph:
    graph = Graph(labels)
    for source, destination in edges:
        graph.add_vertex(source)
        graph.add_vertex(destination)
        graph.add_edge(source, destination, 1)
    return graph


def assert_respects_edges(graph: Graph, order: list) -> None:
    position = {label: i for i, label in enumerate(order)}
    for edge in graph.edges():
        assert position[edge.origin_label] < position[edge.destination_label]


class TestIsDag:
    def test_empty_graph(self):
        assert Graph().is_dag()

    def test_chain(self):
        assert build([("A", "B"), ("B", "C")]).is_dag()

    def test_diamond(self):
        assert build([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]).is_dag()

    def test_cycle(self):
        assert not build([("A", "B"), ("B", "C"), ("C", "A")]).is_dag()

    def test_self_loop(self):
        assert not build([("A", "A")]).is_dag()

    def test_bidirectional_edge_is_cycle(self):
        graph = Graph("AB")
        graph.add_bidirectional_edge("A", "B", 1)
        assert not graph.is_dag()

    def test_cycle_in_later_component(self):
        graph = build([("A", "B"), ("C", "D"), ("D", "E"), ("E", "C")])
        assert not graph.is_dag()

    def test_cross_edge_into_finished_vertex(self):
        """D is finished before C reaches it; that is not a cycle."""
        graph = build([("A", "B"), ("B", "D"), ("A", "C"), ("C", "D")])
        assert graph.is_dag()

    def test_removing_edge_breaks_cycle(self):
        graph = build([("A", "B"), ("B", "A")])
        assert not graph.is_dag()
        graph.remove_edge("B", "A")
        assert graph.is_dag()

    def test_deep_chain(self):
        graph = Graph(range(5000))
        for i in range(4999):
            graph.add_edge(i, i + 1, 1)
        assert graph.is_dag()
        graph.add_edge(4999, 0, 1)
        assert not graph.is_dag()


class TestTopologicalSort:
    def test_linear_chain(self):
        """A -> B -> C should give [A, B, C]"""
        graph = build([("A", "B"), ("B", "C")])
        assert graph.topsort() == ["A", "B", "C"]

    def test_diamond(self):
        """
        Diamond: A -> B, A -> C, B -> D, C -> D
        Valid orders: [A, B, C, D] or [A, C, B, D]
        """
        graph = build([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])
        result = graph.topsort()
        assert result == ["A", "B", "C", "D"]
        assert_respects_edges(graph, result)

    def test_disconnected_nodes(self):
        """Nodes with no edges are emitted in insertion order."""
        graph = Graph("CAB")
        assert graph.topsort() == ["C", "A", "B"]

    def test_empty_graph(self):
        assert Graph().topsort() == []
        assert Graph().topological_sort().status is SortStatus.SORTED

    def test_single_node(self):
        assert Graph(["A"]).topsort() == ["A"]

    def test_cycle_gives_empty(self):
        graph = build([("A", "B"), ("B", "C"), ("C", "A")])
        assert graph.topsort() == []

    def test_self_loop_gives_empty(self):
        assert build([("A", "A")]).topsort() == []

    def test_parallel_edges(self):
        graph = build([("A", "B"), ("A", "B"), ("B", "C")])
        assert graph.topsort() == ["A", "B", "C"]

    def test_two_vertex_scenario(self):
        """X -> Y sorts; adding Y -> X makes it cyclic."""
        graph = Graph(["X", "Y"])
        graph.add_edge("X", "Y", 1)
        assert graph.topsort() == ["X", "Y"]
        graph.add_edge("Y", "X", 1)
        assert graph.topsort() == []
        assert not graph.is_dag()

    def test_tagged_cycle_keeps_prefix(self):
        graph = build([("S", "A"), ("A", "B"), ("B", "A")])
        result = graph.topological_sort()
        assert result.status is SortStatus.CYCLIC
        assert not result.is_sorted
        assert result.order == ("S",)

    def test_complex_dag(self):
        """
        More complex DAG:
        1 -> 2, 3
        2 -> 4
        3 -> 4, 5
        4 -> 6
        5 -> 6
        """
        graph = build([(1, 2), (1, 3), (2, 4), (3, 4), (3, 5), (4, 6), (5, 6)])
        result = graph.topsort()
        assert sorted(result) == [1, 2, 3, 4, 5, 6]
        assert_respects_edges(graph, result)

    def test_topsort_agrees_with_is_dag(self):
        acyclic = build([("A", "B"), ("C", "B")])
        cyclic = build([("A", "B"), ("B", "C"), ("C", "B")])
        assert acyclic.is_dag() and acyclic.topsort()
        assert not cyclic.is_dag() and cyclic.topsort() == []
