"""
Generic weighted graph container.

Vertices are keyed by a caller supplied label and kept in insertion order.
Edges live in a single arena addressed by EdgeId; each vertex keeps two
handle lists into it (outgoing and incoming) that are updated together on
every insertion and removal.

Missing labels never raise: mutations return False, traversals return an
empty list and weight queries return INFINITE_WEIGHT.
"""

import itertools
import logging
import math
from collections.abc import Iterator
from typing import Generic

from typing_extensions import Iterable

from graphcore.dag import is_dag, topological_sort
from graphcore.entities import Edge, Vertex
from graphcore.errors import UnknownElementError
from graphcore.spanning import kruskal_mst
from graphcore.traversal import breadth_first, depth_first, depth_first_from
from graphcore.types import (
    CandidateOrder,
    EdgeId,
    Label,
    LookupStatus,
    TopologicalOrder,
    VertexId,
    WeightLookup,
)

logger = logging.getLogger(__name__)


class Graph(Generic[Label]):
    """
    Directed multigraph with weighted edges.

    Undirected graphs are modelled by adding both directions with
    add_bidirectional_edge.

    Example:
        >>> g = Graph[str]()
        >>> g.add_vertex("A"), g.add_vertex("B")
        (True, True)
        >>> g.add_edge("A", "B", 2.5)
        True
        >>> g.get_edge_weight("A", "B")
        2.5
        >>> g.topsort()
        ['A', 'B']
    """

    def __init__(self, labels: Iterable[Label] = ()) -> None:
        self._vertices: dict[Label, Vertex[Label]] = {}
        self._by_id: dict[VertexId, Vertex[Label]] = {}
        self._edges: dict[EdgeId, Edge[Label]] = {}
        self._vertex_ids = itertools.count()
        self._edge_ids = itertools.count()
        for label in labels:
            self.add_vertex(label)

    # =========================================================================
    # Lookup
    # =========================================================================

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __iter__(self) -> Iterator[Label]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def find_vertex(self, label: Label) -> Vertex[Label] | None:
        return self._vertices.get(label)

    def vertex_set(self) -> tuple[Vertex[Label], ...]:
        """Vertices in insertion order."""
        return tuple(self._vertices.values())

    def vertex_at(self, vertex_id: VertexId) -> Vertex[Label]:
        vertex = self._by_id.get(vertex_id)
        if vertex is None:
            raise UnknownElementError(vertex_id, "vertex arena")
        return vertex

    def edge(self, edge_id: EdgeId) -> Edge[Label]:
        edge = self._edges.get(edge_id)
        if edge is None:
            raise UnknownElementError(edge_id, "edge arena")
        return edge

    def edges(self) -> Iterator[Edge[Label]]:
        """Every edge, grouped by origin in vertex order, then outgoing order."""
        for vertex in self._vertices.values():
            for edge_id in vertex.outgoing:
                yield self._edges[edge_id]

    def outgoing_edges(self, label: Label) -> tuple[Edge[Label], ...]:
        vertex = self._vertices.get(label)
        if vertex is None:
            return ()
        return tuple(self._edges[edge_id] for edge_id in vertex.outgoing)

    def incoming_edges(self, label: Label) -> tuple[Edge[Label], ...]:
        vertex = self._vertices.get(label)
        if vertex is None:
            return ()
        return tuple(self._edges[edge_id] for edge_id in vertex.incoming)

    def successors(self, vertex: Vertex[Label]) -> Iterator[Vertex[Label]]:
        """Destination of each outgoing edge, parallel edges included."""
        for edge_id in vertex.outgoing:
            yield self._by_id[self._edges[edge_id].destination]

    def get_edge_weight(self, source: Label, destination: Label) -> float:
        """
        Weight of the first source -> destination edge in insertion order.

        Returns INFINITE_WEIGHT both when a vertex is missing and when no
        such edge exists. Use lookup_edge_weight to tell these apart.
        """
        return self.lookup_edge_weight(source, destination).weight

    def lookup_edge_weight(self, source: Label, destination: Label) -> WeightLookup:
        vertex = self._vertices.get(source)
        if vertex is None:
            return WeightLookup(LookupStatus.MISSING_VERTEX)
        for edge_id in vertex.outgoing:
            edge = self._edges[edge_id]
            if edge.destination_label == destination:
                return WeightLookup(LookupStatus.FOUND, edge.weight)
        if destination not in self._vertices:
            return WeightLookup(LookupStatus.MISSING_VERTEX)
        return WeightLookup(LookupStatus.MISSING_EDGE)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, label: Label) -> bool:
        """Add a vertex; False if the label is already taken."""
        if label in self._vertices:
            logger.debug("add_vertex: %r already present", label)
            return False
        vertex = Vertex(next(self._vertex_ids), label)
        self._vertices[label] = vertex
        self._by_id[vertex.id] = vertex
        return True

    def remove_vertex(self, label: Label) -> bool:
        """
        Remove a vertex and every edge touching it.

        Edges from other vertices into it go first, then its own outgoing
        edges (self loops included), then the vertex itself.
        """
        vertex = self._vertices.get(label)
        if vertex is None:
            logger.debug("remove_vertex: %r not found", label)
            return False

        for edge_id in list(vertex.incoming):
            edge = self._edges[edge_id]
            if edge.origin != vertex.id:
                self._detach(edge)
        for edge_id in list(vertex.outgoing):
            self._detach(self._edges[edge_id])

        del self._vertices[label]
        del self._by_id[vertex.id]
        return True

    def add_edge(self, source: Label, destination: Label, weight: float) -> bool:
        """
        Add a directed edge; False if either endpoint is missing.

        Parallel edges are kept side by side.

        Raises:
            ValueError: If weight is NaN.
        """
        origin = self._vertices.get(source)
        target = self._vertices.get(destination)
        if origin is None or target is None:
            logger.debug("add_edge: missing endpoint in %r -> %r", source, destination)
            return False
        self._attach(origin, target, weight)
        return True

    def add_bidirectional_edge(
        self, source: Label, destination: Label, weight: float
    ) -> bool:
        """
        Add source -> destination and destination -> source with the same weight.

        The two edges are independent records linked through `reverse`.
        """
        origin = self._vertices.get(source)
        target = self._vertices.get(destination)
        if origin is None or target is None:
            logger.debug(
                "add_bidirectional_edge: missing endpoint in %r <-> %r",
                source,
                destination,
            )
            return False
        forward = self._attach(origin, target, weight)
        backward = self._attach(target, origin, weight)
        forward.reverse = backward.id
        backward.reverse = forward.id
        return True

    def remove_edge(self, source: Label, destination: Label) -> bool:
        """
        Remove every source -> destination edge.

        Returns:
            True if at least one edge was removed, False if the source is
            missing or no such edge exists.
        """
        vertex = self._vertices.get(source)
        if vertex is None:
            logger.debug("remove_edge: %r not found", source)
            return False
        doomed = [
            self._edges[edge_id]
            for edge_id in vertex.outgoing
            if self._edges[edge_id].destination_label == destination
        ]
        for edge in doomed:
            self._detach(edge)
        return bool(doomed)

    def _attach(
        self, origin: Vertex[Label], target: Vertex[Label], weight: float
    ) -> Edge[Label]:
        weight = float(weight)
        if math.isnan(weight):
            raise ValueError(
                f"Edge weight must be a number: {origin.label!r} -> {target.label!r}"
            )
        edge = Edge(
            id=next(self._edge_ids),
            origin=origin.id,
            destination=target.id,
            origin_label=origin.label,
            destination_label=target.label,
            weight=weight,
        )
        self._edges[edge.id] = edge
        origin.outgoing.append(edge.id)
        target.incoming.append(edge.id)
        return edge

    def _detach(self, edge: Edge[Label]) -> None:
        self._by_id[edge.origin].outgoing.remove(edge.id)
        self._by_id[edge.destination].incoming.remove(edge.id)
        del self._edges[edge.id]
        # The twin survives on its own, without a handle to a dead edge
        if edge.reverse is not None and edge.reverse in self._edges:
            self._edges[edge.reverse].reverse = None

    # =========================================================================
    # Algorithms
    # =========================================================================

    def dfs(self, source: Label | None = None) -> list[Label]:
        """
        Depth-first preorder.

        Without a source every vertex is visited, taking unvisited roots in
        insertion order. With a source only its reachable subgraph is
        visited, and an unknown source gives an empty list.
        """
        if source is None:
            return depth_first(self)
        return depth_first_from(self, source)

    def bfs(self, source: Label) -> list[Label]:
        return breadth_first(self, source)

    def is_dag(self) -> bool:
        return is_dag(self)

    def topological_sort(self) -> TopologicalOrder[Label]:
        return topological_sort(self)

    def topsort(self) -> list[Label]:
        """
        Kahn order of the vertices.

        A cyclic graph gives an empty list, the same as an empty graph.
        Use topological_sort for a result that tells them apart.
        """
        result = topological_sort(self)
        return list(result.order) if result.is_sorted else []

    def kruskal_mst(
        self,
        source: Label,
        ordering: CandidateOrder = CandidateOrder.WEIGHT_THEN_SOURCE,
    ) -> list[Edge[Label]]:
        """Spanning tree edges of source's component; empty if source is missing."""
        return kruskal_mst(self, source, ordering)


__all__ = ["Graph"]
