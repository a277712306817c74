"""
DAG (Directed Acyclic Graph) checks on a Graph.

Functions:
    is_dag(graph)            - three-colour DFS, stops at the first back edge
    topological_sort(graph)  - Kahn's algorithm, tagged with SORTED / CYCLIC
"""

import logging
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING

from graphcore.entities import Vertex
from graphcore.types import Label, SortStatus, TopologicalOrder, VertexId

if TYPE_CHECKING:
    from graphcore.graph import Graph

logger = logging.getLogger(__name__)


class _Mark(Enum):
    UNVISITED = 0
    PROCESSING = 1  # on the current DFS path
    DONE = 2


def _probe(
    graph: "Graph[Label]", root: Vertex[Label], marks: dict[VertexId, _Mark]
) -> bool:
    """False as soon as an edge into a PROCESSING vertex is found."""
    marks[root.id] = _Mark.PROCESSING
    stack = [(root, graph.successors(root))]
    while stack:
        vertex, successors = stack[-1]
        for successor in successors:
            mark = marks.get(successor.id, _Mark.UNVISITED)
            if mark is _Mark.PROCESSING:
                logger.debug("back edge %r -> %r", vertex.label, successor.label)
                return False
            if mark is _Mark.UNVISITED:
                marks[successor.id] = _Mark.PROCESSING
                stack.append((successor, graph.successors(successor)))
                break
        else:
            marks[vertex.id] = _Mark.DONE
            stack.pop()
    return True


def is_dag(graph: "Graph[Label]") -> bool:
    """
    Returns True iff the graph, read as directed, has no cycle.

    A self loop and a bidirectional edge pair both count as cycles.
    """
    marks: dict[VertexId, _Mark] = {}
    for vertex in graph.vertex_set():
        if vertex.id not in marks and not _probe(graph, vertex, marks):
            return False
    return True


def topological_sort(graph: "Graph[Label]") -> TopologicalOrder[Label]:
    """
    Orders vertices so every edge goes from an earlier to a later vertex.

    Kahn's algorithm, seeded with the zero-indegree vertices in insertion
    order. Each parallel edge counts toward indegree separately.

    Returns:
        SORTED with the full order, or CYCLIC with the prefix that could be
        emitted before every remaining vertex was blocked by a cycle.
    """
    vertices = graph.vertex_set()
    in_degree: dict[VertexId, int] = {vertex.id: 0 for vertex in vertices}
    for vertex in vertices:
        for successor in graph.successors(vertex):
            in_degree[successor.id] += 1

    queue = deque(vertex for vertex in vertices if in_degree[vertex.id] == 0)
    order: list[Label] = []

    while queue:
        vertex = queue.popleft()
        order.append(vertex.label)
        for successor in graph.successors(vertex):
            in_degree[successor.id] -= 1
            if in_degree[successor.id] == 0:
                queue.append(successor)

    if len(order) != len(vertices):
        logger.debug(
            "topological sort blocked after %d of %d vertices",
            len(order),
            len(vertices),
        )
        return TopologicalOrder(SortStatus.CYCLIC, tuple(order))

    return TopologicalOrder(SortStatus.SORTED, tuple(order))


__all__ = ["is_dag", "topological_sort"]
