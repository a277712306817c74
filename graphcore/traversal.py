"""
Graph traversals.

    depth_first(graph)               - DFS preorder over every component
    depth_first_from(graph, source)  - DFS preorder over source's reachable set
    breadth_first(graph, source)     - BFS level order over source's reachable set

Neighbours are explored in outgoing-edge insertion order. Visited state is
a per-call set of vertex ids, so traversals never leave marks on the graph.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING

from graphcore.entities import Vertex
from graphcore.types import Label, VertexId

if TYPE_CHECKING:
    from graphcore.graph import Graph

logger = logging.getLogger(__name__)


def _visit(
    graph: "Graph[Label]",
    root: Vertex[Label],
    visited: set[VertexId],
    order: list[Label],
) -> None:
    """
    Preorder walk from root using a stack of successor iterators.

    Resuming the parent's iterator after a child is exhausted gives the same
    order as the recursive formulation, without the recursion limit.
    """
    visited.add(root.id)
    order.append(root.label)
    stack = [graph.successors(root)]
    while stack:
        for successor in stack[-1]:
            if successor.id not in visited:
                visited.add(successor.id)
                order.append(successor.label)
                stack.append(graph.successors(successor))
                break
        else:
            stack.pop()


def depth_first(graph: "Graph[Label]") -> list[Label]:
    """Visits every vertex once, starting new trees in insertion order."""
    visited: set[VertexId] = set()
    order: list[Label] = []
    for vertex in graph.vertex_set():
        if vertex.id not in visited:
            _visit(graph, vertex, visited, order)
    logger.debug("dfs visited %d of %d vertices", len(order), len(graph))
    return order


def depth_first_from(graph: "Graph[Label]", source: Label) -> list[Label]:
    """Visits what source can reach; empty if source is not in the graph."""
    root = graph.find_vertex(source)
    if root is None:
        logger.debug("dfs: source %r not found", source)
        return []
    order: list[Label] = []
    _visit(graph, root, set(), order)
    return order


def breadth_first(graph: "Graph[Label]", source: Label) -> list[Label]:
    """
    Level order from source.

    Vertices are marked when enqueued, so each reachable vertex is emitted
    exactly once. Empty if source is not in the graph.
    """
    root = graph.find_vertex(source)
    if root is None:
        logger.debug("bfs: source %r not found", source)
        return []

    visited: set[VertexId] = {root.id}
    queue = deque([root])
    order: list[Label] = []
    while queue:
        current = queue.popleft()
        order.append(current.label)
        for successor in graph.successors(current):
            if successor.id not in visited:
                visited.add(successor.id)
                queue.append(successor)
    return order


__all__ = ["depth_first", "depth_first_from", "breadth_first"]
