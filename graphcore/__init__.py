"""
In-memory weighted graph container and algorithms.

Modules:
    graph       - Graph container: vertex/edge mutation and lookup
    entities    - Vertex and Edge records
    traversal   - Depth-first and breadth-first traversal
    dag         - Acyclicity check and topological sort
    spanning    - Kruskal spanning tree of a source's component
    union_find  - Disjoint set with path compression and union by rank
    types       - Handles, constants and tagged outcomes
    errors      - Exceptions for structural misuse
    display     - Rich rendering of results

Example Usage:
    >>> from graphcore import Graph
    >>> g = Graph[str]("ABC")
    >>> g.add_bidirectional_edge("A", "B", 1)
    True
    >>> g.add_bidirectional_edge("B", "C", 2)
    True
    >>> [str(edge) for edge in g.kruskal_mst("A")]
    ['A -> B (1)', 'B -> C (2)']
"""

from graphcore.entities import Edge, Vertex
from graphcore.errors import GraphError, UnknownElementError
from graphcore.graph import Graph
from graphcore.types import (
    INFINITE_WEIGHT,
    CandidateOrder,
    EdgeId,
    LookupStatus,
    SortStatus,
    TopologicalOrder,
    VertexId,
    WeightLookup,
)
from graphcore.union_find import DisjointSet

__all__ = [
    # Container
    "Graph",
    "Vertex",
    "Edge",
    # Union-find
    "DisjointSet",
    # Types
    "VertexId",
    "EdgeId",
    "INFINITE_WEIGHT",
    "CandidateOrder",
    "SortStatus",
    "TopologicalOrder",
    "LookupStatus",
    "WeightLookup",
    # Errors
    "GraphError",
    "UnknownElementError",
]
