"""
Minimum spanning tree restricted to the component of a source vertex.

Kruskal's algorithm runs over every directed edge of the graph (both halves
of a bidirectional pair are separate candidates), producing a spanning
forest of the whole graph. The forest is then filtered down to the edges
lying in the source's final set.

Candidates are ranked by CandidateOrder. The default sorts by weight and
lets edges leaving the source win ties; SOURCE_THEN_WEIGHT puts every edge
leaving the source ahead of all others regardless of weight. Equal keys
keep graph order (vertex insertion, then outgoing-edge insertion).
"""

import dataclasses
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from typing_extensions import TypeAliasType

from graphcore.entities import Edge
from graphcore.types import CandidateOrder, Label
from graphcore.union_find import DisjointSet

if TYPE_CHECKING:
    from graphcore.graph import Graph

logger = logging.getLogger(__name__)

RankKey = TypeAliasType("RankKey", tuple[bool, float] | tuple[float, bool])


def _rank_key(
    source: Label, ordering: CandidateOrder
) -> Callable[[Edge[Label]], RankKey]:
    if ordering is CandidateOrder.SOURCE_THEN_WEIGHT:
        return lambda edge: (edge.origin_label != source, edge.weight)
    return lambda edge: (edge.weight, edge.origin_label != source)


def kruskal_mst(
    graph: "Graph[Label]",
    source: Label,
    ordering: CandidateOrder = CandidateOrder.WEIGHT_THEN_SOURCE,
) -> list[Edge[Label]]:
    """
    Spanning tree edges of the component containing source.

    Args:
        graph: Graph to read; it is not modified.
        source: Label whose component is kept.
        ordering: Ranking of candidate edges.

    Returns:
        Copies of the accepted edges, in acceptance order, with an endpoint
        sharing source's representative. Empty if source is not in the graph.
    """
    labels = [vertex.label for vertex in graph.vertex_set()]
    candidates = sorted(graph.edges(), key=_rank_key(source, ordering))

    components = DisjointSet[Label]()
    for label in labels:
        components.make_set(label)

    forest: list[Edge[Label]] = []
    for edge in candidates:
        origin, destination = edge.endpoints
        if components.find_set(origin) != components.find_set(destination):
            forest.append(edge)
            components.union_sets(origin, destination)

    if source not in graph:
        logger.debug("kruskal: source %r not found", source)
        return []

    root = components.find_set(source)
    tree = [
        dataclasses.replace(edge)
        for edge in forest
        if components.find_set(edge.origin_label) == root
        or components.find_set(edge.destination_label) == root
    ]
    logger.debug(
        "kruskal: %d forest edges, %d in component of %r",
        len(forest),
        len(tree),
        source,
    )
    return tree


__all__ = ["kruskal_mst"]
