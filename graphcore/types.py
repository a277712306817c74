"""
Type definitions shared by the graph container and its algorithms.

Handles:
    VertexId, EdgeId - stable integer handles into the graph arena

Constants:
    INFINITE_WEIGHT - returned when an edge weight cannot be found

Options:
    CandidateOrder - ranking of Kruskal candidate edges

Outcomes:
    SortStatus / TopologicalOrder   - tagged result of a topological sort
    LookupStatus / WeightLookup     - tagged result of an edge weight query
"""

import math
from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from typing_extensions import TypeAliasType

# Labels only need equality and hashing (they key the arena and union-find)
Label = TypeVar("Label", bound=Hashable)

VertexId = TypeAliasType("VertexId", int)
EdgeId = TypeAliasType("EdgeId", int)

INFINITE_WEIGHT: float = math.inf


class SortStatus(Enum):
    """Outcome of a topological sort."""

    SORTED = "sorted"
    CYCLIC = "cyclic"


class CandidateOrder(Enum):
    """
    How Kruskal ranks candidate edges relative to the source vertex.

    WEIGHT_THEN_SOURCE: ascending weight, edges leaving the source first
        among equal weights. Yields a minimum spanning tree.
    SOURCE_THEN_WEIGHT: every edge leaving the source first, then ascending
        weight within each group. Biased toward source-adjacent edges and
        not minimal in general.
    """

    WEIGHT_THEN_SOURCE = "weight_then_source"
    SOURCE_THEN_WEIGHT = "source_then_weight"


class LookupStatus(Enum):
    """Outcome of an edge weight lookup."""

    FOUND = "found"
    MISSING_VERTEX = "missing_vertex"
    MISSING_EDGE = "missing_edge"


@dataclass(frozen=True, slots=True)
class TopologicalOrder(Generic[Label]):
    """
    Result of Kahn's algorithm.

    Attributes:
        status: SORTED when every vertex was emitted, CYCLIC otherwise.
        order: Labels in emission order. For a cyclic graph this is the
               prefix emitted before the queue ran dry.
    """

    status: SortStatus
    order: tuple[Label, ...]

    @property
    def is_sorted(self) -> bool:
        return self.status is SortStatus.SORTED


@dataclass(frozen=True, slots=True)
class WeightLookup:
    """Weight of the first matching edge, with the reason when there is none."""

    status: LookupStatus
    weight: float = INFINITE_WEIGHT

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


__all__ = [
    "Label",
    "VertexId",
    "EdgeId",
    "INFINITE_WEIGHT",
    "SortStatus",
    "CandidateOrder",
    "LookupStatus",
    "TopologicalOrder",
    "WeightLookup",
]
