"""
Vertex and edge records stored in the graph arena.

Both records refer to each other through integer handles (VertexId, EdgeId)
rather than object references, so removing an element from the arena never
leaves a dangling pointer behind: a stale handle simply fails to resolve.
"""

from dataclasses import dataclass, field
from typing import Generic

from graphcore.types import EdgeId, Label, VertexId


@dataclass(slots=True)
class Edge(Generic[Label]):
    """
    Weighted connection from an origin vertex to a destination vertex.

    The edge is owned by its origin vertex (it sits in the origin's
    outgoing list) and back-referenced by its destination (incoming list).

    Attributes:
        id: Handle of this edge in the arena.
        origin: Handle of the source vertex.
        destination: Handle of the target vertex.
        origin_label: Label of the source vertex.
        destination_label: Label of the target vertex.
        weight: Distance, or capacity for flow extensions.
        selected: Extension flag, not used by the algorithms.
        flow: Extension value, not used by the algorithms.
        reverse: Twin edge handle for edges created as a bidirectional pair.
    """

    id: EdgeId
    origin: VertexId
    destination: VertexId
    origin_label: Label
    destination_label: Label
    weight: float
    selected: bool = False
    flow: float = 0.0
    reverse: EdgeId | None = None

    @property
    def endpoints(self) -> tuple[Label, Label]:
        return self.origin_label, self.destination_label

    def __str__(self) -> str:
        return f"{self.origin_label} -> {self.destination_label} ({self.weight:g})"


@dataclass(slots=True)
class Vertex(Generic[Label]):
    """
    Graph node identified by a unique label.

    Attributes:
        id: Handle of this vertex in the arena.
        label: Caller supplied identity key.
        outgoing: Edges this vertex owns, in insertion order.
        incoming: Edges ending here, in insertion order.
        distance: Extension value for shortest path work.
        path: Extension handle for shortest path work.
    """

    id: VertexId
    label: Label
    outgoing: list[EdgeId] = field(default_factory=list)
    incoming: list[EdgeId] = field(default_factory=list)
    distance: float = 0.0
    path: EdgeId | None = None

    @property
    def out_degree(self) -> int:
        return len(self.outgoing)

    @property
    def in_degree(self) -> int:
        return len(self.incoming)

    def __str__(self) -> str:
        return str(self.label)


__all__ = ["Edge", "Vertex"]
