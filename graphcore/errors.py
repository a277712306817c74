"""
Exceptions raised by graphcore.

Missing labels in graph operations are reported through return values,
not exceptions. These are reserved for structural misuse.
"""


class GraphError(Exception):
    """Base class for graphcore errors."""


class UnknownElementError(GraphError, KeyError):
    """An element was used before being registered (union-find key, edge id)."""

    def __init__(self, element: object, where: str) -> None:
        self.element = element
        self.where = where
        super().__init__(f"{element!r} is not registered in {where}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
