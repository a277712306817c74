"""
Disjoint set (union-find) over vertex labels.

- make_set(x): Register x as a singleton set - O(1)
- find_set(x): Representative of the set containing x - O(α(n)) amortized
- union_sets(x, y): Merge the sets containing x and y - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

Unlike a lazily initialised union-find, elements must be registered with
make_set before use. Touching an unregistered element raises
UnknownElementError rather than silently creating a new set.
"""

import logging
from typing import Generic

from graphcore.errors import UnknownElementError
from graphcore.types import Label

logger = logging.getLogger(__name__)


class DisjointSet(Generic[Label]):
    """
    Union-Find with path compression and union by rank.

    Example:
        >>> ds = DisjointSet[str]()
        >>> for label in "abcd":
        ...     ds.make_set(label)
        >>> ds.union_sets("a", "b")
        >>> ds.union_sets("b", "c")
        >>> ds.connected("a", "c")
        True
        >>> ds.connected("a", "d")
        False
    """

    def __init__(self) -> None:
        self._parent: dict[Label, Label] = {}
        self._rank: dict[Label, int] = {}

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def make_set(self, element: Label) -> None:
        """Register element as its own root with rank 0, overwriting any previous entry."""
        self._parent[element] = element
        self._rank[element] = 0

    def find_set(self, element: Label) -> Label:
        """
        Find the representative (root) of the set containing element.

        Uses path compression: every node visited on the way up is
        re-pointed directly at the root.

        Raises:
            UnknownElementError: If element was never registered.
        """
        if element not in self._parent:
            raise UnknownElementError(element, "disjoint set")

        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def union_sets(self, x: Label, y: Label) -> None:
        """
        Merge the sets containing x and y.

        The lower-rank root is attached under the higher-rank one. On a
        rank tie, y's root goes under x's root and x's root gains a rank.

        Raises:
            UnknownElementError: If either element was never registered.
        """
        root_x = self.find_set(x)
        root_y = self.find_set(y)

        if root_x == root_y:
            return

        if self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        elif self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        logger.debug("union %r with %r", root_x, root_y)

    def connected(self, x: Label, y: Label) -> bool:
        """Check if x and y are in the same set."""
        return self.find_set(x) == self.find_set(y)

    def rank(self, element: Label) -> int:
        """Rank of element's entry (meaningful for roots only)."""
        if element not in self._rank:
            raise UnknownElementError(element, "disjoint set")
        return self._rank[element]

    def groups(self) -> dict[Label, set[Label]]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members.
        """
        sets: dict[Label, set[Label]] = {}
        for element in list(self._parent):
            sets.setdefault(self.find_set(element), set()).add(element)
        return sets


__all__ = ["DisjointSet"]
