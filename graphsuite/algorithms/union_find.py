"""Disjoint-set (union-find) structure used for cycle detection in Kruskal's MST.

``find`` and ``union`` run in O(α(n)) amortized time thanks to path
compression and union by rank.
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

Element = TypeVar("Element", bound=Hashable)


class DisjointSet(Generic[Element]):
    """Partition of elements into disjoint sets.

    Elements are registered up front or lazily on first use.

    Example:
        >>> ds = DisjointSet([1, 2, 3, 4])
        >>> ds.union(1, 2)
        True
        >>> ds.connected(1, 2), ds.connected(1, 3)
        (True, False)
    """

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._parent: Dict[Element, Element] = {}
        self._rank: Dict[Element, int] = {}
        self._set_count = 0
        for element in elements:
            self.add(element)

    def add(self, element: Element) -> None:
        """Register ``element`` as a singleton set (no-op if already known)."""
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0
            self._set_count += 1

    def find(self, element: Element) -> Element:
        """Return the representative of the set containing ``element``."""
        self.add(element)

        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        current = element
        while self._parent[current] != root:
            next_element = self._parent[current]
            self._parent[current] = root
            current = next_element

        return root

    def union(self, x: Element, y: Element) -> bool:
        """Merge the sets containing ``x`` and ``y``.

        Returns:
            True if two different sets were merged, False if they were already one.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        # Attach the shallower tree under the deeper one
        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        self._set_count -= 1
        return True

    def connected(self, x: Element, y: Element) -> bool:
        """Check whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def groups(self) -> List[List[Element]]:
        """Return all sets, each listing members in registration order."""
        groups: Dict[Element, List[Element]] = {}
        for element in list(self._parent):
            groups.setdefault(self.find(element), []).append(element)
        return list(groups.values())

    @property
    def set_count(self) -> int:
        return self._set_count

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: object) -> bool:
        return element in self._parent
