"""Base enums and aliases shared by graph backends and algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Hashable, Union

#: Identifier of a vertex; unique within a graph and used as its storage key.
VertexID = Hashable

#: Numeric edge weight (anything totally ordered and summable).
Weight = Union[int, float]


class Direction(IntEnum):
    """Directionality of a graph, fixed when the graph is constructed."""

    DIRECTED = 1
    UNDIRECTED = 2

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Parse a string into a Direction value.

        Args:
            value: Case-insensitive name (e.g., "directed", "UNDIRECTED").

        Returns:
            The corresponding Direction member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid direction '{value}'. Valid values are: {valid}"
            ) from None


class TraversalType(IntEnum):
    """Graph traversal order."""

    #: Breadth-first (queue based, level order).
    BFS = 1
    #: Depth-first (stack based, preorder).
    DFS = 2

    def __str__(self) -> str:
        return self.name
