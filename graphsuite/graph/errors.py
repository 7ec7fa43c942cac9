"""Exception hierarchy for graph construction and algorithm failures.

Every failure raised by graphsuite derives from ``GraphError``. Concrete kinds
also derive from the built-in exception a caller would naturally catch
(``ValueError`` for invalid data, ``KeyError`` for missing vertices).
"""

from __future__ import annotations

from typing import Any, List, Optional


class GraphError(Exception):
    """Base class for all graphsuite errors."""


class DuplicateVertexError(GraphError, ValueError):
    """A vertex with the same identifier already exists."""

    def __init__(self, vertex_id: Any) -> None:
        super().__init__(f"Vertex with id '{vertex_id}' already exists.")
        self.vertex_id = vertex_id


class VertexNotFoundError(GraphError, KeyError):
    """A referenced vertex identifier is not present in the graph."""

    def __init__(self, vertex_id: Any) -> None:
        super().__init__(f"Vertex with id '{vertex_id}' does not exist.")
        self.vertex_id = vertex_id

    def __str__(self) -> str:
        # KeyError would otherwise render the repr of the message
        return str(self.args[0])


class DuplicateEdgeError(GraphError, ValueError):
    """An edge between the same endpoints already exists."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"Edge between '{source}' and '{target}' already exists.")
        self.source = source
        self.target = target


class InvalidGraphKindError(GraphError, ValueError):
    """The graph has the wrong shape (direction, completeness) for an algorithm."""


class InvalidWeightError(GraphError, ValueError):
    """An edge weight is missing, NaN, or cannot be ordered."""

    def __init__(self, weight: Any, reason: str = "is not a comparable number") -> None:
        super().__init__(f"Edge weight {weight!r} {reason}.")
        self.weight = weight


class NegativeWeightError(GraphError, ValueError):
    """A negative edge weight was found where only non-negative ones are allowed."""

    def __init__(self, source: Any, target: Any, weight: Any) -> None:
        super().__init__(
            f"Edge '{source}' -> '{target}' has negative weight {weight!r}."
        )
        self.source = source
        self.target = target
        self.weight = weight


class NegativeCycleError(GraphError, ValueError):
    """A cycle with negative total weight is reachable from the source."""

    def __init__(self, cycle: List[Any]) -> None:
        path = " -> ".join(str(v) for v in cycle)
        super().__init__(f"Negative cycle detected: {path}")
        self.cycle = cycle


class DisconnectedGraphError(GraphError, ValueError):
    """The algorithm needs a connected graph."""


class InvalidInputError(GraphError, ValueError):
    """Text input could not be parsed into a graph."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class EdgeNotFoundError(GraphError, KeyError):
    """No edge joins the requested endpoints."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"No edge between '{source}' and '{target}'.")
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return str(self.args[0])
