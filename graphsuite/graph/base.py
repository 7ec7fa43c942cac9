"""Abstract graph contract shared by every storage backend.

`Graph` fixes the externally observable behaviour that algorithms rely on:
insertion semantics and failures, neighbor and edge enumeration, and O(1)
vertex/edge counts. Concrete backends (`AdjacencyListGraph`,
`AdjacencyMatrixGraph`) only decide how vertices and edges are stored.

The direction of a graph is chosen at construction and cannot change
afterwards. Undirected graphs store each logical edge once; it is visible from
both endpoints through `neighbors()` and is yielded exactly once by `edges()`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import (
    Any,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from graphsuite.graph.errors import EdgeNotFoundError, VertexNotFoundError
from graphsuite.graph.structs import (
    IdAccessor,
    WeightAccessor,
    edge_weight_of,
    validate_weight,
    vertex_id_of,
)
from graphsuite.types.base import Direction, VertexID

EdgeTuple = Tuple[VertexID, VertexID, Any]

G = TypeVar("G", bound="Graph")


class Graph(ABC):
    """Backend-independent graph contract.

    Attributes:
        id_of: Derives the vertex identifier from a vertex payload.
        weight_of: Derives the raw weight from an edge payload.
    """

    def __init__(
        self,
        direction: Direction = Direction.UNDIRECTED,
        *,
        id_of: Optional[IdAccessor] = None,
        weight_of: Optional[WeightAccessor] = None,
    ) -> None:
        """Create an empty graph.

        Args:
            direction: Directed or undirected; fixed for the graph's lifetime.
            id_of: Identifier accessor for vertex payloads. Defaults to
                ``vertex_id_of`` (``.id`` attribute or the value itself).
            weight_of: Weight accessor for edge payloads. Defaults to
                ``edge_weight_of`` (``.weight`` attribute or the value itself).
        """
        self._direction = Direction(direction)
        self.id_of: IdAccessor = id_of or vertex_id_of
        self.weight_of: WeightAccessor = weight_of or edge_weight_of

    @classmethod
    def from_vertices_and_edges(
        cls: Type[G],
        vertices: Iterable[Any],
        edges: Iterable[EdgeTuple],
        direction: Direction = Direction.UNDIRECTED,
        **kwargs: Any,
    ) -> G:
        """Build a graph from vertex payloads and ``(source, target, edge)`` tuples.

        Raises:
            DuplicateVertexError: On repeated vertex identifiers.
            VertexNotFoundError: If an edge references an unknown vertex.
            DuplicateEdgeError: On repeated edges.
        """
        graph = cls(direction, **kwargs)
        for vertex in vertices:
            graph.insert_vertex(vertex)
        for source, target, edge in edges:
            graph.insert_edge(source, target, edge)
        return graph

    def empty_like(self, backend: Optional[Type["Graph"]] = None) -> "Graph":
        """Return a new empty graph with the same direction and accessors.

        Args:
            backend: Backend class for the new graph; defaults to this graph's class.
        """
        backend = backend or type(self)
        return backend(self._direction, id_of=self.id_of, weight_of=self.weight_of)

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def is_directed(self) -> bool:
        return self._direction == Direction.DIRECTED

    #
    # Storage operations implemented by each backend
    #
    @abstractmethod
    def insert_vertex(self, vertex: Any) -> VertexID:
        """Add a vertex payload and return its identifier.

        Raises:
            DuplicateVertexError: If the identifier is already present. The
                graph is left unchanged.
        """

    @abstractmethod
    def insert_edge(self, source: VertexID, target: VertexID, edge: Any = None) -> None:
        """Add an edge carrying ``edge`` as payload.

        For undirected graphs the edge is reachable from both endpoints.

        Raises:
            VertexNotFoundError: If either endpoint is missing.
            DuplicateEdgeError: If the pair is already joined (in either
                orientation for undirected graphs). The graph is left unchanged.
        """

    @abstractmethod
    def has_vertex(self, vertex_id: VertexID) -> bool: ...

    @abstractmethod
    def get_vertex(self, vertex_id: VertexID) -> Any:
        """Return the payload stored for ``vertex_id``.

        Raises:
            VertexNotFoundError: If the vertex is missing.
        """

    @abstractmethod
    def has_edge(self, source: VertexID, target: VertexID) -> bool: ...

    @abstractmethod
    def _edge_payload(self, source: VertexID, target: VertexID) -> Any:
        """Return the payload of an existing edge; endpoints are already validated."""

    @abstractmethod
    def _iter_neighbors(self, vertex_id: VertexID) -> Iterator[Tuple[VertexID, Any]]:
        """Iterate ``(neighbor_id, edge)`` for a known vertex."""

    @abstractmethod
    def vertices(self) -> Iterator[VertexID]:
        """Iterate vertex identifiers in backend order."""

    @abstractmethod
    def edges(self) -> Iterator[EdgeTuple]:
        """Iterate ``(source, target, edge)``; undirected edges appear once."""

    @property
    @abstractmethod
    def vertex_count(self) -> int: ...

    @property
    @abstractmethod
    def edge_count(self) -> int: ...

    #
    # Shared behaviour
    #
    def neighbors(self, vertex_id: VertexID) -> Iterator[Tuple[VertexID, Any]]:
        """Return a fresh iterator of ``(neighbor_id, edge)`` for outgoing edges.

        Raises:
            VertexNotFoundError: If the vertex is missing (raised immediately).
        """
        self._require_vertex(vertex_id)
        return self._iter_neighbors(vertex_id)

    def adjacent(self, vertex_id: VertexID) -> Iterator[VertexID]:
        """Return a fresh iterator of adjacent vertex identifiers."""
        return (neighbor for neighbor, _ in self.neighbors(vertex_id))

    def get_edge(self, source: VertexID, target: VertexID, default: Any = None) -> Any:
        """Return the payload of the edge ``source -> target`` or ``default``.

        Raises:
            VertexNotFoundError: If either endpoint is missing.
        """
        self._require_vertex(source)
        self._require_vertex(target)
        if not self.has_edge(source, target):
            return default
        return self._edge_payload(source, target)

    def edge_weight(self, edge: Any) -> Any:
        """Return the validated weight of an edge payload."""
        return validate_weight(self.weight_of(edge))

    def weight(self, source: VertexID, target: VertexID) -> Any:
        """Return the validated weight of the edge ``source -> target``.

        Raises:
            VertexNotFoundError: If either endpoint is missing.
            EdgeNotFoundError: If the endpoints are not joined.
            InvalidWeightError: If the payload has no usable weight.
        """
        self._require_vertex(source)
        self._require_vertex(target)
        if not self.has_edge(source, target):
            raise EdgeNotFoundError(source, target)
        return self.edge_weight(self._edge_payload(source, target))

    def total_weight(self) -> Any:
        """Sum of all edge weights (each undirected edge counted once)."""
        total: Any = 0
        for _, _, edge in self.edges():
            total = total + self.edge_weight(edge)
        return total

    def vertex_payloads(self) -> Iterator[Any]:
        """Iterate vertex payloads in backend order."""
        return (self.get_vertex(vertex_id) for vertex_id in self.vertices())

    def first_vertex(self) -> Optional[VertexID]:
        """Return the first vertex in backend order, or None for an empty graph."""
        return next(iter(self.vertices()), None)

    def _require_vertex(self, vertex_id: VertexID) -> None:
        if not self.has_vertex(vertex_id):
            raise VertexNotFoundError(vertex_id)

    def __contains__(self, vertex_id: object) -> bool:
        try:
            return self.has_vertex(vertex_id)
        except TypeError:
            # Unhashable values cannot be vertex identifiers
            return False

    def __len__(self) -> int:
        return self.vertex_count

    def __iter__(self) -> Iterator[VertexID]:
        return self.vertices()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(direction={self._direction.name}, "
            f"vertices={self.vertex_count}, edges={self.edge_count})"
        )

