"""Adjacency-list graph backend.

Vertices live in an insertion-ordered mapping ``id -> payload`` and each vertex
owns an insertion-ordered mapping ``neighbor_id -> edge payload``. Neighbor and
edge enumeration therefore follow insertion order.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Tuple

from graphsuite.graph.base import EdgeTuple, Graph
from graphsuite.graph.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    VertexNotFoundError,
)
from graphsuite.graph.structs import IdAccessor, WeightAccessor
from graphsuite.types.base import Direction, VertexID


class AdjacencyListGraph(Graph):
    """Graph stored as per-vertex neighbor mappings.

    Memory grows with ``|V| + |E|``; vertex and edge insertion are O(1)
    amortized.
    """

    def __init__(
        self,
        direction: Direction = Direction.UNDIRECTED,
        *,
        id_of: Optional[IdAccessor] = None,
        weight_of: Optional[WeightAccessor] = None,
    ) -> None:
        super().__init__(direction, id_of=id_of, weight_of=weight_of)
        self._vertices: Dict[VertexID, Any] = {}
        self._adj: Dict[VertexID, Dict[VertexID, Any]] = {}
        # Logical edges in insertion order, keyed as inserted
        self._edges: Dict[Tuple[VertexID, VertexID], Any] = {}

    def insert_vertex(self, vertex: Any) -> VertexID:
        vertex_id = self.id_of(vertex)
        if vertex_id in self._vertices:
            raise DuplicateVertexError(vertex_id)
        self._vertices[vertex_id] = vertex
        self._adj[vertex_id] = {}
        return vertex_id

    def insert_edge(self, source: VertexID, target: VertexID, edge: Any = None) -> None:
        if source not in self._vertices:
            raise VertexNotFoundError(source)
        if target not in self._vertices:
            raise VertexNotFoundError(target)
        if target in self._adj[source]:
            raise DuplicateEdgeError(source, target)

        self._adj[source][target] = edge
        if not self.is_directed:
            self._adj[target][source] = edge
        self._edges[(source, target)] = edge

    def has_vertex(self, vertex_id: VertexID) -> bool:
        return vertex_id in self._vertices

    def get_vertex(self, vertex_id: VertexID) -> Any:
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise VertexNotFoundError(vertex_id) from None

    def has_edge(self, source: VertexID, target: VertexID) -> bool:
        neighbors = self._adj.get(source)
        return neighbors is not None and target in neighbors

    def _edge_payload(self, source: VertexID, target: VertexID) -> Any:
        return self._adj[source][target]

    def _iter_neighbors(self, vertex_id: VertexID) -> Iterator[Tuple[VertexID, Any]]:
        return iter(self._adj[vertex_id].items())

    def vertices(self) -> Iterator[VertexID]:
        return iter(self._vertices)

    def edges(self) -> Iterator[EdgeTuple]:
        return ((source, target, edge) for (source, target), edge in self._edges.items())

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)


ListGraph = AdjacencyListGraph
