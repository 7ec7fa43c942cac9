"""Adjacency-matrix graph backend.

Vertex identifiers are mapped to dense integer indices in insertion order. Edge
presence and payloads live in two square numpy tables (``bool`` and ``object``)
indexed by those integers. The tables grow geometrically, so vertex insertion
is O(1) amortized with an occasional O(n^2) copy; edge lookup is O(1) and
neighbor enumeration is O(n) in index order.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

import numpy as np

from graphsuite.config import GRAPH_CONFIG
from graphsuite.graph.base import EdgeTuple, Graph
from graphsuite.graph.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    VertexNotFoundError,
)
from graphsuite.graph.structs import IdAccessor, WeightAccessor
from graphsuite.logging import get_logger
from graphsuite.types.base import Direction, VertexID

logger = get_logger(__name__)


class AdjacencyMatrixGraph(Graph):
    """Graph stored as a dense ``n x n`` table.

    Undirected edges occupy both symmetric cells and are enumerated once, from
    the upper triangle (row index <= column index).
    """

    def __init__(
        self,
        direction: Direction = Direction.UNDIRECTED,
        *,
        id_of: Optional[IdAccessor] = None,
        weight_of: Optional[WeightAccessor] = None,
        capacity: Optional[int] = None,
    ) -> None:
        super().__init__(direction, id_of=id_of, weight_of=weight_of)
        self._index: Dict[VertexID, int] = {}
        self._ids: List[VertexID] = []
        self._payloads: List[Any] = []
        self._edge_count = 0

        size = capacity if capacity is not None else GRAPH_CONFIG.matrix_initial_capacity
        self._present = np.zeros((size, size), dtype=bool)
        self._cells = np.empty((size, size), dtype=object)

    @property
    def capacity(self) -> int:
        """Current side length of the storage tables."""
        return self._present.shape[0]

    def _grow(self, required: int) -> None:
        size = GRAPH_CONFIG.grown_capacity(self.capacity, required)
        n = len(self._ids)
        present = np.zeros((size, size), dtype=bool)
        cells = np.empty((size, size), dtype=object)
        present[:n, :n] = self._present[:n, :n]
        cells[:n, :n] = self._cells[:n, :n]
        self._present = present
        self._cells = cells
        logger.debug("Adjacency matrix resized to %dx%d", size, size)

    def insert_vertex(self, vertex: Any) -> VertexID:
        vertex_id = self.id_of(vertex)
        if vertex_id in self._index:
            raise DuplicateVertexError(vertex_id)
        n = len(self._ids)
        if n >= self.capacity:
            self._grow(n + 1)
        self._index[vertex_id] = n
        self._ids.append(vertex_id)
        self._payloads.append(vertex)
        return vertex_id

    def insert_edge(self, source: VertexID, target: VertexID, edge: Any = None) -> None:
        i = self._index.get(source)
        if i is None:
            raise VertexNotFoundError(source)
        j = self._index.get(target)
        if j is None:
            raise VertexNotFoundError(target)
        if self._present[i, j]:
            raise DuplicateEdgeError(source, target)

        self._present[i, j] = True
        self._cells[i, j] = edge
        if not self.is_directed:
            self._present[j, i] = True
            self._cells[j, i] = edge
        self._edge_count += 1

    def index_of(self, vertex_id: VertexID) -> int:
        """Return the dense index assigned to ``vertex_id``."""
        try:
            return self._index[vertex_id]
        except KeyError:
            raise VertexNotFoundError(vertex_id) from None

    def has_vertex(self, vertex_id: VertexID) -> bool:
        return vertex_id in self._index

    def get_vertex(self, vertex_id: VertexID) -> Any:
        return self._payloads[self.index_of(vertex_id)]

    def has_edge(self, source: VertexID, target: VertexID) -> bool:
        i = self._index.get(source)
        j = self._index.get(target)
        if i is None or j is None:
            return False
        return bool(self._present[i, j])

    def _edge_payload(self, source: VertexID, target: VertexID) -> Any:
        return self._cells[self._index[source], self._index[target]]

    def _iter_neighbors(self, vertex_id: VertexID) -> Iterator[Tuple[VertexID, Any]]:
        i = self._index[vertex_id]
        n = len(self._ids)
        columns = np.flatnonzero(self._present[i, :n]).tolist()
        return ((self._ids[j], self._cells[i, j]) for j in columns)

    def vertices(self) -> Iterator[VertexID]:
        return iter(self._ids)

    def edges(self) -> Iterator[EdgeTuple]:
        n = len(self._ids)
        for i in range(n):
            for j in np.flatnonzero(self._present[i, :n]).tolist():
                if not self.is_directed and j < i:
                    continue
                yield self._ids[i], self._ids[j], self._cells[i, j]

    @property
    def vertex_count(self) -> int:
        return len(self._ids)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def to_numpy(self, missing: float = np.inf) -> np.ndarray:
        """Return the ``n x n`` weight matrix in index order.

        Absent edges are filled with ``missing``. Every present edge must carry
        a valid weight.
        """
        n = len(self._ids)
        weights = np.full((n, n), missing, dtype=float)
        rows, cols = np.nonzero(self._present[:n, :n])
        for i, j in zip(rows.tolist(), cols.tolist()):
            weights[i, j] = self.edge_weight(self._cells[i, j])
        return weights


MatrixGraph = AdjacencyMatrixGraph
