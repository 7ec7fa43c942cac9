"""Graph contract, storage backends and helpers.

This package provides the abstract `Graph` contract, the adjacency-list and
adjacency-matrix backends, payload helpers (`structs`), the `Path` type and
NetworkX conversion (`convert`).
"""

from graphsuite.graph.adjacency_list import AdjacencyListGraph, ListGraph
from graphsuite.graph.adjacency_matrix import AdjacencyMatrixGraph, MatrixGraph
from graphsuite.graph.base import EdgeTuple, Graph
from graphsuite.graph.errors import (
    DisconnectedGraphError,
    DuplicateEdgeError,
    DuplicateVertexError,
    EdgeNotFoundError,
    GraphError,
    InvalidGraphKindError,
    InvalidInputError,
    InvalidWeightError,
    NegativeCycleError,
    NegativeWeightError,
    VertexNotFoundError,
)
from graphsuite.graph.path import Path
from graphsuite.graph.structs import Vertex, WeightedEdge

__all__ = [
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "ListGraph",
    "MatrixGraph",
    "EdgeTuple",
    "Graph",
    "Path",
    "Vertex",
    "WeightedEdge",
    "GraphError",
    "DuplicateVertexError",
    "VertexNotFoundError",
    "DuplicateEdgeError",
    "EdgeNotFoundError",
    "InvalidGraphKindError",
    "InvalidWeightError",
    "NegativeWeightError",
    "NegativeCycleError",
    "DisconnectedGraphError",
    "InvalidInputError",
]
