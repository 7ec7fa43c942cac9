import math
from typing import Iterable, Optional, Sequence, Tuple, Type

import pytest

from graphsuite.graph.adjacency_list import AdjacencyListGraph
from graphsuite.graph.adjacency_matrix import AdjacencyMatrixGraph
from graphsuite.graph.base import Graph
from graphsuite.graph.structs import Vertex, WeightedEdge
from graphsuite.types.base import Direction

BACKENDS = [AdjacencyListGraph, AdjacencyMatrixGraph]


def build_graph(
    backend: Type[Graph],
    edges: Iterable[Tuple],
    direction: Direction = Direction.UNDIRECTED,
    vertices: Optional[Sequence] = None,
) -> Graph:
    """Build a graph of `Vertex` payloads from ``(u, v[, weight])`` tuples.

    Without an explicit vertex list, vertices are inserted in order of first
    appearance in ``edges``.
    """
    edges = list(edges)
    if vertices is None:
        vertices = []
        for edge in edges:
            for vertex_id in edge[:2]:
                if vertex_id not in vertices:
                    vertices.append(vertex_id)
    g = backend(direction)
    for vertex_id in vertices:
        g.insert_vertex(Vertex(vertex_id))
    for edge in edges:
        payload = WeightedEdge(edge[2]) if len(edge) > 2 else None
        g.insert_edge(edge[0], edge[1], payload)
    return g


@pytest.fixture(params=BACKENDS, ids=["list", "matrix"])
def backend(request):
    return request.param


@pytest.fixture
def diamond(backend):
    # Undirected:
    #        [1.0]
    #    1 ───────── 2
    #    │         / │
    # [4.0]  [2.0]   [3.0]
    #    │   /       │
    #    3 ───────── 4
    #        [1.0]
    return build_graph(
        backend,
        [(1, 2, 1.0), (1, 3, 4.0), (2, 3, 2.0), (2, 4, 3.0), (3, 4, 1.0)],
    )


@pytest.fixture
def negative_triangle(backend):
    # Directed cycle 0 -> 1 -> 2 -> 0 with total weight -1
    return build_graph(
        backend,
        [(0, 1, 1), (1, 2, -3), (2, 0, 1)],
        Direction.DIRECTED,
    )


@pytest.fixture
def clrs_directed(backend):
    # Directed graph from the classic Dijkstra walk-through; distances from "s":
    # s=0, t=8, x=9, y=5, z=7
    return build_graph(
        backend,
        [
            ("s", "t", 10),
            ("s", "y", 5),
            ("t", "x", 1),
            ("t", "y", 2),
            ("y", "t", 3),
            ("y", "x", 9),
            ("y", "z", 2),
            ("x", "z", 4),
            ("z", "x", 6),
            ("z", "s", 7),
        ],
        Direction.DIRECTED,
    )


@pytest.fixture
def two_components(backend):
    # 0 ─ 1 ─ 2    3 ─ 4    5 (isolated)
    return build_graph(
        backend,
        [(0, 1, 1), (1, 2, 2), (3, 4, 1)],
        vertices=[0, 1, 2, 3, 4, 5],
    )


@pytest.fixture
def euclidean_five(backend):
    # Complete undirected graph over points in the plane (metric weights)
    points = [(0, 0), (0, 3), (4, 0), (4, 3), (2, 5)]
    edges = [
        (i, j, math.dist(points[i], points[j]))
        for i in range(len(points))
        for j in range(i + 1, len(points))
    ]
    return build_graph(backend, edges, vertices=list(range(len(points))))


@pytest.fixture
def asymmetric_four(backend):
    # Complete directed graph; the cheapest tour is 0 -> 1 -> 2 -> 3 -> 0 (cost 4)
    weights = {
        (0, 1): 1, (1, 2): 1, (2, 3): 1, (3, 0): 1,
        (1, 0): 5, (2, 1): 5, (3, 2): 5, (0, 3): 5,
        (0, 2): 3, (2, 0): 3, (1, 3): 3, (3, 1): 3,
    }
    return build_graph(
        backend,
        [(u, v, w) for (u, v), w in weights.items()],
        Direction.DIRECTED,
        vertices=[0, 1, 2, 3],
    )


@pytest.fixture
def clrs_flow(backend):
    # Directed flow network with maximum s -> t flow 23
    return build_graph(
        backend,
        [
            ("s", "v1", 16),
            ("s", "v2", 13),
            ("v1", "v3", 12),
            ("v2", "v1", 4),
            ("v3", "v2", 9),
            ("v2", "v4", 14),
            ("v4", "v3", 7),
            ("v3", "t", 20),
            ("v4", "t", 4),
        ],
        Direction.DIRECTED,
    )
