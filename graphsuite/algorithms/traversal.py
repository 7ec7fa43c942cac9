"""Breadth-first and depth-first traversal and connected components.

Traversals are lazy: they return single-pass iterators that yield each
reachable vertex exactly once, in visitation order. Neighbor order follows the
backend (insertion order for adjacency lists, index order for matrices), so
the visitation order is deterministic per backend. The graph must not be
mutated while an iterator is alive.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Iterator, List, Set

from graphsuite.algorithms.common import weak_adjacency
from graphsuite.graph.base import Graph
from graphsuite.logging import get_logger
from graphsuite.types.base import TraversalType, VertexID

logger = get_logger(__name__)

NeighborFunc = Callable[[VertexID], Iterable[VertexID]]


def _bfs(neighbors_of: NeighborFunc, start: VertexID) -> Iterator[VertexID]:
    visited: Set[VertexID] = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        yield node
        for neighbor in neighbors_of(node):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)


def _dfs(neighbors_of: NeighborFunc, start: VertexID) -> Iterator[VertexID]:
    # Explicit stack; pushing neighbors in reverse reproduces recursive preorder
    visited: Set[VertexID] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        yield node
        pending = [n for n in neighbors_of(node) if n not in visited]
        stack.extend(reversed(pending))


_WALKERS = {
    TraversalType.BFS: _bfs,
    TraversalType.DFS: _dfs,
}


def bfs_iter(graph: Graph, start: VertexID) -> Iterator[VertexID]:
    """Iterate vertices reachable from ``start`` in breadth-first (level) order.

    Raises:
        VertexNotFoundError: If ``start`` is missing (raised immediately).
    """
    return traverse(graph, start, TraversalType.BFS)


def dfs_iter(graph: Graph, start: VertexID) -> Iterator[VertexID]:
    """Iterate vertices reachable from ``start`` in depth-first preorder.

    Raises:
        VertexNotFoundError: If ``start`` is missing (raised immediately).
    """
    return traverse(graph, start, TraversalType.DFS)


def traverse(
    graph: Graph,
    start: VertexID,
    kind: TraversalType = TraversalType.BFS,
) -> Iterator[VertexID]:
    """Iterate vertices reachable from ``start`` using the given traversal.

    Args:
        graph: Graph to walk (edges are followed in their stored direction).
        start: Start vertex, yielded first.
        kind: BFS or DFS.

    Raises:
        VertexNotFoundError: If ``start`` is missing (raised immediately).
    """
    graph.get_vertex(start)
    return _WALKERS[TraversalType(kind)](graph.adjacent, start)


def connected_components(
    graph: Graph,
    kind: TraversalType = TraversalType.BFS,
) -> List[List[VertexID]]:
    """Partition the vertices into connected components.

    A traversal is seeded from every vertex not yet covered, in backend order.
    For directed graphs edge direction is ignored, so the result is the set of
    weakly connected components.

    Args:
        graph: Input graph.
        kind: Traversal used inside each component.

    Returns:
        Components in seed order; each lists its vertices in visitation order.
    """
    if graph.is_directed:
        adjacency = weak_adjacency(graph)
        neighbors_of: NeighborFunc = adjacency.__getitem__
    else:
        neighbors_of = graph.adjacent

    walker = _WALKERS[TraversalType(kind)]
    covered: Set[VertexID] = set()
    components: List[List[VertexID]] = []
    for seed in graph.vertices():
        if seed in covered:
            continue
        component = list(walker(neighbors_of, seed))
        covered.update(component)
        components.append(component)

    logger.debug(
        "Found %d connected component(s) over %d vertices",
        len(components),
        graph.vertex_count,
    )
    return components


def count_connected_components(
    graph: Graph,
    kind: TraversalType = TraversalType.BFS,
) -> int:
    """Return the number of connected components (weak for directed graphs)."""
    return len(connected_components(graph, kind))
