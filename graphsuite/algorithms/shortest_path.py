"""Single-source shortest paths: Dijkstra and Bellman-Ford.

Both algorithms follow edges in their stored direction; on undirected graphs
every edge is usable in both directions. Results are `ShortestPaths` mappings
from each reachable vertex to ``(distance, predecessor)``; unreachable
vertices are simply absent.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple, Type

from graphsuite.algorithms.common import directed_edges
from graphsuite.algorithms.priority_queue import PriorityQueue
from graphsuite.graph.base import Graph
from graphsuite.graph.errors import NegativeCycleError, NegativeWeightError
from graphsuite.logging import get_logger
from graphsuite.types.base import VertexID

logger = get_logger(__name__)


class ShortestPaths(Mapping):
    """Read-only mapping ``vertex -> (distance, predecessor)`` from one source.

    The source maps to ``(0, None)``.
    """

    def __init__(
        self,
        source: VertexID,
        costs: Dict[VertexID, Any],
        predecessors: Dict[VertexID, VertexID],
    ) -> None:
        self._source = source
        self._costs = costs
        self._predecessors = predecessors

    @property
    def source(self) -> VertexID:
        return self._source

    def __getitem__(self, vertex_id: VertexID) -> Tuple[Any, Optional[VertexID]]:
        return self._costs[vertex_id], self._predecessors.get(vertex_id)

    def __iter__(self) -> Iterator[VertexID]:
        return iter(self._costs)

    def __len__(self) -> int:
        return len(self._costs)

    def __repr__(self) -> str:
        return f"ShortestPaths(source={self._source!r}, reachable={len(self)})"

    def distances(self) -> Dict[VertexID, Any]:
        """Copy of the ``vertex -> distance`` mapping."""
        return dict(self._costs)

    def cost(self, target: VertexID) -> Optional[Any]:
        """Distance to ``target``, or None if unreachable."""
        return self._costs.get(target)

    def predecessor(self, target: VertexID) -> Optional[VertexID]:
        """Predecessor of ``target`` on its shortest path, or None."""
        return self._predecessors.get(target)

    def path_to(self, target: VertexID) -> List[VertexID]:
        """Vertex sequence from the source to ``target``; empty if unreachable."""
        if target not in self._costs:
            return []
        path = [target]
        current = target
        while current != self._source:
            current = self._predecessors[current]
            path.append(current)
        path.reverse()
        return path


def dijkstra(
    graph: Graph,
    source: VertexID,
    target: Optional[VertexID] = None,
) -> ShortestPaths:
    """Compute shortest paths from ``source`` with non-negative weights.

    All weights are checked before the search starts.

    Args:
        graph: Weighted graph (directed or undirected).
        source: Start vertex.
        target: Optional destination. When given, the search stops as soon as
            ``target`` is settled and only settled vertices are reported.

    Returns:
        ShortestPaths for every reachable (or settled) vertex.

    Raises:
        VertexNotFoundError: If ``source`` or ``target`` is missing.
        NegativeWeightError: If any edge weight is negative.
        InvalidWeightError: If an edge weight is missing, NaN or unorderable.
    """
    graph.get_vertex(source)
    if target is not None:
        graph.get_vertex(target)

    for u, v, edge in graph.edges():
        weight = graph.edge_weight(edge)
        if weight < 0:
            raise NegativeWeightError(u, v, weight)

    costs: Dict[VertexID, Any] = {source: 0}
    pred: Dict[VertexID, VertexID] = {}
    settled: Set[VertexID] = set()
    min_pq: PriorityQueue[VertexID] = PriorityQueue()
    min_pq.push(0, source)

    while min_pq:
        current_cost, node = min_pq.pop()
        if node in settled:
            continue
        settled.add(node)
        if node == target:
            break
        for neighbor, edge in graph.neighbors(node):
            if neighbor in settled:
                continue
            new_cost = current_cost + graph.edge_weight(edge)
            if neighbor not in costs or new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                pred[neighbor] = node
                min_pq.push(new_cost, neighbor)

    if target is not None:
        costs = {v: c for v, c in costs.items() if v in settled}
        pred = {v: p for v, p in pred.items() if v in settled}

    logger.debug("Dijkstra from '%s' reached %d vertices", source, len(costs))
    return ShortestPaths(source, costs, pred)


def bellman_ford(graph: Graph, source: VertexID) -> ShortestPaths:
    """Compute shortest paths from ``source``, allowing negative weights.

    Runs up to ``|V| - 1`` relaxation passes over all arcs (stopping early once
    nothing changes), then one detection pass. On an undirected graph each edge
    is relaxed in both directions, so any negative undirected edge reachable
    from the source forms a negative cycle.

    Raises:
        VertexNotFoundError: If ``source`` is missing.
        NegativeCycleError: If a negative cycle is reachable from ``source``;
            the error's ``cycle`` lists its vertices (first == last).
        InvalidWeightError: If an edge weight is missing, NaN or unorderable.
    """
    graph.get_vertex(source)
    arcs = [(u, v, graph.edge_weight(edge)) for u, v, edge in directed_edges(graph)]

    costs: Dict[VertexID, Any] = {source: 0}
    pred: Dict[VertexID, VertexID] = {}

    for _ in range(graph.vertex_count - 1):
        changed = False
        for u, v, weight in arcs:
            if u not in costs:
                continue
            new_cost = costs[u] + weight
            if v not in costs or new_cost < costs[v]:
                costs[v] = new_cost
                pred[v] = u
                changed = True
        if not changed:
            break

    for u, v, weight in arcs:
        if u in costs and (v not in costs or costs[u] + weight < costs[v]):
            pred[v] = u
            cycle = _trace_cycle(pred, v, graph.vertex_count)
            logger.debug("Bellman-Ford found negative cycle %s", cycle)
            raise NegativeCycleError(cycle)

    logger.debug("Bellman-Ford from '%s' reached %d vertices", source, len(costs))
    return ShortestPaths(source, costs, pred)


def _trace_cycle(
    pred: Dict[VertexID, VertexID], start: VertexID, n_vertices: int
) -> List[VertexID]:
    # Walking back |V| steps from a still-relaxable vertex lands on the cycle
    node = start
    for _ in range(n_vertices):
        node = pred[node]

    cycle = [node]
    current = pred[node]
    while current != node:
        cycle.append(current)
        current = pred[current]
    cycle.append(node)
    cycle.reverse()
    return cycle


def shortest_path_tree(
    graph: Graph,
    paths: ShortestPaths,
    backend: Optional[Type[Graph]] = None,
) -> Graph:
    """Build the shortest-path tree described by ``paths`` as a new graph.

    Args:
        graph: Graph the paths were computed on.
        paths: Result of `dijkstra` or `bellman_ford` on ``graph``.
        backend: Backend class for the result; defaults to the input's class.

    Returns:
        A graph with the reachable vertices (in backend order) and one
        ``predecessor -> vertex`` edge per non-source vertex.
    """
    tree = graph.empty_like(backend)
    for vertex_id in graph.vertices():
        if vertex_id in paths:
            tree.insert_vertex(graph.get_vertex(vertex_id))
    for vertex_id in tree.vertices():
        parent = paths.predecessor(vertex_id)
        if parent is not None:
            tree.insert_edge(parent, vertex_id, graph.get_edge(parent, vertex_id))
    return tree
