"""Traveling salesman solvers over complete weighted graphs.

Exact solvers:
    - `tsp_brute_force`: enumerates every tour with a fixed start vertex.
    - `tsp_branch_and_bound`: depth-first search over partial tours, pruning
      with a minimum-outgoing-edge lower bound.

Heuristics (no optimality guarantee):
    - `tsp_nearest_neighbor`: greedy walk to the closest unvisited vertex.
    - `tsp_double_tree`: MST doubling, Euler circuit and shortcutting; at most
      twice the optimum on metric instances.

Every solver returns a closed `Path` starting and ending at the start vertex
(the first vertex in backend order unless given). An empty graph yields an
empty path and a single vertex yields a path without steps. Directed complete
graphs are solved asymmetrically by all solvers except the double tree, which
needs an undirected graph for its spanning tree.
"""

from __future__ import annotations

from itertools import permutations
from typing import Any, Dict, List, Optional, Sequence, Tuple

from graphsuite.algorithms.common import (
    require_complete,
    require_undirected,
    resolve_start,
)
from graphsuite.algorithms.mst import prim
from graphsuite.config import GRAPH_CONFIG
from graphsuite.graph.adjacency_list import AdjacencyListGraph
from graphsuite.graph.base import Graph
from graphsuite.graph.path import Path
from graphsuite.logging import get_logger
from graphsuite.types.base import VertexID

logger = get_logger(__name__)

WeightTable = Dict[VertexID, Dict[VertexID, Any]]


def _prepare(
    graph: Graph, start: Optional[VertexID], algorithm: str
) -> Tuple[Optional[VertexID], List[VertexID]]:
    """Resolve the start vertex, check completeness and list the other vertices."""
    root = resolve_start(graph, start)
    if root is None:
        return None, []
    require_complete(graph, algorithm)
    return root, [v for v in graph.vertices() if v != root]


def _weight_table(graph: Graph, vertices: Sequence[VertexID]) -> WeightTable:
    return {
        u: {v: graph.weight(u, v) for v in vertices if v != u} for u in vertices
    }


def _tour_cost(weights: WeightTable, order: Sequence[VertexID]) -> Any:
    total: Any = 0
    for u, v in zip(order, order[1:]):
        total = total + weights[u][v]
    return total


def _closed_path(graph: Graph, order: Sequence[VertexID]) -> Path:
    """Build a closed Path visiting ``order`` and returning to ``order[0]``."""
    path = Path(start=order[0])
    closed = list(order) + [order[0]] if len(order) > 1 else list(order)
    for u, v in zip(closed, closed[1:]):
        path.push(u, v, graph.get_edge(u, v), graph.weight(u, v))
    return path


def _warn_if_large(graph: Graph, algorithm: str) -> None:
    if graph.vertex_count > GRAPH_CONFIG.exact_tsp_warn_vertices:
        logger.warning(
            "%s on %d vertices may take a very long time",
            algorithm,
            graph.vertex_count,
        )


def tsp_brute_force(graph: Graph, start: Optional[VertexID] = None) -> Path:
    """Find an optimal tour by trying every permutation of the non-start vertices.

    Runs in O(n!) time; intended for small instances only. Among equally
    cheap tours the first one enumerated is returned.

    Raises:
        VertexNotFoundError: If ``start`` is missing.
        InvalidGraphKindError: If the graph is not complete.
        InvalidWeightError: If an edge weight is missing, NaN or unorderable.
    """
    root, rest = _prepare(graph, start, "Brute-force TSP")
    if root is None:
        return Path()
    if not rest:
        return Path(start=root)
    _warn_if_large(graph, "Brute-force TSP")

    weights = _weight_table(graph, [root] + rest)
    best_cost: Any = None
    best_order: List[VertexID] = [root]
    for perm in permutations(rest):
        order = [root, *perm, root]
        cost = _tour_cost(weights, order)
        if best_cost is None or cost < best_cost:
            best_cost = cost
            best_order = order[:-1]

    return _closed_path(graph, best_order)


def tsp_branch_and_bound(graph: Graph, start: Optional[VertexID] = None) -> Path:
    """Find an optimal tour with a pruned depth-first search.

    The incumbent is seeded with the nearest-neighbor tour. A partial tour is
    abandoned when its cost, plus the cheapest outgoing edge of its last vertex
    and of every unvisited vertex, is not below the incumbent's cost.

    Raises:
        VertexNotFoundError: If ``start`` is missing.
        InvalidGraphKindError: If the graph is not complete.
        InvalidWeightError: If an edge weight is missing, NaN or unorderable.
    """
    root, rest = _prepare(graph, start, "Branch-and-bound TSP")
    if root is None:
        return Path()
    if not rest:
        return Path(start=root)
    _warn_if_large(graph, "Branch-and-bound TSP")

    vertices = [root] + rest
    weights = _weight_table(graph, vertices)
    min_out = {u: min(weights[u].values()) for u in vertices}

    best_order = _nearest_neighbor_order(weights, root, rest)
    best_cost = _tour_cost(weights, best_order + [root])
    stats = {"expanded": 0, "pruned": 0}

    order = [root]
    unvisited = list(rest)

    def search(cost: Any, remaining_bound: Any) -> None:
        nonlocal best_cost, best_order
        current = order[-1]
        if not unvisited:
            total = cost + weights[current][root]
            if total < best_cost:
                best_cost = total
                best_order = list(order)
            return

        # Cheapest branches first to tighten the incumbent early
        candidates = sorted(unvisited, key=lambda v: weights[current][v])
        for nxt in candidates:
            step_cost = cost + weights[current][nxt]
            bound = step_cost + remaining_bound
            if bound >= best_cost:
                stats["pruned"] += 1
                continue
            stats["expanded"] += 1
            order.append(nxt)
            unvisited.remove(nxt)
            search(step_cost, remaining_bound - min_out[nxt])
            unvisited.append(nxt)
            order.pop()

    # Every unvisited vertex must still leave once
    search(0, sum(min_out[v] for v in rest))
    logger.debug(
        "Branch-and-bound TSP expanded %d and pruned %d partial tours",
        stats["expanded"],
        stats["pruned"],
    )
    return _closed_path(graph, best_order)


def _nearest_neighbor_order(
    weights: WeightTable, root: VertexID, rest: Sequence[VertexID]
) -> List[VertexID]:
    order = [root]
    remaining = list(rest)
    while remaining:
        current = order[-1]
        # min() keeps the first of equally near candidates
        nearest = min(remaining, key=lambda v: weights[current][v])
        remaining.remove(nearest)
        order.append(nearest)
    return order


def tsp_nearest_neighbor(graph: Graph, start: Optional[VertexID] = None) -> Path:
    """Build a tour by always moving to the closest unvisited vertex.

    O(n^2); ties go to the vertex that comes first in backend order.

    Raises:
        VertexNotFoundError: If ``start`` is missing.
        InvalidGraphKindError: If the graph is not complete.
        InvalidWeightError: If an edge weight is missing, NaN or unorderable.
    """
    root, rest = _prepare(graph, start, "Nearest-neighbor TSP")
    if root is None:
        return Path()
    weights = _weight_table(graph, [root] + rest)
    return _closed_path(graph, _nearest_neighbor_order(weights, root, rest))


def _euler_circuit(tree: Graph, root: VertexID) -> List[VertexID]:
    """Euler circuit of the multigraph obtained by doubling every tree edge."""
    adjacency: Dict[VertexID, List[Tuple[int, VertexID]]] = {
        v: [] for v in tree.vertices()
    }
    edge_id = 0
    for u, v, _ in tree.edges():
        for _copy in range(2):
            adjacency[u].append((edge_id, v))
            adjacency[v].append((edge_id, u))
            edge_id += 1

    used = [False] * edge_id
    position = {v: 0 for v in adjacency}
    stack = [root]
    circuit: List[VertexID] = []
    # Hierholzer's algorithm
    while stack:
        node = stack[-1]
        arcs = adjacency[node]
        while position[node] < len(arcs) and used[arcs[position[node]][0]]:
            position[node] += 1
        if position[node] < len(arcs):
            eid, neighbor = arcs[position[node]]
            used[eid] = True
            stack.append(neighbor)
        else:
            circuit.append(stack.pop())
    circuit.reverse()
    return circuit


def tsp_double_tree(graph: Graph, start: Optional[VertexID] = None) -> Path:
    """Approximate a tour from a doubled minimum spanning tree.

    Builds Prim's MST rooted at the start vertex, doubles every tree edge to
    obtain an Eulerian multigraph, extracts an Euler circuit and shortcuts
    repeated vertices. The tour costs at most twice the optimum when the
    weights satisfy the triangle inequality.

    Raises:
        InvalidGraphKindError: If the graph is directed or not complete.
        VertexNotFoundError: If ``start`` is missing.
        InvalidWeightError: If an edge weight is missing, NaN or unorderable.
    """
    require_undirected(graph, "Double-tree TSP")
    root, rest = _prepare(graph, start, "Double-tree TSP")
    if root is None:
        return Path()

    tree = prim(graph, root, backend=AdjacencyListGraph)
    circuit = _euler_circuit(tree, root)

    seen = set()
    order: List[VertexID] = []
    for vertex_id in circuit:
        if vertex_id not in seen:
            seen.add(vertex_id)
            order.append(vertex_id)

    logger.debug(
        "Double-tree TSP shortcut an Euler circuit of %d vertices to %d",
        len(circuit),
        len(order),
    )
    return _closed_path(graph, order)
