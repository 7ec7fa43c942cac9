"""Maximum flow via Edmonds-Karp (shortest augmenting paths).

Edge capacities are read from the edge payloads (the graph's weight accessor
by default). The computation runs on a private residual network, so the input
graph is never modified; per-edge flows are reported in the result instead.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from graphsuite.algorithms.common import require_directed
from graphsuite.graph.base import Graph
from graphsuite.graph.errors import InvalidInputError, NegativeWeightError
from graphsuite.graph.structs import validate_weight
from graphsuite.logging import get_logger
from graphsuite.types.base import VertexID

logger = get_logger(__name__)

Edge = Tuple[VertexID, VertexID]
Residual = Dict[VertexID, Dict[VertexID, Any]]


@dataclass(frozen=True)
class MaxFlowResult:
    """Summary of a maximum-flow computation.

    Attributes:
        value: Total flow from source to target.
        edge_flow: Flow on every input edge, keyed by ``(source, target)``.
        reachable: Vertices reachable from the source in the final residual
            network (the source side of a minimum cut).
        min_cut: Saturated edges leaving ``reachable``, in edge order.
    """

    value: Any
    edge_flow: Dict[Edge, Any] = field(default_factory=dict)
    reachable: Set[VertexID] = field(default_factory=set)
    min_cut: List[Edge] = field(default_factory=list)


def _build_residual(
    graph: Graph, capacity_of: Callable[[Any], Any]
) -> Tuple[Residual, Dict[Edge, Any]]:
    residual: Residual = {v: {} for v in graph.vertices()}
    capacities: Dict[Edge, Any] = {}
    for u, v, edge in graph.edges():
        capacity = validate_weight(capacity_of(edge))
        if capacity < 0:
            raise NegativeWeightError(u, v, capacity)
        capacities[(u, v)] = capacity
        if u == v:
            continue
        residual[u][v] = residual[u].get(v, 0) + capacity
        residual[v].setdefault(u, 0)
    return residual, capacities


def _augmenting_path(
    residual: Residual, source: VertexID, target: VertexID, tolerance: float
) -> Optional[Dict[VertexID, VertexID]]:
    """BFS over arcs with spare capacity; returns the parent map or None."""
    parent: Dict[VertexID, VertexID] = {}
    visited = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbor, spare in residual[node].items():
            if neighbor in visited or spare <= tolerance:
                continue
            visited.add(neighbor)
            parent[neighbor] = node
            if neighbor == target:
                return parent
            queue.append(neighbor)
    return None


def _reachable(residual: Residual, source: VertexID, tolerance: float) -> Set[VertexID]:
    seen = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbor, spare in residual[node].items():
            if spare > tolerance and neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


def edmonds_karp(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    capacity_of: Optional[Callable[[Any], Any]] = None,
    tolerance: float = 1e-10,
) -> MaxFlowResult:
    """Compute a maximum ``source -> target`` flow on a directed graph.

    Each round finds a shortest augmenting path (fewest arcs) by BFS in the
    residual network and pushes its bottleneck capacity along it.

    Args:
        graph: Directed graph whose edge payloads carry capacities.
        source: Source vertex.
        target: Sink vertex.
        capacity_of: Capacity accessor for edge payloads; defaults to the
            graph's weight accessor.
        tolerance: Residual capacities at or below this value count as zero.

    Returns:
        MaxFlowResult with the flow value, per-edge flows and a minimum cut.

    Raises:
        InvalidGraphKindError: If the graph is undirected.
        VertexNotFoundError: If ``source`` or ``target`` is missing.
        InvalidInputError: If ``source == target``.
        NegativeWeightError: If a capacity is negative.
        InvalidWeightError: If a capacity is missing, NaN or unorderable.
    """
    require_directed(graph, "Edmonds-Karp")
    graph.get_vertex(source)
    graph.get_vertex(target)
    if source == target:
        raise InvalidInputError(
            f"Source and target must differ (both are '{source}')."
        )

    residual, capacities = _build_residual(graph, capacity_of or graph.weight_of)

    value: Any = 0
    rounds = 0
    while True:
        parent = _augmenting_path(residual, source, target, tolerance)
        if parent is None:
            break

        path: List[VertexID] = [target]
        while path[-1] != source:
            path.append(parent[path[-1]])
        path.reverse()

        bottleneck = min(residual[u][v] for u, v in zip(path, path[1:]))
        for u, v in zip(path, path[1:]):
            residual[u][v] -= bottleneck
            residual[v][u] += bottleneck
        value += bottleneck
        rounds += 1

    # Antiparallel arcs share one residual pair; the net flow goes on one side
    edge_flow: Dict[Edge, Any] = {}
    for (u, v), capacity in capacities.items():
        flow = capacity - residual[u][v] if u != v else 0
        edge_flow[(u, v)] = flow if flow > tolerance else 0

    reachable = _reachable(residual, source, tolerance)
    min_cut = [
        (u, v)
        for (u, v) in capacities
        if u in reachable and v not in reachable
    ]

    logger.debug(
        "Edmonds-Karp from '%s' to '%s': value %s after %d augmentation(s)",
        source,
        target,
        value,
        rounds,
    )
    return MaxFlowResult(value, edge_flow, reachable, min_cut)
