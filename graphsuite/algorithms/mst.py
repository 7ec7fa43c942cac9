"""Minimum spanning tree algorithms (Prim and Kruskal).

Both algorithms require an undirected graph and return a *new* graph holding
the tree; the input is never modified. The result uses the backend requested
by the caller (the input's backend by default) and keeps the input's vertex
and edge payloads.

On a disconnected graph Prim spans only the component of its start vertex,
while Kruskal returns a spanning forest over all vertices.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple, Type

from graphsuite.algorithms.common import require_undirected, resolve_start
from graphsuite.algorithms.priority_queue import PriorityQueue
from graphsuite.algorithms.union_find import DisjointSet
from graphsuite.graph.base import Graph
from graphsuite.graph.errors import DisconnectedGraphError, InvalidWeightError
from graphsuite.logging import get_logger
from graphsuite.types.base import VertexID

logger = get_logger(__name__)


def prim(
    graph: Graph,
    start: Optional[VertexID] = None,
    backend: Optional[Type[Graph]] = None,
    *,
    require_spanning: bool = False,
) -> Graph:
    """Grow a minimum spanning tree from ``start`` with a priority-queue frontier.

    The frontier holds candidate edges keyed by weight; equal weights are
    taken in the order the edges were discovered.

    Args:
        graph: Undirected weighted graph.
        start: Root vertex; defaults to the first vertex in backend order.
        backend: Backend class for the result; defaults to the input's class.
        require_spanning: Fail instead of returning a partial tree when the
            graph is disconnected.

    Returns:
        A new graph with the spanned vertices and ``k - 1`` tree edges, where
        ``k`` is the size of the start vertex's component.

    Raises:
        InvalidGraphKindError: If the graph is directed.
        VertexNotFoundError: If ``start`` is missing.
        InvalidWeightError: If an edge weight is missing, NaN or unorderable.
        DisconnectedGraphError: If ``require_spanning`` is set and the tree
            does not reach every vertex.
    """
    require_undirected(graph, "Prim's algorithm")
    tree = graph.empty_like(backend)
    root = resolve_start(graph, start)
    if root is None:
        return tree

    tree.insert_vertex(graph.get_vertex(root))
    frontier: PriorityQueue[Tuple[VertexID, VertexID, Any]] = PriorityQueue()

    def expand(node: VertexID) -> None:
        for neighbor, edge in graph.neighbors(node):
            if not tree.has_vertex(neighbor):
                frontier.push(graph.edge_weight(edge), (node, neighbor, edge))

    expand(root)
    total = graph.vertex_count
    while frontier and tree.vertex_count < total:
        _, (source, target, edge) = frontier.pop()
        if tree.has_vertex(target):
            continue
        tree.insert_vertex(graph.get_vertex(target))
        tree.insert_edge(source, target, edge)
        expand(target)

    if tree.vertex_count < total:
        if require_spanning:
            raise DisconnectedGraphError(
                f"Prim's MST from '{root}' reaches {tree.vertex_count} of "
                f"{total} vertices."
            )
        logger.warning(
            "Graph is disconnected: Prim's MST from '%s' spans %d of %d vertices",
            root,
            tree.vertex_count,
            total,
        )
    logger.debug("Prim's MST built with %d edges", tree.edge_count)
    return tree


def kruskal(
    graph: Graph,
    backend: Optional[Type[Graph]] = None,
    *,
    require_spanning: bool = False,
) -> Graph:
    """Build a minimum spanning tree (forest) by scanning edges in weight order.

    Edges are stably sorted by weight, so ties keep their enumeration order.
    An edge is accepted iff it joins two different union-find components.

    Args:
        graph: Undirected weighted graph.
        backend: Backend class for the result; defaults to the input's class.
        require_spanning: Fail instead of returning a forest when the graph
            is disconnected.

    Returns:
        A new graph containing every input vertex and the forest edges
        (``|V| - 1`` edges when the input is connected).

    Raises:
        InvalidGraphKindError: If the graph is directed.
        InvalidWeightError: If an edge weight is missing, NaN or unorderable.
        DisconnectedGraphError: If ``require_spanning`` is set and the graph
            has more than one component.
    """
    require_undirected(graph, "Kruskal's algorithm")
    forest = graph.empty_like(backend)
    for vertex_id in graph.vertices():
        forest.insert_vertex(graph.get_vertex(vertex_id))

    weighted: List[Tuple[Any, VertexID, VertexID, Any]] = [
        (graph.edge_weight(edge), source, target, edge)
        for source, target, edge in graph.edges()
    ]
    try:
        weighted.sort(key=lambda item: item[0])
    except TypeError:
        raise InvalidWeightError(
            [item[0] for item in weighted], "contains incomparable values"
        ) from None

    components = DisjointSet(graph.vertices())
    target_edges = max(graph.vertex_count - 1, 0)
    for _, source, target, edge in weighted:
        if forest.edge_count == target_edges:
            break
        if components.union(source, target):
            forest.insert_edge(source, target, edge)

    if require_spanning and components.set_count > 1:
        raise DisconnectedGraphError(
            f"Graph has {components.set_count} components; no spanning tree exists."
        )
    logger.debug(
        "Kruskal's MST built with %d edges across %d component(s)",
        forest.edge_count,
        components.set_count,
    )
    return forest
