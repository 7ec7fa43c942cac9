"""Helpers shared by the algorithm modules.

Direction guards, start-vertex resolution, a direction-aware edge view and a
completeness check. All helpers work purely through the `Graph` contract.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from graphsuite.graph.base import Graph
from graphsuite.graph.errors import InvalidGraphKindError
from graphsuite.types.base import VertexID


def resolve_start(graph: Graph, start: Optional[VertexID] = None) -> Optional[VertexID]:
    """Return the start vertex for an algorithm.

    Args:
        graph: Input graph.
        start: Requested start vertex, or None for the first vertex.

    Returns:
        The start vertex, or None if ``start`` is None and the graph is empty.

    Raises:
        VertexNotFoundError: If ``start`` is given but missing.
    """
    if start is None:
        return graph.first_vertex()
    graph.get_vertex(start)
    return start


def require_undirected(graph: Graph, algorithm: str) -> None:
    """Raise InvalidGraphKindError unless ``graph`` is undirected."""
    if graph.is_directed:
        raise InvalidGraphKindError(f"{algorithm} requires an undirected graph.")


def require_directed(graph: Graph, algorithm: str) -> None:
    """Raise InvalidGraphKindError unless ``graph`` is directed."""
    if not graph.is_directed:
        raise InvalidGraphKindError(f"{algorithm} requires a directed graph.")


def directed_edges(graph: Graph) -> Iterator[Tuple[VertexID, VertexID, Any]]:
    """Iterate edges as ``(source, target, edge)`` arcs.

    Directed graphs yield each edge once. Undirected graphs yield every edge in
    both orientations (self-loops once), which is the view relaxation-based
    algorithms need.
    """
    for source, target, edge in graph.edges():
        yield source, target, edge
        if not graph.is_directed and source != target:
            yield target, source, edge


def require_complete(graph: Graph, algorithm: str) -> None:
    """Check that every ordered pair of distinct vertices is joined by an edge.

    Raises:
        InvalidGraphKindError: On the first missing pair.
    """
    vertices = list(graph.vertices())
    for i, source in enumerate(vertices):
        # Undirected graphs are symmetric, so half of the pairs suffice
        targets = vertices[i + 1 :] if not graph.is_directed else vertices
        for target in targets:
            if source != target and not graph.has_edge(source, target):
                raise InvalidGraphKindError(
                    f"{algorithm} requires a complete graph; "
                    f"'{source}' -> '{target}' is missing."
                )


def weak_adjacency(graph: Graph) -> Dict[VertexID, List[VertexID]]:
    """Return adjacency lists that ignore edge direction, in backend order."""
    adjacency: Dict[VertexID, List[VertexID]] = {v: [] for v in graph.vertices()}
    for source, target, _ in graph.edges():
        adjacency[source].append(target)
        if source != target:
            adjacency[target].append(source)
    return adjacency
