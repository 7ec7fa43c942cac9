"""Plain-text edge-list loader and writer.

File format:

    <vertex count n>
    <from>\t<to>[\t<weight>]
    ...

Vertices are the integers ``0..n-1`` and are created as `Vertex` payloads.
Fields may be separated by any whitespace and blank lines are skipped. Edge
lines either all carry a weight (stored as `WeightedEdge`) or none do (edge
payload ``None``).
"""

from __future__ import annotations

from pathlib import Path as FilePath
from typing import Iterable, List, Optional, Tuple, Type, Union

from graphsuite.graph.adjacency_list import AdjacencyListGraph
from graphsuite.graph.base import Graph
from graphsuite.graph.errors import InvalidInputError
from graphsuite.graph.structs import Vertex, WeightedEdge
from graphsuite.logging import get_logger
from graphsuite.types.base import Direction, Weight

logger = get_logger(__name__)

ParsedEdge = Tuple[int, int, Optional[Weight]]


def _parse_int(token: str, what: str, line_number: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidInputError(
            f"{what} must be an integer, got '{token}'.", line_number
        ) from None


def _parse_weight(token: str, line_number: int) -> Weight:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        weight = float(token)
    except ValueError:
        raise InvalidInputError(
            f"Weight must be a number, got '{token}'.", line_number
        ) from None
    if weight != weight:
        raise InvalidInputError("Weight must not be NaN.", line_number)
    return weight


def _numbered(lines: Iterable[str]) -> Iterable[Tuple[int, List[str]]]:
    """Yield ``(line_number, fields)`` for every non-blank line."""
    for line_number, line in enumerate(lines, start=1):
        fields = line.split()
        if fields:
            yield line_number, fields


def read_graph(
    lines: Iterable[str],
    backend: Type[Graph] = AdjacencyListGraph,
    direction: Direction = Direction.UNDIRECTED,
    weighted: Optional[bool] = None,
) -> Graph:
    """Build a graph from edge-list text.

    Args:
        lines: Input lines (a file object works).
        backend: Graph class to instantiate.
        direction: Direction of the new graph.
        weighted: None infers weights from the first edge line, True requires
            a weight on every line, False ignores any weight column.

    Returns:
        The populated graph.

    Raises:
        InvalidInputError: On any format problem, with the 1-based line number.
        DuplicateEdgeError: If the same edge is listed twice.
    """
    rows = _numbered(lines)
    header = next(rows, None)
    if header is None:
        raise InvalidInputError("Input is empty; expected a vertex count.")
    line_number, fields = header
    if len(fields) != 1:
        raise InvalidInputError(
            "First line must hold only the vertex count.", line_number
        )
    n_vertices = _parse_int(fields[0], "Vertex count", line_number)
    if n_vertices <= 0:
        raise InvalidInputError("Vertex count must be positive.", line_number)

    ignore_weights = weighted is False
    edges: List[ParsedEdge] = []
    for line_number, fields in rows:
        if len(fields) < 2:
            raise InvalidInputError(
                "Edge line needs 'from' and 'to' vertex ids.", line_number
            )
        if len(fields) > 3:
            raise InvalidInputError(
                f"Edge line has {len(fields)} fields; expected 2 or 3.", line_number
            )
        source = _parse_int(fields[0], "Vertex id", line_number)
        target = _parse_int(fields[1], "Vertex id", line_number)
        for vertex_id in (source, target):
            if not 0 <= vertex_id < n_vertices:
                raise InvalidInputError(
                    f"Vertex id {vertex_id} out of range 0-{n_vertices - 1}.",
                    line_number,
                )

        has_weight = len(fields) == 3
        if weighted is None:
            weighted = has_weight
        if weighted and not has_weight:
            raise InvalidInputError("Edge line is missing its weight.", line_number)
        if has_weight and not weighted and not ignore_weights:
            raise InvalidInputError(
                "Edge line has a weight but earlier lines do not.", line_number
            )

        weight = _parse_weight(fields[2], line_number) if weighted else None
        edges.append((source, target, weight))

    if not edges:
        raise InvalidInputError("Input contains no edges.")

    graph = backend(direction)
    for vertex_id in range(n_vertices):
        graph.insert_vertex(Vertex(vertex_id))
    for source, target, weight in edges:
        edge = WeightedEdge(weight) if weight is not None else None
        graph.insert_edge(source, target, edge)

    logger.debug(
        "Read %s graph with %d vertices and %d edges",
        Direction(direction).name.lower(),
        graph.vertex_count,
        graph.edge_count,
    )
    return graph


def load_graph(
    path: Union[str, FilePath],
    backend: Type[Graph] = AdjacencyListGraph,
    direction: Direction = Direction.UNDIRECTED,
    weighted: Optional[bool] = None,
) -> Graph:
    """Read a graph file; see `read_graph` for the arguments and errors.

    Raises:
        OSError: If the file cannot be opened.
        InvalidInputError: Also raised when the file is not valid UTF-8.
    """
    path = FilePath(path)
    logger.debug("Loading graph from %s", path)
    with path.open("r", encoding="utf-8") as handle:
        try:
            return read_graph(handle, backend, direction, weighted)
        except UnicodeDecodeError as e:
            raise InvalidInputError(f"File is not valid UTF-8: {e}") from None


def write_graph(graph: Graph) -> List[str]:
    """Serialize a graph to edge-list lines (without line terminators).

    Weights are written when any edge payload is present; every edge must
    then carry a usable weight. Undirected edges are written once.

    Raises:
        InvalidInputError: If the vertex ids are not ``0..n-1`` in order.
        InvalidWeightError: If a written edge has no usable weight.
    """
    for expected, vertex_id in enumerate(graph.vertices()):
        if vertex_id != expected or isinstance(vertex_id, bool):
            raise InvalidInputError(
                f"Vertex ids must be 0..n-1 in order; found '{vertex_id}' "
                f"at position {expected}."
            )

    edges = list(graph.edges())
    weighted = any(edge is not None for _, _, edge in edges)
    lines = [str(graph.vertex_count)]
    for source, target, edge in edges:
        fields = [str(source), str(target)]
        if weighted:
            fields.append(str(graph.edge_weight(edge)))
        lines.append("\t".join(fields))
    return lines
