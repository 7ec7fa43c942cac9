import pytest

from graphsuite.graph.adjacency_matrix import AdjacencyMatrixGraph
from graphsuite.graph.errors import (
    DuplicateEdgeError,
    InvalidInputError,
    InvalidWeightError,
)
from graphsuite.graph.structs import Vertex, WeightedEdge
from graphsuite.io import load_graph, read_graph, write_graph
from graphsuite.types.base import Direction
from tests.algorithms.sample_graphs import build_graph

WEIGHTED = """4
0\t1\t1.5
1\t2\t2
2\t3\t-0.25
"""

UNWEIGHTED = """3
0\t1
1\t2
"""


def test_read_weighted(backend):
    g = read_graph(WEIGHTED.splitlines(), backend=backend)
    assert isinstance(g, backend)
    assert not g.is_directed
    assert list(g.vertices()) == [0, 1, 2, 3]
    assert g.get_vertex(2) == Vertex(2)
    assert g.get_edge(0, 1) == WeightedEdge(1.5)
    assert g.weight(2, 1) == 2
    assert isinstance(g.weight(1, 2), int)
    assert g.weight(3, 2) == -0.25


def test_read_unweighted_directed():
    g = read_graph(UNWEIGHTED.splitlines(), direction=Direction.DIRECTED)
    assert g.is_directed
    assert list(g.edges()) == [(0, 1, None), (1, 2, None)]
    assert not g.has_edge(1, 0)


def test_isolated_vertices_are_created():
    g = read_graph(["5", "0 1"])
    assert g.vertex_count == 5
    assert g.edge_count == 1


def test_blank_lines_and_spaces_accepted():
    g = read_graph(["", "3", "  ", "0   1  4", "1 2 5", ""])
    assert g.total_weight() == 9


def test_weighted_false_ignores_weights():
    g = read_graph(WEIGHTED.splitlines(), weighted=False)
    assert g.get_edge(0, 1) is None


def test_weighted_true_requires_weights():
    with pytest.raises(InvalidInputError) as exc_info:
        read_graph(UNWEIGHTED.splitlines(), weighted=True)
    assert exc_info.value.line_number == 2


@pytest.mark.parametrize(
    "lines, line_number",
    [
        (["x"], 1),
        (["0"], 1),
        (["-2"], 1),
        (["3 4"], 1),
        (["3", "0"], 2),
        (["3", "0 1", "a 2"], 3),
        (["3", "0 1", "1 3"], 3),
        (["3", "0 -1"], 2),
        (["3", "0 1 heavy"], 2),
        (["3", "0 1 nan"], 2),
        (["3", "0 1 2 3"], 2),
        (["3", "0 1 1", "1 2"], 3),
        (["3", "0 1", "1 2 1"], 3),
    ],
)
def test_parse_errors_carry_line_number(lines, line_number):
    with pytest.raises(InvalidInputError) as exc_info:
        read_graph(lines)
    assert exc_info.value.line_number == line_number
    assert str(exc_info.value).startswith(f"line {line_number}:")


def test_empty_input_rejected():
    with pytest.raises(InvalidInputError):
        read_graph([])
    with pytest.raises(InvalidInputError):
        read_graph(["", "   "])


def test_no_edges_rejected():
    with pytest.raises(InvalidInputError, match="no edges"):
        read_graph(["3"])


def test_duplicate_edge_rejected():
    with pytest.raises(DuplicateEdgeError):
        read_graph(["2", "0 1", "1 0"])


def test_load_graph(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(WEIGHTED, encoding="utf-8")
    g = load_graph(path, backend=AdjacencyMatrixGraph, direction=Direction.DIRECTED)
    assert isinstance(g, AdjacencyMatrixGraph)
    assert g.edge_count == 3
    assert g.has_edge(0, 1) and not g.has_edge(1, 0)

    assert load_graph(str(path)).edge_count == 3


def test_load_graph_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_graph(tmp_path / "absent.txt")


def test_load_graph_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"2\n0\t1\t\xff\n")
    with pytest.raises(InvalidInputError, match="not valid UTF-8"):
        load_graph(path)


def test_write_graph_round_trip(backend):
    g = read_graph(WEIGHTED.splitlines(), backend=backend)
    lines = write_graph(g)
    assert lines == ["4", "0\t1\t1.5", "1\t2\t2", "2\t3\t-0.25"]
    again = read_graph(lines, backend=backend)
    assert list(again.edges()) == list(g.edges())


def test_write_unweighted(backend):
    g = build_graph(backend, [(0, 1), (1, 2)], Direction.DIRECTED)
    assert write_graph(g) == ["3", "0\t1", "1\t2"]


def test_write_requires_dense_integer_ids(backend):
    g = build_graph(backend, [("a", "b", 1)])
    with pytest.raises(InvalidInputError):
        write_graph(g)
    g = build_graph(backend, [(1, 0, 1)])
    with pytest.raises(InvalidInputError):
        write_graph(g)


def test_write_rejects_partially_weighted_graph(backend):
    g = build_graph(backend, [(0, 1, 1), (1, 2)])
    with pytest.raises(InvalidWeightError):
        write_graph(g)
