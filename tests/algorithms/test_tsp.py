import itertools
import logging
import math

import pytest

from graphsuite.algorithms.tsp import (
    tsp_branch_and_bound,
    tsp_brute_force,
    tsp_double_tree,
    tsp_nearest_neighbor,
)
from graphsuite.config import GRAPH_CONFIG
from graphsuite.graph.errors import InvalidGraphKindError, VertexNotFoundError
from graphsuite.graph.path import Path
from graphsuite.types.base import Direction
from tests.algorithms.sample_graphs import build_graph

SOLVERS = [tsp_brute_force, tsp_branch_and_bound, tsp_nearest_neighbor, tsp_double_tree]
EXACT = [tsp_brute_force, tsp_branch_and_bound]

# Convex pentagon: the hull order is optimal
EUCLIDEAN_OPTIMUM = 10 + 4 * math.sqrt(2)


def assert_valid_tour(graph, tour: Path, start):
    vertices = tour.vertices()
    assert tour.start == start
    assert tour.is_closed
    assert len(tour) == graph.vertex_count
    assert sorted(vertices[:-1]) == sorted(graph.vertices())
    expected = sum(graph.weight(u, v) for u, v, _ in tour)
    assert tour.cost == pytest.approx(expected)


def random_metric_graph(backend, n, seed):
    # Points on a small integer grid give metric Euclidean weights
    coords = [((seed * 7 + i * 13) % 17, (seed * 11 + i * 5) % 19) for i in range(n)]
    edges = [
        (i, j, math.dist(coords[i], coords[j]) + 1)
        for i, j in itertools.combinations(range(n), 2)
    ]
    return build_graph(backend, edges, vertices=list(range(n)))


@pytest.mark.parametrize("solver", SOLVERS)
def test_tours_are_valid(euclidean_five, solver):
    tour = solver(euclidean_five)
    assert_valid_tour(euclidean_five, tour, 0)


@pytest.mark.parametrize("solver", EXACT)
def test_exact_solvers_find_optimum(euclidean_five, solver):
    assert solver(euclidean_five).cost == pytest.approx(EUCLIDEAN_OPTIMUM)


@pytest.mark.parametrize("solver", SOLVERS)
def test_start_vertex_honoured(euclidean_five, solver):
    tour = solver(euclidean_five, start=3)
    assert_valid_tour(euclidean_five, tour, 3)


@pytest.mark.parametrize("seed", range(4))
def test_branch_and_bound_matches_brute_force(backend, seed):
    g = random_metric_graph(backend, 7, seed)
    assert tsp_branch_and_bound(g).cost == pytest.approx(tsp_brute_force(g).cost)


@pytest.mark.parametrize("seed", range(4))
def test_double_tree_within_twice_optimum(backend, seed):
    g = random_metric_graph(backend, 7, seed)
    optimum = tsp_brute_force(g).cost
    approx = tsp_double_tree(g).cost
    assert optimum <= approx + 1e-9
    assert approx <= 2 * optimum + 1e-9


@pytest.mark.parametrize("seed", range(4))
def test_nearest_neighbor_never_beats_optimum(backend, seed):
    g = random_metric_graph(backend, 6, seed)
    assert tsp_nearest_neighbor(g).cost >= tsp_brute_force(g).cost - 1e-9


@pytest.mark.parametrize("solver", EXACT + [tsp_nearest_neighbor])
def test_directed_asymmetric_instance(asymmetric_four, solver):
    tour = solver(asymmetric_four)
    assert tour.vertices() == [0, 1, 2, 3, 0]
    assert tour.cost == 4


def test_double_tree_requires_undirected(asymmetric_four):
    with pytest.raises(InvalidGraphKindError):
        tsp_double_tree(asymmetric_four)


@pytest.mark.parametrize("solver", SOLVERS)
def test_incomplete_graph_rejected(diamond, solver):
    with pytest.raises(InvalidGraphKindError):
        solver(diamond)


@pytest.mark.parametrize("solver", SOLVERS)
def test_unknown_start(euclidean_five, solver):
    with pytest.raises(VertexNotFoundError):
        solver(euclidean_five, start=99)


@pytest.mark.parametrize("solver", SOLVERS)
def test_empty_and_single_vertex(backend, solver):
    empty = solver(backend())
    assert empty.start is None
    assert len(empty) == 0

    single = solver(build_graph(backend, [], vertices=["x"]))
    assert single.start == "x"
    assert len(single) == 0
    assert single.cost == 0


@pytest.mark.parametrize("solver", SOLVERS)
def test_two_vertices(backend, solver):
    g = build_graph(backend, [("a", "b", 2.5)])
    tour = solver(g)
    assert tour.vertices() == ["a", "b", "a"]
    assert tour.cost == 5.0


def test_tour_steps_carry_edge_payloads(euclidean_five):
    tour = tsp_nearest_neighbor(euclidean_five)
    for u, v, edge in tour:
        assert edge is euclidean_five.get_edge(u, v)


def test_exact_solver_warns_on_large_input(backend, caplog, monkeypatch):
    monkeypatch.setattr(GRAPH_CONFIG, "exact_tsp_warn_vertices", 3)
    g = random_metric_graph(backend, 5, 0)
    with caplog.at_level(logging.WARNING, logger="graphsuite"):
        tsp_brute_force(g)
    assert "may take a very long time" in caplog.text


def test_branch_and_bound_logs_pruning(euclidean_five, caplog):
    with caplog.at_level(logging.DEBUG, logger="graphsuite"):
        tsp_branch_and_bound(euclidean_five)
    assert "pruned" in caplog.text


def test_input_not_modified(euclidean_five):
    before = list(euclidean_five.edges())
    for solver in SOLVERS:
        solver(euclidean_five)
    assert list(euclidean_five.edges()) == before
    assert euclidean_five.direction == Direction.UNDIRECTED
