import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

import pytest

from graphsuite.graph.errors import InvalidWeightError
from graphsuite.graph.structs import (
    Vertex,
    WeightedEdge,
    edge_weight_of,
    validate_weight,
    vertex_id_of,
)


@dataclass
class Named:
    id: str


def test_vertex_id_of_attribute_and_plain_value():
    assert vertex_id_of(Vertex(3)) == 3
    assert vertex_id_of(Named("n1")) == "n1"
    assert vertex_id_of("plain") == "plain"
    assert vertex_id_of((1, 2)) == (1, 2)


def test_vertex_id_of_rejects_unhashable():
    with pytest.raises(TypeError):
        vertex_id_of({"a": 1})
    with pytest.raises(TypeError):
        vertex_id_of(Named(["x"]))  # type: ignore[arg-type]


def test_edge_weight_of():
    assert edge_weight_of(WeightedEdge(2.5)) == 2.5
    assert edge_weight_of(4) == 4
    assert edge_weight_of(None) is None


@pytest.mark.parametrize("weight", [0, -3, 2.5, math.inf, Fraction(1, 3), Decimal("1.5")])
def test_validate_weight_accepts_numbers(weight):
    assert validate_weight(weight) == weight


@pytest.mark.parametrize("weight", [None, True, math.nan, float("nan"), "3", object()])
def test_validate_weight_rejects(weight):
    with pytest.raises(InvalidWeightError) as exc_info:
        validate_weight(weight)
    assert isinstance(exc_info.value, ValueError)


def test_payloads_are_frozen():
    edge = WeightedEdge(1.0)
    with pytest.raises(AttributeError):
        edge.weight = 2.0  # type: ignore[misc]
    assert Vertex(1) == Vertex(1)
    assert hash(Vertex(1)) == hash(Vertex(1))
