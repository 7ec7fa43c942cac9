"""Vertex/edge payload types and the identity and weight capability helpers.

A vertex payload is usable when an identifier can be derived from it: either
it exposes an ``id`` attribute or it is itself a hashable value. An edge
payload is usable by weighted algorithms when a weight can be derived from it:
either it exposes a ``weight`` attribute or it is itself a number.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable

from graphsuite.graph.errors import InvalidWeightError
from graphsuite.types.base import VertexID, Weight

IdAccessor = Callable[[Any], VertexID]
WeightAccessor = Callable[[Any], Any]


@dataclass(frozen=True)
class Vertex:
    """Minimal vertex payload carrying only its identifier."""

    id: Hashable


@dataclass(frozen=True)
class WeightedEdge:
    """Minimal edge payload carrying only its weight."""

    weight: Weight


def vertex_id_of(vertex: Any) -> VertexID:
    """Return the identifier of a vertex payload.

    Args:
        vertex: Object with an ``id`` attribute, or a hashable value.

    Returns:
        The identifier used as the storage key.

    Raises:
        TypeError: If no hashable identifier can be derived.
    """
    vertex_id = getattr(vertex, "id", vertex)
    try:
        hash(vertex_id)
    except TypeError:
        raise TypeError(
            f"Vertex {vertex!r} has no hashable identifier."
        ) from None
    return vertex_id


def edge_weight_of(edge: Any) -> Any:
    """Return the raw weight of an edge payload (unvalidated)."""
    return getattr(edge, "weight", edge)


def validate_weight(weight: Any) -> Any:
    """Check that a weight supports ordering and is not NaN-like.

    Args:
        weight: Candidate weight value.

    Returns:
        The weight unchanged.

    Raises:
        InvalidWeightError: If the weight is missing, NaN, or unorderable.
    """
    if weight is None or isinstance(weight, bool):
        raise InvalidWeightError(weight)
    try:
        # NaN compares unequal to itself
        if weight != weight:
            raise InvalidWeightError(weight, "is NaN")
        # Unorderable or non-numeric values raise TypeError here
        _ = (weight < weight, weight + 0)
    except TypeError:
        raise InvalidWeightError(weight) from None
    return weight
