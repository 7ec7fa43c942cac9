"""Graph conversion utilities between graphsuite graphs and NetworkX graphs.

Conversions keep the original payloads in a ``payload`` attribute so that a
round trip restores them unchanged.
"""

from __future__ import annotations

from typing import Optional, Type

import networkx as nx

from graphsuite.graph.adjacency_list import AdjacencyListGraph
from graphsuite.graph.base import Graph
from graphsuite.graph.errors import InvalidGraphKindError, InvalidInputError
from graphsuite.graph.structs import WeightedEdge
from graphsuite.types.base import Direction


def to_networkx(graph: Graph, weight_attr: str = "weight") -> nx.Graph:
    """Convert a graph to a NetworkX ``Graph`` or ``DiGraph``.

    Node order and edge order follow the backend's enumeration order.

    Args:
        graph: Source graph (any backend).
        weight_attr: Edge attribute receiving the weight, when the payload has one.

    Returns:
        ``nx.DiGraph`` for directed graphs, ``nx.Graph`` otherwise. Every node
        and edge carries its original object under ``payload``.

    Raises:
        InvalidWeightError: If an edge payload has a weight that is NaN or
            not numeric.
    """
    nx_graph: nx.Graph = nx.DiGraph() if graph.is_directed else nx.Graph()
    for vertex_id in graph.vertices():
        nx_graph.add_node(vertex_id, payload=graph.get_vertex(vertex_id))

    for source, target, edge in graph.edges():
        attrs = {"payload": edge}
        # Payloads without a weight are carried without a weight attribute
        if graph.weight_of(edge) is not None:
            attrs[weight_attr] = graph.edge_weight(edge)
        nx_graph.add_edge(source, target, **attrs)
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    backend: Optional[Type[Graph]] = None,
    weight_attr: str = "weight",
) -> Graph:
    """Build a graph from a NetworkX ``Graph`` or ``DiGraph``.

    Nodes and edges that carry a ``payload`` attribute (as produced by
    ``to_networkx``) get that object back. Other nodes use the node key as the
    vertex payload; other edges become ``WeightedEdge(weight)`` when
    ``weight_attr`` is present and ``None`` otherwise.

    Args:
        nx_graph: Input graph; multigraphs are not supported.
        backend: Backend class for the result (default: adjacency list).
        weight_attr: Edge attribute holding the weight.

    Returns:
        A new graph with the same directedness as the input.

    Raises:
        InvalidGraphKindError: If the input is a multigraph.
        InvalidInputError: If a node payload derives a different identifier.
    """
    if nx_graph.is_multigraph():
        raise InvalidGraphKindError("NetworkX multigraphs are not supported.")

    backend = backend or AdjacencyListGraph
    direction = Direction.DIRECTED if nx_graph.is_directed() else Direction.UNDIRECTED
    result = backend(direction)

    for node, data in nx_graph.nodes(data=True):
        vertex_id = result.insert_vertex(data.get("payload", node))
        if vertex_id != node:
            raise InvalidInputError(
                f"Node payload identifier '{vertex_id}' does not match node '{node}'."
            )

    for source, target, data in nx_graph.edges(data=True):
        if "payload" in data:
            edge = data["payload"]
        elif weight_attr in data:
            edge = WeightedEdge(data[weight_attr])
        else:
            edge = None
        result.insert_edge(source, target, edge)
    return result
