"""graphsuite: pluggable graph backends with a shared algorithm suite.

Graphs store vertex and edge payloads in one of two interchangeable backends
(adjacency list or adjacency matrix); the direction is fixed when the graph is
created. Every algorithm works through the common `Graph` contract.

Primary API:
    AdjacencyListGraph, AdjacencyMatrixGraph - storage backends
    Vertex, WeightedEdge - ready-made payloads
    bfs_iter(), dfs_iter(), connected_components() - traversal
    prim(), kruskal() - minimum spanning trees
    dijkstra(), bellman_ford() - single-source shortest paths
    tsp_brute_force(), tsp_branch_and_bound(), tsp_nearest_neighbor(),
    tsp_double_tree() - traveling salesman tours
    edmonds_karp() - maximum flow
    read_graph(), load_graph(), write_graph() - edge-list text files

Example:
    from graphsuite import AdjacencyListGraph, Vertex, WeightedEdge, prim

    graph = AdjacencyListGraph()
    for i in range(3):
        graph.insert_vertex(Vertex(i))
    graph.insert_edge(0, 1, WeightedEdge(1.0))
    graph.insert_edge(1, 2, WeightedEdge(2.0))
    tree = prim(graph)
"""

from __future__ import annotations

from graphsuite import cli, logging
from graphsuite.algorithms import (
    MaxFlowResult,
    ShortestPaths,
    bellman_ford,
    bfs_iter,
    connected_components,
    count_connected_components,
    dfs_iter,
    dijkstra,
    edmonds_karp,
    kruskal,
    prim,
    shortest_path_tree,
    traverse,
    tsp_branch_and_bound,
    tsp_brute_force,
    tsp_double_tree,
    tsp_nearest_neighbor,
)
from graphsuite.config import GRAPH_CONFIG, GraphConfig
from graphsuite.graph import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    DisconnectedGraphError,
    DuplicateEdgeError,
    DuplicateVertexError,
    EdgeNotFoundError,
    Graph,
    GraphError,
    InvalidGraphKindError,
    InvalidInputError,
    InvalidWeightError,
    ListGraph,
    MatrixGraph,
    NegativeCycleError,
    NegativeWeightError,
    Path,
    Vertex,
    VertexNotFoundError,
    WeightedEdge,
)
from graphsuite.graph.convert import from_networkx, to_networkx
from graphsuite.io import load_graph, read_graph, write_graph
from graphsuite.types.base import Direction, TraversalType

__version__ = "0.3.0"

__all__ = [
    "__version__",
    # Graph model
    "Graph",
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "ListGraph",
    "MatrixGraph",
    "Vertex",
    "WeightedEdge",
    "Path",
    # Types
    "Direction",
    "TraversalType",
    # Algorithms
    "bfs_iter",
    "dfs_iter",
    "traverse",
    "connected_components",
    "count_connected_components",
    "prim",
    "kruskal",
    "ShortestPaths",
    "dijkstra",
    "bellman_ford",
    "shortest_path_tree",
    "tsp_brute_force",
    "tsp_branch_and_bound",
    "tsp_nearest_neighbor",
    "tsp_double_tree",
    "MaxFlowResult",
    "edmonds_karp",
    # Errors
    "GraphError",
    "DuplicateVertexError",
    "VertexNotFoundError",
    "DuplicateEdgeError",
    "EdgeNotFoundError",
    "InvalidGraphKindError",
    "InvalidWeightError",
    "NegativeWeightError",
    "NegativeCycleError",
    "DisconnectedGraphError",
    "InvalidInputError",
    # Text files
    "read_graph",
    "load_graph",
    "write_graph",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
