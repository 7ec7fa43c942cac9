"""Graph algorithms written against the backend-independent `Graph` contract."""

from graphsuite.algorithms.max_flow import MaxFlowResult, edmonds_karp
from graphsuite.algorithms.mst import kruskal, prim
from graphsuite.algorithms.shortest_path import (
    ShortestPaths,
    bellman_ford,
    dijkstra,
    shortest_path_tree,
)
from graphsuite.algorithms.traversal import (
    bfs_iter,
    connected_components,
    count_connected_components,
    dfs_iter,
    traverse,
)
from graphsuite.algorithms.tsp import (
    tsp_branch_and_bound,
    tsp_brute_force,
    tsp_double_tree,
    tsp_nearest_neighbor,
)

__all__ = [
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
]
