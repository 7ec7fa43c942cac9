"""Command-line interface for graphsuite."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from graphsuite.algorithms.max_flow import edmonds_karp
from graphsuite.algorithms.mst import kruskal, prim
from graphsuite.algorithms.shortest_path import bellman_ford, dijkstra
from graphsuite.algorithms.traversal import connected_components
from graphsuite.algorithms.tsp import (
    tsp_branch_and_bound,
    tsp_brute_force,
    tsp_double_tree,
    tsp_nearest_neighbor,
)
from graphsuite.graph.adjacency_list import AdjacencyListGraph
from graphsuite.graph.adjacency_matrix import AdjacencyMatrixGraph
from graphsuite.graph.base import Graph
from graphsuite.graph.errors import GraphError
from graphsuite.io import load_graph
from graphsuite.logging import get_logger, set_verbosity
from graphsuite.types.base import Direction

logger = get_logger(__name__)

BACKENDS = {
    "list": AdjacencyListGraph,
    "matrix": AdjacencyMatrixGraph,
}

MST_ALGORITHMS = ("prim", "kruskal")

SSSP_ALGORITHMS = {
    "dijkstra": dijkstra,
    "bellman-ford": bellman_ford,
}

TSP_ALGORITHMS = {
    "brute-force": tsp_brute_force,
    "branch-and-bound": tsp_branch_and_bound,
    "nearest-neighbor": tsp_nearest_neighbor,
    "double-tree": tsp_double_tree,
}


def _is_weighted(graph: Graph) -> bool:
    return any(edge is not None for _, _, edge in graph.edges())


def _load(args: argparse.Namespace) -> Graph:
    direction = Direction.DIRECTED if args.directed else Direction.UNDIRECTED
    graph = load_graph(args.graph, BACKENDS[args.backend], direction)
    logger.info("Loaded %r from %s", graph, args.graph)
    return graph


def _cmd_info(graph: Graph, args: argparse.Namespace) -> List[str]:
    lines = [
        f"vertices: {graph.vertex_count}",
        f"edges: {graph.edge_count}",
        f"directed: {'yes' if graph.is_directed else 'no'}",
        f"components: {len(connected_components(graph))}",
    ]
    if _is_weighted(graph):
        lines.append(f"total weight: {graph.total_weight()}")
    return lines


def _cmd_components(graph: Graph, args: argparse.Namespace) -> List[str]:
    components = connected_components(graph)
    lines = [f"components: {len(components)}"]
    for i, component in enumerate(components, start=1):
        lines.append(f"{i}: " + " ".join(str(v) for v in component))
    return lines


def _cmd_mst(graph: Graph, args: argparse.Namespace) -> List[str]:
    if args.algorithm == "prim":
        tree = prim(graph, args.start)
    else:
        tree = kruskal(graph)
    lines = [
        f"{source}\t{target}\t{graph.edge_weight(edge)}"
        for source, target, edge in tree.edges()
    ]
    lines.append(f"total weight: {tree.total_weight()}")
    return lines


def _cmd_sssp(graph: Graph, args: argparse.Namespace) -> List[str]:
    source = args.start if args.start is not None else graph.first_vertex()
    paths = SSSP_ALGORITHMS[args.algorithm](graph, source)
    targets = [args.target] if args.target is not None else list(graph.vertices())

    lines = []
    for target in targets:
        graph.get_vertex(target)
        if target not in paths:
            lines.append(f"{target}\tunreachable")
            continue
        route = " -> ".join(str(v) for v in paths.path_to(target))
        lines.append(f"{target}\t{paths.cost(target)}\t{route}")
    return lines


def _cmd_tsp(graph: Graph, args: argparse.Namespace) -> List[str]:
    tour = TSP_ALGORITHMS[args.algorithm](graph, args.start)
    return [
        "tour: " + " -> ".join(str(v) for v in tour.vertices()),
        f"cost: {tour.cost}",
    ]


def _cmd_max_flow(graph: Graph, args: argparse.Namespace) -> List[str]:
    source = args.start if args.start is not None else graph.first_vertex()
    result = edmonds_karp(graph, source, args.target)
    lines = [f"max flow: {result.value}"]
    for (u, v), flow in result.edge_flow.items():
        if flow:
            lines.append(f"{u} -> {v}: {flow}")
    cut = ", ".join(f"{u} -> {v}" for u, v in result.min_cut)
    lines.append(f"min cut: {cut}")
    return lines


COMMANDS: Dict[str, Callable[[Graph, argparse.Namespace], List[str]]] = {
    "info": _cmd_info,
    "components": _cmd_components,
    "mst": _cmd_mst,
    "sssp": _cmd_sssp,
    "tsp": _cmd_tsp,
    "max-flow": _cmd_max_flow,
}


def _run(args: argparse.Namespace) -> None:
    try:
        graph = _load(args)
        lines = COMMANDS[args.command](graph, args)
    except FileNotFoundError:
        logger.error("Graph file not found: %s", args.graph)
        sys.exit(1)
    except (GraphError, OSError) as e:
        logger.error("%s failed: %s: %s", args.command, type(e).__name__, e)
        sys.exit(1)

    for line in lines:
        print(line)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphsuite",
        description="Run graph algorithms on edge-list files.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{info,components,mst,sssp,tsp,max-flow}",
    )

    _add_graph_arguments(subparsers.add_parser("info", help="Show graph statistics"))
    _add_graph_arguments(
        subparsers.add_parser("components", help="List connected components")
    )

    mst_parser = subparsers.add_parser("mst", help="Minimum spanning tree")
    mst_parser.add_argument("algorithm", choices=list(MST_ALGORITHMS))
    _add_graph_arguments(mst_parser)

    sssp_parser = subparsers.add_parser("sssp", help="Single-source shortest paths")
    sssp_parser.add_argument("algorithm", choices=list(SSSP_ALGORITHMS))
    _add_graph_arguments(sssp_parser)
    sssp_parser.add_argument(
        "--target", type=int, default=None, help="Only report this vertex"
    )

    tsp_parser = subparsers.add_parser("tsp", help="Traveling salesman tour")
    tsp_parser.add_argument("algorithm", choices=list(TSP_ALGORITHMS))
    _add_graph_arguments(tsp_parser)

    flow_parser = subparsers.add_parser(
        "max-flow", help="Maximum flow (directed graphs)"
    )
    _add_graph_arguments(flow_parser)
    flow_parser.add_argument("--target", type=int, required=True, help="Sink vertex")

    return parser


def _add_graph_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the graph file and loading options shared by every command."""
    parser.add_argument("graph", type=Path, help="Path to the graph file")
    parser.add_argument(
        "--directed", action="store_true", help="Treat edges as directed"
    )
    parser.add_argument(
        "--backend",
        choices=sorted(BACKENDS),
        default="list",
        help="Storage backend (default: list)",
    )
    parser.add_argument(
        "--start", type=int, default=None, help="Start/source vertex id"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``graphsuite`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = _build_parser()

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_verbosity(args.verbose)
    logger.debug("Debug logging enabled")

    _run(args)


if __name__ == "__main__":
    main()
