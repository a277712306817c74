"""
Run one graph algorithm on a graph described on the command line.

Usage:
    uv run python -m graphcore --biedge A B 1 --biedge B C 2 --biedge A C 5 \\
        --algorithm mst --source A
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from graphcore.display import (
    display_flag,
    display_labels,
    edges_to_table,
    topological_order_to_text,
    weight_lookup_to_text,
)
from graphcore.graph import Graph
from graphcore.types import CandidateOrder

logger = logging.getLogger("graphcore")

ALGORITHMS = ("dfs", "bfs", "isdag", "topsort", "mst", "weight")
NEEDS_SOURCE = frozenset({"bfs", "mst", "weight"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphcore", description="Run a graph algorithm"
    )
    parser.add_argument(
        "--vertex", action="append", default=[], metavar="LABEL", help="Add a vertex"
    )
    parser.add_argument(
        "--edge",
        action="append",
        default=[],
        nargs=3,
        metavar=("SRC", "DST", "WEIGHT"),
        help="Add a directed edge (endpoints are created if needed)",
    )
    parser.add_argument(
        "--biedge",
        action="append",
        default=[],
        nargs=3,
        metavar=("SRC", "DST", "WEIGHT"),
        help="Add a bidirectional edge (endpoints are created if needed)",
    )
    parser.add_argument("--algorithm", choices=ALGORITHMS, default="dfs")
    parser.add_argument("--source", help="Source vertex")
    parser.add_argument("--target", help="Target vertex (weight lookup)")
    parser.add_argument(
        "--source-first",
        action="store_true",
        help="Rank every edge leaving the source ahead of the others in mst",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _weight(parser: argparse.ArgumentParser, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        parser.error(f"invalid edge weight: {raw!r}")


def build_graph(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> Graph[str]:
    graph = Graph[str](args.vertex)
    for source, destination, raw in args.edge:
        graph.add_vertex(source)
        graph.add_vertex(destination)
        graph.add_edge(source, destination, _weight(parser, raw))
    for source, destination, raw in args.biedge:
        graph.add_vertex(source)
        graph.add_vertex(destination)
        graph.add_bidirectional_edge(source, destination, _weight(parser, raw))
    logger.info("graph with %d vertices, %d edges", graph.num_vertices, graph.num_edges)
    return graph


def run(args: argparse.Namespace, graph: Graph[str], console: Console) -> int:
    algorithm = args.algorithm
    if algorithm == "dfs":
        display_labels(console, "dfs", graph.dfs(args.source))
    elif algorithm == "bfs":
        display_labels(console, "bfs", graph.bfs(args.source))
    elif algorithm == "isdag":
        display_flag(console, "is DAG", graph.is_dag())
    elif algorithm == "topsort":
        result = graph.topological_sort()
        console.print(topological_order_to_text(result))
        return 0 if result.is_sorted else 1
    elif algorithm == "mst":
        ordering = (
            CandidateOrder.SOURCE_THEN_WEIGHT
            if args.source_first
            else CandidateOrder.WEIGHT_THEN_SOURCE
        )
        tree = graph.kruskal_mst(args.source, ordering)
        console.print(edges_to_table(tree, title=f"Spanning tree of {args.source}"))
    elif algorithm == "weight":
        lookup = graph.lookup_edge_weight(args.source, args.target)
        console.print(weight_lookup_to_text(lookup))
        return 0 if lookup.found else 1
    return 0


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.algorithm in NEEDS_SOURCE and args.source is None:
        parser.error(f"--source is required for {args.algorithm}")
    if args.algorithm == "weight" and args.target is None:
        parser.error("--target is required for weight")

    graph = build_graph(parser, args)
    return run(args, graph, console or Console())


if __name__ == "__main__":
    sys.exit(main())
