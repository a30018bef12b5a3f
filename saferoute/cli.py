"""Command-line interface for SafeRoute."""

from __future__ import annotations

import argparse
import json
import math
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from saferoute.algorithms.spf import find_shortest_path
from saferoute.api import route
from saferoute.io import load_graph_file, path_result_to_dict
from saferoute.logging import get_logger, level_for_verbosity, set_global_log_level
from saferoute.model.edit import block_edges
from saferoute.model.graph import Graph
from saferoute.types import NodeType

logger = get_logger(__name__)


def _clip(value: Any, limit: Optional[int]) -> str:
    text = str(value)
    if limit is not None and len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Render rows as an indented ASCII table.

    Cells longer than ``max_col_width`` are clipped with "...". Returns "" when
    there are no rows.
    """
    if not rows:
        return ""

    table = [[_clip(cell, max_col_width) for cell in row] for row in [headers, *rows]]
    widths = [max(min_width, *(len(cell) for cell in col)) for col in zip(*table)]

    def render(cells: List[str]) -> str:
        return "   " + " | ".join(c.ljust(w) for c, w in zip(cells, widths))

    ruler = "   " + "-+-".join("-" * w for w in widths)
    return "\n".join([render(table[0]), ruler] + [render(r) for r in table[1:]])


def _format_distance(value: Any) -> str:
    """Route distance for display.

    Whole values print without decimals, others with up to three; thousands
    are separated. An infinite distance prints as "unreachable" and values
    that are not numbers are returned as ``str(value)``.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 1234.567 -> "1,234.567"; inf -> "unreachable".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)
    if math.isinf(v):
        return "unreachable"
    if v.is_integer():
        return f"{v:,.0f}"
    return f"{v:,.3f}".rstrip("0").rstrip(".")


def _format_duration(seconds: float) -> str:
    """Return a concise duration string, e.g. "12.3 ms" or "1.23 s"."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _print_graph_summary(graph: Graph, detail: bool) -> None:
    """Print node and edge counts and, with ``detail``, full tables."""
    blocked = [e for e in graph.edges.values() if e.blocked]
    by_type = {t.label: 0 for t in NodeType}
    for node in graph.nodes.values():
        by_type[node.type.label] += 1

    print("\n1. NODES")
    print("-" * 30)
    print(f"   Total: {len(graph.nodes)}")
    print("   " + ", ".join(f"{label}: {n}" for label, n in by_type.items()))
    hazards = [n.id for n in graph.nodes.values() if n.is_hazard]
    if hazards:
        print(f"   Hazards reported: {', '.join(hazards)}")
    if detail and graph.nodes:
        rows = [
            [n.id, n.name, n.type.label, "yes" if n.is_hazard else ""]
            for n in graph.nodes.values()
        ]
        print(_format_table(["ID", "Name", "Type", "Hazard"], rows, max_col_width=40))

    print("\n2. EDGES")
    print("-" * 30)
    print(f"   Total: {len(graph.edges)} ({len(blocked)} blocked)")
    if detail and graph.edges:
        rows = [
            [
                e.id,
                e.source,
                e.target,
                _format_distance(e.weight),
                e.status.label,
                e.traffic.label if e.traffic is not None else "",
            ]
            for e in graph.edges.values()
        ]
        print(
            _format_table(
                ["ID", "Source", "Target", "Weight", "Status", "Traffic"], rows
            )
        )


def _inspect_graph(path: Path, detail: bool = False) -> None:
    """Load and validate a graph document, then print its structure."""
    logger.info(f"Inspecting graph: {path}")
    try:
        graph = load_graph_file(path)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to load graph: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to load graph: {type(e).__name__}: {e}")
        sys.exit(1)

    print("GRAPH ANALYSIS")
    print("=" * 30)
    print(f"   File: {path}")
    _print_graph_summary(graph, detail)
    print("\nGraph is valid")


def _run_route(
    path: Path,
    start: str,
    end: str,
    block: Optional[List[str]] = None,
    results: Optional[Path] = None,
    stdout: bool = False,
    strict: bool = False,
) -> None:
    """Route between two nodes of a graph file and report the result.

    Args:
        path: Graph document (YAML or JSON).
        start: Start node id.
        end: Target node id.
        block: Edge ids to mark blocked before routing.
        results: Optional path where the JSON result is written.
        stdout: Whether to print the JSON result to stdout.
        strict: Reject unknown node ids instead of reporting them unreachable.
    """
    _start_time = perf_counter()
    try:
        graph = load_graph_file(path)
        if block:
            graph = block_edges(graph, block)

        if strict:
            result = route(graph, start, end)
        else:
            for node_id in (start, end):
                if node_id not in graph.nodes:
                    logger.warning(f"Node '{node_id}' is not in the graph")
            result = find_shortest_path(graph, start, end)

        if result.is_reachable:
            names = [graph.nodes[n].name for n in result.path]
            distance = _format_distance(result.distance)
            print(f"Route {start} -> {end}: distance {distance}")
            print("   " + " -> ".join(names))
        else:
            print(f"No route from {start} to {end}")

        payload = path_result_to_dict(result, graph)
        json_str = json.dumps(payload, indent=2)
        if results is not None:
            results.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Writing results to: {results}")
            results.write_text(json_str)
            print(f"Results written to: {results}")
        if stdout:
            print(json_str)

        _elapsed = perf_counter() - _start_time
        logger.info(f"Routing completed in {_format_duration(_elapsed)}")

    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to compute route: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to compute route: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``saferoute`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="saferoute",
        description="Find shortest open routes in road graphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{route,inspect}",
        help="Available commands",
    )

    route_parser = subparsers.add_parser("route", help="Find the shortest route")
    route_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")
    route_parser.add_argument("start", help="Start node id")
    route_parser.add_argument("end", help="Target node id")
    route_parser.add_argument(
        "--block",
        "-b",
        nargs="+",
        metavar="EDGE",
        help="Mark these edge ids blocked before routing",
    )
    route_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Write the result as JSON to this file",
    )
    route_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the JSON result to stdout",
    )
    route_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unknown node ids instead of reporting no route",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect and validate a graph document"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show complete node and edge tables",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_verbosity(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "route":
        _run_route(
            path=args.graph,
            start=args.start,
            end=args.end,
            block=args.block,
            results=args.results,
            stdout=args.stdout,
            strict=args.strict,
        )
    elif args.command == "inspect":
        _inspect_graph(args.graph, args.detail)


if __name__ == "__main__":
    main()
