"""SafeRoute: shortest open routes through road graphs with blocked segments.

Primary API:
    find_shortest_path() - Minimal-weight route between two nodes, never raises
    route() - Same, but rejects unknown node ids with KeyError
    compute_shortest_path() - Graph document in, result dictionary out
    Graph, Node, Edge - Road graph model
    PathResult - Distance and node sequence of a route

Example:
    from saferoute import Edge, Graph, Node, find_shortest_path

    g = Graph()
    for node_id in "ABCD":
        g.add_node(Node(id=node_id))
    g.add_edge(Edge(id="ab", source="A", target="B", weight=1))
    g.add_edge(Edge(id="bd", source="B", target="D", weight=2))

    result = find_shortest_path(g, "A", "D")
    result.distance  # 3.0
    result.path      # ("A", "B", "D")
"""

from __future__ import annotations

from saferoute import cli, logging
from saferoute._version import __version__
from saferoute.algorithms.spf import find_shortest_path
from saferoute.api import compute_shortest_path, route
from saferoute.io import (
    graph_from_dict,
    graph_to_dict,
    load_graph_file,
    load_graph_yaml,
    path_result_to_dict,
)
from saferoute.lib.nx import from_networkx, to_networkx
from saferoute.model.edit import (
    block_edges,
    report_hazard,
    unblock_edges,
    update_traffic,
)
from saferoute.model.graph import Edge, Graph, Node, validate_graph
from saferoute.model.path import PathResult
from saferoute.types import EdgeStatus, NodeType, TrafficLevel

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Node",
    "Edge",
    "PathResult",
    "NodeType",
    "EdgeStatus",
    "TrafficLevel",
    "validate_graph",
    # Routing
    "find_shortest_path",
    "route",
    "compute_shortest_path",
    # Editing
    "block_edges",
    "unblock_edges",
    "report_hazard",
    "update_traffic",
    # Documents
    "graph_from_dict",
    "graph_to_dict",
    "load_graph_yaml",
    "load_graph_file",
    "path_result_to_dict",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
