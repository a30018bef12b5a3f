"""Road graph model and routing results."""

from saferoute.model.edit import (
    block_edges,
    report_hazard,
    unblock_edges,
    update_traffic,
)
from saferoute.model.graph import Edge, Graph, Node, validate_graph
from saferoute.model.path import PathResult

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "PathResult",
    "validate_graph",
    "block_edges",
    "unblock_edges",
    "report_hazard",
    "update_traffic",
]
