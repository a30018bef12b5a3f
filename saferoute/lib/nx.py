"""NetworkX graph conversion utilities.

Converts between the SafeRoute Graph model and ``networkx.MultiGraph`` so
that graphs can be drawn, analysed or cross-checked with NetworkX algorithms.

Example:
    >>> import networkx as nx
    >>> from saferoute.lib.nx import to_networkx
    >>> G = to_networkx(graph)
    >>> nx.dijkstra_path_length(G, "A", "D", weight="weight")
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

import networkx as nx

from saferoute.model.graph import Edge, Graph, Node
from saferoute.types import EdgeStatus, NodeType, TrafficLevel
from saferoute.utils.ids import new_base64_uuid


def to_networkx(graph: Graph, include_blocked: bool = False) -> nx.MultiGraph:
    """Convert a Graph into an undirected NetworkX multigraph.

    Edge ids become multigraph keys. Node and edge fields become attributes,
    with enums stored as their lower-case names.

    Args:
        graph: Graph to convert.
        include_blocked: Keep blocked edges. By default only open edges are
            copied, so NetworkX path algorithms see the same roads the
            shortest-path search does.

    Returns:
        A new ``nx.MultiGraph``.
    """
    G = nx.MultiGraph(**graph.attrs)
    for node_id, node in graph.nodes.items():
        attrs = asdict(node)
        attrs.pop("id")
        attrs["type"] = node.type.label
        G.add_node(node_id, **attrs)

    for edge_id, edge in graph.edges.items():
        if edge.blocked and not include_blocked:
            continue
        G.add_edge(
            edge.source,
            edge.target,
            key=edge_id,
            weight=edge.weight,
            status=edge.status.label,
            traffic=edge.traffic.label if edge.traffic is not None else None,
        )
    return G


def _enum_attr(enum_cls: Any, value: Any, default: Any) -> Any:
    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    return enum_cls.from_string(value)


def from_networkx(G: nx.Graph, weight_attr: str = "weight") -> Graph:
    """Build a Graph from any NetworkX graph.

    Directed graphs are read as undirected: each edge becomes one undirected
    Edge. Node names are converted to strings. Multigraph keys that are strings
    are kept as edge ids; other edges get generated ids.

    Args:
        G: Source NetworkX graph (Graph, DiGraph, MultiGraph or MultiDiGraph).
        weight_attr: Edge attribute holding the weight; missing means 1.

    Returns:
        A new Graph. Invariants are not validated here.
    """
    graph = Graph(attrs=dict(G.graph))
    for node_name, data in G.nodes(data=True):
        node_id = str(node_name)
        graph.add_node(
            Node(
                id=node_id,
                name=data.get("name", ""),
                type=_enum_attr(NodeType, data.get("type"), NodeType.NORMAL),
                description=data.get("description", ""),
                lat=data.get("lat"),
                lng=data.get("lng"),
                is_hazard=bool(data.get("is_hazard", False)),
            )
        )

    if G.is_multigraph():
        edge_iter = G.edges(keys=True, data=True)
    else:
        edge_iter = ((u, v, None, d) for u, v, d in G.edges(data=True))

    for u, v, key, data in edge_iter:
        edge_id = key if isinstance(key, str) and key not in graph.edges else None
        graph.add_edge(
            Edge(
                id=edge_id or new_base64_uuid(),
                source=str(u),
                target=str(v),
                weight=data.get(weight_attr, 1.0),
                status=_enum_attr(EdgeStatus, data.get("status"), EdgeStatus.OPEN),
                traffic=_enum_attr(TrafficLevel, data.get("traffic"), None),
            )
        )
    return graph

