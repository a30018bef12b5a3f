"""Single-pair shortest path over the open edges of an undirected graph."""

from __future__ import annotations

import math
from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from saferoute.logging import get_logger
from saferoute.model.graph import Graph
from saferoute.model.path import PathResult
from saferoute.types import Cost

LOGGER = get_logger(__name__)

#: Neighbor id and the weight of the edge leading to it.
Adjacency = Dict[str, List[Tuple[str, Cost]]]


def open_adjacency(graph: Graph) -> Adjacency:
    """Index the open edges of ``graph`` by endpoint.

    Every edge is listed under both endpoints since edges are undirected; a
    self-loop is listed once. Blocked edges and edges with an endpoint outside
    ``graph.nodes`` are left out. Neighbors keep the edge iteration order of
    ``graph.edges``.

    Args:
        graph: Graph to index.

    Returns:
        Mapping from node id to a list of (neighbor_id, weight) pairs.
    """
    adjacency: Adjacency = {node_id: [] for node_id in graph.nodes}
    for edge in graph.edges.values():
        if edge.blocked:
            continue
        if edge.source not in adjacency or edge.target not in adjacency:
            continue
        adjacency[edge.source].append((edge.target, edge.weight))
        if edge.target != edge.source:
            adjacency[edge.target].append((edge.source, edge.weight))
    return adjacency


def _resolve_to_path(pred: Dict[str, Optional[str]], dst_node: str) -> Tuple[str, ...]:
    """Walk predecessor links back from ``dst_node`` and return them in order."""
    path: List[str] = []
    current: Optional[str] = dst_node
    while current is not None:
        path.append(current)
        current = pred.get(current)
    path.reverse()
    return tuple(path)


def find_shortest_path(graph: Graph, start_id: str, end_id: str) -> PathResult:
    """Compute the minimal-weight route between two nodes.

    Dijkstra's search from ``start_id`` with lazy deletion: superseded frontier
    entries are skipped when popped instead of being decreased in place. The
    search stops as soon as ``end_id`` is popped since its distance is final at
    that point.

    Blocked edges are ignored and every open edge can be used in both
    directions. Among parallel edges the cheapest one wins through relaxation.
    When several routes share the minimal weight, the predecessor recorded
    first is kept, so the returned route depends on edge iteration order.

    No errors are raised for data conditions. An unknown ``start_id`` or
    ``end_id``, or a target in another component, yields an unreachable
    result. Weights are assumed non-negative; see ``validate_graph``.

    Args:
        graph: Graph to search. It is not modified.
        start_id: Id of the start node.
        end_id: Id of the target node.

    Returns:
        PathResult with the total weight and the node ids from start to end,
        or ``(inf, ())`` when the target cannot be reached.
    """
    if start_id not in graph.nodes or end_id not in graph.nodes:
        LOGGER.debug(
            "Unknown endpoint in query %r -> %r; reporting unreachable",
            start_id,
            end_id,
        )
        return PathResult.unreachable()

    adjacency = open_adjacency(graph)

    costs: Dict[str, Cost] = {node_id: math.inf for node_id in graph.nodes}
    costs[start_id] = 0.0
    pred: Dict[str, Optional[str]] = {start_id: None}
    min_pq: List[Tuple[Cost, str]] = [(0.0, start_id)]

    while min_pq:
        current_cost, node_id = heappop(min_pq)
        if current_cost > costs[node_id]:
            continue
        if node_id == end_id:
            break

        for neighbor_id, weight in adjacency[node_id]:
            new_cost = current_cost + weight
            if new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = node_id
                heappush(min_pq, (new_cost, neighbor_id))

    distance = costs[end_id]
    if math.isinf(distance):
        LOGGER.debug("No open route from %r to %r", start_id, end_id)
        return PathResult.unreachable()

    path = _resolve_to_path(pred, end_id)
    LOGGER.debug(
        "Route %r -> %r: distance=%s over %d hops",
        start_id,
        end_id,
        distance,
        len(path) - 1,
    )
    return PathResult(distance=distance, path=path)
