"""Graph editing helpers that return new graphs.

A search assumes the graph it reads stays unchanged, so every helper here
copies the graph and replaces the affected Node/Edge values instead of
mutating the input.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable, Optional, Union

from saferoute.config import ROUTING_CONFIG
from saferoute.logging import get_logger
from saferoute.model.graph import Graph
from saferoute.types import EdgeStatus, TrafficLevel

LOGGER = get_logger(__name__)


def _set_status(graph: Graph, edge_ids: Iterable[str], status: EdgeStatus) -> Graph:
    new_graph = graph.copy()
    for edge_id in edge_ids:
        edge = graph.get_edge(edge_id)
        new_graph.edges[edge_id] = replace(edge, status=status)
    return new_graph


def block_edges(graph: Graph, edge_ids: Iterable[str]) -> Graph:
    """Return a copy of ``graph`` with the given edges marked blocked.

    Raises:
        KeyError: If any edge id is unknown.
    """
    edge_ids = list(edge_ids)
    new_graph = _set_status(graph, edge_ids, EdgeStatus.BLOCKED)
    LOGGER.info("Blocked %d edge(s): %s", len(edge_ids), ", ".join(edge_ids))
    return new_graph


def unblock_edges(graph: Graph, edge_ids: Iterable[str]) -> Graph:
    """Return a copy of ``graph`` with the given edges marked open.

    Raises:
        KeyError: If any edge id is unknown.
    """
    edge_ids = list(edge_ids)
    new_graph = _set_status(graph, edge_ids, EdgeStatus.OPEN)
    LOGGER.info("Reopened %d edge(s): %s", len(edge_ids), ", ".join(edge_ids))
    return new_graph


def report_hazard(graph: Graph, node_id: str, factor: Optional[float] = None) -> Graph:
    """Mark a node hazardous and make the roads touching it more expensive.

    Every edge incident to ``node_id`` has its weight multiplied by ``factor``
    (``ROUTING_CONFIG.hazard_weight_factor`` by default). Reporting the same
    node twice applies the factor twice.

    Args:
        graph: Source graph. Not modified.
        node_id: Location of the hazard.
        factor: Weight multiplier for incident edges. Must be non-negative.

    Returns:
        A new graph with the updated node and edges.

    Raises:
        KeyError: If the node does not exist.
        ValueError: If ``factor`` is negative.
    """
    if factor is None:
        factor = ROUTING_CONFIG.hazard_weight_factor
    if factor < 0:
        raise ValueError(f"Hazard weight factor must be non-negative, got {factor}.")

    node = graph.get_node(node_id)
    new_graph = graph.copy()
    new_graph.nodes[node_id] = replace(node, is_hazard=True)

    touched = 0
    for edge in graph.incident_edges(node_id):
        new_graph.edges[edge.id] = replace(edge, weight=edge.weight * factor)
        touched += 1

    LOGGER.info(
        "Hazard reported at '%s'; scaled %d incident edge(s) by %s",
        node_id,
        touched,
        factor,
    )
    return new_graph


def update_traffic(
    graph: Graph,
    edge_id: str,
    level: Union[TrafficLevel, str],
    baseline: Optional[Graph] = None,
) -> Graph:
    """Record a traffic level on an edge and recompute its weight.

    The new weight is the baseline weight scaled by the level's multiplier from
    ``ROUTING_CONFIG`` and rounded half up to a whole number. The baseline
    weight is read from ``baseline`` (the unadjusted reference graph) so that
    repeated updates do not compound; it defaults to ``graph`` itself.

    Args:
        graph: Source graph. Not modified.
        edge_id: Edge to update.
        level: Traffic level or its name ("low", "medium", "high").
        baseline: Reference graph holding the uncongested weights.

    Returns:
        A new graph with the updated edge.

    Raises:
        KeyError: If the edge is missing from ``graph`` or ``baseline``.
        ValueError: If ``level`` is not a known traffic level.
    """
    if not isinstance(level, TrafficLevel):
        level = TrafficLevel.from_string(level)
    multiplier = ROUTING_CONFIG.traffic_multiplier(level.label)

    edge = graph.get_edge(edge_id)
    reference = (baseline if baseline is not None else graph).get_edge(edge_id)
    weight = math.floor(reference.weight * multiplier + 0.5)

    new_graph = graph.copy()
    new_graph.edges[edge_id] = replace(edge, traffic=level, weight=weight)
    LOGGER.debug(
        "Traffic on '%s' set to %s; weight %s -> %s",
        edge_id,
        level.label,
        edge.weight,
        weight,
    )
    return new_graph
