"""Caller-facing entry points around the shortest-path search.

``find_shortest_path`` never raises and folds unknown node ids into an
unreachable result. ``route`` checks the endpoints first so that a typo in an
id is reported as such, and ``compute_shortest_path`` goes from a graph
document to a freshly built result dictionary in one call.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

import yaml

from saferoute.algorithms.spf import find_shortest_path
from saferoute.io import graph_from_dict, path_result_to_dict
from saferoute.logging import get_logger
from saferoute.model.graph import Graph
from saferoute.model.path import PathResult

LOGGER = get_logger(__name__)


def route(graph: Graph, start_id: str, end_id: str) -> PathResult:
    """Shortest route between two nodes that must exist in ``graph``.

    Raises:
        KeyError: If ``start_id`` or ``end_id`` is not a node of ``graph``.
    """
    if start_id not in graph.nodes:
        raise KeyError(f"Start node '{start_id}' is not in the graph.")
    if end_id not in graph.nodes:
        raise KeyError(f"End node '{end_id}' is not in the graph.")
    return find_shortest_path(graph, start_id, end_id)


def compute_shortest_path(
    document: Union[Mapping[str, Any], str], start_id: str, end_id: str
) -> Dict[str, Any]:
    """Load a graph document, route between two nodes and return the result.

    The returned dictionary is built fresh for each call and belongs to the
    caller; see ``path_result_to_dict`` for its keys.

    Args:
        document: Parsed graph document, or its YAML/JSON text.
        start_id: Id of the start node.
        end_id: Id of the target node.

    Raises:
        KeyError: If either endpoint is not a node of the document.
        ValueError: If the document is malformed.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    if isinstance(document, str):
        document = yaml.safe_load(document) or {}
    elif isinstance(document, Mapping):
        document = dict(document)
    graph = graph_from_dict(document)
    result = route(graph, start_id, end_id)
    LOGGER.debug(
        "compute_shortest_path %r -> %r: reachable=%s",
        start_id,
        end_id,
        result.is_reachable,
    )
    return path_result_to_dict(result, graph)
