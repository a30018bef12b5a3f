"""Graph documents: loading, validation and serialization.

A graph document keys nodes and edges by id::

    nodes:
      clock_tower: {name: Clock Tower, type: normal}
      parade_ground: {name: Parade Ground, type: safe}
    edges:
      e1: {source: clock_tower, target: parade_ground, weight: 3}

JSON documents use the same shape (JSON parses as YAML). An ``id`` inside an
entry is optional but must match its key when present. ``isHazard`` is the
document spelling of ``Node.is_hazard``.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import jsonschema
import yaml

from saferoute.config import ROUTING_CONFIG
from saferoute.logging import get_logger
from saferoute.model.graph import Edge, Graph, Node, validate_graph
from saferoute.model.path import PathResult
from saferoute.types import EdgeStatus, NodeType, TrafficLevel
from saferoute.utils.yaml_utils import normalize_yaml_dict_keys

LOGGER = get_logger(__name__)

_SCHEMA_CACHE: Dict[str, Any] = {}


def _graph_schema() -> Dict[str, Any]:
    """Load the packaged JSON schema once."""
    if "graph" not in _SCHEMA_CACHE:
        with (
            resources.files("saferoute.schemas")
            .joinpath("graph.json")
            .open("r", encoding="utf-8")
        ) as f:
            _SCHEMA_CACHE["graph"] = json.load(f)
    return _SCHEMA_CACHE["graph"]


def _check_shape(data: Dict[str, Any]) -> None:
    """Early shape checks with clearer messages than schema validation gives."""
    for section in ("nodes", "edges"):
        if section in data and not isinstance(data[section], dict):
            raise ValueError(f"'{section}' must be a mapping of id -> definition")
    for section in ("nodes", "edges"):
        for key, entry in (data.get(section) or {}).items():
            if not isinstance(entry, dict):
                raise ValueError(
                    f"Definition of '{key}' in '{section}' must be a mapping"
                )
            if "id" in entry and str(entry["id"]) != key:
                raise ValueError(
                    f"Entry '{key}' in '{section}' declares mismatching id "
                    f"'{entry['id']}'"
                )


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """Build and validate a Graph from a parsed graph document.

    Args:
        data: Mapping with optional ``nodes``, ``edges`` and ``attrs`` sections.

    Returns:
        The validated Graph.

    Raises:
        ValueError: On malformed sections, mismatching ids, dangling endpoints
            or invalid weights.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    if not isinstance(data, dict):
        raise ValueError("A graph document must be a mapping at top-level.")

    data = dict(data)
    for section in ("nodes", "edges"):
        if data.get(section) is None:
            data[section] = {}
        elif isinstance(data[section], dict):
            data[section] = normalize_yaml_dict_keys(data[section])

    _check_shape(data)
    jsonschema.validate(data, _graph_schema())

    graph = Graph(attrs=dict(data.get("attrs") or {}))
    for node_id, entry in data["nodes"].items():
        graph.nodes[node_id] = Node(
            id=node_id,
            name=entry.get("name", ""),
            type=NodeType.from_string(
                entry.get("type", ROUTING_CONFIG.default_node_type)
            ),
            description=entry.get("description", ""),
            lat=entry.get("lat"),
            lng=entry.get("lng"),
            is_hazard=entry.get("isHazard", False),
        )

    for edge_id, entry in data["edges"].items():
        traffic = entry.get("traffic")
        graph.edges[edge_id] = Edge(
            id=edge_id,
            source=str(entry["source"]),
            target=str(entry["target"]),
            weight=entry["weight"],
            status=EdgeStatus.from_string(
                entry.get("status", ROUTING_CONFIG.default_edge_status)
            ),
            traffic=TrafficLevel.from_string(traffic) if traffic else None,
        )

    validate_graph(graph)
    LOGGER.debug(
        "Loaded graph document: %d nodes, %d edges", len(graph.nodes), len(graph.edges)
    )
    return graph


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Serialize a Graph into the document shape read by ``graph_from_dict``.

    Optional fields are written only when set.
    """
    nodes: Dict[str, Any] = {}
    for node_id, node in graph.nodes.items():
        entry: Dict[str, Any] = {
            "id": node.id,
            "name": node.name,
            "type": node.type.label,
            "description": node.description,
        }
        if node.lat is not None:
            entry["lat"] = node.lat
        if node.lng is not None:
            entry["lng"] = node.lng
        if node.is_hazard:
            entry["isHazard"] = True
        nodes[node_id] = entry

    edges: Dict[str, Any] = {}
    for edge_id, edge in graph.edges.items():
        entry = {
            "id": edge.id,
            "source": edge.source,
            "target": edge.target,
            "weight": edge.weight,
            "status": edge.status.label,
        }
        if edge.traffic is not None:
            entry["traffic"] = edge.traffic.label
        edges[edge_id] = entry

    data: Dict[str, Any] = {"nodes": nodes, "edges": edges}
    if graph.attrs:
        data["attrs"] = dict(graph.attrs)
    return data


def load_graph_yaml(text: str) -> Graph:
    """Parse a YAML (or JSON) graph document and build the Graph."""
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    return graph_from_dict(data)


def load_graph_file(path: Union[str, Path]) -> Graph:
    """Read a YAML or JSON graph document from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    LOGGER.info("Loading graph from: %s", path)
    graph = load_graph_yaml(path.read_text(encoding="utf-8"))
    LOGGER.info(
        "Loaded %d nodes and %d edges (%d blocked)",
        len(graph.nodes),
        len(graph.edges),
        sum(1 for e in graph.edges.values() if e.blocked),
    )
    return graph


def path_result_to_dict(
    result: PathResult, graph: Optional[Graph] = None
) -> Dict[str, Any]:
    """Serialize a PathResult for JSON output.

    When ``graph`` is given, display names of the path nodes are included
    under ``names``.
    """
    data = result.to_dict()
    if graph is not None:
        data["names"] = [
            graph.nodes[node_id].name if node_id in graph.nodes else node_id
            for node_id in result.path
        ]
    return data


def edgelist_to_graph(
    lines: Iterable[str],
    columns: Optional[List[str]] = None,
    separator: Optional[str] = None,
    graph: Optional[Graph] = None,
) -> Graph:
    """Build or extend a Graph from an edge list.

    Each non-empty line that does not start with ``#`` is split by
    ``separator`` (any whitespace by default) and the tokens are mapped to
    ``columns``. Recognized columns are ``id``, ``source``, ``target``,
    ``weight``, ``status`` and ``traffic``; ``source`` and ``target`` are
    required, ``weight`` defaults to 1 and ``id`` to a generated one. Missing
    endpoint nodes are created with default attributes.

    Args:
        lines: Edge lines.
        columns: Column names. Defaults to ``["id", "source", "target", "weight"]``.
        separator: Token separator, or None to split on whitespace.
        graph: Graph to extend. It is not modified; the edges are added to a
            copy. A new Graph is created when None.

    Returns:
        The extended copy, or the newly created Graph.

    Raises:
        ValueError: If a line's token count does not match ``columns`` or a
            value cannot be parsed.
    """
    if columns is None:
        columns = ["id", "source", "target", "weight"]
    for required in ("source", "target"):
        if required not in columns:
            raise ValueError(f"Edge list columns must include '{required}'.")
    graph = Graph() if graph is None else graph.copy()

    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        tokens = line.split(separator)
        if len(tokens) != len(columns):
            raise ValueError(
                f"Line '{line}' does not match expected columns {columns} "
                "(token count mismatch)."
            )
        row = dict(zip(columns, tokens))

        attr: Dict[str, Any] = {}
        if "status" in row:
            attr["status"] = EdgeStatus.from_string(row["status"])
        if "traffic" in row:
            attr["traffic"] = TrafficLevel.from_string(row["traffic"])
        try:
            weight = float(row.get("weight", 1.0))
        except ValueError:
            raise ValueError(f"Invalid weight in line '{line}'.") from None

        for node_id in (row["source"], row["target"]):
            if node_id not in graph:
                graph.add_node(Node(id=node_id))

        graph.connect(row["source"], row["target"], weight, key=row.get("id"), **attr)

    validate_graph(graph)
    return graph
