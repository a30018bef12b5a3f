"""Road graph model: Node, Edge and the Graph container.

Nodes and edges are frozen dataclasses keyed by their ``id`` in the Graph's
``nodes`` and ``edges`` dictionaries. Edges are undirected; ``source`` and
``target`` only name the two endpoints. Editing helpers in
``saferoute.model.edit`` produce new Graph values rather than mutating one that
may be in use by a search.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from saferoute.logging import get_logger
from saferoute.types import Cost, EdgeStatus, NodeType, TrafficLevel
from saferoute.utils.ids import new_base64_uuid

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Node:
    """A location in the road graph.

    Only ``id`` matters to routing; the rest is carried for presentation.

    Attributes:
        id (str): Unique identifier, the key in ``Graph.nodes``.
        name (str): Display name. Defaults to the id.
        type (NodeType): Safety classification.
        description (str): Free-text description.
        lat (Optional[float]): Latitude, if known.
        lng (Optional[float]): Longitude, if known.
        is_hazard (bool): Whether a hazard has been reported at this location.
    """

    id: str
    name: str = ""
    type: NodeType = NodeType.NORMAL
    description: str = ""
    lat: Optional[float] = None
    lng: Optional[float] = None
    is_hazard: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.id)


@dataclass(frozen=True)
class Edge:
    """An undirected, weighted road segment between two nodes.

    Attributes:
        id (str): Unique identifier, the key in ``Graph.edges``.
        source (str): One endpoint node id.
        target (str): The other endpoint node id.
        weight (Cost): Non-negative traversal cost.
        status (EdgeStatus): OPEN or BLOCKED. Blocked edges are never traversed.
        traffic (Optional[TrafficLevel]): Observed congestion, if reported.
    """

    id: str
    source: str
    target: str
    weight: Cost = 1.0
    status: EdgeStatus = EdgeStatus.OPEN
    traffic: Optional[TrafficLevel] = None

    @property
    def blocked(self) -> bool:
        return self.status == EdgeStatus.BLOCKED

    def connects(self, node_id: str) -> bool:
        """Return True if ``node_id`` is one of this edge's endpoints."""
        return self.source == node_id or self.target == node_id

    def other_end(self, node_id: str) -> str:
        """Return the endpoint opposite ``node_id``.

        For a self-loop this is ``node_id`` itself.

        Raises:
            ValueError: If ``node_id`` is not an endpoint of this edge.
        """
        if self.source == node_id:
            return self.target
        if self.target == node_id:
            return self.source
        raise ValueError(f"Node '{node_id}' is not an endpoint of edge '{self.id}'.")


@dataclass
class Graph:
    """A container of nodes and undirected edges keyed by id.

    ``add_node`` and ``add_edge`` enforce unique ids and existing endpoints.
    The dictionaries may also be filled directly; ``validate_graph`` checks the
    invariants of a graph built that way.

    Attributes:
        nodes (Dict[str, Node]): Mapping from node id -> Node.
        edges (Dict[str, Edge]): Mapping from edge id -> Edge.
        attrs (Dict[str, Any]): Optional metadata about the graph.
    """

    nodes: Dict[str, Node] = field(default_factory=dict)
    edges: Dict[str, Edge] = field(default_factory=dict)
    attrs: Dict[str, Any] = field(default_factory=dict)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)

    def add_node(self, node: Node) -> None:
        """Add a node keyed by ``node.id``.

        Raises:
            ValueError: If a node with the same id already exists.
        """
        if node.id in self.nodes:
            raise ValueError(f"Node '{node.id}' already exists in this graph.")
        self.nodes[node.id] = node

    def add_edge(self, edge: Edge) -> None:
        """Add an edge keyed by ``edge.id``.

        Raises:
            ValueError: If an endpoint does not exist or the id is already in use.
        """
        if edge.source not in self.nodes:
            raise ValueError(f"Source node '{edge.source}' does not exist.")
        if edge.target not in self.nodes:
            raise ValueError(f"Target node '{edge.target}' does not exist.")
        if edge.id in self.edges:
            raise ValueError(f"Edge with id '{edge.id}' already exists.")
        self.edges[edge.id] = edge

    def connect(
        self,
        source: str,
        target: str,
        weight: Cost = 1.0,
        key: Optional[str] = None,
        **attr: Any,
    ) -> str:
        """Create and add an edge between two existing nodes.

        Args:
            source: One endpoint. Must exist in the graph.
            target: The other endpoint. Must exist in the graph.
            weight: Traversal cost.
            key: Edge id. A Base64 UUID is generated when omitted.
            **attr: Remaining Edge fields (``status``, ``traffic``).

        Returns:
            The id of the new edge.
        """
        if key is None:
            key = new_base64_uuid()
        self.add_edge(
            Edge(id=key, source=source, target=target, weight=weight, **attr)
        )
        return key

    def get_node(self, node_id: str) -> Node:
        """Return the node with this id.

        Raises:
            KeyError: If the node does not exist.
        """
        try:
            return self.nodes[node_id]
        except KeyError:
            raise KeyError(f"Node '{node_id}' not found in graph.") from None

    def get_edge(self, edge_id: str) -> Edge:
        """Return the edge with this id.

        Raises:
            KeyError: If the edge does not exist.
        """
        try:
            return self.edges[edge_id]
        except KeyError:
            raise KeyError(f"Edge '{edge_id}' not found in graph.") from None

    def incident_edges(self, node_id: str) -> List[Edge]:
        """List every edge (blocked or not) touching ``node_id``."""
        return [edge for edge in self.edges.values() if edge.connects(node_id)]

    def edges_between(self, u: str, v: str) -> List[Edge]:
        """List every edge joining ``u`` and ``v`` in either orientation."""
        return [
            edge
            for edge in self.edges.values()
            if (edge.source == u and edge.target == v)
            or (edge.source == v and edge.target == u)
        ]

    def copy(self) -> Graph:
        """Return a new Graph sharing the (immutable) Node and Edge values."""
        return Graph(
            nodes=dict(self.nodes), edges=dict(self.edges), attrs=dict(self.attrs)
        )


def validate_graph(graph: Graph) -> None:
    """Check the invariants the shortest-path search relies on.

    The search never validates its input; loaders call this before handing a
    graph over.

    Raises:
        ValueError: On a node or edge stored under a key other than its id, an
            edge endpoint that is not a node, or a negative or non-finite weight.
    """
    for key, node in graph.nodes.items():
        if key != node.id:
            raise ValueError(f"Node stored under key '{key}' has id '{node.id}'.")

    for key, edge in graph.edges.items():
        if key != edge.id:
            raise ValueError(f"Edge stored under key '{key}' has id '{edge.id}'.")
        for endpoint in (edge.source, edge.target):
            if endpoint not in graph.nodes:
                raise ValueError(
                    f"Edge '{edge.id}' references unknown node '{endpoint}'."
                )
        weight = edge.weight
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError(
                f"Edge '{edge.id}' weight must be a number, got {weight!r}."
            )
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(
                f"Edge '{edge.id}' weight must be finite and non-negative, "
                f"got {weight}."
            )

    LOGGER.debug(
        "Validated graph with %d nodes and %d edges", len(graph.nodes), len(graph.edges)
    )
