"""Shared graph fixtures.

Edge ids encode their endpoints where that helps reading assertions
(``ab`` joins A and B).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from saferoute.model.graph import Edge, Graph, Node
from saferoute.types import EdgeStatus, NodeType

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"


def make_graph(node_ids, edges) -> Graph:
    """Build a Graph from node ids and (id, source, target, weight[, status]) tuples."""
    g = Graph()
    for node_id in node_ids:
        g.add_node(Node(id=node_id))
    for spec in edges:
        edge_id, source, target, weight = spec[:4]
        status = spec[4] if len(spec) > 4 else EdgeStatus.OPEN
        g.add_edge(
            Edge(
                id=edge_id, source=source, target=target, weight=weight, status=status
            )
        )
    return g


@pytest.fixture
def build_graph():
    """Expose ``make_graph`` to tests that need ad-hoc topologies."""
    return make_graph


@pytest.fixture
def diamond() -> Graph:
    #        [1]      [2]
    #    ┌──────B──────┐
    #    A             D
    #    └──────C──────┘
    #        [4]      [1]
    return make_graph(
        "ABCD",
        [
            ("ab", "A", "B", 1),
            ("bd", "B", "D", 2),
            ("ac", "A", "C", 4),
            ("cd", "C", "D", 1),
        ],
    )


@pytest.fixture
def two_islands() -> Graph:
    #  A──[1]──B      C──[1]──D
    return make_graph("ABCD", [("ab", "A", "B", 1), ("cd", "C", "D", 1)])


@pytest.fixture
def parallel_line() -> Graph:
    #      [5,2,1(blocked)]      [3]
    #  A◄──────────────────►B◄───────►C
    return make_graph(
        "ABC",
        [
            ("ab_slow", "A", "B", 5),
            ("ab_fast", "A", "B", 2),
            ("ab_closed", "A", "B", 1, EdgeStatus.BLOCKED),
            ("bc", "B", "C", 3),
        ],
    )


@pytest.fixture
def square_equal_cost() -> Graph:
    # Two routes of weight 2 from A to C: A-B-C and A-D-C.
    return make_graph(
        "ABCD",
        [
            ("ab", "A", "B", 1),
            ("bc", "B", "C", 1),
            ("ad", "A", "D", 1),
            ("dc", "D", "C", 1),
        ],
    )


@pytest.fixture
def evacuation_graph() -> Graph:
    g = Graph()
    g.add_node(Node(id="home", name="Housing Colony"))
    g.add_node(Node(id="market", name="City Market", type=NodeType.WARNING))
    g.add_node(Node(id="shelter", name="Central Shelter", type=NodeType.SAFE))
    g.add_node(Node(id="hospital", name="Doon Hospital", type=NodeType.SAFE))
    g.add_edge(Edge(id="e1", source="home", target="market", weight=2))
    g.add_edge(Edge(id="e2", source="market", target="shelter", weight=2))
    g.add_edge(Edge(id="e3", source="home", target="hospital", weight=7))
    g.add_edge(Edge(id="e4", source="hospital", target="shelter", weight=1))
    return g


@pytest.fixture
def dehradun_yaml() -> Path:
    return EXAMPLES_DIR / "dehradun.yaml"
