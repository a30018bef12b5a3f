"""Tests for the PathResult dataclass."""

import math

import pytest

from saferoute.model.path import PathResult


def test_unreachable_defaults():
    result = PathResult()
    assert math.isinf(result.distance)
    assert result.path == ()
    assert result == PathResult.unreachable()
    assert not result.is_reachable
    assert result.hops == 0
    assert len(result) == 0


def test_reachable_properties():
    result = PathResult(3.0, ("A", "B", "D"))
    assert result.is_reachable
    assert result.start == "A"
    assert result.end == "D"
    assert result.hops == 2
    assert list(result) == ["A", "B", "D"]
    assert list(result.segments()) == [("A", "B"), ("B", "D")]


def test_zero_length_route():
    result = PathResult(0.0, ("A",))
    assert result.is_reachable
    assert result.hops == 0
    assert list(result.segments()) == []


def test_to_dict_reachable():
    assert PathResult(3.0, ("A", "B", "D")).to_dict() == {
        "distance": 3.0,
        "reachable": True,
        "path": ["A", "B", "D"],
        "hops": 2,
    }


def test_to_dict_unreachable_has_no_infinity():
    data = PathResult.unreachable().to_dict()
    assert data == {"distance": None, "reachable": False, "path": [], "hops": 0}


def test_path_weight_uses_cheapest_open_edge(parallel_line):
    result = PathResult(5.0, ("A", "B", "C"))
    assert result.path_weight(parallel_line) == 5.0


def test_path_weight_rejects_missing_segment(diamond):
    with pytest.raises(ValueError, match="No open edge between 'A' and 'D'"):
        PathResult(1.0, ("A", "D")).path_weight(diamond)
