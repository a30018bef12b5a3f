"""Tests for `saferoute.config`."""

import pytest

from saferoute.config import ROUTING_CONFIG, RoutingConfig


def test_default_multipliers_are_non_decreasing() -> None:
    config = RoutingConfig()
    values = [config.traffic_multiplier(level) for level in ("low", "medium", "high")]
    assert values == sorted(values)
    assert config.traffic_multiplier("low") == 1.0


def test_unknown_level() -> None:
    with pytest.raises(ValueError, match="Valid values are: high, low, medium"):
        RoutingConfig().traffic_multiplier("gridlock")


def test_custom_config_is_independent() -> None:
    custom = RoutingConfig(traffic_multipliers={"low": 1.0, "jam": 4.0})
    assert custom.traffic_multiplier("jam") == 4.0
    with pytest.raises(ValueError):
        ROUTING_CONFIG.traffic_multiplier("jam")


def test_default_instances_do_not_share_state() -> None:
    a, b = RoutingConfig(), RoutingConfig()
    a.traffic_multipliers["extra"] = 9.0
    assert "extra" not in b.traffic_multipliers


def test_global_defaults() -> None:
    assert ROUTING_CONFIG.hazard_weight_factor == 2.0
    assert ROUTING_CONFIG.default_node_type == "normal"
    assert ROUTING_CONFIG.default_edge_status == "open"
