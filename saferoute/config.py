"""Configuration for graph loading and graph editing helpers."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class RoutingConfig:
    """Tunables used by loaders and by the weight-adjusting edit helpers.

    The shortest-path search itself takes no configuration.
    """

    # Multiplier applied to an edge's baseline weight for each traffic level
    traffic_multipliers: Dict[str, float] = field(
        default_factory=lambda: {"low": 1.0, "medium": 1.5, "high": 2.0}
    )

    # Incident edge weights are multiplied by this when a node is reported hazardous
    hazard_weight_factor: float = 2.0

    # Values assumed when a graph document omits them
    default_node_type: str = "normal"
    default_edge_status: str = "open"

    def traffic_multiplier(self, level: str) -> float:
        """Return the weight multiplier for a traffic level name.

        Raises:
            ValueError: If ``level`` is not a configured traffic level.
        """
        try:
            return self.traffic_multipliers[level]
        except KeyError:
            valid = ", ".join(sorted(self.traffic_multipliers))
            raise ValueError(
                f"Invalid traffic level '{level}'. Valid values are: {valid}"
            ) from None


# Global configuration instance
ROUTING_CONFIG = RoutingConfig()
