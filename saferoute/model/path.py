"""Result of a single shortest-path query.

``PathResult`` pairs the total distance with the ordered node ids of the route.
An unreachable target is a regular result, not an error: the distance is
``math.inf`` and the path is empty.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterator, Tuple

from saferoute.types import Cost

if TYPE_CHECKING:
    from saferoute.model.graph import Graph


@dataclass(frozen=True)
class PathResult:
    """Total distance and node sequence of a route.

    Attributes:
        distance: Minimal total weight, or ``math.inf`` when no route exists.
        path: Node ids from start to end inclusive; empty when unreachable.
    """

    distance: Cost = math.inf
    path: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def unreachable(cls) -> PathResult:
        return cls(distance=math.inf, path=())

    @property
    def is_reachable(self) -> bool:
        return not math.isinf(self.distance)

    @property
    def hops(self) -> int:
        """Number of edges traversed; 0 for a zero-length or missing route."""
        return max(len(self.path) - 1, 0)

    @property
    def start(self) -> str:
        return self.path[0]

    @property
    def end(self) -> str:
        return self.path[-1]

    def __iter__(self) -> Iterator[str]:
        return iter(self.path)

    def __len__(self) -> int:
        return len(self.path)

    def segments(self) -> Iterator[Tuple[str, str]]:
        """Yield consecutive ``(from_node, to_node)`` pairs along the route."""
        return zip(self.path, self.path[1:])

    def path_weight(self, graph: Graph) -> Cost:
        """Sum the cheapest open edge for every segment of the route.

        Useful for checking a result against the graph it was computed on.

        Raises:
            ValueError: If some segment has no open edge in ``graph``.
        """
        total: Cost = 0.0
        for u, v in self.segments():
            weights = [e.weight for e in graph.edges_between(u, v) if not e.blocked]
            if not weights:
                raise ValueError(f"No open edge between '{u}' and '{v}'.")
            total += min(weights)
        return total

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-safe dictionary.

        JSON has no infinity, so an unreachable distance is written as None.
        """
        return {
            "distance": self.distance if self.is_reachable else None,
            "reachable": self.is_reachable,
            "path": list(self.path),
            "hops": self.hops,
        }
