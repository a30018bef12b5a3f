from saferoute.algorithms.spf import find_shortest_path, open_adjacency

__all__ = ["find_shortest_path", "open_adjacency"]
