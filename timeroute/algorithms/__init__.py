"""Shortest-path algorithms for time-dependent city graphs."""

from .bellman_ford import bellman_ford_shortest_paths
from .edge_utils import build_cost_matrix, build_edge_arrays
from .path_cost import compute_path_travel_cost
from .reconstruct import reconstruct_path

__all__ = [
    "bellman_ford_shortest_paths",
    "build_cost_matrix",
    "build_edge_arrays",
    "compute_path_travel_cost",
    "reconstruct_path",
]
