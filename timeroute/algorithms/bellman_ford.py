"""Bellman-Ford single-source shortest paths over flat edge arrays."""

import numpy as np
from numba import njit


@njit
def bellman_ford_shortest_paths(
    edge_u: np.ndarray,
    edge_v: np.ndarray,
    edge_cost: np.ndarray,
    n_nodes: int,
    source: int,
) -> tuple:
    """Relax every edge ``n_nodes - 1`` times, in array order.

    Returns ``(dist, reached, prev)``. ``dist[v]`` is only meaningful where
    ``reached[v]`` is set; ``prev[v]`` is ``-1`` when ``v`` has no predecessor.
    Negative cycles are not detected.
    """

    dist = np.zeros(n_nodes, dtype=np.int64)
    reached = np.zeros(n_nodes, dtype=np.bool_)
    prev = np.full(n_nodes, -1, dtype=np.int64)

    reached[source] = True
    n_edges = edge_u.shape[0]

    for _ in range(n_nodes - 1):
        for e in range(n_edges):
            u = edge_u[e]
            if not reached[u]:
                continue
            v = edge_v[e]
            alt = dist[u] + edge_cost[e]
            if (not reached[v]) or alt < dist[v]:
                dist[v] = alt
                reached[v] = True
                prev[v] = u

    return dist, reached, prev
