"""Utilities for computing the cost of a path."""

import numpy as np
from numba import njit


@njit
def compute_path_travel_cost(
    path: np.ndarray,
    cost_matrix: np.ndarray,
    has_edge: np.ndarray,
) -> tuple:
    """Sum edge costs along ``path``; returns ``(total, valid)``.

    ``valid`` is False when two consecutive cities are not joined by a road.
    """

    total = 0
    for i in range(path.shape[0] - 1):
        u = path[i]
        v = path[i + 1]
        if not has_edge[u, v]:
            return 0, False
        total += cost_matrix[u, v]

    return total, True
