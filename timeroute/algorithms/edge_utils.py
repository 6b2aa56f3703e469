"""Utilities for building per-slot edge arrays and cost matrices."""

import numpy as np

from ..graph import CityGraph
from ..time_slots import TimeSlot


def build_edge_arrays(graph: CityGraph, slot: TimeSlot) -> tuple:
    """Flatten the directed adjacency into ``(edge_u, edge_v, edge_cost)``.

    Entries follow ``graph.iter_edges()`` so the relaxation order, and with it
    the choice between equal-cost predecessors, is the same on every call.
    """

    m = graph.n_edges
    edge_u = np.empty(m, dtype=np.int64)
    edge_v = np.empty(m, dtype=np.int64)
    edge_cost = np.empty(m, dtype=np.int64)

    for idx, road in enumerate(graph.iter_edges()):
        edge_u[idx] = road.source
        edge_v[idx] = road.target
        edge_cost[idx] = road.cost(slot)

    return edge_u, edge_v, edge_cost


def build_cost_matrix(graph: CityGraph, slot: TimeSlot) -> tuple:
    """Dense ``(cost, has_edge)`` matrices keeping the cheapest parallel road."""

    n_nodes = graph.n_vertices
    cost_matrix = np.zeros((n_nodes, n_nodes), dtype=np.int64)
    has_edge = np.zeros((n_nodes, n_nodes), dtype=np.bool_)

    for road in graph.iter_edges():
        u, v = road.source, road.target
        cost = road.cost(slot)
        if not has_edge[u, v] or cost < cost_matrix[u, v]:
            cost_matrix[u, v] = cost
            has_edge[u, v] = True

    return cost_matrix, has_edge
