"""Synthetic city network generation utilities."""

from typing import Dict

import networkx as nx
import numpy as np

from .graph import CityGraph


def generate_city_network(
    n_cities: int = 12,
    p_keep: float = 0.8,
    base_low: int = 1,
    base_high: int = 20,
    traffic_low: int = 0,
    traffic_high: int = 10,
    seed: int = 42,
) -> Dict[str, object]:
    """Generate a connected grid-shaped city network with random road weights."""

    if n_cities < 1:
        raise ValueError("n_cities must be at least 1")
    rng = np.random.default_rng(seed)

    # 1. Planar grid
    rows = int(np.floor(np.sqrt(n_cities)))
    cols = int(np.ceil(n_cities / rows))

    G_grid = nx.grid_2d_graph(rows, cols)

    mapping = {}
    reverse_mapping = {}
    node_id = 0
    for i in range(rows):
        for j in range(cols):
            mapping[(i, j)] = node_id
            reverse_mapping[node_id] = (i, j)
            node_id += 1

    G = nx.Graph()
    G.add_nodes_from(range(n_cities))
    for (u2, v2) in G_grid.edges():
        u = mapping[u2]
        v = mapping[v2]
        if u < n_cities and v < n_cities:
            G.add_edge(u, v)

    # 2. Drop roads at random
    to_remove = [(u, v) for u, v in sorted(G.edges()) if rng.random() > p_keep]
    G.remove_edges_from(to_remove)

    # 3. Reconnect components through grid neighbours
    while not nx.is_connected(G):
        comps = sorted(nx.connected_components(G), key=min)
        base = comps[0]
        added = False
        for u in sorted(base):
            i, j = reverse_mapping[u]
            for di, dj in [(1, 0), (-1, 0), (0, 1), (0, -1)]:
                v = mapping.get((i + di, j + dj))
                if v is None or v >= n_cities or v in base:
                    continue
                G.add_edge(u, v)
                added = True
                break
            if added:
                break

    # 4. Coordinates and weights
    node_coords = np.zeros((n_cities, 2))
    for nid in range(n_cities):
        i, j = reverse_mapping[nid]
        node_coords[nid] = [j, -i]

    graph = CityGraph(n_cities)
    for nid in range(n_cities):
        i, j = reverse_mapping[nid]
        graph.add_city(nid, f"C{i}{j}" if rows <= 10 and cols <= 10 else f"C{nid}")

    for u, v in sorted(G.edges()):
        base = int(rng.integers(base_low, base_high + 1))
        traffic = rng.integers(traffic_low, traffic_high + 1, size=3)
        graph.add_road(
            u,
            v,
            base,
            {"morning": int(traffic[0]), "afternoon": int(traffic[1]), "evening": int(traffic[2])},
        )

    return dict(
        graph=graph.freeze(),
        node_coords=node_coords,
        n_cities=n_cities,
        n_roads=graph.n_roads,
    )
