import networkx as nx
import pytest

from timeroute.fake_data import generate_city_network
from timeroute.time_slots import TimeSlot
from timeroute.visualize import build_networkx_graph


def test_generated_network_is_connected_and_frozen():
    data = generate_city_network(n_cities=15, p_keep=0.3, seed=5)
    graph = data["graph"]
    assert graph.frozen
    assert graph.n_cities == data["n_cities"] == 15
    assert graph.n_roads == data["n_roads"]
    assert data["node_coords"].shape == (15, 2)
    assert nx.is_connected(build_networkx_graph(graph))


def test_generated_network_is_deterministic():
    first = generate_city_network(n_cities=12, seed=3)["graph"]
    second = generate_city_network(n_cities=12, seed=3)["graph"]

    def listing(graph):
        return [(r.source, r.target, r.base_weight, r.traffic) for r in graph.iter_edges()]

    assert listing(first) == listing(second)


def test_generated_weights_stay_in_range():
    graph = generate_city_network(
        n_cities=9, base_low=2, base_high=4, traffic_low=1, traffic_high=3, seed=11
    )["graph"]
    for road in graph.iter_roads():
        assert 2 <= road.base_weight <= 4
        for slot in TimeSlot:
            assert 1 <= road.traffic.weight(slot) <= 3


def test_city_names_follow_grid_positions():
    graph = generate_city_network(n_cities=9, seed=0)["graph"]
    assert graph.resolve_city_id("C00") == 0
    assert graph.resolve_city_id("C22") == 8


def test_single_city_network():
    data = generate_city_network(n_cities=1)
    assert data["n_roads"] == 0


def test_requires_at_least_one_city():
    with pytest.raises(ValueError):
        generate_city_network(n_cities=0)
