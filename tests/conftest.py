import copy
import json

import pytest

from timeroute.graph import CityGraph


ABC_DOCUMENT = {
    "vertex_capacity": 4,
    "cities": [
        {"id": 0, "name": "A"},
        {"id": 1, "name": "B"},
        {"id": 2, "name": "C"},
        {"id": 3, "name": "D"},
    ],
    "edges": [
        {"u": 0, "v": 1, "base": 5, "traffic": {"morning": 2, "afternoon": 1, "evening": 4}},
        {"u": 1, "v": 2, "base": 3, "traffic": {"morning": 1, "afternoon": 5, "evening": 0}},
    ],
}


@pytest.fixture
def abc_graph() -> CityGraph:
    """
    A --- B --- C        D (isolated)

    A-B: base 5, traffic morning 2 / afternoon 1 / evening 4
    B-C: base 3, traffic morning 1 / afternoon 5 / evening 0
    """
    graph = CityGraph(4)
    for city_id, name in enumerate("ABCD"):
        graph.add_city(city_id, name)
    graph.add_road(0, 1, 5, {"morning": 2, "afternoon": 1, "evening": 4})
    graph.add_road(1, 2, 3, {"morning": 1, "afternoon": 5, "evening": 0})
    return graph.freeze()


@pytest.fixture
def diamond_graph() -> CityGraph:
    """
        B
       / \\
      A   D      every road costs 1 at every time of day
       \\ /
        C
    """
    graph = CityGraph(4)
    for city_id, name in enumerate("ABCD"):
        graph.add_city(city_id, name)
    flat = {"morning": 0, "afternoon": 0, "evening": 0}
    graph.add_road(0, 1, 1, flat)
    graph.add_road(0, 2, 1, flat)
    graph.add_road(1, 3, 1, flat)
    graph.add_road(2, 3, 1, flat)
    return graph.freeze()


@pytest.fixture
def abc_document() -> dict:
    return copy.deepcopy(ABC_DOCUMENT)


@pytest.fixture
def abc_json(tmp_path):
    path = tmp_path / "cities_and_edges.json"
    path.write_text(json.dumps(ABC_DOCUMENT), encoding="utf-8")
    return path
