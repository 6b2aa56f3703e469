"""Load and save city graphs as JSON documents.

Document layout::

    {
      "vertex_capacity": 4,                      # optional
      "cities": [{"id": 0, "name": "A"}, ...],
      "edges": [{"u": 0, "v": 1, "base": 5,
                 "traffic": {"morning": 2, "afternoon": 1, "evening": 4}}, ...]
    }
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Union

from .errors import GraphDocumentError
from .graph import CityGraph

logger = logging.getLogger(__name__)


def _require(entry: Mapping, key: str, label: str) -> object:
    if key not in entry:
        raise GraphDocumentError(f"{label} is missing required key {key!r}")
    return entry[key]


def _entries(data: Mapping, key: str) -> List[Mapping]:
    entries = _require(data, key, "Graph document")
    if not isinstance(entries, list):
        raise TypeError(f"'{key}' must be a list")
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise TypeError(f"Entries of '{key}' must be mappings, got {entry!r}")
    return entries


def graph_from_document(data: Mapping) -> CityGraph:
    """Build a frozen ``CityGraph`` from a parsed document.

    Construction errors propagate unchanged, so a caller never gets a
    partially populated graph.
    """

    if not isinstance(data, Mapping):
        raise TypeError("Graph document must contain a mapping at the top level")

    cities = _entries(data, "cities")
    edges = _entries(data, "edges")

    capacity = data.get("vertex_capacity")
    if capacity is None:
        ids = [_require(city, "id", "City entry") for city in cities]
        int_ids = [city_id for city_id in ids if isinstance(city_id, int)]
        capacity = max(int_ids + [0]) + 1

    graph = CityGraph(capacity)
    for city in cities:
        graph.add_city(_require(city, "id", "City entry"), _require(city, "name", "City entry"))

    for idx, edge in enumerate(edges):
        label = f"Edge #{idx}"
        graph.add_road(
            _require(edge, "u", label),
            _require(edge, "v", label),
            _require(edge, "base", label),
            _require(edge, "traffic", label),
        )

    return graph.freeze()


def load_graph_json(path: Union[str, Path]) -> CityGraph:
    graph_path = Path(path)
    if not graph_path.exists():
        raise FileNotFoundError(f"Graph JSON not found at {graph_path}")
    with graph_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    graph = graph_from_document(data)
    logger.info(
        "Loaded %d cities and %d roads from %s", graph.n_cities, graph.n_roads, graph_path
    )
    return graph


def graph_to_document(graph: CityGraph) -> Dict[str, object]:
    """Inverse of ``graph_from_document``; one edge entry per road."""

    return {
        "vertex_capacity": graph.n_vertices,
        "cities": [{"id": city_id, "name": name} for city_id, name in graph.cities.items()],
        "edges": [
            {
                "u": road.source,
                "v": road.target,
                "base": road.base_weight,
                "traffic": road.traffic.as_dict(),
            }
            for road in graph.iter_roads()
        ],
    }


def save_graph_json(graph: CityGraph, path: Union[str, Path]) -> None:
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    with dest.open("w", encoding="utf-8") as handle:
        json.dump(graph_to_document(graph), handle, indent=2)
    logger.info("Wrote graph with %d roads to %s", graph.n_roads, dest)


__all__ = ["graph_from_document", "graph_to_document", "load_graph_json", "save_graph_json"]
