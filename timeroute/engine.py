"""Time-dependent single-source shortest paths over a ``CityGraph``."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .algorithms.bellman_ford import bellman_ford_shortest_paths
from .algorithms.edge_utils import build_edge_arrays
from .errors import InvalidTimeSlotError, UnknownCityError
from .graph import CityGraph
from .time_slots import TimeSlot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Finite:
    """Reachable vertex with its minimal total cost."""

    cost: int

    def __str__(self) -> str:
        return str(self.cost)


@dataclass(frozen=True)
class Unreachable:
    """Vertex with no route from the source."""

    def __str__(self) -> str:
        return "unreachable"


UNREACHABLE = Unreachable()

Distance = Union[Finite, Unreachable]


@dataclass(frozen=True)
class DistanceResult:
    """Distances and predecessors of one query, indexed by vertex id."""

    source: int
    slot: TimeSlot
    distances: tuple[Distance, ...]
    predecessors: tuple[Optional[int], ...]

    def distance_to(self, city_id: int) -> Distance:
        return self.distances[city_id]

    def is_reachable(self, city_id: int) -> bool:
        return isinstance(self.distances[city_id], Finite)


class ShortestPathEngine:
    """Bellman-Ford over the graph's directed entries for one time slot.

    The engine only deals with integer city ids; names are resolved by the
    caller. It keeps no state between queries.
    """

    def __init__(self, graph: CityGraph):
        self.graph = graph

    def shortest_paths(self, source: int, slot: TimeSlot) -> DistanceResult:
        if not self.graph.has_city(source):
            raise UnknownCityError(f"Unknown source city id {source!r}")
        if not isinstance(slot, TimeSlot):
            raise InvalidTimeSlotError(f"Expected a TimeSlot, got {slot!r}")

        edge_u, edge_v, edge_cost = build_edge_arrays(self.graph, slot)
        dist, reached, prev = bellman_ford_shortest_paths(
            edge_u, edge_v, edge_cost, self.graph.n_vertices, source
        )

        distances = tuple(
            Finite(int(d)) if r else UNREACHABLE for d, r in zip(dist, reached)
        )
        predecessors = tuple(int(p) if p >= 0 else None for p in prev)
        logger.debug(
            "Shortest paths from %d (%s): %d of %d vertices reachable",
            source,
            slot,
            int(reached.sum()),
            self.graph.n_vertices,
        )
        return DistanceResult(
            source=source, slot=slot, distances=distances, predecessors=predecessors
        )


__all__ = [
    "Distance",
    "DistanceResult",
    "Finite",
    "ShortestPathEngine",
    "UNREACHABLE",
    "Unreachable",
]
