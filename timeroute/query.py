"""Name-level route queries on top of the shortest-path engine."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Union

import numpy as np

from .algorithms.edge_utils import build_cost_matrix
from .algorithms.path_cost import compute_path_travel_cost
from .algorithms.reconstruct import reconstruct_path
from .engine import Finite, ShortestPathEngine
from .errors import MissingRoadError, UnreachableError
from .graph import CityGraph
from .time_slots import TimeSlot, parse_time_slot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteResult:
    """Cheapest route between two cities for one time slot."""

    source: int
    destination: int
    slot: TimeSlot
    cost: int
    path: tuple[int, ...]
    city_names: tuple[str, ...]


class RouteQueryService:
    """Answers ``(source name, destination name, time of day)`` queries."""

    def __init__(self, graph: CityGraph):
        self.graph = graph
        self.engine = ShortestPathEngine(graph)

    def find_route(
        self,
        source_name: str,
        destination_name: str,
        time_of_day: Union[str, TimeSlot],
    ) -> RouteResult:
        """Raise ``UnknownCityError``, ``InvalidTimeSlotError`` or ``UnreachableError``."""
        source = self.graph.resolve_city_id(source_name)
        destination = self.graph.resolve_city_id(destination_name)
        slot = parse_time_slot(time_of_day)
        return self._route_between(source, destination, slot)

    def compare_time_slots(
        self, source_name: str, destination_name: str
    ) -> Dict[TimeSlot, Optional[RouteResult]]:
        """Route for every time slot; ``None`` where the destination is unreachable."""
        source = self.graph.resolve_city_id(source_name)
        destination = self.graph.resolve_city_id(destination_name)

        results: Dict[TimeSlot, Optional[RouteResult]] = {}
        for slot in TimeSlot:
            try:
                results[slot] = self._route_between(source, destination, slot)
            except UnreachableError:
                results[slot] = None
        return results

    def best_time_slot(self, source_name: str, destination_name: str) -> RouteResult:
        """Cheapest slot to travel in; earlier slots win ties."""
        best = None
        for result in self.compare_time_slots(source_name, destination_name).values():
            if result is None:
                continue
            if best is None or result.cost < best.cost:
                best = result
        if best is None:
            raise UnreachableError(
                self.graph.resolve_city_id(source_name),
                self.graph.resolve_city_id(destination_name),
            )
        return best

    def route_cost(
        self, city_names: Sequence[str], time_of_day: Union[str, TimeSlot]
    ) -> RouteResult:
        """Price a route given city by city; parallel roads use the cheapest one.

        Raises ``MissingRoadError`` when two consecutive cities share no road.
        """
        if not city_names:
            raise ValueError("A route needs at least one city")
        path = [self.graph.resolve_city_id(name) for name in city_names]
        slot = parse_time_slot(time_of_day)

        cost_matrix, has_edge = build_cost_matrix(self.graph, slot)
        total, valid = compute_path_travel_cost(
            np.asarray(path, dtype=np.int64), cost_matrix, has_edge
        )
        if not valid:
            for u, v in zip(path, path[1:]):
                if not has_edge[u, v]:
                    raise MissingRoadError(
                        f"No road between {self.graph.city_name(u)} and {self.graph.city_name(v)}"
                    )
        return RouteResult(
            source=path[0],
            destination=path[-1],
            slot=slot,
            cost=int(total),
            path=tuple(path),
            city_names=tuple(self.graph.city_name(city_id) for city_id in path),
        )

    def _route_between(self, source: int, destination: int, slot: TimeSlot) -> RouteResult:
        result = self.engine.shortest_paths(source, slot)
        distance = result.distance_to(destination)
        if not isinstance(distance, Finite):
            logger.info(
                "No route from %s to %s in the %s",
                self.graph.city_name(source),
                self.graph.city_name(destination),
                slot,
            )
            raise UnreachableError(source, destination)

        path = reconstruct_path(source, destination, result.predecessors)
        return RouteResult(
            source=source,
            destination=destination,
            slot=slot,
            cost=distance.cost,
            path=tuple(path),
            city_names=tuple(self.graph.city_name(city_id) for city_id in path),
        )


__all__ = ["RouteQueryService", "RouteResult"]
