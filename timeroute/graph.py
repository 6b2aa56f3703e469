"""City registry and undirected road graph with time-dependent weights."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Union

from .errors import (
    CityIdOutOfRangeError,
    DuplicateCityError,
    GraphFrozenError,
    UnknownCityError,
)
from .time_slots import TimeSlot, TrafficProfile, check_weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Road:
    """Directed adjacency entry of an undirected road."""

    source: int
    target: int
    base_weight: int
    traffic: TrafficProfile

    def cost(self, slot: TimeSlot) -> int:
        """Total traversal cost for a time slot."""
        return self.base_weight + self.traffic.weight(slot)

    def reversed(self) -> "Road":
        return Road(self.target, self.source, self.base_weight, self.traffic)


class CityRegistry:
    """Two-way mapping between city ids and city names."""

    def __init__(self) -> None:
        self._names: Dict[int, str] = {}
        self._ids: Dict[str, int] = {}

    def add(self, city_id: int, name: str) -> None:
        if city_id in self._names:
            raise DuplicateCityError(
                f"City id {city_id} already registered as {self._names[city_id]!r}"
            )
        if name in self._ids:
            raise DuplicateCityError(
                f"City name {name!r} already registered with id {self._ids[name]}"
            )
        self._names[city_id] = name
        self._ids[name] = city_id

    def id_for(self, name: str) -> int:
        try:
            return self._ids[name]
        except (KeyError, TypeError):
            raise UnknownCityError(f"Unknown city name {name!r}") from None

    def name_for(self, city_id: int) -> str:
        try:
            return self._names[city_id]
        except (KeyError, TypeError):
            raise UnknownCityError(f"Unknown city id {city_id!r}") from None

    def __contains__(self, city_id: object) -> bool:
        return city_id in self._names

    def __len__(self) -> int:
        return len(self._names)

    def items(self) -> List[tuple[int, str]]:
        """Registered ``(id, name)`` pairs ordered by id."""
        return sorted(self._names.items())


class CityGraph:
    """Undirected multigraph of cities, written once and then only read.

    Vertices are the dense ids ``0 .. n_vertices - 1``; the adjacency is a list
    indexed by vertex id. Each road is stored as two directed ``Road`` entries
    that share the same weights.
    """

    def __init__(self, n_vertices: int):
        if isinstance(n_vertices, bool) or not isinstance(n_vertices, int) or n_vertices < 1:
            raise ValueError(f"n_vertices must be a positive integer, got {n_vertices!r}")
        self.n_vertices = n_vertices
        self.cities = CityRegistry()
        self._adjacency: List[List[Road]] = [[] for _ in range(n_vertices)]
        self._roads: List[Road] = []
        self._frozen = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_city(self, city_id: int, name: str) -> None:
        self._check_mutable()
        if isinstance(city_id, bool) or not isinstance(city_id, int):
            raise CityIdOutOfRangeError(f"City id must be an integer, got {city_id!r}")
        if not 0 <= city_id < self.n_vertices:
            raise CityIdOutOfRangeError(
                f"City id {city_id} outside [0, {self.n_vertices})"
            )
        self.cities.add(city_id, str(name))

    def add_road(
        self,
        u: int,
        v: int,
        base_weight: int,
        traffic: Union[TrafficProfile, Mapping],
    ) -> None:
        """Insert the road ``u <-> v`` as the entries ``u -> v`` and ``v -> u``."""
        self._check_mutable()
        for city_id in (u, v):
            if not self.has_city(city_id):
                raise UnknownCityError(f"Road {u}-{v} references unknown city {city_id!r}")
        base = check_weight(base_weight, f"Base weight of road {u}-{v}")
        profile = TrafficProfile.from_mapping(traffic)

        forward = Road(u, v, base, profile)
        self._adjacency[u].append(forward)
        self._adjacency[v].append(forward.reversed())
        self._roads.append(forward)

    add_edge = add_road

    def freeze(self) -> "CityGraph":
        """Reject any further construction calls."""
        self._frozen = True
        logger.debug("Froze %r", self)
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is frozen; cities and roads can no longer be added")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_city(self, city_id: object) -> bool:
        return city_id in self.cities

    def resolve_city_id(self, name: str) -> int:
        return self.cities.id_for(name)

    def city_name(self, city_id: int) -> str:
        return self.cities.name_for(city_id)

    def neighbors(self, city_id: int) -> List[Road]:
        if not self.has_city(city_id):
            raise UnknownCityError(f"Unknown city id {city_id!r}")
        return list(self._adjacency[city_id])

    def iter_edges(self) -> Iterator[Road]:
        """Yield every directed entry, by vertex id then insertion order."""
        for entries in self._adjacency:
            yield from entries

    list_edges = iter_edges

    def iter_roads(self) -> Iterator[Road]:
        """Yield each undirected road once, in the order it was added."""
        yield from self._roads

    @property
    def n_cities(self) -> int:
        return len(self.cities)

    @property
    def n_roads(self) -> int:
        return len(self._roads)

    @property
    def n_edges(self) -> int:
        """Number of directed adjacency entries."""
        return 2 * len(self._roads)

    def __repr__(self) -> str:
        return (
            f"CityGraph(n_vertices={self.n_vertices}, n_cities={self.n_cities}, "
            f"n_roads={self.n_roads})"
        )


__all__ = ["CityGraph", "CityRegistry", "Road"]
