"""Time-of-day aware shortest routes between cities."""

from .engine import (
    UNREACHABLE,
    Distance,
    DistanceResult,
    Finite,
    ShortestPathEngine,
    Unreachable,
)
from .errors import (
    CityIdOutOfRangeError,
    DuplicateCityError,
    GraphConstructionError,
    GraphDocumentError,
    GraphFrozenError,
    IncompleteTrafficError,
    InvalidTimeSlotError,
    InvalidWeightError,
    MissingRoadError,
    TimeRouteError,
    UnknownCityError,
    UnreachableError,
)
from .graph import CityGraph, CityRegistry, Road
from .loader import graph_from_document, graph_to_document, load_graph_json, save_graph_json
from .query import RouteQueryService, RouteResult
from .time_slots import TimeSlot, TrafficProfile, parse_time_slot
from .algorithms import reconstruct_path

__all__ = [
    "CityGraph",
    "CityIdOutOfRangeError",
    "CityRegistry",
    "Distance",
    "DistanceResult",
    "DuplicateCityError",
    "Finite",
    "GraphConstructionError",
    "GraphDocumentError",
    "GraphFrozenError",
    "IncompleteTrafficError",
    "InvalidTimeSlotError",
    "InvalidWeightError",
    "MissingRoadError",
    "Road",
    "RouteQueryService",
    "RouteResult",
    "ShortestPathEngine",
    "TimeRouteError",
    "TimeSlot",
    "TrafficProfile",
    "UNREACHABLE",
    "Unreachable",
    "UnknownCityError",
    "UnreachableError",
    "graph_from_document",
    "graph_to_document",
    "load_graph_json",
    "parse_time_slot",
    "reconstruct_path",
    "save_graph_json",
]
