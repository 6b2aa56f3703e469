"""Exceptions raised while building city graphs and answering route queries."""


class TimeRouteError(Exception):
    """Base class for every error raised by the package."""


class GraphConstructionError(TimeRouteError, ValueError):
    """The graph description is invalid; loading must stop."""


class DuplicateCityError(GraphConstructionError):
    """A city id or name was registered twice."""


class CityIdOutOfRangeError(GraphConstructionError):
    """A city id falls outside ``[0, n_vertices)``."""


class IncompleteTrafficError(GraphConstructionError):
    """A road does not define a traffic weight for every time slot."""


class InvalidWeightError(GraphConstructionError):
    """A road weight is not an integer."""


class GraphFrozenError(GraphConstructionError):
    """The graph was modified after it was frozen."""


class GraphDocumentError(GraphConstructionError):
    """A graph document is missing a required key."""


class UnknownCityError(TimeRouteError, LookupError):
    """A city name or id is not part of the graph."""


class MissingRoadError(TimeRouteError, LookupError):
    """Two consecutive cities of a given route are not joined by a road."""


class InvalidTimeSlotError(TimeRouteError, ValueError):
    """Text that is not one of ``morning``, ``afternoon`` or ``evening``."""


class UnreachableError(TimeRouteError):
    """No route exists between two cities for the queried time slot."""

    def __init__(self, source: int, destination: int):
        super().__init__(f"city {destination} is not reachable from city {source}")
        self.source = source
        self.destination = destination


__all__ = [
    "CityIdOutOfRangeError",
    "DuplicateCityError",
    "GraphConstructionError",
    "GraphDocumentError",
    "GraphFrozenError",
    "IncompleteTrafficError",
    "InvalidTimeSlotError",
    "InvalidWeightError",
    "MissingRoadError",
    "TimeRouteError",
    "UnknownCityError",
    "UnreachableError",
]
