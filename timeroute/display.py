"""Plain-text rendering of graphs and routes."""

from .graph import CityGraph
from .query import RouteResult
from .time_slots import TimeSlot


def format_graph_listing(graph: CityGraph) -> list[str]:
    """One line per directed road entry."""

    lines = []
    for road in graph.iter_edges():
        lines.append(
            f"{graph.city_name(road.source)} -> {graph.city_name(road.target)}"
            f" (Base: {road.base_weight}"
            f", Traffic (Morning): {road.traffic.weight(TimeSlot.MORNING)}"
            f", Afternoon: {road.traffic.weight(TimeSlot.AFTERNOON)}"
            f", Evening: {road.traffic.weight(TimeSlot.EVENING)})"
        )
    return lines


def format_route(result: RouteResult) -> list[str]:
    return [
        f"Shortest distance (with traffic for {result.slot}): {result.cost}",
        "Path: " + " -> ".join(result.city_names),
    ]


def format_no_route(source_name: str, destination_name: str) -> str:
    return f"No route found from {source_name} to {destination_name}"
