"""Command line entry point: list a city graph and answer route queries."""

import argparse
import logging
import sys
from typing import Callable, Sequence

import numpy as np

from .display import format_graph_listing, format_no_route, format_route
from .errors import InvalidTimeSlotError, TimeRouteError, UnknownCityError, UnreachableError
from .fake_data import generate_city_network
from .graph import CityGraph
from .loader import load_graph_json, save_graph_json
from .query import RouteQueryService, RouteResult
from .time_slots import TimeSlot
from .visualize import visualize_city_graph, write_figure_html

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "graph",
        nargs="?",
        default=None,
        help="Graph JSON with 'cities' and 'edges' (see timeroute.loader).",
    )
    parser.add_argument(
        "--demo-cities",
        type=int,
        default=None,
        help="Generate a synthetic grid network with this many cities instead of loading one.",
    )
    parser.add_argument("--seed", type=int, default=42, help="Seed for --demo-cities.")
    parser.add_argument("--save-graph", default=None, help="Write the graph back out as JSON.")
    parser.add_argument("--from", dest="source", default=None, help="Start city name.")
    parser.add_argument("--to", dest="destination", default=None, help="Destination city name.")
    parser.add_argument(
        "--time",
        dest="time_of_day",
        default=None,
        help="Time of day for a one-shot query: morning, afternoon or evening.",
    )
    parser.add_argument(
        "--route",
        default=None,
        help="Comma-separated city names to price as given, e.g. \"A,B,C\" (needs --time).",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Report the route for every time of day and the cheapest one.",
    )
    parser.add_argument("--html", default=None, help="Write a plotly figure of the graph to HTML.")
    parser.add_argument("--no-listing", action="store_true", help="Skip the graph listing.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    if args.graph is None and args.demo_cities is None:
        parser.error("either a graph JSON path or --demo-cities is required")
    if args.graph is not None and args.demo_cities is not None:
        parser.error("a graph JSON path and --demo-cities cannot be combined")
    if (args.source is None) != (args.destination is None):
        parser.error("--from and --to must be given together")
    if args.route is not None and (args.source is not None or args.compare):
        parser.error("--route cannot be combined with --from/--to or --compare")
    if args.route is not None and args.time_of_day is None:
        parser.error("--route needs --time")
    if args.source is not None and not args.compare and args.time_of_day is None:
        parser.error("a one-shot query needs --time or --compare")
    return args


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_graph(args: argparse.Namespace) -> tuple[CityGraph, np.ndarray | None]:
    if args.demo_cities is not None:
        data = generate_city_network(n_cities=args.demo_cities, seed=args.seed)
        logger.info("Generated %d cities and %d roads", data["n_cities"], data["n_roads"])
        return data["graph"], data["node_coords"]
    return load_graph_json(args.graph), None


def run_interactive(
    service: RouteQueryService,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[[str], None] = print,
) -> None:
    """Prompt for queries until the user types ``exit`` or input ends."""

    while True:
        try:
            start_name = input_fn("\nEnter start city name (or 'exit' to quit): ").strip()
            if start_name == "exit":
                break
            end_name = input_fn("Enter destination city name: ").strip()
            time_text = input_fn("Enter time of day (morning/afternoon/evening): ").strip()
        except EOFError:
            break

        try:
            result = service.find_route(start_name, end_name, time_text)
        except UnknownCityError:
            print_fn("Invalid city name(s). Try again.")
            continue
        except InvalidTimeSlotError:
            print_fn("Invalid time of day. Try again.")
            continue
        except UnreachableError:
            print_fn(format_no_route(start_name, end_name))
            continue

        for line in format_route(result):
            print_fn(line)


def run_route_cost(service: RouteQueryService, args: argparse.Namespace) -> tuple[int, RouteResult | None]:
    """Price the comma-separated route given with ``--route``."""

    names = [name.strip() for name in args.route.split(",") if name.strip()]
    try:
        result = service.route_cost(names, args.time_of_day)
    except (TimeRouteError, ValueError) as exc:
        print(f"Query failed: {exc}")
        return 1, None

    print(f"Route cost (with traffic for {result.slot}): {result.cost}")
    print("Path: " + " -> ".join(result.city_names))
    return 0, result


def run_query(service: RouteQueryService, args: argparse.Namespace) -> tuple[int, RouteResult | None]:
    """Answer the one-shot query given on the command line."""

    try:
        if args.compare:
            results = service.compare_time_slots(args.source, args.destination)
            for slot, result in results.items():
                print(f"=== {slot} ===")
                if result is None:
                    print(format_no_route(args.source, args.destination))
                    continue
                for line in format_route(result):
                    print(line)
            best = service.best_time_slot(args.source, args.destination)
            print(f"\nCheapest time to travel: {best.slot} (cost {best.cost})")
            return 0, best

        result = service.find_route(args.source, args.destination, args.time_of_day)
    except UnreachableError:
        print(format_no_route(args.source, args.destination))
        return 1, None
    except TimeRouteError as exc:
        print(f"Query failed: {exc}")
        return 1, None

    for line in format_route(result):
        print(line)
    return 0, result


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        graph, node_coords = _load_graph(args)
    except (TimeRouteError, OSError, TypeError, ValueError) as exc:
        raise SystemExit(f"Failed to load graph: {exc}") from exc

    if not args.no_listing:
        print("=== Graph Layout ===")
        for line in format_graph_listing(graph):
            print(line)

    if args.save_graph:
        save_graph_json(graph, args.save_graph)

    service = RouteQueryService(graph)
    exit_code = 0
    route = None
    if args.source is not None:
        print("\n=== Route Query ===")
        exit_code, route = run_query(service, args)
    elif args.route is not None:
        print("\n=== Route Cost ===")
        exit_code, route = run_route_cost(service, args)
    else:
        run_interactive(service)

    if args.html:
        slot = route.slot if route is not None else None
        if slot is None and args.time_of_day in {s.value for s in TimeSlot}:
            slot = TimeSlot(args.time_of_day)
        fig = visualize_city_graph(
            graph,
            slot=slot,
            route=route,
            node_coords=node_coords,
            title="City Graph",
            return_fig=True,
        )
        write_figure_html(fig, args.html)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
