import plotly.graph_objects as go

from timeroute.display import format_graph_listing, format_no_route, format_route
from timeroute.query import RouteQueryService
from timeroute.visualize import build_networkx_graph, visualize_city_graph, write_figure_html
from timeroute.time_slots import TimeSlot


def test_graph_listing_has_one_line_per_direction(abc_graph):
    assert format_graph_listing(abc_graph) == [
        "A -> B (Base: 5, Traffic (Morning): 2, Afternoon: 1, Evening: 4)",
        "B -> A (Base: 5, Traffic (Morning): 2, Afternoon: 1, Evening: 4)",
        "B -> C (Base: 3, Traffic (Morning): 1, Afternoon: 5, Evening: 0)",
        "C -> B (Base: 3, Traffic (Morning): 1, Afternoon: 5, Evening: 0)",
    ]


def test_format_route(abc_graph):
    result = RouteQueryService(abc_graph).find_route("A", "C", "evening")
    assert format_route(result) == [
        "Shortest distance (with traffic for evening): 12",
        "Path: A -> B -> C",
    ]


def test_format_no_route():
    assert format_no_route("A", "D") == "No route found from A to D"


def test_networkx_view_uses_slot_costs(abc_graph):
    G = build_networkx_graph(abc_graph, TimeSlot.AFTERNOON)
    assert set(G.nodes) == {0, 1, 2, 3}
    assert G[0][1]["weight"] == 6
    assert G[1][2]["weight"] == 8
    assert build_networkx_graph(abc_graph)[0][1]["weight"] == 5


def test_figure_highlights_route(abc_graph, tmp_path):
    route = RouteQueryService(abc_graph).find_route("A", "C", "morning")
    fig = visualize_city_graph(abc_graph, route=route, return_fig=True)
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 4
    assert "cost 11" in fig.data[-1].name
    assert list(fig.data[-1].hovertext) == ["A", "B", "C"]

    out = tmp_path / "figs" / "graph.html"
    write_figure_html(fig, out)
    assert out.exists()
    assert "plotly" in out.read_text(encoding="utf-8").lower()


def test_figure_without_route(abc_graph):
    fig = visualize_city_graph(abc_graph, return_fig=True)
    assert len(fig.data) == 3
    assert list(fig.data[2].text) == ["A", "B", "C", "D"]
