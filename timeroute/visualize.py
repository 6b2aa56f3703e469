"""Plotly-based visualization of a city graph and a route on it."""

import logging
from pathlib import Path

import networkx as nx
import numpy as np
import plotly.graph_objects as go

from .graph import CityGraph
from .query import RouteResult
from .time_slots import TimeSlot

logger = logging.getLogger(__name__)


def build_networkx_graph(graph: CityGraph, slot: TimeSlot | None = None) -> nx.Graph:
    """Simple undirected networkx view; parallel roads keep the cheapest cost."""

    G = nx.Graph()
    for city_id, name in graph.cities.items():
        G.add_node(city_id, name=name)

    for road in graph.iter_roads():
        weight = road.cost(slot) if slot is not None else road.base_weight
        u, v = road.source, road.target
        if G.has_edge(u, v) and G[u][v]["weight"] <= weight:
            continue
        G.add_edge(u, v, weight=weight)

    return G


def _layout_coords(graph: CityGraph, seed: int) -> np.ndarray:
    coords = np.zeros((graph.n_vertices, 2))
    positions = nx.spring_layout(build_networkx_graph(graph), seed=seed)
    for city_id, (x, y) in positions.items():
        coords[city_id] = [x, y]
    return coords


def visualize_city_graph(
    graph: CityGraph,
    slot: TimeSlot | None = None,
    route: RouteResult | None = None,
    node_coords: np.ndarray | None = None,
    node_size: int = 14,
    layout_seed: int = 42,
    title: str = "City Graph",
    return_fig: bool = False,
) -> go.Figure | None:
    """Draw roads, cities and an optional highlighted route."""

    if node_coords is None:
        node_coords = _layout_coords(graph, layout_seed)
    if route is not None and slot is None:
        slot = route.slot

    edge_x, edge_y, mid_x, mid_y, edge_text = [], [], [], [], []
    for road in graph.iter_roads():
        x0, y0 = node_coords[road.source]
        x1, y1 = node_coords[road.target]
        edge_x += [x0, x1, None]
        edge_y += [y0, y1, None]
        mid_x.append((x0 + x1) / 2.0)
        mid_y.append((y0 + y1) / 2.0)
        costs = ", ".join(f"{s}={road.cost(s)}" for s in TimeSlot)
        edge_text.append(
            f"{graph.city_name(road.source)} - {graph.city_name(road.target)}"
            f"<br>base={road.base_weight}<br>{costs}"
        )

    edge_lines_trace = go.Scatter(
        x=edge_x,
        y=edge_y,
        mode="lines",
        line=dict(width=2, color="lightgray"),
        hoverinfo="none",
        showlegend=False,
    )

    edge_label_trace = go.Scatter(
        x=mid_x,
        y=mid_y,
        mode="text" if slot is not None else "markers",
        text=[str(road.cost(slot)) for road in graph.iter_roads()] if slot is not None else None,
        marker=dict(size=1, color="lightgray"),
        textposition="top center",
        textfont=dict(size=10, color="black"),
        hovertext=edge_text,
        hoverinfo="text",
        showlegend=False,
        name="road costs",
    )

    city_ids = [city_id for city_id, _ in graph.cities.items()]
    node_trace = go.Scatter(
        x=node_coords[city_ids, 0],
        y=node_coords[city_ids, 1],
        mode="markers+text",
        marker=dict(size=node_size, color="lightgray", line=dict(width=0.5, color="black")),
        text=[name for _, name in graph.cities.items()],
        textposition="bottom center",
        hoverinfo="text",
        name="cities",
    )

    fig = go.Figure()
    fig.add_trace(edge_lines_trace)
    fig.add_trace(edge_label_trace)
    fig.add_trace(node_trace)

    if route is not None:
        path = np.asarray(route.path, dtype=np.int64)
        fig.add_trace(
            go.Scatter(
                x=node_coords[path, 0],
                y=node_coords[path, 1],
                mode="lines+markers",
                line=dict(width=4, color="crimson"),
                marker=dict(size=node_size * 1.3, color="crimson"),
                name=f"route ({route.slot}, cost {route.cost})",
                hovertext=list(route.city_names),
                hoverinfo="text",
            )
        )

    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False, scaleanchor="x", scaleratio=1)
    subtitle = f" ({slot})" if slot is not None else ""
    fig.update_layout(
        title=title + subtitle,
        legend=dict(orientation="v", yanchor="top", y=0.98, xanchor="left", x=1.02),
        height=650,
    )

    if return_fig:
        return fig
    fig.show(renderer="browser")
    return None


def write_figure_html(fig: go.Figure, output_path: str | Path) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(path), include_plotlyjs="cdn")
    logger.info("Figure written to %s", path)
