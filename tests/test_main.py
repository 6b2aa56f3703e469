import json

import pytest

from timeroute.main import main, run_interactive
from timeroute.query import RouteQueryService


def _scripted(lines):
    answers = iter(lines)

    def input_fn(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    return input_fn


def test_one_shot_query(abc_json, capsys):
    assert main([str(abc_json), "--from", "A", "--to", "C", "--time", "morning"]) == 0
    out = capsys.readouterr().out
    assert "=== Graph Layout ===" in out
    assert "A -> B (Base: 5, Traffic (Morning): 2, Afternoon: 1, Evening: 4)" in out
    assert "Shortest distance (with traffic for morning): 11" in out
    assert "Path: A -> B -> C" in out


def test_one_shot_unreachable(abc_json, capsys):
    args = [str(abc_json), "--from", "A", "--to", "D", "--time", "evening", "--no-listing"]
    assert main(args) == 1
    out = capsys.readouterr().out
    assert "No route found from A to D" in out
    assert "Graph Layout" not in out


def test_one_shot_invalid_time(abc_json, capsys):
    args = [str(abc_json), "--from", "A", "--to", "C", "--time", "noon", "--no-listing"]
    assert main(args) == 1
    assert "Query failed" in capsys.readouterr().out


def test_compare_prints_every_slot(abc_json, capsys):
    args = [str(abc_json), "--from", "A", "--to", "C", "--compare", "--no-listing"]
    assert main(args) == 0
    out = capsys.readouterr().out
    for slot in ("morning", "afternoon", "evening"):
        assert f"=== {slot} ===" in out
    assert "Cheapest time to travel: morning (cost 11)" in out


def test_demo_network_with_html_and_saved_graph(tmp_path, capsys):
    html = tmp_path / "demo.html"
    saved = tmp_path / "demo.json"
    args = [
        "--demo-cities", "9",
        "--from", "C00",
        "--to", "C22",
        "--time", "afternoon",
        "--html", str(html),
        "--save-graph", str(saved),
        "--no-listing",
    ]
    assert main(args) == 0
    assert html.exists()
    assert len(json.loads(saved.read_text(encoding="utf-8"))["cities"]) == 9
    assert "Path: C00 -> " in capsys.readouterr().out


def test_broken_graph_aborts(tmp_path, abc_document):
    del abc_document["edges"][0]["traffic"]["morning"]
    path = tmp_path / "broken.json"
    path.write_text(json.dumps(abc_document), encoding="utf-8")
    with pytest.raises(SystemExit, match="Failed to load graph"):
        main([str(path), "--no-listing"])


def test_missing_graph_file_aborts(tmp_path):
    with pytest.raises(SystemExit, match="Failed to load graph"):
        main([str(tmp_path / "nope.json"), "--from", "A", "--to", "B", "--time", "morning"])


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["graph.json", "--from", "A"],
        ["graph.json", "--from", "A", "--to", "B"],
        ["graph.json", "--demo-cities", "9", "--no-listing"],
        ["graph.json", "--route", "A,B"],
        ["graph.json", "--route", "A,B", "--time", "morning", "--compare"],
    ],
)
def test_argument_errors(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_interactive_loop_recovers_from_bad_input(abc_graph):
    printed = []
    run_interactive(
        RouteQueryService(abc_graph),
        input_fn=_scripted(
            [
                "A", "Atlantis", "morning",
                "A", "C", "MORNING",
                "A", "D", "evening",
                "A", "C", "evening",
                "exit",
            ]
        ),
        print_fn=printed.append,
    )
    assert printed == [
        "Invalid city name(s). Try again.",
        "Invalid time of day. Try again.",
        "No route found from A to D",
        "Shortest distance (with traffic for evening): 12",
        "Path: A -> B -> C",
    ]


def test_interactive_loop_stops_at_end_of_input(abc_graph):
    printed = []
    run_interactive(
        RouteQueryService(abc_graph),
        input_fn=_scripted(["B", "C", "afternoon", "A"]),
        print_fn=printed.append,
    )
    assert printed == [
        "Shortest distance (with traffic for afternoon): 8",
        "Path: B -> C",
    ]


def test_route_cost_query(abc_json, capsys):
    args = [str(abc_json), "--route", "A, B, C", "--time", "morning", "--no-listing"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "=== Route Cost ===" in out
    assert "Route cost (with traffic for morning): 11" in out
    assert "Path: A -> B -> C" in out


def test_route_cost_query_without_a_road(abc_json, capsys):
    args = [str(abc_json), "--route", "A,C", "--time", "evening", "--no-listing"]
    assert main(args) == 1
    assert "Query failed: No road between A and C" in capsys.readouterr().out
