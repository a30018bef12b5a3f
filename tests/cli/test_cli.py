import json
import logging
import math
from pathlib import Path

import pytest

from saferoute import cli

GRAPH_YAML = """
nodes:
  A: {name: Alpha}
  B: {name: Bravo}
  C: {name: Charlie, type: safe}
  D: {name: Delta, type: safe}
  E: {name: Echo}
edges:
  ab: {source: A, target: B, weight: 1}
  bd: {source: B, target: D, weight: 2}
  ac: {source: A, target: C, weight: 4}
  cd: {source: C, target: D, weight: 1, traffic: high}
"""


def extract_json_from_stdout(output: str) -> str:
    """Return the first balanced JSON object in stdout that may include status lines."""
    json_start = output.find("{")
    if json_start == -1:
        return output

    depth = 0
    for i in range(json_start, len(output)):
        if output[i] == "{":
            depth += 1
        elif output[i] == "}":
            depth -= 1
            if depth == 0:
                return output[json_start : i + 1]
    return output


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    path = tmp_path / "graph.yaml"
    path.write_text(GRAPH_YAML)
    return path


def test_route_prints_summary(graph_file: Path, capsys) -> None:
    cli.main(["route", str(graph_file), "A", "D"])
    out = capsys.readouterr().out
    assert "Route A -> D: distance 3" in out
    assert "Alpha -> Bravo -> Delta" in out


def test_route_with_block_and_stdout(graph_file: Path, capsys) -> None:
    cli.main(["route", str(graph_file), "A", "D", "--block", "bd", "--stdout"])
    payload = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert payload["distance"] == 5
    assert payload["path"] == ["A", "C", "D"]
    assert payload["names"] == ["Alpha", "Charlie", "Delta"]


def test_route_unreachable(graph_file: Path, capsys) -> None:
    cli.main(["route", str(graph_file), "A", "E", "--stdout"])
    out = capsys.readouterr().out
    assert "No route from A to E" in out
    payload = json.loads(extract_json_from_stdout(out))
    assert payload["reachable"] is False
    assert payload["distance"] is None


def test_route_writes_results_file(graph_file: Path, tmp_path: Path) -> None:
    results = tmp_path / "out" / "route.json"
    cli.main(["route", str(graph_file), "D", "A", "--results", str(results)])
    data = json.loads(results.read_text())
    assert data["distance"] == 3
    assert data["path"] == ["D", "B", "A"]


def test_route_unknown_node_lenient(graph_file: Path, capsys, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="saferoute"):
        cli.main(["route", str(graph_file), "A", "Z"])
    assert "No route from A to Z" in capsys.readouterr().out
    assert any("'Z' is not in the graph" in r.getMessage() for r in caplog.records)


def test_route_unknown_node_strict_exits(graph_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", str(graph_file), "A", "Z", "--strict"])
    assert exc_info.value.code == 1
    assert "KeyError" in capsys.readouterr().out


def test_route_unknown_block_edge_exits(graph_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", str(graph_file), "A", "D", "--block", "nope"])
    assert exc_info.value.code == 1
    assert "ERROR: Failed to compute route" in capsys.readouterr().out


def test_route_missing_file(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", str(tmp_path / "missing.yaml"), "A", "B"])
    assert exc_info.value.code == 1
    assert "Graph file not found" in capsys.readouterr().out


def test_inspect_summary(graph_file: Path, capsys) -> None:
    cli.main(["inspect", str(graph_file)])
    out = capsys.readouterr().out
    assert "GRAPH ANALYSIS" in out
    assert "Total: 5" in out
    assert "safe: 2" in out
    assert "Total: 4 (0 blocked)" in out
    assert "Graph is valid" in out
    # Tables only with --detail
    assert "Charlie" not in out


def test_inspect_detail_tables(graph_file: Path, capsys) -> None:
    cli.main(["inspect", str(graph_file), "--detail"])
    out = capsys.readouterr().out
    assert "Charlie" in out
    assert "Traffic" in out
    assert "high" in out


def test_inspect_invalid_graph(tmp_path: Path, capsys) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("nodes: {A: {}}\nedges: {ax: {source: A, target: X, weight: 1}}\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(bad)])
    assert exc_info.value.code == 1
    assert "unknown node 'X'" in capsys.readouterr().out


def test_inspect_example_graph(capsys) -> None:
    example = Path(__file__).resolve().parents[2] / "examples" / "dehradun.yaml"
    cli.main(["inspect", str(example)])
    assert "Graph is valid" in capsys.readouterr().out


def test_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: saferoute" in capsys.readouterr().out


def test_verbose_and_quiet_switch_levels(graph_file: Path, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="saferoute"):
        cli.main(["--verbose", "route", str(graph_file), "A", "D"])
    assert any("Debug logging enabled" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="saferoute"):
        cli.main(["--quiet", "route", str(graph_file), "A", "D"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


def test_format_distance() -> None:
    assert cli._format_distance(0.1) == "0.1"
    assert cli._format_distance(10.0) == "10"
    assert cli._format_distance(1234.567) == "1,234.567"
    assert cli._format_distance(2.5) == "2.5"
    assert cli._format_distance(math.inf) == "unreachable"
    assert cli._format_distance("n/a") == "n/a"


def test_format_table_clips() -> None:
    table = cli._format_table(["ID", "Name"], [["a", "x" * 50]], max_col_width=10)
    assert "xxxxxxx..." in table
    header, ruler, row = table.splitlines()
    assert header.startswith("   ID       | Name")
    assert set(ruler.strip()) == {"-", "+"}
    assert row.split(" | ")[0].strip() == "a"
    assert cli._format_table(["ID"], []) == ""
