import json
from pathlib import Path

from dense_dijkstra.cli import main


def _events(capsys):
    return [json.loads(line) for line in capsys.readouterr().out.splitlines() if line.strip()]


def test_run_generates_and_reports_every_path(capsys):
    assert main(["run", "--nodes", "5", "--seed", "1"]) == 0
    events = _events(capsys)
    kinds = [e["event"] for e in events]
    assert kinds[0] == "graph"
    assert kinds.count("result") == 1
    assert kinds.count("path") == 5
    result = next(e for e in events if e["event"] == "result")
    assert result["distance"][0] == 0
    assert result["predecessor"][0] is None
    for e in events:
        if e["event"] == "path":
            assert e["reachable"]
            assert sum(e["weights"]) == result["distance"][e["target"]]


def test_run_with_steps_logs_each_settlement(capsys):
    assert main(["run", "--nodes", "4", "--seed", "2", "--steps"]) == 0
    settles = [e for e in _events(capsys) if e["event"] == "settle"]
    assert [s["iteration"] for s in settles] == [0, 1, 2, 3]
    assert settles[0]["node"] == 0


def test_bad_node_count(capsys):
    assert main(["run", "--nodes", "lots"]) == 2
    events = _events(capsys)
    assert events[-1]["event"] == "error"
    assert "Invalid number of nodes" in events[-1]["error"]


def test_bad_source(capsys):
    assert main(["run", "--nodes", "3", "--source", "3"]) == 2
    assert _events(capsys)[-1]["event"] == "error"


def test_run_from_json_with_unreachable_node(tmp_path: Path, capsys):
    p = tmp_path / "g.json"
    p.write_text(json.dumps({"weights": [[None, 2, None], [2, None, None], [None, None, None]], "source": 0}))
    assert main(["run-from-json", str(p)]) == 0
    events = _events(capsys)
    result = next(e for e in events if e["event"] == "result")
    assert result["distance"] == [0, 2, "inf"]
    assert result["order"] == [0, 1]
    path2 = next(e for e in events if e["event"] == "path" and e["target"] == 2)
    assert path2["reachable"] is False
    assert path2["cost"] == "inf"


def test_run_from_json_bad_file(tmp_path: Path, capsys):
    p = tmp_path / "g.json"
    p.write_text(json.dumps({"node_count": -3}))
    assert main(["run-from-json", str(p)]) == 2
    assert _events(capsys)[-1]["action"] == "load_config"


def test_run_from_json_null_weight_bound(tmp_path: Path, capsys):
    p = tmp_path / "g.json"
    p.write_text(json.dumps({"node_count": 3, "max_weight": None}))
    assert main(["run-from-json", str(p)]) == 2
    assert _events(capsys)[-1]["event"] == "error"
