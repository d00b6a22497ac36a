from fastapi.testclient import TestClient

from dense_dijkstra.api import app


client = TestClient(app)

FOUR_NODES = [
    [None, 1, 4, None],
    [1, None, 2, 5],
    [4, 2, None, 1],
    [None, 5, 1, None],
]


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert "X-Request-Id" in r.headers


def test_generate():
    r = client.post("/api/graph/generate", json={"node_count": 4, "seed": 5})
    assert r.status_code == 200
    body = r.json()
    assert body["node_count"] == 4
    w = body["weights"]
    for i in range(4):
        assert w[i][i] is None
        for j in range(4):
            assert w[i][j] == w[j][i]
            if i != j:
                assert 1 <= w[i][j] <= 9


def test_generate_bad_range():
    r = client.post("/api/graph/generate", json={"node_count": 3, "min_weight": 5, "max_weight": 1})
    assert r.status_code == 400


def test_shortest_paths():
    r = client.post("/api/shortest-paths", json={"weights": FOUR_NODES, "source": 0, "include_steps": True})
    assert r.status_code == 200
    body = r.json()
    assert body["distance"] == [0, 1, 3, 4]
    assert body["predecessor"] == [None, 0, 1, 2]
    assert body["order"] == [0, 1, 2, 3]
    assert body["paths"]["3"]["nodes"] == [0, 1, 2, 3]
    assert body["paths"]["3"]["weights"] == [1, 2, 1]
    assert [s["node"] for s in body["steps"]] == [0, 1, 2, 3]

    status = client.get("/api/status").json()
    assert status["last_run"] == {"node_count": 4, "source": 0, "unreachable": 0}


def test_shortest_paths_unreachable():
    weights = [[None, 1, None], [1, None, None], [None, None, None]]
    body = client.post("/api/shortest-paths", json={"weights": weights}).json()
    assert body["distance"] == [0, 1, None]
    assert body["paths"]["2"]["reachable"] is False
    assert body["paths"]["2"]["cost"] is None
    assert body["steps"] is None


def test_shortest_paths_rejects_bad_input():
    assert client.post("/api/shortest-paths", json={"weights": FOUR_NODES, "source": 9}).status_code == 400
    assert client.post("/api/shortest-paths", json={"weights": [[None, 1], [2, None]]}).status_code == 400


def test_shortest_paths_rejects_fractional_weights():
    weights = [[None, 1.5], [1.5, None]]
    assert client.post("/api/shortest-paths", json={"weights": weights}).status_code == 422
