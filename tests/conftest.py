import pytest


@pytest.fixture(autouse=True)
def _log_dir(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("DIJKSTRA_LOG_DIR", str(log_dir))
    return log_dir
