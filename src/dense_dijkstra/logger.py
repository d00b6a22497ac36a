from __future__ import annotations

import json
import math
import os
import sys
from datetime import datetime, timezone
from typing import Any


def _jsonable(obj: Any) -> Any:
    # strict JSON has no Infinity; unreachable distances become "inf"
    if isinstance(obj, float) and math.isinf(obj):
        return "inf" if obj > 0 else "-inf"
    if isinstance(obj, dict):
        return {str(k): _jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_jsonable(v) for v in obj]
    return obj


def _log_dir() -> str:
    return os.environ.get("DIJKSTRA_LOG_DIR", ".logs")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


def _max_bytes() -> int:
    return _env_int("DIJKSTRA_LOG_MAX_BYTES", 1048576)  # 1MB


def _backups() -> int:
    return _env_int("DIJKSTRA_LOG_BACKUPS", 5)


def log_path() -> str:
    return os.path.join(_log_dir(), "events.log")


def _rotate(path: str) -> None:
    backups = _backups()
    if backups <= 0:
        os.remove(path)
        return
    oldest = f"{path}.{backups}"
    if os.path.exists(oldest):
        os.remove(oldest)
    for i in range(backups - 1, 0, -1):
        if os.path.exists(f"{path}.{i}"):
            os.replace(f"{path}.{i}", f"{path}.{i + 1}")
    os.replace(path, f"{path}.1")


def _write_file_line(line: str) -> None:
    try:
        os.makedirs(_log_dir(), exist_ok=True)
        path = log_path()
        if os.path.exists(path) and os.path.getsize(path) > _max_bytes():
            _rotate(path)
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError:
        # file logging is best effort; stdout already has the event
        pass


def log_event(event: str, **fields: Any) -> None:
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        **_jsonable(fields),
    }
    line = json.dumps(record, ensure_ascii=False)
    sys.stdout.write(line + "\n")
    sys.stdout.flush()
    _write_file_line(line)
