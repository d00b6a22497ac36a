from __future__ import annotations

import json
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .errors import ConfigurationError, GraphError
from .generator import DEFAULT_MAX_WEIGHT, DEFAULT_MIN_WEIGHT, generate_graph
from .graph import Graph


@dataclass
class RunConfig:
    node_count: int
    min_weight: int = DEFAULT_MIN_WEIGHT
    max_weight: int = DEFAULT_MAX_WEIGHT
    source: int = 0
    seed: Optional[int] = None
    weights: Optional[List[List[Any]]] = None  # explicit matrix, skips generation


def parse_node_count(text: Any) -> int:
    """Parse a node count typed by a user. Must be a non-negative integer."""
    if isinstance(text, bool):
        raise ConfigurationError(f"Invalid number of nodes: {text!r}")
    if isinstance(text, int):
        value = text
    else:
        try:
            value = int(str(text).strip())
        except ValueError:
            raise ConfigurationError(f"Invalid number of nodes: {text!r}") from None
    if value < 0:
        raise ConfigurationError(f"Invalid number of nodes: {value} (must be >= 0)")
    return value


def _int_field(data: Dict[str, Any], key: str, default: Optional[int]) -> Optional[int]:
    value = data.get(key, default)
    if value is None:
        if default is not None:
            raise ConfigurationError(f"{key} must be an integer, got null")
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}")
    return value


def config_from_dict(data: Dict[str, Any]) -> RunConfig:
    if not isinstance(data, dict):
        raise ConfigurationError("config must be a JSON object")

    weights = data.get("weights")
    if weights is not None:
        if not isinstance(weights, list) or not all(isinstance(r, list) for r in weights):
            raise ConfigurationError("weights must be a list of lists")
        node_count = len(weights)
        if "node_count" in data and parse_node_count(data["node_count"]) != node_count:
            raise ConfigurationError("node_count does not match the size of weights")
    else:
        if "node_count" not in data:
            raise ConfigurationError("either node_count or weights is required")
        node_count = parse_node_count(data["node_count"])

    cfg = RunConfig(
        node_count=node_count,
        min_weight=_int_field(data, "min_weight", DEFAULT_MIN_WEIGHT),
        max_weight=_int_field(data, "max_weight", DEFAULT_MAX_WEIGHT),
        source=_int_field(data, "source", 0),
        seed=_int_field(data, "seed", None),
        weights=weights,
    )
    if cfg.min_weight < 1 or cfg.max_weight < cfg.min_weight:
        raise ConfigurationError("weight range must satisfy 1 <= min_weight <= max_weight")
    return cfg


def load_config(path: str) -> RunConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigurationError(f"cannot read config {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"config {path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"config {path} is not valid JSON: {exc}") from exc
    return config_from_dict(data)


def build_graph(cfg: RunConfig) -> Graph:
    """Explicit matrix if the config carries one, else a fresh random graph."""
    if cfg.weights is not None:
        try:
            return Graph.from_matrix(cfg.weights)
        except GraphError as exc:
            raise ConfigurationError(f"invalid weights: {exc}") from exc
    return generate_graph(cfg.node_count, cfg.min_weight, cfg.max_weight, rng=random.Random(cfg.seed))
