from __future__ import annotations

import random
from typing import List, Optional, Protocol

from .errors import ConfigurationError
from .graph import INF, Graph, Weight


DEFAULT_MIN_WEIGHT = 1
DEFAULT_MAX_WEIGHT = 9


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


def _check_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    return value


def generate_graph(
    node_count: int,
    min_weight: int = DEFAULT_MIN_WEIGHT,
    max_weight: int = DEFAULT_MAX_WEIGHT,
    rng: Optional[RandomSource] = None,
) -> Graph:
    """Random complete undirected graph on node_count nodes.

    Every pair i < j gets one weight drawn uniformly from
    [min_weight, max_weight] (inclusive), mirrored into both halves of the
    matrix. The diagonal stays INF.
    """
    node_count = _check_int("node_count", node_count)
    min_weight = _check_int("min_weight", min_weight)
    max_weight = _check_int("max_weight", max_weight)
    if node_count < 0:
        raise ConfigurationError("node_count must be >= 0")
    if min_weight < 1:
        raise ConfigurationError("min_weight must be >= 1")
    if max_weight < min_weight:
        raise ConfigurationError("max_weight must be >= min_weight")

    rng = rng if rng is not None else random.Random()
    rows: List[List[Weight]] = [[INF] * node_count for _ in range(node_count)]
    for i in range(node_count):
        for j in range(i + 1, node_count):
            w = rng.randint(min_weight, max_weight)
            rows[i][j] = w
            rows[j][i] = w
    return Graph(rows)
