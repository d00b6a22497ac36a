from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import GraphError


INF = float("inf")

Node = int
Weight = float  # ints in practice; INF marks a missing edge


@dataclass(frozen=True)
class Edge:
    u: Node
    v: Node
    w: Weight


def _coerce_weight(value: object, i: int, j: int) -> Weight:
    if value is None:
        return INF
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GraphError(f"weight at ({i}, {j}) must be a number or null, got {value!r}")
    if isinstance(value, float) and math.isnan(value):
        raise GraphError(f"weight at ({i}, {j}) is NaN")
    if value < 0:
        raise GraphError(f"weight at ({i}, {j}) is negative: {value}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class Graph:
    """Undirected weighted graph stored as a dense, immutable weight matrix.

    - Nodes are indices 0..N-1.
    - weights[i][j] is the edge weight between i and j, or INF for no edge.
    - The matrix must be symmetric. Diagonal entries are kept as given but
      never count as edges.
    """

    __slots__ = ("_weights",)

    def __init__(self, weights: Sequence[Sequence[object]]):
        rows = [list(r) for r in weights]
        n = len(rows)
        for i, row in enumerate(rows):
            if len(row) != n:
                raise GraphError(f"row {i} has {len(row)} entries, expected {n}")
        matrix: List[Tuple[Weight, ...]] = []
        for i, row in enumerate(rows):
            matrix.append(tuple(_coerce_weight(x, i, j) for j, x in enumerate(row)))
        for i in range(n):
            for j in range(i + 1, n):
                if matrix[i][j] != matrix[j][i]:
                    raise GraphError(f"matrix not symmetric at ({i}, {j}): {matrix[i][j]} != {matrix[j][i]}")
        self._weights: Tuple[Tuple[Weight, ...], ...] = tuple(matrix)

    @classmethod
    def empty(cls, node_count: int = 0) -> "Graph":
        """Graph with node_count nodes and no edges."""
        if node_count < 0:
            raise GraphError("node_count must be >= 0")
        return cls([[INF] * node_count for _ in range(node_count)])

    @classmethod
    def from_matrix(cls, rows: Sequence[Sequence[object]]) -> "Graph":
        return cls(rows)

    @classmethod
    def from_edges(cls, node_count: int, edges: Iterable[Tuple[Node, Node, Weight]]) -> "Graph":
        if node_count < 0:
            raise GraphError("node_count must be >= 0")
        rows: List[List[object]] = [[INF] * node_count for _ in range(node_count)]
        for u, v, w in edges:
            if not (0 <= u < node_count and 0 <= v < node_count):
                raise GraphError(f"edge ({u}, {v}) references a node outside 0..{node_count - 1}")
            if u == v:
                raise GraphError(f"self-loop on node {u} is not an edge")
            rows[u][v] = w
            rows[v][u] = w
        return cls(rows)

    @property
    def node_count(self) -> int:
        return len(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    @property
    def weights(self) -> Tuple[Tuple[Weight, ...], ...]:
        return self._weights

    def weight(self, u: Node, v: Node) -> Weight:
        """Edge weight between u and v; INF for no edge and for u == v."""
        if u == v:
            return INF
        return self._weights[u][v]

    def has_edge(self, u: Node, v: Node) -> bool:
        return self.weight(u, v) != INF

    def neighbors(self, u: Node) -> Dict[Node, Weight]:
        return {v: w for v, w in enumerate(self._weights[u]) if v != u and w != INF}

    def edges(self) -> Iterator[Edge]:
        """Each undirected edge once, with u < v."""
        n = len(self._weights)
        for u in range(n):
            for v in range(u + 1, n):
                w = self._weights[u][v]
                if w != INF:
                    yield Edge(u, v, w)

    def to_matrix(self) -> List[List[Optional[Weight]]]:
        """Plain nested lists with None in place of INF, safe for JSON."""
        return [[None if w == INF else w for w in row] for row in self._weights]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._weights == other._weights

    def __hash__(self) -> int:
        return hash(self._weights)

    def __repr__(self) -> str:
        return f"Graph(node_count={self.node_count}, edges={sum(1 for _ in self.edges())})"
