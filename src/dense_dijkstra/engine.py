from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from .errors import InvalidSourceError
from .graph import INF, Graph, Node, Weight


@dataclass(frozen=True)
class SettlementStep:
    """Progress report emitted once per settled node.

    Snapshots are taken after the node has been settled and its unvisited
    neighbours relaxed.
    """

    iteration: int
    node: Node
    distance: Tuple[Weight, ...]
    predecessor: Tuple[Optional[Node], ...]


@dataclass(frozen=True)
class ShortestPathResult:
    graph: Graph
    source: Node
    distance: Tuple[Weight, ...]
    predecessor: Tuple[Optional[Node], ...]
    order: Tuple[Node, ...]  # settlement order

    @property
    def node_count(self) -> int:
        return len(self.distance)

    def is_reachable(self, node: Node) -> bool:
        return self.distance[node] != INF

    def unreachable(self) -> List[Node]:
        return [v for v, d in enumerate(self.distance) if d == INF]


StepCallback = Callable[[SettlementStep], None]


def _check_source(graph: Graph, source: object) -> Node:
    n = graph.node_count
    if isinstance(source, bool) or not isinstance(source, int):
        raise InvalidSourceError(source, n)
    if n and not (0 <= source < n):
        raise InvalidSourceError(source, n)
    return source


def _select_next(distance: List[Weight], visited: List[bool]) -> Optional[Node]:
    """Unvisited node with the smallest finite distance, lowest index on ties.

    None when every unvisited node is still at INF.
    """
    best: Optional[Node] = None
    best_dist = INF
    for v, d in enumerate(distance):
        if not visited[v] and d < best_dist:
            best, best_dist = v, d
    return best


def _settle(graph: Graph, source: Node) -> Iterator[SettlementStep]:
    n = graph.node_count
    weights = graph.weights
    distance: List[Weight] = [INF] * n
    predecessor: List[Optional[Node]] = [None] * n
    visited = [False] * n
    distance[source] = 0

    for iteration in range(n):
        u = _select_next(distance, visited)
        if u is None:
            # rest of the graph is disconnected from the source
            break
        visited[u] = True

        row = weights[u]
        for v in range(n):
            if visited[v] or row[v] == INF:
                continue
            candidate = distance[u] + row[v]
            if candidate < distance[v]:
                distance[v] = candidate
                predecessor[v] = u

        yield SettlementStep(iteration, u, tuple(distance), tuple(predecessor))


def iter_settlements(graph: Graph, source: Node) -> Iterator[SettlementStep]:
    """Run the label-setting loop lazily, one SettlementStep per settled node.

    Raises InvalidSourceError immediately, not on first iteration.
    """
    source = _check_source(graph, source)
    if graph.node_count == 0:
        return iter(())
    return _settle(graph, source)


def compute(graph: Graph, source: Node, on_settle: Optional[StepCallback] = None) -> ShortestPathResult:
    """Single-source shortest paths on a non-negatively weighted graph.

    O(N^2) Dijkstra with a plain distance array; no priority queue since the
    graphs this targets are dense. Nodes not reachable from source keep
    distance INF and predecessor None and never appear in ``order``.
    """
    source = _check_source(graph, source)
    n = graph.node_count
    distance: Tuple[Weight, ...] = tuple([INF] * n)
    predecessor: Tuple[Optional[Node], ...] = tuple([None] * n)
    order: List[Node] = []

    for step in iter_settlements(graph, source):
        order.append(step.node)
        distance, predecessor = step.distance, step.predecessor
        if on_settle is not None:
            on_settle(step)

    return ShortestPathResult(graph, source, distance, predecessor, tuple(order))
