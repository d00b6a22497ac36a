from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .engine import ShortestPathResult
from .errors import InvalidNodeError, PathReconstructionError
from .graph import INF, Node, Weight


@dataclass(frozen=True)
class PathEdge:
    u: Node
    v: Node
    weight: Weight


@dataclass
class Path:
    target: Node
    reachable: bool
    edges: List[PathEdge] = field(default_factory=list)
    cost: Weight = INF

    @property
    def nodes(self) -> List[Node]:
        if not self.reachable:
            return []
        if not self.edges:
            return [self.target]
        return [self.edges[0].u] + [e.v for e in self.edges]

    @property
    def weights(self) -> List[Weight]:
        return [e.weight for e in self.edges]


def reconstruct_path(result: ShortestPathResult, target: Node) -> Path:
    """Walk predecessor pointers from target back to the source.

    Edges come back in source-to-target order. An unreachable target gives a
    Path with reachable=False rather than an error. The walk is capped at N
    steps so a corrupted predecessor map raises PathReconstructionError
    instead of looping.
    """
    n = result.node_count
    if isinstance(target, bool) or not isinstance(target, int) or not (0 <= target < n):
        raise InvalidNodeError(target, n, role="target")

    if result.distance[target] == INF:
        return Path(target, reachable=False)

    graph = result.graph
    edges: List[PathEdge] = []
    cur: Node = target
    steps = 0
    while cur != result.source:
        prev: Optional[Node] = result.predecessor[cur]
        if prev is None:
            raise PathReconstructionError(f"node {cur} has no predecessor but is not the source {result.source}")
        steps += 1
        if steps > n:
            raise PathReconstructionError(f"predecessor walk from {target} exceeded {n} steps")
        w = graph.weight(prev, cur)
        if w == INF:
            raise PathReconstructionError(f"predecessor edge ({prev}, {cur}) is not in the graph")
        edges.append(PathEdge(prev, cur, w))
        cur = prev
    edges.reverse()
    return Path(target, reachable=True, edges=edges, cost=sum(e.weight for e in edges))


def all_paths(result: ShortestPathResult) -> Dict[Node, Path]:
    return {v: reconstruct_path(result, v) for v in range(result.node_count)}


def shortest_path_tree(result: ShortestPathResult) -> List[PathEdge]:
    """Edges (predecessor[v], v) of every reached non-source node, ordered by v.

    The union of all shortest paths back to the source.
    """
    tree: List[PathEdge] = []
    for v, prev in enumerate(result.predecessor):
        if prev is None:
            continue
        tree.append(PathEdge(prev, v, result.graph.weight(prev, v)))
    return tree
