from __future__ import annotations


class DijkstraError(Exception):
    """Base class for every error raised by dense_dijkstra."""


class ConfigurationError(DijkstraError, ValueError):
    """Bad user-supplied settings: node count, weight range, config file."""


class GraphError(DijkstraError, ValueError):
    """Weight matrix is not square, not symmetric, or holds a negative weight."""


class InvalidNodeError(DijkstraError, IndexError):
    def __init__(self, node: object, node_count: int, role: str = "node"):
        super().__init__(f"{role} {node!r} out of range for graph with {node_count} nodes")
        self.node = node
        self.node_count = node_count


class InvalidSourceError(InvalidNodeError):
    def __init__(self, node: object, node_count: int):
        super().__init__(node, node_count, role="source")


class PathReconstructionError(DijkstraError, RuntimeError):
    """Predecessor map does not lead back to the source."""
