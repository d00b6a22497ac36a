from __future__ import annotations

import argparse
import random
from typing import List

from .config import RunConfig, build_graph, load_config, parse_node_count
from .engine import SettlementStep, compute
from .errors import ConfigurationError, InvalidSourceError
from .generator import DEFAULT_MAX_WEIGHT, DEFAULT_MIN_WEIGHT, generate_graph
from .graph import Graph
from .logger import log_event
from .paths import all_paths


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dense-dijkstra", description="Shortest paths on random dense graphs")
    sub = p.add_subparsers(dest="cmd", required=True)

    run = sub.add_parser("run", help="Generate a random complete graph and compute shortest paths")
    run.add_argument("--nodes", required=True, help="Number of nodes (non-negative integer)")
    run.add_argument("--source", type=int, default=0, help="Source node index")
    run.add_argument("--min-weight", type=int, default=DEFAULT_MIN_WEIGHT, help="Smallest edge weight")
    run.add_argument("--max-weight", type=int, default=DEFAULT_MAX_WEIGHT, help="Largest edge weight")
    run.add_argument("--seed", type=int, default=None, help="Seed for reproducible graphs")
    run.add_argument("--steps", action="store_true", help="Log one event per settled node")

    from_json = sub.add_parser("run-from-json", help="Run using a JSON config file")
    from_json.add_argument("path", help="Path to JSON config")
    from_json.add_argument("--steps", action="store_true", help="Log one event per settled node")

    return p


def _log_step(step: SettlementStep) -> None:
    log_event("settle", iteration=step.iteration, node=step.node, distance=step.distance)


def run_graph(graph: Graph, source: int, steps: bool = False) -> int:
    log_event("graph", node_count=graph.node_count, weights=graph.to_matrix())
    try:
        result = compute(graph, source, on_settle=_log_step if steps else None)
    except InvalidSourceError as exc:
        log_event("error", action="compute", error=str(exc))
        return 2
    log_event("result", source=result.source, distance=result.distance,
              predecessor=result.predecessor, order=result.order)
    for target, path in all_paths(result).items():
        log_event("path", target=target, reachable=path.reachable, nodes=path.nodes,
                  weights=path.weights, cost=path.cost)
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    try:
        n = parse_node_count(args.nodes)
        graph = generate_graph(n, args.min_weight, args.max_weight, rng=random.Random(args.seed))
    except ConfigurationError as exc:
        log_event("error", action="generate", error=str(exc))
        return 2
    return run_graph(graph, args.source, steps=args.steps)


def cmd_run_from_json(args: argparse.Namespace) -> int:
    try:
        cfg: RunConfig = load_config(args.path)
        graph = build_graph(cfg)
    except ConfigurationError as exc:
        log_event("error", action="load_config", error=str(exc))
        return 2
    return run_graph(graph, cfg.source, steps=args.steps)


def main(argv: List[str] | None = None) -> int:
    p = build_arg_parser()
    args = p.parse_args(argv)
    if args.cmd == "run":
        return cmd_run(args)
    if args.cmd == "run-from-json":
        return cmd_run_from_json(args)
    return 0

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
