from __future__ import annotations

import os
import platform
import random
import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from .engine import SettlementStep, compute
from .errors import ConfigurationError, GraphError, InvalidSourceError
from .generator import DEFAULT_MAX_WEIGHT, DEFAULT_MIN_WEIGHT, generate_graph
from .graph import INF, Graph
from .logger import log_event
from .paths import all_paths


APP_VERSION = "0.1.0"
RUN_ID = os.environ.get("DIJKSTRA_RUN_ID", str(uuid.uuid4()))
app = FastAPI(title="Dense Dijkstra API", version=APP_VERSION)

# Summary of the most recent shortest-path run, reported by /api/status
LAST_RUN: Dict[str, Any] | None = None


class GenerateRequest(BaseModel):
    node_count: int = Field(ge=0)
    min_weight: int = DEFAULT_MIN_WEIGHT
    max_weight: int = DEFAULT_MAX_WEIGHT
    seed: Optional[int] = None


class GraphResponse(BaseModel):
    node_count: int
    weights: List[List[Optional[int]]]


class ShortestPathRequest(BaseModel):
    weights: List[List[Optional[int]]] = Field(description="Symmetric matrix, null for no edge")
    source: int = 0
    include_steps: bool = False


class PathModel(BaseModel):
    reachable: bool
    nodes: List[int]
    weights: List[int]
    cost: Optional[int]


class StepModel(BaseModel):
    iteration: int
    node: int
    distance: List[Optional[int]]


class ShortestPathResponse(BaseModel):
    source: int
    distance: List[Optional[int]]
    predecessor: List[Optional[int]]
    order: List[int]
    paths: Dict[int, PathModel]
    steps: Optional[List[StepModel]] = None


def _finite(values) -> List[Optional[int]]:
    return [None if v == INF else v for v in values]


@app.post("/api/graph/generate", response_model=GraphResponse)
def api_generate(req: GenerateRequest):
    try:
        graph = generate_graph(req.node_count, req.min_weight, req.max_weight, rng=random.Random(req.seed))
    except ConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    log_event("api_generate", node_count=graph.node_count, seed=req.seed)
    return GraphResponse(node_count=graph.node_count, weights=graph.to_matrix())


@app.post("/api/shortest-paths", response_model=ShortestPathResponse)
def api_shortest_paths(req: ShortestPathRequest):
    try:
        graph = Graph.from_matrix(req.weights)
    except GraphError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    steps: List[SettlementStep] = []
    try:
        result = compute(graph, req.source, on_settle=steps.append if req.include_steps else None)
    except InvalidSourceError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    paths = {
        v: PathModel(reachable=p.reachable, nodes=p.nodes, weights=p.weights,
                     cost=None if p.cost == INF else p.cost)
        for v, p in all_paths(result).items()
    }
    unreachable = result.unreachable()
    log_event("api_shortest_paths", node_count=graph.node_count, source=result.source, unreachable=unreachable)

    global LAST_RUN
    LAST_RUN = {"node_count": graph.node_count, "source": result.source, "unreachable": len(unreachable)}
    return ShortestPathResponse(
        source=result.source,
        distance=_finite(result.distance),
        predecessor=list(result.predecessor),
        order=list(result.order),
        paths=paths,
        steps=[StepModel(iteration=s.iteration, node=s.node, distance=_finite(s.distance)) for s in steps]
        if req.include_steps else None,
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    req_id = str(uuid.uuid4())
    log_event("http_request", method=request.method, path=request.url.path, request_id=req_id, run_id=RUN_ID)
    response = await call_next(request)
    response.headers["X-Request-Id"] = req_id
    response.headers["X-Run-Id"] = RUN_ID
    log_event("http_response", path=request.url.path, status=response.status_code, request_id=req_id, run_id=RUN_ID)
    return response


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/status")
def status():
    info: Dict[str, Any] = {
        "status": "ok",
        "version": APP_VERSION,
        "run_id": RUN_ID,
        "python": platform.python_version(),
    }
    if LAST_RUN is not None:
        info["last_run"] = LAST_RUN
    return info
