import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from socialpath.config import configure_logging, load_settings
from socialpath.models.dataset import configured_edges
from socialpath.models.degree import degree_distribution, most_connected
from socialpath.models.graph import build_graph, resolve
from socialpath.models.traversal import hop_count, path_labels, shortest_path

logger = logging.getLogger(__name__)


# ---------- Schemas ----------
class EdgeIn(BaseModel):
    source: str = Field(..., description="Label of the entity the relationship starts from")
    target: str = Field(..., description="Label of the entity the relationship points to")
    weight: int = Field(1, description="Stored with the edge; not used for path search")


class DegreesRequest(BaseModel):
    edges: Optional[List[EdgeIn]] = Field(
        default=None,
        description="Edge list to analyse; the configured dataset is used when omitted",
    )


class RouteRequest(BaseModel):
    source_name: str = Field(..., description="Source entity label, e.g. 'Eva'")
    target_name: str = Field(..., description="Target entity label, e.g. 'Maxine'")
    edges: Optional[List[EdgeIn]] = Field(
        default=None,
        description="Edge list to search; the configured dataset is used when omitted",
    )


# ---------- App ----------
settings = load_settings()
configure_logging(settings.log_level)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _edges(payload_edges: Optional[List[EdgeIn]]) -> list:
    if payload_edges is None:
        try:
            return configured_edges(settings.dataset_path)
        except (OSError, ValueError) as e:
            logger.error("could not load dataset %s: %s", settings.dataset_path, e)
            raise HTTPException(status_code=500, detail=f"Dataset could not be loaded: {e}")
    return [(e.source, e.target, e.weight) for e in payload_edges]


# --------- Endpoints ---------
@app.get("/")
async def root():
    return {"message": "socialpath is running"}


@app.get("/graph")
def graph_summary():
    G = build_graph(_edges(None))
    summary = G.describe()
    return {"nodes": summary["nodes"], "edges": summary["edges"], "density": summary["density"]}


@app.post("/degrees")
def degrees(payload: DegreesRequest):
    """Degree of every entity (incoming and outgoing relationships combined)."""
    counts: Dict[str, int] = degree_distribution(_edges(payload.edges))
    return {"degrees": counts, "most_connected": most_connected(counts)}


@app.post("/generate-routes")
def generate_routes(payload: RouteRequest):
    """
    Minimum-hop directed route between two entities, given their labels.
    """
    G = build_graph(_edges(payload.edges))

    src_id = resolve(G, payload.source_name)
    if src_id is None:
        raise HTTPException(
            status_code=404,
            detail=f"Source '{payload.source_name}' not found",
        )
    tgt_id = resolve(G, payload.target_name)
    if tgt_id is None:
        raise HTTPException(
            status_code=404,
            detail=f"Target '{payload.target_name}' not found",
        )

    path = shortest_path(G, src_id, tgt_id)
    logger.info("route %s -> %s: %s", payload.source_name, payload.target_name,
                "none" if path is None else f"{hop_count(path)} hops")

    if path is None:
        return {
            "source_name": payload.source_name,
            "target_name": payload.target_name,
            "path": None,
            "hops": None,
        }

    return {
        "source_name": payload.source_name,
        "target_name": payload.target_name,
        "path": path_labels(G, path),
        "hops": hop_count(path),
    }
