"""FastAPI proxy between the research explorer front end and the model provider"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from . import __version__
from .analytics import aggregate
from .config import configure_logging, get_settings
from .errors import GraphValidationError, ProviderError, ProviderNotConfiguredError, ProviderResponseError
from .graph import GraphAdjacencyIndex, prune_graph
from .metadata import get_metadata, suggest
from .palette import contrasting_text_color, heat_color, node_color, node_symbol, series_color
from .providers import AiService, create_service
from .schema import AiSearchResult, KnowledgeGraph, SearchFilters, apply_filters, merge_results
from .themes import extract_themes

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Bionova Research Explorer", version=__version__)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request models
class SearchRequest(BaseModel):
    query: str
    filters: Optional[SearchFilters] = None


class ExtendSearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    existing_result: AiSearchResult = Field(alias="existingResult")
    filters: Optional[SearchFilters] = None


class ConnectedRequest(BaseModel):
    graph: KnowledgeGraph
    a: str
    b: str


# Provider instance (initialized on first use)
_services: Dict[str, AiService] = {}


def get_ai_service() -> AiService:
    """Get or create the active provider"""
    if settings.ai_provider not in _services:
        try:
            _services[settings.ai_provider] = create_service(settings)
        except ValueError as e:
            raise HTTPException(status_code=500, detail=str(e))
    return _services[settings.ai_provider]


def _require_query(query: str) -> str:
    query = (query or "").strip()
    if not query:
        raise HTTPException(status_code=400, detail="Query is required")
    return query


def _run_provider(service: AiService, query: str, filters: Optional[SearchFilters], context: Optional[AiSearchResult] = None) -> AiSearchResult:
    try:
        return service.generate(query, filters=filters, context=context)
    except ProviderNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ProviderResponseError as e:
        raise HTTPException(status_code=502, detail=f"AI provider returned an unusable response: {e}")
    except ProviderError as e:
        raise HTTPException(status_code=500, detail=f"AI search failed: {e}")


def _finalize(result: AiSearchResult, filters: Optional[SearchFilters]) -> AiSearchResult:
    result = apply_filters(result, filters)
    return result.model_copy(update={"graph": prune_graph(result.graph)})


@app.get("/")
async def root():
    return {
        "service": "Bionova Research Explorer",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
async def health_check(service: AiService = Depends(get_ai_service)):
    """API health check endpoint"""
    return {
        "status": "ok",
        "service": "Bionova Research Explorer",
        "environment": settings.environment,
        "provider": service.name,
        "model": service.model,
        "provider_configured": service.is_configured,
    }


# ===== SEARCH ENDPOINTS =====
# Plain def: provider SDK calls block, FastAPI runs these in its threadpool

@app.post("/api/search", response_model=AiSearchResult)
def search(request: SearchRequest, service: AiService = Depends(get_ai_service)):
    """Run a research query through the active provider"""
    query = _require_query(request.query)
    result = _run_provider(service, query, request.filters)
    result = _finalize(result, request.filters)
    logger.info("✅ Search %r returned %d report items", query, len(result.detailed_report))
    return result


@app.post("/api/extend-search", response_model=AiSearchResult)
def extend_search(request: ExtendSearchRequest, service: AiService = Depends(get_ai_service)):
    """Ask for more items on the same topic and merge them into the existing result"""
    query = _require_query(request.query)
    extra = _run_provider(service, query, request.filters, context=request.existing_result)
    merged = merge_results(request.existing_result, extra)
    merged = _finalize(merged, request.filters)
    logger.info(
        "✅ Extended search %r: %d -> %d report items",
        query, len(request.existing_result.detailed_report), len(merged.detailed_report),
    )
    return merged


# ===== ANALYTICS ENDPOINTS =====

@app.post("/api/analytics")
async def analytics(result: AiSearchResult, dark: bool = False):
    """Chart, theme and graph data for the dashboard"""
    dashboard = aggregate(result.detailed_report)
    themes = extract_themes(result.detailed_report)
    graph = prune_graph(result.graph)
    index = GraphAdjacencyIndex.from_graph(graph)

    distribution: List[Dict[str, Any]] = [
        {"name": share.name, "value": share.value, "color": series_color(i)}
        for i, share in enumerate(dashboard.mission_distribution)
    ]

    matrix = dashboard.matrix
    heatmap = matrix.to_dict()
    heatmap["colors"] = {
        organism: {
            mission: heat_color(matrix.count(organism, mission), matrix.max_count, dark=dark)
            for mission in matrix.missions
        }
        for organism in matrix.organisms
    }
    heatmap["text_colors"] = {
        organism: {mission: contrasting_text_color(color) for mission, color in row.items()}
        for organism, row in heatmap["colors"].items()
    }

    return {
        "stats": dashboard.stats.to_dict(),
        "mission_distribution": distribution,
        "organism_trend": dashboard.organism_trend.to_dict(),
        "heatmap": heatmap,
        "themes": [{"text": term.text, "size": term.weight, "frequency": term.frequency} for term in themes],
        "graph": {
            "nodes": [
                {"id": node.id, "type": node.type, "color": node_color(node.type, dark=dark), "symbol": node_symbol(node.type)}
                for node in graph.nodes
            ],
            "links": [
                {"source": link.source_id, "target": link.target_id, "label": link.label}
                for link in graph.links
            ],
            "adjacency": index.adjacency(),
        },
        "message": result.status_message,
    }


@app.post("/api/graph/connected")
async def graph_connected(request: ConnectedRequest):
    """Whether two nodes are directly linked (or identical)"""
    try:
        index = GraphAdjacencyIndex.from_graph(request.graph)
        return {"a": request.a, "b": request.b, "connected": index.connected(request.a, request.b)}
    except GraphValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ===== METADATA ENDPOINTS =====

@app.get("/api/metadata")
async def metadata():
    """Taxonomy lists for filters and search suggestions"""
    return get_metadata()


@app.get("/api/metadata/suggest")
async def metadata_suggest(q: str = Query("", description="Text typed so far"), limit: int = Query(10, ge=1, le=50)):
    return {"query": q, "suggestions": suggest(q, limit)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("bionova.main:app", host=settings.host, port=settings.port, reload=settings.debug)
