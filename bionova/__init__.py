"""Bionova research explorer: provider proxy and result analytics"""

__version__ = "1.0.0"

from .analytics import Dashboard, aggregate
from .errors import (
    BackendError,
    BionovaError,
    ConnectivityError,
    GraphValidationError,
    ProviderError,
)
from .graph import GraphAdjacencyIndex, prune_graph
from .missions import MissionCategory, normalize
from .schema import AiSearchResult, GraphLink, GraphNode, KnowledgeGraph, ReportItem, SearchFilters
from .themes import ThemeTerm, extract_themes

__all__ = [
    "AiSearchResult",
    "BackendError",
    "BionovaError",
    "ConnectivityError",
    "Dashboard",
    "GraphAdjacencyIndex",
    "GraphLink",
    "GraphNode",
    "GraphValidationError",
    "KnowledgeGraph",
    "MissionCategory",
    "ProviderError",
    "ReportItem",
    "SearchFilters",
    "ThemeTerm",
    "aggregate",
    "extract_themes",
    "normalize",
    "prune_graph",
]
