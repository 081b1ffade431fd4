"""Result schema exchanged between the provider proxy and the front end.

The provider is instructed to return JSON of exactly this shape::

    {
      "summary": {"overview": ..., "years_range": ..., "highlight_points": [...]},
      "detailed_report": [{"title", "year", "organism", "mission_or_experiment",
                           "main_findings", "source_url" | null}],
      "graph": {"nodes": [{"id", "type"}], "links": [{"source", "target", "label"}]}
    }
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .missions import normalize

NO_REFERENCE_LABEL = "(no NASA reference found)"
NO_RESULTS_MESSAGE = "No NASA reference has been found for this topic"
PROVIDER_ERROR_MESSAGE = "There was a problem retrieving the data, please try again later"


class Summary(BaseModel):
    overview: str = ""
    years_range: str = ""
    highlight_points: List[str] = Field(default_factory=list)


class ReportItem(BaseModel):
    """One research record from the detailed report"""

    model_config = ConfigDict(frozen=True)

    title: str
    year: int
    organism: str
    mission_or_experiment: str
    main_findings: str
    source_url: Optional[str] = None

    @property
    def has_source(self) -> bool:
        return bool(self.source_url)

    @property
    def source_label(self) -> str:
        return self.source_url if self.source_url else NO_REFERENCE_LABEL


class GraphNode(BaseModel):
    id: str
    type: str
    # Layout state owned by the force simulation, never serialized
    x: Optional[float] = Field(default=None, exclude=True)
    y: Optional[float] = Field(default=None, exclude=True)
    vx: Optional[float] = Field(default=None, exclude=True)
    vy: Optional[float] = Field(default=None, exclude=True)


class GraphLink(BaseModel):
    # A layout engine replaces ids with node objects once it starts
    source: Union[str, GraphNode]
    target: Union[str, GraphNode]
    label: str = ""

    @property
    def source_id(self) -> str:
        return endpoint_id(self.source)

    @property
    def target_id(self) -> str:
        return endpoint_id(self.target)


class KnowledgeGraph(BaseModel):
    nodes: List[GraphNode] = Field(default_factory=list)
    links: List[GraphLink] = Field(default_factory=list)

    @property
    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]


class AiSearchResult(BaseModel):
    summary: Summary = Field(default_factory=Summary)
    detailed_report: List[ReportItem] = Field(default_factory=list)
    graph: KnowledgeGraph = Field(default_factory=KnowledgeGraph)

    @property
    def is_empty(self) -> bool:
        return not self.detailed_report

    @property
    def status_message(self) -> Optional[str]:
        return NO_RESULTS_MESSAGE if self.is_empty else None


class SearchFilters(BaseModel):
    """Optional narrowing of a search, sent alongside the query"""

    organisms: List[str] = Field(default_factory=list)
    missions: List[str] = Field(default_factory=list)
    year_from: Optional[int] = None
    year_to: Optional[int] = None
    research_areas: List[str] = Field(default_factory=list)
    publication_types: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.organisms
            or self.missions
            or self.year_from is not None
            or self.year_to is not None
            or self.research_areas
            or self.publication_types
        )

    def matches(self, item: ReportItem) -> bool:
        """Whether a report item passes the organism, mission and year filters"""
        if self.organisms:
            wanted = {organism.lower() for organism in self.organisms}
            if item.organism.lower() not in wanted:
                return False
        if self.missions:
            wanted = {mission.lower() for mission in self.missions}
            if normalize(item.mission_or_experiment).value.lower() not in wanted:
                return False
        if self.year_from is not None and item.year < self.year_from:
            return False
        if self.year_to is not None and item.year > self.year_to:
            return False
        return True

    def describe(self) -> str:
        """Plain-English rendering used inside provider prompts"""
        parts = []
        if self.organisms:
            parts.append(f"organisms: {', '.join(self.organisms)}")
        if self.missions:
            parts.append(f"missions/platforms: {', '.join(self.missions)}")
        if self.year_from is not None and self.year_to is not None:
            parts.append(f"years {self.year_from}-{self.year_to}")
        elif self.year_from is not None:
            parts.append(f"years from {self.year_from}")
        elif self.year_to is not None:
            parts.append(f"years up to {self.year_to}")
        if self.research_areas:
            parts.append(f"research areas: {', '.join(self.research_areas)}")
        if self.publication_types:
            parts.append(f"publication types: {', '.join(self.publication_types)}")
        return "; ".join(parts)


def endpoint_id(endpoint: Union[str, GraphNode, Dict[str, Any]]) -> str:
    """Resolve a link endpoint given as an id, a node or a node dict"""
    if isinstance(endpoint, str):
        return endpoint
    if isinstance(endpoint, dict):
        return endpoint["id"]
    return endpoint.id


def apply_filters(result: AiSearchResult, filters: Optional[SearchFilters]) -> AiSearchResult:
    """Return a copy of ``result`` keeping only report items that pass ``filters``.

    The graph and summary are left untouched; research area and publication
    type filters only steer the prompt since items carry no such fields.
    """
    if filters is None or filters.is_empty:
        return result
    kept = [item for item in result.detailed_report if filters.matches(item)]
    return result.model_copy(update={"detailed_report": kept})


def merge_results(existing: AiSearchResult, extra: AiSearchResult) -> AiSearchResult:
    """Combine a previous result with the answer to an extended search"""
    seen_titles = set()
    report: List[ReportItem] = []
    for item in list(existing.detailed_report) + list(extra.detailed_report):
        key = item.title.strip().lower()
        if key in seen_titles:
            continue
        seen_titles.add(key)
        report.append(item)

    seen_nodes = set()
    nodes: List[GraphNode] = []
    for node in list(existing.graph.nodes) + list(extra.graph.nodes):
        if node.id in seen_nodes:
            continue
        seen_nodes.add(node.id)
        nodes.append(node)

    seen_links = set()
    links: List[GraphLink] = []
    for link in list(existing.graph.links) + list(extra.graph.links):
        key = (link.source_id, link.target_id, link.label)
        if key in seen_links:
            continue
        seen_links.add(key)
        links.append(link)

    highlights: List[str] = []
    for point in existing.summary.highlight_points + extra.summary.highlight_points:
        if point not in highlights:
            highlights.append(point)

    summary = Summary(
        overview=extra.summary.overview or existing.summary.overview,
        years_range=extra.summary.years_range or existing.summary.years_range,
        highlight_points=highlights,
    )
    return AiSearchResult(
        summary=summary,
        detailed_report=report,
        graph=KnowledgeGraph(nodes=nodes, links=links),
    )
