"""Contract every model provider follows, plus the shared prompt and parsing"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import ValidationError

from ..errors import ProviderResponseError
from ..schema import AiSearchResult, SearchFilters

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """You are an AI agent that retrieves and analyzes NASA Space Biology research data.
When the user searches a topic (e.g. "plants in microgravity"), your job is to:
Fetch all relevant research items from NASA's sources (papers, datasets, media, experiments).
Analyze & summarize the findings in student-friendly English.
MOST IMPORTANT: Always attach the official NASA reference URL for each item.
DATA SOURCES (priority order):
NASA GeneLab: https://genelab-data.ndc.nasa.gov/genelab/projects
NASA Technical Reports Server (NTRS): https://ntrs.nasa.gov/
NASA Image & Video Library: https://images.nasa.gov/
NASA Space Biology Program pages (ISS, RR missions, etc.)
OUTPUT RULES:
Never fabricate references or links.
If a direct NASA link is not available, return "source_url": null.
Ensure all URLs are clickable and valid (https://).
Graph nodes must match report entities and every link must connect existing node ids.
Respond with a single JSON object only, no text before or after it.
"""

JSON_SCHEMA_HINT = """{
  "summary": { "overview": "...", "years_range": "YYYY-YYYY", "highlight_points": ["..."] },
  "detailed_report": [ { "title": "...", "year": 2020, "organism": "Human|Mouse|Plant|Microbe|Other", "mission_or_experiment": "ISS|RR-1|GLDS-242|Shuttle|N/A", "main_findings": "...", "source_url": "https://... or null" } ],
  "graph": { "nodes": [ { "id": "...", "type": "experiment|organism|result|condition" } ], "links": [ { "source": "...", "target": "...", "label": "..." } ] }
}"""


def build_user_prompt(
    query: str,
    filters: Optional[SearchFilters] = None,
    context: Optional[AiSearchResult] = None,
) -> str:
    """Render the query, filters and (for extended searches) prior titles"""
    prompt = f'Generate a response for the topic: "{query}".'
    if filters is not None and not filters.is_empty:
        prompt += f" Only include research matching these filters: {filters.describe()}."
    if context is not None and context.detailed_report:
        titles = "; ".join(item.title for item in context.detailed_report)
        prompt += (
            " The user has already seen these items, return different ones that extend"
            f" the existing findings: {titles}."
        )
    return prompt


def parse_result(text: Optional[str], provider: str) -> AiSearchResult:
    """Validate raw provider output against the result schema"""
    if not text or not text.strip():
        raise ProviderResponseError(f"{provider} returned an empty response.")
    try:
        return AiSearchResult.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        logger.error("%s returned invalid JSON: %s", provider, e)
        raise ProviderResponseError(f"{provider} returned invalid JSON: {e}") from e
    except ValidationError as e:
        logger.error("%s response does not match the result schema: %s", provider, e)
        raise ProviderResponseError(
            f"{provider} response does not match the result schema ({e.error_count()} errors)"
        ) from e


class AiService(ABC):
    """A hosted model that answers research queries with an AiSearchResult"""

    name: str = "base"
    model: str = ""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether an API key / client is available"""

    @abstractmethod
    def generate(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        context: Optional[AiSearchResult] = None,
    ) -> AiSearchResult:
        """Run the query against the provider and return the validated result"""
