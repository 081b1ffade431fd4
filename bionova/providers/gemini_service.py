"""Google Gemini provider (google-genai SDK) with a strict response schema"""

import logging
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from ..errors import ProviderError, ProviderNotConfiguredError
from ..schema import AiSearchResult, SearchFilters
from .base import SYSTEM_INSTRUCTION, AiService, build_user_prompt, parse_result

logger = logging.getLogger(__name__)

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "summary": {
            "type": "OBJECT",
            "properties": {
                "overview": {"type": "STRING"},
                "years_range": {"type": "STRING"},
                "highlight_points": {"type": "ARRAY", "items": {"type": "STRING"}},
            },
            "required": ["overview", "years_range", "highlight_points"],
        },
        "detailed_report": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "title": {"type": "STRING"},
                    "year": {"type": "INTEGER"},
                    "organism": {"type": "STRING"},
                    "mission_or_experiment": {"type": "STRING"},
                    "main_findings": {"type": "STRING"},
                    "source_url": {"type": "STRING", "nullable": True},
                },
                "required": [
                    "title", "year", "organism", "mission_or_experiment",
                    "main_findings", "source_url",
                ],
            },
        },
        "graph": {
            "type": "OBJECT",
            "properties": {
                "nodes": {
                    "type": "ARRAY",
                    "items": {
                        "type": "OBJECT",
                        "properties": {"id": {"type": "STRING"}, "type": {"type": "STRING"}},
                        "required": ["id", "type"],
                    },
                },
                "links": {
                    "type": "ARRAY",
                    "items": {
                        "type": "OBJECT",
                        "properties": {
                            "source": {"type": "STRING"},
                            "target": {"type": "STRING"},
                            "label": {"type": "STRING"},
                        },
                        "required": ["source", "target", "label"],
                    },
                },
            },
            "required": ["nodes", "links"],
        },
    },
    "required": ["summary", "detailed_report", "graph"],
}


class GeminiService(AiService):
    name = "gemini"

    def __init__(self, api_key: str = "", model: str = "gemini-2.5-flash", client: Any = None):
        self.model = model
        if client is None and api_key:
            client = genai.Client(api_key=api_key)
        self.client = client

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def generate(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        context: Optional[AiSearchResult] = None,
    ) -> AiSearchResult:
        if not self.is_configured:
            raise ProviderNotConfiguredError(
                "Gemini API key is not configured on the server. Please add GEMINI_API_KEY to your .env file."
            )

        prompt = build_user_prompt(query, filters, context)
        logger.info("🔍 Gemini query (%s): %r", self.model, query)
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_INSTRUCTION,
                    response_mime_type="application/json",
                    response_schema=RESPONSE_SCHEMA,
                ),
            )
        except Exception as e:
            logger.exception("Gemini API error")
            raise ProviderError("Failed to get summary from AI.") from e

        return parse_result(response.text, "Gemini")
