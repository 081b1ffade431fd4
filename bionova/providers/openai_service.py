"""OpenAI chat-completions provider in JSON mode"""

import logging
from typing import Any, Optional

from openai import OpenAI

from ..errors import ProviderError, ProviderNotConfiguredError, ProviderResponseError
from ..schema import AiSearchResult, SearchFilters
from .base import JSON_SCHEMA_HINT, SYSTEM_INSTRUCTION, AiService, build_user_prompt, parse_result

logger = logging.getLogger(__name__)


class OpenAIService(AiService):
    name = "openai"

    def __init__(self, api_key: str = "", model: str = "gpt-4-turbo", client: Any = None):
        self.model = model
        if client is None and api_key:
            client = OpenAI(api_key=api_key)
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
                "OpenAI API key is not configured on the server. Please add OPENAI_API_KEY to your .env file."
            )

        prompt = build_user_prompt(query, filters, context)
        logger.info("🔍 OpenAI query (%s): %r", self.model, query)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_INSTRUCTION},
                    {"role": "user", "content": f"{prompt} Respond with JSON matching this schema: {JSON_SCHEMA_HINT}"},
                ],
                response_format={"type": "json_object"},
            )
        except Exception as e:
            logger.exception("OpenAI API error")
            raise ProviderError("Failed to get summary from OpenAI.") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ProviderResponseError("OpenAI returned an empty response.")
        return parse_result(content, "OpenAI")
