"""Model providers behind the search proxy"""

from typing import Optional

from ..config import SUPPORTED_PROVIDERS, Settings, get_settings
from .base import AiService, build_user_prompt, parse_result
from .gemini_service import GeminiService
from .openai_service import OpenAIService


def create_service(settings: Optional[Settings] = None) -> AiService:
    """Build the provider selected by AI_PROVIDER"""
    settings = settings or get_settings()
    if settings.ai_provider == "gemini":
        return GeminiService(api_key=settings.gemini_api_key, model=settings.gemini_model)
    if settings.ai_provider == "openai":
        return OpenAIService(api_key=settings.openai_api_key, model=settings.openai_model)
    raise ValueError(
        f"Unknown AI_PROVIDER {settings.ai_provider!r}, expected one of {', '.join(SUPPORTED_PROVIDERS)}"
    )


__all__ = [
    "AiService",
    "GeminiService",
    "OpenAIService",
    "build_user_prompt",
    "create_service",
    "parse_result",
]
