"""Environment-driven settings and logging setup"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:3001"]
SUPPORTED_PROVIDERS = ("gemini", "openai")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Runtime configuration read from the environment (.env supported)"""

    # To change the AI provider set AI_PROVIDER=openai (default gemini)
    ai_provider: str = "gemini"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    openai_api_key: str = ""
    openai_model: str = "gpt-4-turbo"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    api_base_url: str = "http://localhost:8000/api"
    is_production: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        # GEMINI_API_KEY wins, GOOGLE_API_KEY / API_KEY kept for older .env files
        gemini_key = (
            os.getenv("GEMINI_API_KEY")
            or os.getenv("GOOGLE_API_KEY")
            or os.getenv("API_KEY")
            or ""
        )
        debug = _env_flag("DEBUG")
        return cls(
            ai_provider=os.getenv("AI_PROVIDER", "gemini").strip().lower(),
            gemini_api_key=gemini_key,
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4-turbo"),
            cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=debug,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if debug else "INFO").upper(),
            api_base_url=os.getenv("BIONOVA_API_URL", "http://localhost:8000/api"),
            # Check if running in production (serverless environment)
            is_production=os.getenv("VERCEL") == "1" or os.getenv("AWS_LAMBDA_FUNCTION_NAME") is not None,
        )

    @property
    def environment(self) -> str:
        return "production" if self.is_production else "development"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the process-wide settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment"""
    global _settings
    _settings = None


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the service and scripts"""
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
