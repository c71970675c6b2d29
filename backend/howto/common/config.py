"""
Configuration - loaded from environment variables and .env
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings

from howto.common.exceptions import (
    MissingOpenAIKeyError,
    MissingSearchCredentialsError,
    MissingYouTubeKeyError,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "howto"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    ping_message: str = "ping"
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    # Provider credentials (optional; checked once at startup)
    youtube_api_key: Optional[str] = None
    google_search_api_key: Optional[str] = None
    google_search_engine_id: Optional[str] = None
    openai_api_key: Optional[str] = None

    # LLM
    openai_model: str = "gpt-3.5-turbo"
    openai_base_url: str = "https://api.openai.com/v1"

    # Outbound HTTP
    request_timeout_seconds: float = 30.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class ProviderName(str, Enum):
    YOUTUBE = "youtube"
    GOOGLE_SEARCH = "google_search"
    OPENAI = "openai"


@dataclass(frozen=True)
class ProviderCredentials:
    """Provider credentials resolved once from settings.

    Video and article providers treat a missing credential as "disabled";
    the LLM treats it as fatal for the request.
    """

    youtube_api_key: Optional[str] = None
    google_search_api_key: Optional[str] = None
    google_search_engine_id: Optional[str] = None
    openai_api_key: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProviderCredentials":
        creds = cls(
            youtube_api_key=settings.youtube_api_key or None,
            google_search_api_key=settings.google_search_api_key or None,
            google_search_engine_id=settings.google_search_engine_id or None,
            openai_api_key=settings.openai_api_key or None,
        )
        if not creds.has_youtube:
            logger.warning("YOUTUBE_API_KEY not configured - video search will use fallback data")
        if not creds.has_search:
            logger.warning(
                "GOOGLE_SEARCH_API_KEY / GOOGLE_SEARCH_ENGINE_ID not configured - "
                "article search will use fallback data"
            )
        if not creds.has_openai:
            logger.warning("OPENAI_API_KEY not configured - summaries and follow-ups will fail")
        return creds

    @property
    def has_youtube(self) -> bool:
        return bool(self.youtube_api_key)

    @property
    def has_search(self) -> bool:
        return bool(self.google_search_api_key and self.google_search_engine_id)

    @property
    def has_openai(self) -> bool:
        return bool(self.openai_api_key)

    def require_youtube(self) -> str:
        if not self.youtube_api_key:
            raise MissingYouTubeKeyError("YOUTUBE_API_KEY not configured")
        return self.youtube_api_key

    def require_search(self) -> tuple[str, str]:
        if not self.has_search:
            raise MissingSearchCredentialsError("Google Custom Search credentials not configured")
        return self.google_search_api_key, self.google_search_engine_id

    def require_openai(self) -> str:
        if not self.openai_api_key:
            raise MissingOpenAIKeyError("OPENAI_API_KEY not configured")
        return self.openai_api_key

    def status(self) -> dict:
        """Which providers are usable, for the health endpoint."""
        return {
            ProviderName.YOUTUBE.value: self.has_youtube,
            ProviderName.GOOGLE_SEARCH.value: self.has_search,
            ProviderName.OPENAI.value: self.has_openai,
        }


# Global settings instance
settings = Settings()

_credentials: Optional[ProviderCredentials] = None


def init_credentials(source: Optional[Settings] = None) -> ProviderCredentials:
    """Resolve provider credentials (called during app startup)."""
    global _credentials
    _credentials = ProviderCredentials.from_settings(source or settings)
    return _credentials


def get_credentials() -> ProviderCredentials:
    """Return the resolved credentials (lazy-init if needed)."""
    global _credentials
    if _credentials is None:
        _credentials = ProviderCredentials.from_settings(settings)
    return _credentials
