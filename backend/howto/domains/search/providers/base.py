"""Base provider ABCs shared by the video, article and LLM clients."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import httpx

from howto.common.config import ProviderCredentials, ProviderName
from ..prompts import build_summary_prompt
from ..schemas import Article, Video

DEFAULT_TIMEOUT = 30.0
MAX_RESULTS = 5
SUMMARY_MAX_TOKENS = 1500
FOLLOW_UP_MAX_TOKENS = 800


class BaseProvider(ABC):
    """Holds credentials and a lazily created shared httpx client."""

    provider: ProviderName

    def __init__(
        self,
        credentials: ProviderCredentials,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.credentials = credentials
        self._client = client
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()


class VideoSearchProvider(BaseProvider):
    @abstractmethod
    async def search_videos(self, query: str) -> List[Video]:
        """Return up to MAX_RESULTS videos; empty on any failure, never raises."""
        ...


class ArticleSearchProvider(BaseProvider):
    @abstractmethod
    async def search_articles(self, query: str) -> List[Article]:
        """Return up to MAX_RESULTS articles; empty on any failure, never raises."""
        ...


class CompletionProvider(BaseProvider):
    @abstractmethod
    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Single-message chat completion.

        Raises:
            ConfigurationError: credentials missing
            UpstreamError: non-success status or malformed payload
        """
        ...

    async def summarize(
        self,
        query: str,
        videos: Sequence[Video],
        articles: Sequence[Article],
        language: str = "en",
    ) -> str:
        """Step-by-step guide for *query* built from exactly the given sources."""
        prompt = build_summary_prompt(query, videos, articles, language)
        return await self.complete(prompt, max_tokens=SUMMARY_MAX_TOKENS)
