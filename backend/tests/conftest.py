"""Shared fixtures: stub providers with call counters and record factories."""

from typing import List, Optional

import pytest

from howto.common.config import ProviderCredentials
from howto.common.exceptions import UpstreamError
from howto.domains.search.providers import (
    ArticleSearchProvider,
    CompletionProvider,
    VideoSearchProvider,
)
from howto.domains.search.schemas import Article, Video


def make_video(n: int) -> Video:
    return Video(
        id=f"vid{n}",
        title=f"Real video {n}",
        channel=f"Channel {n}",
        duration="N/A",
        views="N/A",
        thumbnail=f"https://i.ytimg.com/vi/vid{n}/default.jpg",
        url=f"https://www.youtube.com/watch?v=vid{n}",
    )


def make_article(n: int) -> Article:
    return Article(
        id=f"article-{n}",
        title=f"Real article {n}",
        website="example.com",
        snippet=f"Snippet {n}",
        url=f"https://example.com/{n}",
    )


class StubVideoProvider(VideoSearchProvider):
    def __init__(self, videos: Optional[List[Video]] = None):
        super().__init__(ProviderCredentials())
        self.videos = videos or []
        self.calls = 0

    async def search_videos(self, query: str) -> List[Video]:
        self.calls += 1
        return list(self.videos)


class StubArticleProvider(ArticleSearchProvider):
    def __init__(self, articles: Optional[List[Article]] = None):
        super().__init__(ProviderCredentials())
        self.articles = articles or []
        self.calls = 0

    async def search_articles(self, query: str) -> List[Article]:
        self.calls += 1
        return list(self.articles)


class StubLLM(CompletionProvider):
    def __init__(self, answer: str = "Step 1: Do it. Step 2: Done.", error: Optional[Exception] = None):
        super().__init__(ProviderCredentials())
        self.answer = answer
        self.error = error
        self.prompts: List[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def complete(self, prompt: str, max_tokens: int) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def full_credentials() -> ProviderCredentials:
    return ProviderCredentials(
        youtube_api_key="yt-key",
        google_search_api_key="g-key",
        google_search_engine_id="engine-id",
        openai_api_key="sk-test",
    )


@pytest.fixture
def failing_llm() -> StubLLM:
    return StubLLM(error=UpstreamError("The model is overloaded"))
