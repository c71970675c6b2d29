"""
Search orchestrator - coordinates the how-to search pipeline.
"""

import asyncio
import logging
from typing import List, Tuple

from howto.common.exceptions import ConfigurationError, UpstreamError
from howto.common.i18n import normalize_language
from .fallback import mock_articles, mock_videos
from .providers import ArticleSearchProvider, CompletionProvider, VideoSearchProvider
from .schemas import Article, SearchResponse, Video
from .validation import validate_query

logger = logging.getLogger(__name__)


class SearchOrchestrator:
    """
    Runs one search request:
    1. Validate the query
    2. Fetch videos and articles concurrently (each soft-fails to empty)
    3. Substitute fallback data for any empty list
    4. Summarize exactly those lists with the LLM
    5. Return the assembled response

    No retries; a summarization failure is raised once as UpstreamError.
    """

    def __init__(
        self,
        video_provider: VideoSearchProvider,
        article_provider: ArticleSearchProvider,
        llm: CompletionProvider,
    ):
        self.video_provider = video_provider
        self.article_provider = article_provider
        self.llm = llm

    async def search(self, query: str, language: str = "en") -> SearchResponse:
        query = validate_query(query)
        language = normalize_language(language)
        logger.info(f"Searching for: {query} (language={language})")

        videos, articles = await self._fetch_sources(query)

        if not videos:
            logger.info(f"No videos for '{query}', using fallback videos")
            videos = mock_videos(query)
        if not articles:
            logger.info(f"No articles for '{query}', using fallback articles")
            articles = mock_articles(query)

        try:
            summary = await self.llm.summarize(query, videos, articles, language)
        except ConfigurationError as e:
            raise UpstreamError(e.message) from e

        return SearchResponse(videos=videos, articles=articles, summary=summary)

    async def _fetch_sources(self, query: str) -> Tuple[List[Video], List[Article]]:
        videos, articles = await asyncio.gather(
            self.video_provider.search_videos(query),
            self.article_provider.search_articles(query),
        )
        return list(videos), list(articles)
