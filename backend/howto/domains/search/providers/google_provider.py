"""
Google Custom Search API - web article results.
"""

import logging
from typing import List
from urllib.parse import urlparse

import httpx
from pydantic import ValidationError

from howto.common.exceptions import ConfigurationError
from ..schemas import Article
from .base import MAX_RESULTS, ArticleSearchProvider, ProviderName

logger = logging.getLogger(__name__)

CUSTOM_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


def extract_website(url: str) -> str:
    """Hostname of *url*, or "Unknown" when it has none."""
    try:
        host = urlparse(url).hostname
    except ValueError:
        return "Unknown"
    return host or "Unknown"


class GoogleArticleProvider(ArticleSearchProvider):
    """Google Custom Search strategy (API key + engine id)."""

    provider = ProviderName.GOOGLE_SEARCH

    async def search_articles(self, query: str) -> List[Article]:
        try:
            api_key, engine_id = self.credentials.require_search()
        except ConfigurationError as e:
            logger.warning(f"Article search skipped: {e}")
            return []

        params = {
            "q": query,
            "cx": engine_id,
            "key": api_key,
            "num": MAX_RESULTS,
        }

        try:
            client = await self._get_client()
            resp = await client.get(CUSTOM_SEARCH_URL, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"Google search request failed for '{query}': {e}")
            return []

        if resp.status_code != 200:
            if resp.status_code == 429:
                logger.warning("Google API quota exceeded, returning empty results")
            else:
                logger.warning(f"Google API returned {resp.status_code} for '{query}'")
            return []

        try:
            data = resp.json()
        except ValueError:
            logger.warning(f"Google API returned non-JSON body for '{query}'")
            return []

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            logger.warning(f"Google returned 0 results for: {query}")
            return []

        articles: List[Article] = []
        for index, item in enumerate(items[:MAX_RESULTS]):
            try:
                articles.append(self._to_article(index, item))
            except (KeyError, TypeError, AttributeError, ValidationError) as e:
                logger.warning(f"Skip malformed {self.provider.value} item at {index}: {e}")

        logger.info(f"Google search returned {len(articles)} results for query: {query}")
        return articles

    @staticmethod
    def _to_article(index: int, item: dict) -> Article:
        link = item["link"]
        if not isinstance(link, str) or not link:
            raise TypeError(f"link must be a non-empty string, got {link!r}")
        return Article(
            id=f"article-{index}",
            title=item.get("title") or "",
            website=extract_website(link),
            snippet=item.get("snippet") or "",
            url=link,
        )
