"""YouTube Data API v3 search - video results for a how-to query."""

import logging
from typing import List

import httpx
from pydantic import ValidationError

from howto.common.exceptions import ConfigurationError
from ..fallback import FALLBACK_THUMBNAIL
from ..schemas import NOT_AVAILABLE, Video
from .base import MAX_RESULTS, ProviderName, VideoSearchProvider

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"


class YouTubeVideoProvider(VideoSearchProvider):
    """Search videos via the YouTube Data API (requires API key)."""

    provider = ProviderName.YOUTUBE

    async def search_videos(self, query: str) -> List[Video]:
        try:
            api_key = self.credentials.require_youtube()
        except ConfigurationError as e:
            logger.warning(f"Video search skipped: {e}")
            return []

        params = {
            "part": "snippet",
            "q": query,
            "type": "video",
            "maxResults": MAX_RESULTS,
            "key": api_key,
        }

        try:
            client = await self._get_client()
            resp = await client.get(YOUTUBE_SEARCH_URL, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"YouTube request failed for '{query}': {e}")
            return []

        if resp.status_code != 200:
            logger.warning(f"YouTube API returned {resp.status_code} for '{query}'")
            return []

        try:
            data = resp.json()
        except ValueError:
            logger.warning(f"YouTube API returned non-JSON body for '{query}'")
            return []

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            logger.warning(f"YouTube API payload has no items for '{query}'")
            return []

        videos: List[Video] = []
        for item in items[:MAX_RESULTS]:
            try:
                videos.append(self._to_video(item))
            except (KeyError, TypeError, AttributeError, ValidationError) as e:
                logger.warning(f"Skip malformed {self.provider.value} item: {e}")

        logger.info(f"YouTube returned {len(videos)} videos for '{query}'")
        return videos

    @staticmethod
    def _to_video(item: dict) -> Video:
        video_id = item["id"]["videoId"]
        snippet = item["snippet"]
        thumbnails = snippet.get("thumbnails") or {}
        thumbnail = (thumbnails.get("default") or {}).get("url") or FALLBACK_THUMBNAIL
        return Video(
            id=video_id,
            title=snippet["title"],
            channel=snippet.get("channelTitle") or "",
            duration=NOT_AVAILABLE,
            views=NOT_AVAILABLE,
            thumbnail=thumbnail,
            url=f"https://www.youtube.com/watch?v={video_id}",
        )
