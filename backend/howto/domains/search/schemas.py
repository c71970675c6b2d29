"""
Data models for the how-to search pipeline.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

NOT_AVAILABLE = "N/A"


class Video(BaseModel):
    """Video result from the video search provider (or fallback)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Provider video id")
    title: str
    channel: str
    duration: str = Field(NOT_AVAILABLE, description='"N/A" when unknown')
    views: str = Field(NOT_AVAILABLE, description='"N/A" when unknown')
    thumbnail: str
    url: str


class Article(BaseModel):
    """Web article result from the web search provider (or fallback)."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    website: str = Field(..., description="Hostname of the article link")
    snippet: str
    url: str


class SearchResponse(BaseModel):
    """Response from /api/search"""

    videos: List[Video]
    articles: List[Article]
    summary: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "videos": [
                    {
                        "id": "xAg7z6u4NE8",
                        "title": "How to Tie a Tie",
                        "channel": "Howcast",
                        "duration": "N/A",
                        "views": "N/A",
                        "thumbnail": "https://i.ytimg.com/vi/xAg7z6u4NE8/default.jpg",
                        "url": "https://www.youtube.com/watch?v=xAg7z6u4NE8",
                    }
                ],
                "articles": [
                    {
                        "id": "article-0",
                        "title": "How to Tie a Tie",
                        "website": "www.wikihow.com",
                        "snippet": "Start with the wide end of the tie on your right...",
                        "url": "https://www.wikihow.com/Tie-a-Tie",
                    }
                ],
                "summary": "Step 1: Drape the tie around your neck...",
            }
        }
    )


class FollowUpRequest(BaseModel):
    """Body of POST /api/follow-up. Wire names are camelCase."""

    originalQuery: str = ""
    # Left loose so the handler can answer 400 with {error} instead of a 422
    followUpQuery: Any = None
    language: Optional[str] = "en"


class FollowUpResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str
