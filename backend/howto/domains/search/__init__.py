"""
How-to search: provider fan-out, fallback data and LLM summaries.
"""

from .fallback import mock_articles, mock_videos
from .follow_up import FollowUpHandler
from .orchestrator import SearchOrchestrator
from .schemas import Article, FollowUpResponse, SearchResponse, Video
from .validation import is_valid_query, validate_query

__all__ = [
    "mock_articles",
    "mock_videos",
    "FollowUpHandler",
    "SearchOrchestrator",
    "Article",
    "FollowUpResponse",
    "SearchResponse",
    "Video",
    "is_valid_query",
    "validate_query",
]
