"""Singleton wiring for the search domain services."""

import logging
from typing import Optional

from howto.common.config import Settings, get_credentials, settings
from .follow_up import FollowUpHandler
from .orchestrator import SearchOrchestrator
from .providers import GoogleArticleProvider, OpenAICompletionProvider, YouTubeVideoProvider

logger = logging.getLogger(__name__)

_orchestrator: Optional[SearchOrchestrator] = None
_follow_up_handler: Optional[FollowUpHandler] = None


def _build(config: Settings) -> tuple[SearchOrchestrator, FollowUpHandler]:
    credentials = get_credentials()
    timeout = config.request_timeout_seconds
    llm = OpenAICompletionProvider(
        credentials,
        timeout=timeout,
        model=config.openai_model,
        base_url=config.openai_base_url,
    )
    orchestrator = SearchOrchestrator(
        video_provider=YouTubeVideoProvider(credentials, timeout=timeout),
        article_provider=GoogleArticleProvider(credentials, timeout=timeout),
        llm=llm,
    )
    return orchestrator, FollowUpHandler(llm)


def get_search_orchestrator() -> SearchOrchestrator:
    global _orchestrator, _follow_up_handler
    if _orchestrator is None:
        _orchestrator, _follow_up_handler = _build(settings)
        logger.info("SearchOrchestrator initialized")
    return _orchestrator


def get_follow_up_handler() -> FollowUpHandler:
    global _follow_up_handler
    if _follow_up_handler is None:
        get_search_orchestrator()
    return _follow_up_handler


async def close_services() -> None:
    """Close provider HTTP clients (called on app shutdown)."""
    global _orchestrator, _follow_up_handler
    if _orchestrator is not None:
        await _orchestrator.video_provider.aclose()
        await _orchestrator.article_provider.aclose()
        await _orchestrator.llm.aclose()
    _orchestrator = None
    _follow_up_handler = None
