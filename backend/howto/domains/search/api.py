"""Search and follow-up API endpoints"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from howto.domains.search.follow_up import FollowUpHandler
from howto.domains.search.orchestrator import SearchOrchestrator
from howto.domains.search.schemas import (
    ErrorResponse,
    FollowUpRequest,
    FollowUpResponse,
    SearchResponse,
)
from howto.domains.search.service import get_follow_up_handler, get_search_orchestrator

logger = logging.getLogger(__name__)
router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Query failed validation"},
    500: {"model": ErrorResponse, "description": "LLM provider failed"},
}


@router.get("/search", response_model=SearchResponse, responses=_ERROR_RESPONSES)
async def search(
    q: Optional[str] = Query(None, description="How-to question, e.g. 'tie a tie'"),
    language: Optional[str] = Query("en", description="Answer language code (en, es, fr, ...)"),
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
):
    """
    Videos, articles and an LLM-written guide for a how-to question.

    ValidationError -> 400, summarization failure -> 500 (see exception handlers in main).
    """
    return await orchestrator.search(q, language or "en")


@router.post("/follow-up", response_model=FollowUpResponse, responses=_ERROR_RESPONSES)
async def follow_up(
    data: FollowUpRequest,
    handler: FollowUpHandler = Depends(get_follow_up_handler),
):
    """Answer a follow-up question about an earlier how-to query."""
    return await handler.follow_up(data.originalQuery, data.followUpQuery, data.language or "en")
