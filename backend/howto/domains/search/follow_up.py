"""Single-shot follow-up answers in the context of an earlier query."""

import logging

from howto.common.exceptions import ConfigurationError, UpstreamError, ValidationError
from howto.common.i18n import normalize_language
from .prompts import build_follow_up_prompt
from .providers import CompletionProvider
from .providers.base import FOLLOW_UP_MAX_TOKENS
from .schemas import FollowUpResponse

logger = logging.getLogger(__name__)


class FollowUpHandler:
    def __init__(self, llm: CompletionProvider):
        self.llm = llm

    async def follow_up(
        self,
        original_query: str,
        follow_up_query: object,
        language: str = "en",
    ) -> FollowUpResponse:
        if not isinstance(follow_up_query, str) or not follow_up_query.strip():
            raise ValidationError("Missing follow-up query")

        prompt = build_follow_up_prompt(
            (original_query or "").strip(),
            follow_up_query.strip(),
            normalize_language(language),
        )
        try:
            answer = await self.llm.complete(prompt, max_tokens=FOLLOW_UP_MAX_TOKENS)
        except ConfigurationError as e:
            raise UpstreamError(e.message) from e

        logger.info(f"Follow-up answered for '{original_query}'")
        return FollowUpResponse(answer=answer)
