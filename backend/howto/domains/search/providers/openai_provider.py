"""OpenAI-compatible chat completions client (summaries and follow-ups)."""

import logging

import httpx
from howto.common.exceptions import UpstreamError
from .base import DEFAULT_TIMEOUT, CompletionProvider, ProviderName

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_BASE_URL = "https://api.openai.com/v1"
TEMPERATURE = 0.7


class OpenAICompletionProvider(CompletionProvider):
    """Hard dependency: every failure here is raised to the caller."""

    provider = ProviderName.OPENAI

    def __init__(
        self,
        credentials,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
    ):
        super().__init__(credentials, client=client, timeout=timeout)
        self.model = model
        self.base_url = base_url.rstrip("/")

    async def complete(self, prompt: str, max_tokens: int) -> str:
        api_key = self.credentials.require_openai()

        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": TEMPERATURE,
            "max_tokens": max_tokens,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

        try:
            client = await self._get_client()
            resp = await client.post(f"{self.base_url}/chat/completions", json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"LLM request failed: {e}")
            raise UpstreamError(f"LLM request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        content = self._extract_content(data)
        if resp.status_code != 200 or content is None:
            message = self._extract_error(data) or f"LLM API returned {resp.status_code}"
            logger.error(f"{self.provider.value} completion failed ({resp.status_code}): {message}")
            raise UpstreamError(message)

        logger.info(f"LLM completion: {len(prompt)} chars in -> {len(content)} chars out")
        return content

    @staticmethod
    def _extract_content(data) -> str | None:
        if not isinstance(data, dict):
            return None
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return None
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        return content if isinstance(content, str) else None

    @staticmethod
    def _extract_error(data) -> str | None:
        if isinstance(data, dict) and isinstance(data.get("error"), dict):
            return data["error"].get("message")
        return None
