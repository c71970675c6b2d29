"""Synchronous client for the HowTo backend."""

import logging
from typing import Optional

import httpx

from howto.common.exceptions import HowToError, ValidationError
from howto.domains.search.schemas import FollowUpResponse, SearchResponse
from howto.domains.search.validation import validate_query

logger = logging.getLogger(__name__)


class ApiError(HowToError):
    """The backend answered with an error status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.status_code >= 500


class HowToClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        client: Optional[httpx.Client] = None,
    ):
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HowToClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def search(self, query: str, language: str = "en") -> SearchResponse:
        """Validated locally first; an invalid query never reaches the network."""
        query = validate_query(query)
        resp = self._request("GET", "/api/search", params={"q": query, "language": language})
        return SearchResponse.model_validate(resp.json())

    def follow_up(self, original_query: str, question: str, language: str = "en") -> FollowUpResponse:
        if not question or not question.strip():
            raise ValidationError("Missing follow-up query")
        resp = self._request(
            "POST",
            "/api/follow-up",
            json={
                "originalQuery": original_query,
                "followUpQuery": question,
                "language": language,
            },
        )
        return FollowUpResponse.model_validate(resp.json())

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            resp = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError(f"Could not reach the HowTo backend: {e}", status_code=503) from e

        if resp.is_success:
            return resp

        message = f"HTTP {resp.status_code}: request failed"
        if "application/json" in resp.headers.get("content-type", ""):
            try:
                body = resp.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("error"):
                message = body["error"]
        raise ApiError(message, status_code=resp.status_code)
