"""Query shape check shared by the API layer and the client."""

import re
from typing import Optional

from howto.common.exceptions import ValidationError

MIN_QUERY_LENGTH = 3
MIN_WORDS = 2

_TINY_ATOM = re.compile(r"^[a-zA-Z0-9]{1,2}$")


def _failure_reason(query: object) -> Optional[str]:
    """Return the message for the first rule *query* breaks, or None."""
    if not isinstance(query, str) or not query:
        return "Missing search query"

    trimmed = query.strip()
    if len(trimmed) < MIN_QUERY_LENGTH:
        return f"Search query must be at least {MIN_QUERY_LENGTH} characters"

    words = [w for w in trimmed.split() if len(w) > 1]
    if len(words) < MIN_WORDS:
        return "Please enter a meaningful question with at least 2 words"

    if _TINY_ATOM.match(trimmed):
        return "Please enter a valid 'How to...' question"

    return None


def is_valid_query(query: object) -> bool:
    """True when *query* looks like a meaningful how-to question."""
    return _failure_reason(query) is None


def validate_query(query: object) -> str:
    """Return the trimmed query or raise ValidationError."""
    reason = _failure_reason(query)
    if reason is not None:
        raise ValidationError(reason)
    return query.strip()
