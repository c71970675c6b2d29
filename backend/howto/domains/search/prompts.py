"""LLM prompt builders for summaries and follow-up answers."""

from typing import Sequence

from howto.common.i18n import language_name
from .schemas import Article, Video


def _language_instruction(language: str) -> str:
    return (
        f"IMPORTANT: Respond ONLY in {language_name(language)}, "
        "regardless of the language of the sources above."
    )


def build_summary_prompt(
    query: str,
    videos: Sequence[Video],
    articles: Sequence[Article],
    language: str = "en",
) -> str:
    """Prompt asking for a step-by-step guide grounded on the found sources."""
    videos_text = "\n".join(f"- {v.title} ({v.channel})" for v in videos)
    articles_text = "\n".join(f"- {a.title} ({a.website})" for a in articles)

    return f"""Based on these tutorials for "{query}", create a helpful step-by-step guide with clear instructions, tools needed, time required, and difficulty level.

Videos found:
{videos_text}

Articles found:
{articles_text}

Please generate a concise but comprehensive guide that someone could follow to accomplish "{query}".

{_language_instruction(language)}"""


def build_follow_up_prompt(original_query: str, follow_up_query: str, language: str = "en") -> str:
    return f"""The user asked: "How to {original_query}"

Now they have a follow-up question: "{follow_up_query}"

Please provide a clear, concise answer to their follow-up question in the context of the original how-to guide.

{_language_instruction(language)}"""
