"""Language selection and UI string lookup."""

import logging
from typing import Any, Optional

from howto.common.translations import TRANSLATIONS

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

# Used in LLM prompts ("Respond ONLY in <name>")
LANGUAGE_NAMES = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "ja": "Japanese",
    "zh": "Chinese",
    "ar": "Arabic",
    "pt": "Portuguese",
    "ru": "Russian",
    "ko": "Korean",
}

SUPPORTED_LANGUAGES = tuple(LANGUAGE_NAMES)


def normalize_language(code: Optional[str]) -> str:
    """Return *code* if supported, otherwise the default language."""
    if isinstance(code, str) and code.strip().lower() in LANGUAGE_NAMES:
        return code.strip().lower()
    return DEFAULT_LANGUAGE


def language_name(code: Optional[str]) -> str:
    return LANGUAGE_NAMES[normalize_language(code)]


def _lookup(table: Any, key: str) -> Optional[str]:
    value = table
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return None
    return value if isinstance(value, str) else None


class Translator:
    """Dot-notation lookup, e.g. ``t("results.aiSummary")``.

    Missing keys fall back to the English table, then to the key itself.
    """

    def __init__(self, language: Optional[str] = None):
        self.language = normalize_language(language)
        if language and language.strip().lower() != self.language:
            logger.warning(f"Language {language} not supported, defaulting to {self.language}")

    def t(self, key: str) -> str:
        value = _lookup(TRANSLATIONS.get(self.language), key)
        if value is None and self.language != DEFAULT_LANGUAGE:
            value = _lookup(TRANSLATIONS[DEFAULT_LANGUAGE], key)
        return value if value is not None else key
