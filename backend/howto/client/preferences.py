"""User preferences (language, dark mode), loaded once and saved on change."""

import logging
from dataclasses import dataclass, field

from howto.common.exceptions import StorageError
from howto.common.i18n import DEFAULT_LANGUAGE, normalize_language
from howto.client.storage import LocalStorage

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "language"
DARK_MODE_KEY = "darkMode"


@dataclass
class Preferences:
    storage: LocalStorage = field(repr=False)
    language: str = DEFAULT_LANGUAGE
    dark_mode: bool = False

    @classmethod
    def load(cls, storage: LocalStorage) -> "Preferences":
        try:
            stored_language = storage.get_item(LANGUAGE_KEY)
            stored_dark = storage.get_item(DARK_MODE_KEY)
        except StorageError as e:
            logger.error(f"Error reading preferences: {e}")
            return cls(storage=storage)

        language = normalize_language(stored_language)
        if stored_language and stored_language != language:
            logger.warning(f"Stored language {stored_language} not supported, defaulting to {language}")
        return cls(storage=storage, language=language, dark_mode=stored_dark == "true")

    def set_language(self, code: str) -> str:
        """Select and persist *code*; unsupported codes select the default."""
        self.language = normalize_language(code)
        if code != self.language:
            logger.warning(f"Language {code} not supported, defaulting to {self.language}")
        self._persist(LANGUAGE_KEY, self.language)
        return self.language

    def set_dark_mode(self, enabled: bool) -> None:
        self.dark_mode = bool(enabled)
        self._persist(DARK_MODE_KEY, "true" if self.dark_mode else "false")

    def _persist(self, key: str, value: str) -> None:
        try:
            self.storage.set_item(key, value)
        except StorageError as e:
            logger.error(f"Error saving preference {key}: {e}")
