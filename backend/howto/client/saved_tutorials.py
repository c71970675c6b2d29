"""
Saved tutorials - client-local list persisted under one storage key.

Every operation reads and rewrites the whole collection. Storage failures are
logged and degrade to an empty list / no-op; they never reach the caller.
"""

import json
import logging
import time
import uuid
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from howto.common.exceptions import StorageError
from howto.client.storage import LocalStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "saved_tutorials"


class TutorialDraft(BaseModel):
    """What the caller provides; id and timestamp are assigned on save."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    query: str
    summary: str
    date_saved: str = Field(default_factory=lambda: date.today().isoformat())
    tools: Optional[List[str]] = None
    time_estimate: Optional[str] = None
    difficulty: Optional[str] = None


class SavedTutorial(TutorialDraft):
    id: str
    timestamp: int = Field(..., description="Epoch milliseconds at save time")


class SavedTutorialStore:
    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def list(self) -> List[SavedTutorial]:
        try:
            raw = self.storage.get_item(STORAGE_KEY)
            if not raw:
                return []
            return [SavedTutorial.model_validate(item) for item in json.loads(raw)]
        except (StorageError, json.JSONDecodeError, TypeError, PydanticValidationError) as e:
            logger.error(f"Error reading saved tutorials: {e}")
            return []

    def _write(self, tutorials: List[SavedTutorial]) -> None:
        payload = json.dumps(
            [t.model_dump(by_alias=True, exclude_none=True) for t in tutorials],
            ensure_ascii=False,
        )
        self.storage.set_item(STORAGE_KEY, payload)

    def is_saved(self, query: str) -> bool:
        return self.get_by_query(query) is not None

    def save(self, draft: TutorialDraft) -> Optional[SavedTutorial]:
        """Append *draft*; returns None when its query is already saved."""
        saved = self.list()
        wanted = draft.query.lower()
        if any(item.query.lower() == wanted for item in saved):
            logger.info(f"Tutorial already saved: {draft.query}")
            return None

        tutorial = SavedTutorial(
            **draft.model_dump(),
            id=uuid.uuid4().hex,
            timestamp=int(time.time() * 1000),
        )
        saved.append(tutorial)
        try:
            self._write(saved)
        except StorageError as e:
            logger.error(f"Error saving tutorial: {e}")
            return None
        return tutorial

    def delete(self, tutorial_id: str) -> bool:
        """Remove the entry with *tutorial_id*; True if one was removed."""
        saved = self.list()
        remaining = [item for item in saved if item.id != tutorial_id]
        if len(remaining) == len(saved):
            return False
        try:
            self._write(remaining)
        except StorageError as e:
            logger.error(f"Error deleting tutorial: {e}")
            return False
        return True

    def get_by_id(self, tutorial_id: str) -> Optional[SavedTutorial]:
        return next((item for item in self.list() if item.id == tutorial_id), None)

    def get_by_query(self, query: str) -> Optional[SavedTutorial]:
        wanted = query.lower()
        return next((item for item in self.list() if item.query.lower() == wanted), None)
