"""
Local key-value storage - a JSON file holding string values per key.

Mirrors the browser localStorage contract: values are strings, every write
rewrites the whole file, there is no locking.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from howto.common.exceptions import StorageError

logger = logging.getLogger(__name__)


class LocalStorage:
    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt storage file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Corrupt storage file {self.path}: expected an object")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
