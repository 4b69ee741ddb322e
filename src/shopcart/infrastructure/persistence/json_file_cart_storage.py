"""JSON-file-backed implementation of CartStorage.

The file holds one JSON object mapping storage keys to blob strings, so
several keys can share a file the same way they share local storage.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from shopcart.domain.exceptions import StorageError
from shopcart.infrastructure.persistence.cart_storage import CartStorage

logger = logging.getLogger(__name__)


class JsonFileCartStorage(CartStorage):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CartStorage interface ------------------------------------------------

    def load(self, key: str) -> str | None:
        value = self._load_raw().get(key)
        if value is not None and not isinstance(value, str):
            logger.warning("Ignoring non-string value under %r in %s", key, self._file_path)
            return None
        return value

    def save(self, key: str, blob: str) -> None:
        records = self._load_raw()
        records[key] = blob
        self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable storage file %s: %s", self._file_path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Storage file %s does not hold a JSON object", self._file_path)
            return {}
        return raw

    def _persist_raw(self, records: dict) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(records, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc
