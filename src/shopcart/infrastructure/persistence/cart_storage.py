"""Abstract key-value storage for string blobs.

Mirrors a browser's local storage: one string per key, read whole and
written whole.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CartStorage(ABC):

    @abstractmethod
    def load(self, key: str) -> str | None:
        """Return the blob stored under ``key``, or None if absent."""

    @abstractmethod
    def save(self, key: str, blob: str) -> None:
        """Store ``blob`` under ``key``, replacing any previous value.

        Raises StorageError if the write fails.
        """
