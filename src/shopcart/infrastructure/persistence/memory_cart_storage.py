"""Dict-backed CartStorage, for embedding callers and tests."""

from __future__ import annotations

from shopcart.infrastructure.persistence.cart_storage import CartStorage


class InMemoryCartStorage(CartStorage):

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self._store.get(key)

    def save(self, key: str, blob: str) -> None:
        self._store[key] = blob
