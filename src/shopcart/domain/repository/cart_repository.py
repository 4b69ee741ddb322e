"""Abstract repository for the Cart aggregate.

There is exactly one cart per storage, so the repository has no IDs:
it loads the persisted cart and replaces it wholesale on save.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the persisted cart, or an empty one if nothing is stored.

        Raises MalformedCartError if the stored value cannot be decoded.
        """

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist ``cart``, replacing the stored value.

        Raises MalformedCartError if ``cart`` cannot be encoded and
        StorageError if the write fails.
        """
