"""Differential persistence of the cart.

Keeps two slots: the last cart value that was observed (and therefore
already stored) and the current one. Storage is written only when the two
differ by value, which gives exactly one write per actual change and no
write at all for the initial, freshly loaded cart.
"""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import StorageError
from shopcart.domain.model.cart import Cart
from shopcart.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class CartPersistenceSync:

    def __init__(self, cart_repo: CartRepository, initial: Cart) -> None:
        self._cart_repo = cart_repo
        self._previous = initial

    @property
    def previous(self) -> Cart:
        return self._previous

    def sync(self, current: Cart) -> bool:
        """Store ``current`` if it differs from the last observed cart.

        Returns True when a write happened. On a failed write the previous
        slot is kept, so the next call retries. A cart that cannot be
        encoded at all raises MalformedCartError.
        """
        if current == self._previous:
            return False
        try:
            self._cart_repo.save(current)
        except StorageError:
            logger.exception("Failed to persist cart with %d item(s)", len(current))
            return False
        logger.debug("Cart persisted with %d item(s)", len(current))
        self._previous = current
        return True
