"""CartManager, the single owner of the shopper's cart.

All reads and writes of the cart go through one CartManager instance.
Each public operation runs a use-case handler against the cart snapshot
taken when the operation started, then either commits the returned cart
or leaves the old one in place and notifies the user. No operation raises
past its own boundary.

Overlapping async operations are not serialized: whichever one commits
last replaces the cart, even if an earlier one committed in between.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from shopcart.application import messages
from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.notifier import Notifier
from shopcart.application.persistence_sync import CartPersistenceSync
from shopcart.application.remove_from_cart import RemoveFromCartHandler
from shopcart.application.update_cart_amount import UpdateCartAmountHandler
from shopcart.domain.exceptions import (
    DomainException,
    InsufficientStockError,
    MalformedCartError,
)
from shopcart.domain.model.cart import Cart
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.domain.repository.stock_repository import StockRepository

logger = logging.getLogger(__name__)

CartListener = Callable[[Cart], None]


class CartManager:

    def __init__(
        self,
        cart_repo: CartRepository,
        stock_repo: StockRepository,
        product_repo: ProductRepository,
        notifier: Notifier,
    ) -> None:
        self._notifier = notifier
        self._add = AddToCartHandler(stock_repo, product_repo)
        self._remove = RemoveFromCartHandler()
        self._update = UpdateCartAmountHandler(stock_repo)
        self._listeners: list[CartListener] = []

        self._cart = self._load_initial(cart_repo)
        self._sync = CartPersistenceSync(cart_repo, self._cart)

    # --- State exposure -------------------------------------------------------

    @property
    def cart(self) -> Cart:
        """Current cart. Immutable, so safe to hand out to any observer."""
        return self._cart

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Call ``listener`` with the new cart after every commit.

        Returns a callable that removes the subscription.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def persist(self) -> bool:
        """Write the cart to storage if it changed since the last write."""
        return self._sync.sync(self._cart)

    # --- Mutations ------------------------------------------------------------

    async def add_product(self, product_id: int) -> None:
        snapshot = self._cart
        try:
            updated = await self._add.handle(snapshot, product_id)
            self._commit(updated, f"added product {product_id}")
        except InsufficientStockError as exc:
            logger.warning("Add rejected: %s", exc)
            self._notifier.error(messages.OUT_OF_STOCK)
        except DomainException as exc:
            logger.warning("Failed to add product %s: %s", product_id, exc)
            self._notifier.error(messages.ADD_FAILED)
        except Exception:
            logger.exception("Unexpected error adding product %s", product_id)
            self._notifier.error(messages.ADD_FAILED)

    def remove_product(self, product_id: int) -> None:
        try:
            updated = self._remove.handle(self._cart, product_id)
            self._commit(updated, f"removed product {product_id}")
        except DomainException as exc:
            logger.warning("Failed to remove product %s: %s", product_id, exc)
            self._notifier.error(messages.REMOVE_FAILED)
        except Exception:
            logger.exception("Unexpected error removing product %s", product_id)
            self._notifier.error(messages.REMOVE_FAILED)

    async def update_product_amount(self, product_id: int, amount: int) -> None:
        snapshot = self._cart
        try:
            updated = await self._update.handle(snapshot, product_id, amount)
            if updated is snapshot:
                logger.debug("Ignored non-positive amount %r for %s", amount, product_id)
                return
            self._commit(updated, f"set product {product_id} to {amount}")
        except InsufficientStockError as exc:
            logger.warning("Update rejected: %s", exc)
            self._notifier.error(messages.OUT_OF_STOCK)
        except DomainException as exc:
            logger.warning(
                "Failed to set product %s to %r: %s", product_id, amount, exc
            )
            self._notifier.error(messages.UPDATE_FAILED)
        except Exception:
            logger.exception(
                "Unexpected error setting product %s to %r", product_id, amount
            )
            self._notifier.error(messages.UPDATE_FAILED)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _load_initial(cart_repo: CartRepository) -> Cart:
        try:
            cart = cart_repo.load()
        except MalformedCartError as exc:
            logger.warning("Discarding stored cart: %s", exc)
            return Cart.empty()
        logger.info("Loaded cart with %d item(s)", len(cart))
        return cart

    def _commit(self, cart: Cart, reason: str) -> None:
        # Sync first: a cart that cannot be encoded raises MalformedCartError
        # here and the operation aborts with the old cart still in place.
        self._sync.sync(cart)
        self._cart = cart
        logger.info("Cart committed (%s), %d item(s)", reason, len(cart))
        for listener in list(self._listeners):
            try:
                listener(cart)
            except Exception:
                logger.exception("Cart listener %r failed", listener)
