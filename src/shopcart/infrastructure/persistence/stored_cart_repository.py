"""CartRepository backed by a CartStorage blob under a fixed key."""

from __future__ import annotations

from shopcart.domain.model.cart import Cart
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.infrastructure.persistence import cart_serializer
from shopcart.infrastructure.persistence.cart_storage import CartStorage

DEFAULT_CART_KEY = "@RocketShoes:cart"


class StoredCartRepository(CartRepository):

    def __init__(self, storage: CartStorage, key: str = DEFAULT_CART_KEY) -> None:
        self._storage = storage
        self._key = key

    def load(self) -> Cart:
        blob = self._storage.load(self._key)
        if not blob:
            return Cart.empty()
        return cart_serializer.loads(blob)

    def save(self, cart: Cart) -> None:
        self._storage.save(self._key, cart_serializer.dumps(cart))
