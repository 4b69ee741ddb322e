"""Application service: Remove Product from Cart use case."""

from __future__ import annotations

from shopcart.domain.model.cart import Cart


class RemoveFromCartHandler:

    def handle(self, cart: Cart, product_id: int) -> Cart:
        """Drop the line item; raises EntityNotFoundError if it isn't there."""
        return cart.without(product_id)
