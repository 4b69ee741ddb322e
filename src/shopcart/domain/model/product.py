"""Read models returned by the catalog and stock lookups.

Neither is owned by the cart: both are snapshots of what the remote
services reported at the moment of the lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import require_int


@dataclass(frozen=True)
class ProductData:
    """Base product data from the catalog, everything except the amount.

    ``fields`` is opaque to the cart; it is copied verbatim into the line
    item when the product is first added.
    """

    product_id: int
    fields: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        require_int(self.product_id, "Product ID")


@dataclass(frozen=True)
class Stock:
    """Units of a product currently available for purchase."""

    product_id: int
    amount: int

    def __post_init__(self) -> None:
        require_int(self.product_id, "Product ID")
        require_int(self.amount, "Stock amount")
        if self.amount < 0:
            raise ValidationError("Stock amount cannot be negative")

    def allows(self, requested: int) -> bool:
        return requested <= self.amount
