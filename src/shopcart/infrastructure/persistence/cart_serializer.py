"""Serialization of a Cart to and from the stored string blob.

The blob is a JSON array in cart order. Each element is the product
payload with the ``id`` and ``amount`` keys merged in::

    [{"id": 1, "title": "Tênis", "price": 179.9, "image": "...", "amount": 2}]
"""

from __future__ import annotations

import json
from typing import Any

from shopcart.domain.exceptions import MalformedCartError, ValidationError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.model.value_objects import Quantity


def dumps(cart: Cart) -> str:
    """Encode ``cart``; raises MalformedCartError if a payload isn't JSON-safe."""
    try:
        return json.dumps([_to_raw(item) for item in cart], ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise MalformedCartError(f"Cart cannot be stored as JSON: {exc}") from exc


def loads(blob: str) -> Cart:
    """Rebuild a Cart; raises MalformedCartError on anything unexpected."""
    try:
        raw = json.loads(blob)
    except (json.JSONDecodeError, TypeError) as exc:
        raise MalformedCartError(f"Stored cart is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise MalformedCartError(
            f"Stored cart must be a JSON array, got {type(raw).__name__}"
        )

    try:
        return Cart.of(_to_domain(entry) for entry in raw)
    except (KeyError, TypeError, ValidationError) as exc:
        raise MalformedCartError(f"Stored cart has an invalid item: {exc}") from exc


# --- Helpers ------------------------------------------------------------------


def _to_raw(item: LineItem) -> dict[str, Any]:
    return {"id": item.product_id, **item.payload_dict(), "amount": item.amount}


def _to_domain(entry: Any) -> LineItem:
    if not isinstance(entry, dict):
        raise TypeError(f"expected an object, got {type(entry).__name__}")
    payload = dict(entry)
    product_id = payload.pop("id")
    amount = payload.pop("amount")
    return LineItem(product_id=product_id, quantity=Quantity(amount), payload=payload)
