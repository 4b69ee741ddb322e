"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry cart data out to the CLI without exposing the domain model.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single line item as displayed to the user."""

    product_id: int
    title: str
    amount: int


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart as displayed to the user."""

    items: list[CartLineDTO]
    total_units: int
