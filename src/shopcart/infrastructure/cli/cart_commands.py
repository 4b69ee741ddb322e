"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import asyncio

import click

from shopcart.application.cart_manager import CartManager
from shopcart.application.show_cart import ShowCartHandler
from shopcart.infrastructure.bootstrap import cart_manager
from shopcart.infrastructure.config import Settings


def _display_cart(manager: CartManager) -> None:
    dto = ShowCartHandler().handle(manager.cart)

    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<30} {'Amount':>7}")
    click.echo(f"  {'-'*45}")
    for item in dto.items:
        click.echo(f"  {item.product_id:<6} {item.title:<30} {item.amount:>7}")
    click.echo(f"  {'-'*45}")
    click.echo(f"  {'Units':<37} {dto.total_units:>7}")


@click.command("show")
@click.pass_obj
def cart_show(settings: Settings) -> None:
    """Show the current cart."""
    _display_cart(cart_manager(settings))


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to add.")
@click.pass_obj
def cart_add(settings: Settings, product_id: int) -> None:
    """Add one unit of a product to the cart."""
    manager = cart_manager(settings)
    asyncio.run(manager.add_product(product_id))
    _display_cart(manager)


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to remove.")
@click.pass_obj
def cart_remove(settings: Settings, product_id: int) -> None:
    """Remove a product from the cart."""
    manager = cart_manager(settings)
    manager.remove_product(product_id)
    _display_cart(manager)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to update.")
@click.option("--amount", required=True, type=int, help="New absolute amount.")
@click.pass_obj
def cart_update(settings: Settings, product_id: int, amount: int) -> None:
    """Set the amount of a product already in the cart.

    Amounts of zero or less are ignored; use ``remove`` instead.
    """
    manager = cart_manager(settings)
    asyncio.run(manager.update_product_amount(product_id, amount))
    _display_cart(manager)
