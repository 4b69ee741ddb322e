from pathlib import Path

import click

from shopcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
)
from shopcart.infrastructure.config import (
    DEFAULT_API_URL,
    DEFAULT_STORAGE_PATH,
    DEFAULT_TIMEOUT,
    Settings,
)
from shopcart.infrastructure.logging_setup import setup_logging
from shopcart.infrastructure.persistence.stored_cart_repository import DEFAULT_CART_KEY


@click.group()
@click.option(
    "--api-url",
    envvar="SHOPCART_API_URL",
    default=DEFAULT_API_URL,
    show_default=True,
    help="Base URL of the product/stock API.",
)
@click.option(
    "--storage",
    "storage_path",
    envvar="SHOPCART_STORAGE",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_STORAGE_PATH,
    help="JSON file the cart is persisted to.",
)
@click.option(
    "--key",
    "storage_key",
    envvar="SHOPCART_KEY",
    default=DEFAULT_CART_KEY,
    show_default=True,
    help="Storage key of the cart blob.",
)
@click.option(
    "--timeout",
    envvar="SHOPCART_TIMEOUT",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Request timeout in seconds.",
)
@click.option("--debug", is_flag=True, envvar="SHOPCART_DEBUG", help="Verbose logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    api_url: str,
    storage_path: Path,
    storage_key: str,
    timeout: float,
    debug: bool,
) -> None:
    """shopcart: Shopping Cart Manager"""
    setup_logging(debug)
    ctx.obj = Settings(
        api_url=api_url,
        storage_path=storage_path,
        storage_key=storage_key,
        request_timeout=timeout,
        debug=debug,
    )


# Register subcommands
cli.add_command(cart_add)
cli.add_command(cart_remove)
cli.add_command(cart_show)
cli.add_command(cart_update)
