"""CLI commands for the product registry."""

from __future__ import annotations

import click

from scanreg.infrastructure.bootstrap import registry_controller
from scanreg.infrastructure.cli.render import (
    render_product,
    render_product_table,
    render_summary,
)
from scanreg.infrastructure.config import Settings


@click.command("add")
@click.option("--code", required=True, help="Product code (as printed under the barcode).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 9.99).")
@click.pass_obj
def product_add(settings: Settings, code: str, name: str, price: str) -> None:
    """Register a product by typing its code."""
    result = registry_controller(settings).register(code, name, price)
    if not result.ok:
        raise click.ClickException(str(result.error))

    product = result.value
    click.echo(f"Product '{product.name}' ({product.code}) registered at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List registered products, newest first."""
    for line in render_product_table(registry_controller(settings).list_products()):
        click.echo(line)


@click.command("lookup")
@click.option("--code", required=True, help="Product code to look up.")
@click.pass_obj
def product_lookup(settings: Settings, code: str) -> None:
    """Check whether a code is already registered."""
    product = registry_controller(settings).find_by_code(code)
    if product is None:
        click.echo(f"Code {code.strip()} is not registered.")
        return

    for line in render_product(product):
        click.echo(line)


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_obj
def product_remove(settings: Settings, product_id: str, yes: bool) -> None:
    """Remove a product from the registry."""
    if not yes:
        click.confirm(f"Remove product {product_id}?", abort=True)

    result = registry_controller(settings).remove(product_id)
    if not result.ok:
        raise click.ClickException(str(result.error))

    if result.value:
        click.echo(f"Product {product_id} removed.")
    else:
        click.echo(f"No product with ID {product_id}; nothing removed.")


@click.command("clear")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_obj
def product_clear(settings: Settings, yes: bool) -> None:
    """Remove ALL products. This cannot be undone."""
    controller = registry_controller(settings)
    token = controller.request_clear()
    if not yes:
        click.confirm("Remove ALL products? This cannot be undone.", abort=True)

    result = controller.confirm_clear(token)
    if not result.ok:
        raise click.ClickException(str(result.error))

    click.echo("All products removed.")


@click.command("summary")
@click.pass_obj
def product_summary(settings: Settings) -> None:
    """Show how many products are registered and their total value."""
    click.echo(render_summary(registry_controller(settings).aggregate()))
