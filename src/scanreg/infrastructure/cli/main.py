import logging
from pathlib import Path

import click

from scanreg.infrastructure.cli.product_commands import (
    product_add,
    product_clear,
    product_list,
    product_lookup,
    product_remove,
    product_summary,
)
from scanreg.infrastructure.cli.scan_commands import scan
from scanreg.infrastructure.config import load_settings
from scanreg.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="SCANREG_DATA_DIR",
    default=None,
    help="Directory holding the registry file.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Scan Registry: register scanned products without duplicates"""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    try:
        ctx.obj = load_settings(data_dir)
    except ValueError as exc:
        raise click.UsageError(str(exc))


@cli.group()
def product() -> None:
    """Manage registered products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_clear)
product.add_command(product_list)
product.add_command(product_lookup)
product.add_command(product_remove)
product.add_command(product_summary)
cli.add_command(scan)
