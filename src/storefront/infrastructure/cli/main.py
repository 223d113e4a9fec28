from __future__ import annotations

from pathlib import Path

import click

from storefront import config
from storefront.infrastructure.cli.account_commands import login, register
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.cli.product_commands import product_list, product_upsert


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="STOREFRONT_DATA_DIR",
    default=None,
    help="Directory holding users.json, products.json and orders.json.",
)
@click.option("--log-level", default=config.LOG_LEVEL, show_default=True, help="Logging level.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str) -> None:
    """Storefront: accounts, catalog and checkout"""
    config.configure_logging(log_level.upper())
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


@cli.group()
def product() -> None:
    """Manage the catalog."""


# Register subcommands
cli.add_command(register)
cli.add_command(login)
cli.add_command(checkout)
product.add_command(product_list)
product.add_command(product_upsert)
