"""CLI commands for the catalog."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.session import (
    api_from,
    ensure_ok,
    logged_in,
    with_credentials,
)


@click.command("list")
@with_credentials
@click.pass_context
def product_list(ctx: click.Context, username: str, password: str) -> None:
    """List all products in the catalog."""
    api = api_from(ctx)
    with logged_in(api, username, password) as session_id:
        products = ensure_ok(api.list_products(session_id)).body

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<14} {'Price':>10}")
    click.echo("-" * 53)
    for p in products:
        click.echo(f"{str(p['id']):<6} {p['name']:<20} {p['category']:<14} {str(p['price']):>10}")


@click.command("upsert")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, help="Product category.")
@with_credentials
@click.pass_context
def product_upsert(
    ctx: click.Context,
    product_id: str,
    name: str,
    price: str,
    category: str,
    username: str,
    password: str,
) -> None:
    """Add a product or replace the one with the same ID (admins only)."""
    api = api_from(ctx)
    form = {"id": product_id, "name": name, "price": price, "category": category}
    with logged_in(api, username, password) as session_id:
        response = ensure_ok(api.upsert_product(session_id, form))

    click.echo(response.message)
