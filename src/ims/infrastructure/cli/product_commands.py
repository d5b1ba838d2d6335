"""CLI commands for browsing products."""

from __future__ import annotations

import click

from ims.application.list_products import ListProductsHandler
from ims.application.show_product import ShowProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.product import ProductKind
from ims.infrastructure.bootstrap import AppContext
from ims.infrastructure.cli.formatting import display_product, display_product_table


@click.command("list")
@click.option(
    "--kind",
    type=click.Choice(["physical", "digital"], case_sensitive=False),
    default=None,
    help="Only show one product variant.",
)
@click.option("--name", "name_contains", default=None, help="Name fragment to search for.")
@click.pass_obj
def product_list(ctx: AppContext, kind: str | None, name_contains: str | None) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=ctx.product_repo)
    products = handler.handle(
        kind=ProductKind.parse(kind) if kind else None,
        name_contains=name_contains,
    )

    if not products:
        click.echo("No products found.")
        return

    display_product_table(products)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(ctx: AppContext, product_id: str) -> None:
    """Show details of a single product."""
    handler = ShowProductHandler(product_repo=ctx.product_repo)

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_product(product)
