"""CLI commands for sales, shipping quotes and downloads."""

from __future__ import annotations

import click

from ims.application.issue_download import IssueDownloadHandler
from ims.application.prepare_shipment import PrepareShipmentHandler
from ims.application.process_sale import ProcessSaleHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import AppContext
from ims.infrastructure.cli.formatting import (
    display_download,
    display_receipt,
    display_shipment,
)


@click.command("process")
@click.option("--id", "product_id", required=True, help="Product ID to sell.")
@click.option("--quantity", required=True, type=int, help="Units to sell.")
@click.option("--address", default=None, help="Shipping address (physical products).")
@click.option("--user", "user_id", default=None, help="Buyer's user ID (digital products).")
@click.pass_obj
def sale_process(
    ctx: AppContext,
    product_id: str,
    quantity: int,
    address: str | None,
    user_id: str | None,
) -> None:
    """Sell units of a product and dispatch fulfillment."""
    handler = ProcessSaleHandler(
        product_repo=ctx.product_repo,
        fulfillment=ctx.fulfillment,
    )

    try:
        receipt = handler.handle(
            product_id, quantity, destination=address, user_id=user_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_receipt(receipt)


@click.command("quote")
@click.option("--id", "product_id", required=True, help="Physical product ID.")
@click.option("--destination", required=True, help="Destination address.")
@click.pass_obj
def shipping_quote(ctx: AppContext, product_id: str, destination: str) -> None:
    """Prepare a shipment summary with its cost."""
    handler = PrepareShipmentHandler(
        product_repo=ctx.product_repo,
        fulfillment=ctx.fulfillment,
    )

    try:
        summary = handler.handle(product_id, destination)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_shipment(summary)


@click.command("download")
@click.option("--id", "product_id", required=True, help="Digital product ID.")
@click.option("--user", "user_id", required=True, help="Licensed user ID.")
@click.pass_obj
def download_link(ctx: AppContext, product_id: str, user_id: str) -> None:
    """Issue a download link for a licensed user."""
    handler = IssueDownloadHandler(
        product_repo=ctx.product_repo,
        fulfillment=ctx.fulfillment,
    )

    try:
        grant = handler.handle(product_id, user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_download(grant)
