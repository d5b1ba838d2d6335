"""Shared text rendering for CLI output."""

from __future__ import annotations

import click

from ims.application.dto import InventoryStatistics, SaleReceipt
from ims.domain.model.capabilities import ShipmentSummary
from ims.domain.model.product import ProductDescription
from ims.domain.service.fulfillment_service import DownloadGrant


def display_product_table(products: list[ProductDescription]) -> None:
    click.echo(f"{'ID':<10} {'Name':<32} {'Kind':<9} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 72)
    for p in products:
        click.echo(
            f"{p.id:<10} {p.name:<32} {p.kind.value:<9} {str(p.price):>10} {p.stock:>7}"
        )


def display_product(product: ProductDescription) -> None:
    click.echo(f"Product {product.id}  ({product.kind.value})")
    click.echo(f"  Name:   {product.name}")
    click.echo(f"  Price:  {product.price}")
    click.echo(f"  Stock:  {product.stock}")
    for key, value in product.details.items():
        label = key.replace("_", " ").capitalize() + ":"
        click.echo(f"  {label:<16}{value}")


def display_shipment(summary: ShipmentSummary) -> None:
    click.echo(f"Shipment for {summary.product_name}")
    click.echo(f"  Address:     {summary.address}")
    click.echo(f"  Weight:      {summary.weight_kg} kg")
    click.echo(f"  Dimensions:  {summary.dimensions}")
    click.echo(f"  Distance:    {summary.distance_km} km")
    click.echo(f"  Cost:        {summary.cost}")


def display_download(grant: DownloadGrant) -> None:
    click.echo(f"Download for {grant.product_name}")
    click.echo(f"  User:    {grant.user_id}")
    click.echo(f"  Format:  {grant.format}  ({grant.file_size_mb} MB)")
    click.echo(f"  Link:    {grant.link}")


def display_receipt(receipt: SaleReceipt) -> None:
    click.echo(f"Sale processed: {receipt.product_name} ({receipt.product_id})")
    click.echo(f"  {'Quantity':<16} {receipt.quantity:>12}")
    click.echo(f"  {'Unit price':<16} {str(receipt.unit_price):>12}")
    click.echo(f"  {'Total':<16} {str(receipt.total):>12}")
    click.echo(f"  {'Stock left':<16} {receipt.remaining_stock:>12}")
    click.echo()
    if receipt.shipment is not None:
        display_shipment(receipt.shipment)
    elif receipt.download is not None:
        display_download(receipt.download)
    else:
        click.echo(f"Fulfillment skipped: {receipt.fulfillment_error}")


def display_statistics(stats: InventoryStatistics) -> None:
    click.echo("Inventory statistics")
    click.echo(f"  {'Products':<20} {stats.total_products:>12}")
    click.echo(f"  {'Physical':<20} {stats.physical_count:>12}")
    click.echo(f"  {'Digital':<20} {stats.digital_count:>12}")
    click.echo(f"  {'Inventory value':<20} {str(stats.total_value):>12}")
