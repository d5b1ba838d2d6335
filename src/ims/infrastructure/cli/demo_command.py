"""``ims demo`` walks the sample catalog through every use case."""

from __future__ import annotations

import click

from ims.application.issue_download import IssueDownloadHandler
from ims.application.list_products import ListProductsHandler
from ims.application.manage_license import ManageLicenseHandler
from ims.application.prepare_shipment import PrepareShipmentHandler
from ims.application.process_sale import ProcessSaleHandler
from ims.application.register_product import RegisterProductHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.restock import RestockHandler
from ims.application.show_product import ShowProductHandler
from ims.application.show_statistics import ShowStatisticsHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.product import ProductKind
from ims.infrastructure.bootstrap import AppContext
from ims.infrastructure.cli.formatting import (
    display_download,
    display_product,
    display_product_table,
    display_receipt,
    display_shipment,
    display_statistics,
)
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from ims.infrastructure.persistence.json_catalog_loader import build_products
from ims.infrastructure.sample_catalog import SAMPLE_RECORDS


def _phase(title: str) -> None:
    click.echo()
    click.echo(f"=== {title} ===")


def _report_error(exc: DomainException) -> None:
    click.echo(f"Error: {exc}")


@click.command("demo")
@click.pass_obj
def demo(ctx: AppContext) -> None:
    """Run a scripted tour over a fresh sample inventory (ignores --catalog)."""
    repo = InMemoryProductRepository()
    register = RegisterProductHandler(repo)
    sell = ProcessSaleHandler(repo, ctx.fulfillment)
    listing = ListProductsHandler(repo)

    _phase("Registering products")
    for product in build_products(SAMPLE_RECORDS, ctx.factory):
        try:
            described = register.handle(product)
            click.echo(f"Registered {described.id}: {described.name}")
        except DomainException as exc:
            _report_error(exc)

    # Same ID twice: reported, not fatal
    try:
        register.handle(build_products(SAMPLE_RECORDS[:1], ctx.factory)[0])
    except DomainException as exc:
        _report_error(exc)

    _phase("All products")
    display_product_table(listing.handle())

    for kind in ProductKind:
        _phase(f"{kind.value.capitalize()} products")
        display_product_table(listing.handle(kind=kind))

    _phase("Sales")
    for product_id, quantity, address, user_id in (
        ("PROD-001", 3, "Calle 123, Bogota, Colombia", None),
        ("PROD-007", 1, "Av. Siempre Viva 742", None),
        ("PROD-004", 5, None, "USER-001"),
        ("PROD-003", 999, None, None),
    ):
        try:
            display_receipt(
                sell.handle(product_id, quantity, destination=address, user_id=user_id)
            )
        except DomainException as exc:
            _report_error(exc)
        click.echo()

    _phase("Restocking")
    click.echo(f"PROD-002 stock now {RestockHandler(repo).handle('PROD-002', 25)}")

    _phase("Capability-specific operations")
    shipping = PrepareShipmentHandler(repo, ctx.fulfillment)
    downloads = IssueDownloadHandler(repo, ctx.fulfillment)
    display_shipment(shipping.handle("PROD-001", "Calle 123, Bogota, Colombia"))
    for attempt in (
        lambda: shipping.handle("PROD-004", "Calle 456, Medellin, Colombia"),
        lambda: downloads.handle("PROD-001", "USER-001"),
    ):
        try:
            attempt()
        except DomainException as exc:
            _report_error(exc)

    ManageLicenseHandler(repo).activate("PROD-004", "USER-001")
    display_download(downloads.handle("PROD-004", "USER-001"))

    _phase("Search")
    display_product_table(listing.handle(name_contains="logitech"))
    display_product(ShowProductHandler(repo).handle("PROD-003"))

    _phase("Removing a product")
    RemoveProductHandler(repo).handle("PROD-006")
    click.echo(f"PROD-006 removed, {repo.count()} products left")

    _phase("Statistics")
    display_statistics(ShowStatisticsHandler(repo).handle())
