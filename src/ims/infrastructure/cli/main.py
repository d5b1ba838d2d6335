from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError as SettingsError

from ims.application.show_statistics import ShowStatisticsHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import AppContext, build_context
from ims.infrastructure.cli.demo_command import demo
from ims.infrastructure.cli.formatting import display_statistics
from ims.infrastructure.cli.product_commands import product_list, product_show
from ims.infrastructure.cli.sale_commands import (
    download_link,
    sale_process,
    shipping_quote,
)
from ims.infrastructure.logging import configure_logging
from ims.infrastructure.settings import InventorySettings


@click.group()
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="IMS_CATALOG",
    default=None,
    help="JSON catalog to load into the in-memory inventory.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.pass_context
def cli(ctx: click.Context, catalog: Path | None, log_level: str | None) -> None:
    """IMS: Inventory Management System"""
    try:
        settings = InventorySettings()
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    configure_logging(log_level or settings.log_level)

    try:
        ctx.obj = build_context(catalog=catalog, settings=settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def product() -> None:
    """Browse products."""


@cli.group()
def sale() -> None:
    """Process sales."""


@cli.group()
def shipping() -> None:
    """Shipping quotes for physical products."""


@cli.command("stats")
@click.pass_obj
def stats(ctx: AppContext) -> None:
    """Show inventory statistics."""
    display_statistics(ShowStatisticsHandler(ctx.product_repo).handle())


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
sale.add_command(sale_process)
shipping.add_command(shipping_quote)
cli.add_command(download_link)
cli.add_command(demo)
