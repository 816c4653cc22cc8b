"""CLI commands for stock levels."""

from __future__ import annotations

import click

from checkout.domain.exceptions import DomainException
from checkout.infrastructure.bootstrap import stock_service
from checkout.infrastructure.config import Settings


@click.command("set")
@click.option("--item", "item_id", required=True, help="Item ID.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.pass_obj
def stock_set(settings: Settings, item_id: str, quantity: int) -> None:
    """Set the stock level for an item."""
    service = stock_service(settings)

    try:
        service.set_level(item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{item_id}' set to {quantity}")


@click.command("show")
@click.pass_obj
def stock_show(settings: Settings) -> None:
    """Show current stock levels."""
    levels = stock_service(settings).list_levels()

    if not levels:
        click.echo("No stock records found.")
        return

    click.echo(f"{'Item':<20} {'Quantity':>10}")
    click.echo("-" * 31)
    for level in levels:
        click.echo(f"{level.item_id:<20} {level.quantity:>10}")
