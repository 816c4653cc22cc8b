"""CLI commands for checking out an order."""

from __future__ import annotations

import asyncio
from decimal import Decimal, InvalidOperation

import click

from checkout.domain.exceptions import DomainException
from checkout.domain.model.line_item import LineItem
from checkout.infrastructure.bootstrap import order_coordinator
from checkout.infrastructure.config import Settings


def _parse_item(raw: str) -> LineItem:
    """Parse 'sku-1:Widget:15.00:3' into a LineItem."""
    parts = [part.strip() for part in raw.split(":")]
    if len(parts) != 4:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'ID:Name:Price:Quantity'."
        )
    item_id, name, price_str, qty_str = parts
    try:
        price = Decimal(price_str)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{price_str}' for item '{item_id}'.")
    try:
        qty = int(qty_str)
    except ValueError:
        raise click.BadParameter(f"Invalid quantity '{qty_str}' for item '{item_id}'.")
    return LineItem(id=item_id, name=name, unit_price=price, quantity=qty)


@click.command("run")
@click.option("--email", required=True, help="Customer email.")
@click.option(
    "--item", "raw_items", required=True, multiple=True,
    help="Item as 'ID:Name:Price:Quantity'. Repeat for more items.",
)
@click.option("--discount", default=None, help="Discount code.")
@click.pass_obj
def order_run(
    settings: Settings, email: str, raw_items: tuple[str, ...], discount: str | None
) -> None:
    """Build an order and run it through checkout."""
    items = [_parse_item(raw) for raw in raw_items]

    try:
        coordinator = order_coordinator(settings, email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for item in items:
        coordinator.add_item(item)

    if discount is not None and not coordinator.apply_discount(discount):
        click.echo(f"Discount code '{discount}' was not accepted.", err=True)

    succeeded = asyncio.run(coordinator.checkout())
    click.echo(coordinator.get_order_status())

    if not succeeded:
        raise click.ClickException(f"Checkout of order {coordinator.order_id} failed")
