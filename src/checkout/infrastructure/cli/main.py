import click

from checkout.domain.exceptions import DomainException
from checkout.infrastructure.cli.order_commands import order_run
from checkout.infrastructure.cli.stock_commands import stock_set, stock_show
from checkout.infrastructure.config import load_settings
from checkout.infrastructure.logging_setup import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Order checkout coordinator"""
    try:
        settings = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def order() -> None:
    """Check out orders."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


# Register subcommands
order.add_command(order_run)
stock.add_command(stock_set)
stock.add_command(stock_show)
