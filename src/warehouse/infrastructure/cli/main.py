import logging

import click

from warehouse.infrastructure.bootstrap import warehouse_repository
from warehouse.infrastructure.cli.product_commands import categories, session


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Warehouse — in-memory product registry"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = warehouse_repository()


# Register subcommands
cli.add_command(categories)
cli.add_command(session)
