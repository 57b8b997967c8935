"""CLI commands for working with a warehouse.

Warehouses only live in memory, so product commands run inside a
``session``: one process, one warehouse, commands read line by line
from stdin.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable, Iterable

import click

from warehouse.application.add_product import AddProductHandler
from warehouse.application.dto import ProductDTO
from warehouse.application.show_products import ShowProductsHandler
from warehouse.application.update_product import UpdateProductPriceHandler
from warehouse.domain.exceptions import DomainException
from warehouse.domain.model.category import Category
from warehouse.domain.model.warehouse import Warehouse
from warehouse.domain.repository.warehouse_repository import (
    DEFAULT_WAREHOUSE_NAME,
    WarehouseRepository,
)

SESSION_HELP = """\
Commands:
  add NAME CATEGORY [PRICE] [--id UUID]   Add a product
  update ID PRICE                         Change a product's price
  show ID                                 Show one product
  list                                    List all products
  by CATEGORY                             List products in a category
  groups                                  List products grouped by category
  changed                                 Show the price-change log
  clear                                   Remove all products and history
  help                                    Show this help
  quit                                    End the session"""


class UsageError(Exception):
    """A session command was given the wrong arguments."""


# --- Rendering ----------------------------------------------------------------


def _echo_products(products: list[ProductDTO], empty: str = "No products found.") -> None:
    if not products:
        click.echo(empty)
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Category':<12} {'Price':>10}")
    click.echo("-" * 81)
    for p in products:
        click.echo(f"{p.id:<36} {p.name:<20} {p.category:<12} {p.price:>10}")


# --- Session commands ---------------------------------------------------------


def _add(warehouse: Warehouse, args: list[str]) -> None:
    product_id = None
    if "--id" in args:
        idx = args.index("--id")
        if idx + 1 >= len(args):
            raise UsageError("add NAME CATEGORY [PRICE] [--id UUID]")
        product_id = args[idx + 1]
        args = args[:idx] + args[idx + 2:]
    if len(args) not in (2, 3):
        raise UsageError("add NAME CATEGORY [PRICE] [--id UUID]")

    name, category = args[0], args[1]
    price = args[2] if len(args) == 3 else None
    product = AddProductHandler(warehouse).handle(
        name=name, category=category, price=price, product_id=product_id
    )
    click.echo(f"Added {product.id} '{product.name}' at {product.price:.2f}")


def _update(warehouse: Warehouse, args: list[str]) -> None:
    if len(args) != 2:
        raise UsageError("update ID PRICE")
    product = UpdateProductPriceHandler(warehouse).handle(args[0], args[1])
    click.echo(f"Product {product.id} price updated to {product.price:.2f}")


def _show(warehouse: Warehouse, args: list[str]) -> None:
    if len(args) != 1:
        raise UsageError("show ID")
    dto = ShowProductsHandler(warehouse).by_id(args[0])
    if dto is None:
        click.echo(f"No product with id {args[0]}")
        return
    _echo_products([dto])


def _list(warehouse: Warehouse, args: list[str]) -> None:
    _echo_products(ShowProductsHandler(warehouse).all())


def _by(warehouse: Warehouse, args: list[str]) -> None:
    if len(args) != 1:
        raise UsageError("by CATEGORY")
    _echo_products(ShowProductsHandler(warehouse).by_category(args[0]))


def _groups(warehouse: Warehouse, args: list[str]) -> None:
    grouped = ShowProductsHandler(warehouse).grouped()
    if not grouped:
        click.echo("No products found.")
        return
    for category, products in grouped.items():
        click.echo(f"[{category}]")
        _echo_products(products)


def _changed(warehouse: Warehouse, args: list[str]) -> None:
    _echo_products(ShowProductsHandler(warehouse).changed(), empty="No price changes.")


def _clear(warehouse: Warehouse, args: list[str]) -> None:
    warehouse.clear_products()
    click.echo(f"Warehouse '{warehouse.name}' cleared")


def _help(warehouse: Warehouse, args: list[str]) -> None:
    click.echo(SESSION_HELP)


COMMANDS: dict[str, Callable[[Warehouse, list[str]], None]] = {
    "add": _add,
    "update": _update,
    "show": _show,
    "list": _list,
    "by": _by,
    "groups": _groups,
    "changed": _changed,
    "clear": _clear,
    "help": _help,
}


def run_session(warehouse: Warehouse, lines: Iterable[str]) -> None:
    """Execute session commands until ``quit`` or the input runs out.

    Failing commands print an error and the session carries on.
    """
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        try:
            command, *args = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}")
            continue

        if command in ("quit", "exit"):
            break
        handler = COMMANDS.get(command)
        if handler is None:
            click.echo(f"Error: unknown command '{command}' (try 'help')")
            continue

        try:
            handler(warehouse, args)
        except UsageError as exc:
            click.echo(f"Error: usage: {exc}")
        except DomainException as exc:
            click.echo(f"Error: {exc}")


# --- click commands -----------------------------------------------------------


@click.command("categories")
def categories() -> None:
    """List the available product categories."""
    for category in Category:
        click.echo(category.value)


@click.command("session")
@click.option(
    "--name", default=DEFAULT_WAREHOUSE_NAME, show_default=True, help="Warehouse name."
)
@click.pass_obj
def session(repo: WarehouseRepository, name: str) -> None:
    """Run warehouse commands read from stdin."""
    warehouse = repo.get(name)
    run_session(warehouse, click.get_text_stream("stdin"))
