"""CLI for the stockpot inventory.

Usage:
    python -m stockpot demo                          # Sample catalog, a few sales, report
    python -m stockpot shell                         # Interactive session
    python -m stockpot discounts                     # Show discount kinds and rules
    python -m stockpot -v demo                       # Same, with debug logging

The inventory lives in memory only, so every command starts from an empty
(or sample) catalog.
"""

from __future__ import annotations

import logging
import shlex
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from stockpot.config import Settings
from stockpot.discounts import RULES, available_discount_kinds
from stockpot.errors import InvalidArgument
from stockpot.inventory import InventoryManager
from stockpot.models import Outcome, SaleOutcome
from stockpot.report import fmt_money, render_inventory, render_receipt, render_statistics

app = typer.Typer(
    name="stockpot",
    help="In-memory inventory for books and electronics",
    no_args_is_help=True,
)
console = Console(stderr=True)

# (id, name, category, price, quantity)
SAMPLE_CATALOG = [
    ("B001", "Java Programming", "Book", 45.99, 10),
    ("B002", "Python Basics", "Book", 35.50, 3),
    ("B003", "Clean Code", "Book", 39.99, 0),
    ("E001", "Laptop", "Electronics", 999.99, 5),
    ("E002", "Wireless Mouse", "Electronics", 25.00, 20),
    ("E003", "USB-C Cable", "Electronics", 12.50, 2),
]

# (id, quantity, discount kind)
SAMPLE_SALES = [
    ("B001", 2, "Student"),
    ("E002", 6, "Bulk"),
    ("E001", 1, "Student"),
    ("B003", 1, "None"),
]

SHELL_HELP = """\
Commands:
  add ID NAME CATEGORY PRICE QTY     Add (or replace) a product
  sell ID QTY [DISCOUNT]             Sell by product id
  sell-name NAME QTY [DISCOUNT]      Sell by product name
  stock ID QTY                       Add stock to a product
  find NAME                          Find a product by name
  list                               Show the inventory
  category CATEGORY                  Show products in a category
  low [THRESHOLD]                    Show low-stock products
  stats                              Show inventory statistics
  value                              Show total inventory value
  help                               Show this help
  quit                               Leave the shell
Quote names with spaces: add B010 "Clean Code" Book 39.99 4"""


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """In-memory inventory for books and electronics."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _report(outcome: Outcome) -> None:
    """Print an outcome: receipts for sales, a one-liner otherwise."""
    if not outcome.ok:
        console.print(f"[red]{escape(outcome.message)}[/red]")
        return
    if isinstance(outcome, SaleOutcome) and outcome.receipt:
        render_receipt(outcome.receipt, console)
    else:
        console.print(f"[green]{escape(outcome.message)}[/green]")


def seed_sample_catalog(inventory: InventoryManager) -> None:
    """Load SAMPLE_CATALOG into `inventory`."""
    for row in SAMPLE_CATALOG:
        _report(inventory.add_product(*row))


@app.command("demo")
def cmd_demo(
    threshold: Optional[int] = typer.Option(None, "--threshold", "-t", help="Low-stock threshold"),
) -> None:
    """Load a sample catalog, run a few sales and show the report."""
    inventory = InventoryManager(Settings.from_env())
    seed_sample_catalog(inventory)
    limit = inventory.settings.low_stock_threshold if threshold is None else threshold
    render_inventory(inventory.products(), console, low_stock_threshold=limit)

    for product_id, quantity, kind in SAMPLE_SALES:
        console.print(f"[bold]Selling:[/bold] {product_id} x{quantity} ({kind})")
        _report(inventory.sell(product_id, quantity, kind))

    _report(inventory.add_stock("B003", 5))
    render_statistics(inventory.statistics(limit), console)


@app.command("discounts")
def cmd_discounts() -> None:
    """Show available discount kinds."""
    table = Table(title="Discount Kinds", show_header=True, header_style="bold")
    table.add_column("Kind", style="green", min_width=10)
    table.add_column("Rule", min_width=30)
    for kind in available_discount_kinds():
        table.add_row(kind.value, RULES[kind])

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Interactive shell
# ---------------------------------------------------------------------------

class UsageError(Exception):
    """Shell command called with the wrong arguments."""


def _int_arg(value: str, label: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise UsageError(f"{label} must be a whole number, got {value!r}")


def _sh_add(inventory: InventoryManager, args: list[str]) -> None:
    if len(args) != 5:
        raise UsageError("usage: add ID NAME CATEGORY PRICE QTY")
    product_id, name, category, price, qty = args
    _report(inventory.add_product(product_id, name, category, price, _int_arg(qty, "QTY")))


def _sh_sell(inventory: InventoryManager, args: list[str]) -> None:
    if len(args) not in (2, 3):
        raise UsageError("usage: sell ID QTY [DISCOUNT]")
    kind = args[2] if len(args) == 3 else "None"
    _report(inventory.sell(args[0], _int_arg(args[1], "QTY"), kind))


def _sh_sell_name(inventory: InventoryManager, args: list[str]) -> None:
    if len(args) not in (2, 3):
        raise UsageError("usage: sell-name NAME QTY [DISCOUNT]")
    kind = args[2] if len(args) == 3 else "None"
    _report(inventory.sell_by_name(args[0], _int_arg(args[1], "QTY"), kind))


def _sh_stock(inventory: InventoryManager, args: list[str]) -> None:
    if len(args) != 2:
        raise UsageError("usage: stock ID QTY")
    _report(inventory.add_stock(args[0], _int_arg(args[1], "QTY")))


def _sh_find(inventory: InventoryManager, args: list[str]) -> None:
    if len(args) != 1:
        raise UsageError("usage: find NAME")
    product = inventory.find_by_name(args[0])
    if product is None:
        console.print(f"[yellow]Product not found: {escape(args[0])}[/yellow]")
    else:
        console.print(escape(str(product)))


def _sh_list(inventory: InventoryManager, args: list[str]) -> None:
    render_inventory(
        inventory.products(), console,
        low_stock_threshold=inventory.settings.low_stock_threshold,
    )


def _sh_category(inventory: InventoryManager, args: list[str]) -> None:
    if len(args) != 1:
        raise UsageError("usage: category CATEGORY")
    products = inventory.list_by_category(args[0])
    render_inventory(products, console, title=f"Category: {escape(args[0])}")


def _sh_low(inventory: InventoryManager, args: list[str]) -> None:
    threshold = _int_arg(args[0], "THRESHOLD") if args else None
    products = inventory.list_low_stock(threshold)
    if not products:
        console.print("[green]No low-stock products.[/green]")
        return
    render_inventory(products, console, title="Low Stock")


def _sh_stats(inventory: InventoryManager, args: list[str]) -> None:
    render_statistics(inventory.statistics(), console)


def _sh_value(inventory: InventoryManager, args: list[str]) -> None:
    console.print(f"Total inventory value: {fmt_money(inventory.total_value())}")


_SHELL_COMMANDS: dict[str, Callable[[InventoryManager, list[str]], None]] = {
    "add": _sh_add,
    "sell": _sh_sell,
    "sell-name": _sh_sell_name,
    "stock": _sh_stock,
    "find": _sh_find,
    "list": _sh_list,
    "category": _sh_category,
    "low": _sh_low,
    "stats": _sh_stats,
    "value": _sh_value,
}


def run_shell_line(inventory: InventoryManager, line: str) -> bool:
    """Execute one shell line. Returns False when the shell should exit."""
    try:
        parts = shlex.split(line)
    except ValueError as e:
        console.print(f"[red]Could not parse line: {escape(str(e))}[/red]")
        return True
    if not parts:
        return True

    command, args = parts[0].lower(), parts[1:]
    if command in ("quit", "exit"):
        return False
    if command == "help":
        console.print(SHELL_HELP, markup=False, highlight=False)
        return True

    handler = _SHELL_COMMANDS.get(command)
    if handler is None:
        console.print(f"[red]Unknown command: {escape(command)}[/red] (try 'help')")
        return True

    try:
        handler(inventory, args)
    except UsageError as e:
        console.print(f"[yellow]{escape(str(e))}[/yellow]")
    except InvalidArgument as e:
        console.print(f"[red]{escape(str(e))}[/red]")
    return True


@app.command("shell")
def cmd_shell(
    sample: bool = typer.Option(False, "--sample", help="Start with the sample catalog"),
) -> None:
    """Interactive inventory session (state is lost on exit)."""
    inventory = InventoryManager(Settings.from_env())
    if sample:
        seed_sample_catalog(inventory)

    console.print("[bold]stockpot shell[/bold], type 'help' for commands, 'quit' to leave")
    while True:
        try:
            line = console.input("[bold green]stockpot>[/bold green] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not run_shell_line(inventory, line):
            break


if __name__ == "__main__":
    app()
