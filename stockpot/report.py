"""Rich rendering for inventory listings, statistics and sale receipts."""

from __future__ import annotations

from decimal import Decimal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stockpot.models import Category, InventoryStats, Product, SaleReceipt

_CATEGORY_STYLES = {
    Category.BOOK: "cyan",
    Category.ELECTRONICS: "magenta",
}


def fmt_money(amount: Decimal) -> str:
    """Format an amount as $1,234.56."""
    return f"${amount:,.2f}"


def _fmt_stock(quantity: int, threshold: int) -> str:
    if quantity == 0:
        return "[red]0[/red]"
    if quantity <= threshold:
        return f"[yellow]{quantity}[/yellow]"
    return str(quantity)


def render_inventory(
    products: list[Product],
    console: Console,
    title: str = "Inventory",
    low_stock_threshold: int = 5,
) -> None:
    """Render products as a table, in the order given."""
    if not products:
        console.print("[yellow]No products in inventory.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("ID", style="dim", min_width=6)
    table.add_column("Name", min_width=20)
    table.add_column("Category")
    table.add_column("Price", justify="right")
    table.add_column("Stock", justify="right")
    table.add_column("Value", justify="right")

    for p in products:
        style = _CATEGORY_STYLES.get(p.category, "white")
        table.add_row(
            escape(p.id),
            escape(p.name),
            f"[{style}]{p.category.value}[/{style}]",
            fmt_money(p.price),
            _fmt_stock(p.quantity, low_stock_threshold),
            fmt_money(p.value),
        )

    console.print()
    console.print(table)
    console.print()


def render_statistics(stats: InventoryStats, console: Console) -> None:
    """Render product count, total value and the restock list."""
    table = Table(title="Inventory Statistics", show_header=False)
    table.add_column("Metric", style="dim", min_width=20)
    table.add_column("Value", justify="right")
    table.add_row("Total products", str(stats.product_count))
    table.add_row("Total inventory value", fmt_money(stats.total_value))
    table.add_row(f"Low stock items (<= {stats.low_stock_threshold})", str(len(stats.low_stock)))

    console.print()
    console.print(table)
    if stats.low_stock:
        console.print("[bold]Items needing restock:[/bold]")
        for p in stats.low_stock:
            console.print(f"  - {escape(p.name)} (Stock: {p.quantity})")
    console.print()


def render_receipt(receipt: SaleReceipt, console: Console) -> None:
    """Render a completed sale."""
    table = Table(title="Sale Complete", show_header=False)
    table.add_column("Field", style="dim", min_width=16)
    table.add_column("Value", justify="right")
    table.add_row("Product", escape(receipt.product_name))
    table.add_row("Quantity", str(receipt.quantity))
    table.add_row("Unit price", fmt_money(receipt.unit_price))
    table.add_row("Original total", fmt_money(receipt.original_total))

    discount = receipt.discount
    color = "green" if discount.amount > 0 else "dim"
    table.add_row("Discount", f"[{color}]{fmt_money(discount.amount)} ({escape(discount.description)})[/{color}]")
    table.add_row("Final price", f"[bold]{fmt_money(receipt.final_total)}[/bold]")
    table.add_row("Remaining stock", str(receipt.remaining_stock))

    console.print()
    console.print(table)
    console.print()
