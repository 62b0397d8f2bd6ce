"""Console rendering for menus, receipts and the day summary."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from rich import box
from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

from cafe.config import (
    CAFE_NAME,
    CURRENCY_SYMBOL,
    RECEIPT_ITEM_WIDTH,
    RECEIPT_QTY_WIDTH,
    RECEIPT_RULE_WIDTH,
    RECEIPT_TIMESTAMP_FORMAT,
)
from cafe.models import Category, DaySummary, MenuItem, Order

_STYLES: dict[str, str] = {
    "title": "bold cyan",
    "subtle": "cyan",
    "highlight": "bold green",
    "accent": "yellow",
    "error": "bold red",
    "muted": "bright_black",
    "sold_out": "red",
}


def style_for(role: str) -> str:
    """Return the console style for a text role; unknown roles are unstyled."""
    return _STYLES.get(role, "")


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL} {amount:.2f}"


def render_welcome(console: Console) -> None:
    console.print(Text(f"Welcome to {CAFE_NAME} — A cozy corner for your calm mornings.", style=style_for("title")))
    console.print(Text("Here we brew slow, chat quietly, and make every cup with care.", style=style_for("muted")))
    console.print()


def render_new_customer(console: Console) -> None:
    console.print(Text("---- New Customer ----", style=style_for("accent")))


def render_categories(console: Console, categories: dict[int, Category], sold_out: set[Category]) -> None:
    """Print the numbered category menu with sold-out markers and the finish option."""
    console.print(Text("Menu categories:", style=style_for("subtle")))
    for choice, category in categories.items():
        line = Text(f"{choice}) {category.value}")
        if category in sold_out:
            line.append(" [SOLD OUT]", style=style_for("sold_out"))
        console.print(line)
    console.print("0) Finish order")


def render_available(console: Console, category: Category, items: list[MenuItem]) -> None:
    if not items:
        console.print(Text(f"(No available items in {category.value})", style=style_for("muted")))
        return
    for idx, item in enumerate(items, start=1):
        console.print(Text(f"{idx}) {item.name}  {format_money(item.price)}  ({item.remaining} left)"))
    console.print("0) Back to categories")


def render_sold_out(console: Console, category: Category) -> None:
    console.print(Text(f"Sorry, {category.value} is completely sold out for today.", style=style_for("error")))


def render_item_gone(console: Console, item: MenuItem) -> None:
    console.print(Text(f"Sorry, {item.name} just sold out. Please choose again.", style=style_for("error")))


def render_added(console: Console, quantity: int, item: MenuItem) -> None:
    console.print(Text(f"{quantity} x {item.name} added to order.", style=style_for("highlight")))


def render_cancelled(console: Console) -> None:
    console.print(Text("No items ordered. Cancelling this transaction.", style=style_for("muted")))


def build_receipt(order: Order) -> Group:
    """Build the receipt for a finalized order; lines keep insertion order."""
    stamp = order.created_at.strftime(RECEIPT_TIMESTAMP_FORMAT)
    rule = "-" * RECEIPT_RULE_WIDTH

    body = Text()
    body.append(f"{'Item':<{RECEIPT_ITEM_WIDTH}}{'Qty':<{RECEIPT_QTY_WIDTH}}Subtotal\n")
    body.append(f"{rule}\n")
    for line in order.lines:
        body.append(f"{line.name:<{RECEIPT_ITEM_WIDTH}}{line.quantity:<{RECEIPT_QTY_WIDTH}}{format_money(line.subtotal)}\n")
    body.append(rule)

    return Group(
        Text(f"\n=== {CAFE_NAME} Receipt ===", style=style_for("title")),
        Text(f"Receipt# {order.receipt_number}     {stamp}", style=style_for("subtle")),
        Text(f"Customer: {order.customer_name}     ({order.dine_option.value})\n", style=style_for("muted")),
        body,
        Text(f"TOTAL: {format_money(order.total())}", style=style_for("highlight")),
        Text(f"Thank you for choosing {CAFE_NAME} — come back soon! ☕\n", style=style_for("title")),
    )


def render_receipt(console: Console, order: Order) -> None:
    console.print(build_receipt(order))


def _inventory_table(items: Iterable[MenuItem]) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Item")
    table.add_column("Left", justify="right")
    table.add_column("Sold", justify="right")
    for item in items:
        left = Text(str(item.remaining), style=style_for("sold_out") if item.remaining == 0 else "")
        table.add_row(item.name, left, str(item.sold))
    return table


def render_summary(console: Console, summary: DaySummary) -> None:
    console.print(Text("\n=== Daily Summary ===", style=style_for("title")))
    console.print(f"Customers served: {summary.customers_served}")
    console.print(f"Total revenue: {format_money(summary.total_revenue)}")
    console.print(f"Total items sold: {summary.total_items_sold}")
    if summary.best_seller is not None:
        console.print(Text(f"Best seller: {summary.best_seller.name} ({summary.best_seller.sold} sold)"))
    else:
        console.print("No sales recorded.")

    console.print("\nRemaining inventory:")
    console.print(_inventory_table(summary.inventory))
    console.print(Text(f"\nThank you for running {CAFE_NAME} today. Good job! ☕", style=style_for("title")))
