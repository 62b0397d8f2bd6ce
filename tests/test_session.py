"""Tests for the trading-day loop and its summary."""

import io
from datetime import datetime
from decimal import Decimal

from cafe.models import DineOption
from cafe.prompts import Prompter
from cafe.receipts import ReceiptNumberGenerator
from cafe.session import DaySession
from conftest import output_of, script

FIXED_TIME = datetime(2026, 10, 18, 9, 30, 0)


def make_session(catalog, console, *lines, clock_ms=lambda: 1_760_000_000_000):
    return DaySession(
        catalog,
        Prompter(console, script(*lines)),
        console,
        receipt_numbers=ReceiptNumberGenerator(clock=clock_ms),
        clock=lambda: FIXED_TIME,
    )


def test_single_customer_day(catalog, console):
    """One customer buying 3 Cappuccinos is served, receipted and summarized."""
    session = make_session(catalog, console, "Ana", "y", "1", "1", "3", "n", "n", "n")
    summary = session.run()

    assert session.customers_served == 1
    assert len(session.orders) == 1
    order = session.orders[0]
    assert order.customer_name == "Ana"
    assert order.dine_option is DineOption.EAT_IN
    assert order.receipt_number is not None
    assert order.total() == Decimal("420.00")

    assert summary.customers_served == 1
    assert summary.total_revenue == Decimal("420.00")
    assert summary.total_items_sold == 3
    assert summary.best_seller.name == "Cappuccino"

    out = output_of(console)
    assert f"Receipt# {order.receipt_number}     2026-10-18 09:30:00" in out
    assert "Customer: Ana     (Eat-In)" in out
    assert "TOTAL: ₱ 420.00" in out
    assert "Customers served: 1" in out
    assert "Best seller: Cappuccino (3 sold)" in out


def test_empty_order_is_cancelled(catalog, console):
    """A customer who orders nothing is not counted and not kept."""
    session = make_session(catalog, console, "Ben", "n", "0", "n")
    summary = session.run()

    assert session.orders == []
    assert session.customers_served == 0
    assert summary.total_revenue == Decimal("0.00")
    assert summary.best_seller is None
    out = output_of(console)
    assert "No items ordered. Cancelling this transaction." in out
    assert "Receipt#" not in out
    assert "No sales recorded." in out


def test_blank_name_is_reprompted(catalog, console):
    session = make_session(catalog, console, "", "  ", " Cy ", "n", "0", "n")
    session.run()
    assert output_of(console).count("Name cannot be empty.") == 2


def test_several_customers_revenue_and_receipts(catalog, console):
    """Revenue is the sum of finalized totals; receipts stay unique within one millisecond."""
    session = make_session(
        catalog,
        console,
        "Ana", "y", "1", "1", "3", "n", "n", "y",
        "Ben", "n", "0", "y",
        "Cy", "n", "4", "3", "2", "n", "n", "y",
        "Dee", "y", "1", "2", "1", "y", "2", "1", "4", "n", "n", "n",
        clock_ms=lambda: 1_760_000_000_000,
    )
    summary = session.run()

    assert session.customers_served == 3
    assert [order.customer_name for order in session.orders] == ["Ana", "Cy", "Dee"]
    assert session.orders[1].dine_option is DineOption.TAKE_OUT
    receipts = [order.receipt_number for order in session.orders]
    assert len(set(receipts)) == 3
    assert summary.total_revenue == sum((o.total() for o in session.orders), Decimal("0"))
    assert summary.total_revenue == Decimal("420.00") + Decimal("540.00") + Decimal("150.00") + Decimal("300.00")
    assert summary.total_items_sold == 3 + 2 + 1 + 4
    assert summary.best_seller.name == "Blueberry Muffin"
    assert catalog.stock_is_conserved()


def test_best_seller_tie_reports_first_in_catalog(catalog, console):
    session = make_session(catalog, console, "Eve", "y", "4", "3", "2", "y", "1", "2", "2", "n", "n", "n")
    summary = session.run()
    assert summary.best_seller.name == "Latte"
    assert "Best seller: Latte (2 sold)" in output_of(console)


def test_summary_lists_remaining_inventory(catalog, console):
    session = make_session(catalog, console, "Ana", "y", "1", "1", "3", "n", "n", "n")
    summary = session.run()

    assert [item.name for item in summary.inventory] == [item.name for item in catalog]
    out = output_of(console)
    assert "Remaining inventory:" in out
    assert "Tiramisu" in out


def test_end_of_input_mid_order_keeps_committed_lines(catalog, console):
    """If input ends mid-order, committed lines are finalized and the day closes."""
    session = make_session(catalog, console, "Dee", "n", "1", "1", "2")
    summary = session.run()

    assert session.customers_served == 1
    assert summary.total_items_sold == 2
    assert summary.total_revenue == Decimal("280.00")
    assert catalog.stock_is_conserved()
    assert "=== Daily Summary ===" in output_of(console)


def test_end_of_input_before_any_order(catalog, console):
    session = DaySession(catalog, Prompter(console, io.StringIO("")), console)
    summary = session.run()

    assert summary.customers_served == 0
    assert "No sales recorded." in output_of(console)


def test_end_of_input_at_next_customer_prompt(catalog, console):
    session = make_session(catalog, console, "Ana", "y", "1", "1", "1", "n", "n")
    summary = session.run()
    assert summary.customers_served == 1
    assert summary.total_revenue == Decimal("140.00")


def test_serve_customer_returns_finalized_order(catalog, console):
    session = make_session(catalog, console, "Fay", "y", "3", "1", "1", "n", "n")
    order = session.serve_customer()
    assert order is session.orders[0]
    assert order.lines[0].name == "Chicken Wrap"


def test_very_long_quantity_does_not_end_the_day(catalog, console):
    """An absurdly long quantity is re-asked and the day continues to its summary."""
    session = make_session(catalog, console, "Ana", "y", "1", "1", "9" * 5000, "3", "n", "n", "n")
    summary = session.run()

    assert summary.customers_served == 1
    assert summary.total_revenue == Decimal("420.00")
    assert "Please enter a number between 1 and 20." in output_of(console)
