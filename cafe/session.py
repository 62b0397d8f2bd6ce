"""The trading day: one customer after another, then the summary."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

from rich.console import Console

from cafe.catalog import Catalog
from cafe.flow import SelectionFlow
from cafe.models import DaySummary, DineOption, Order
from cafe.prompts import InputClosed, Prompter
from cafe.receipts import ReceiptNumberGenerator
from cafe.rendering import (
    render_cancelled,
    render_new_customer,
    render_receipt,
    render_summary,
    render_welcome,
)

logger = logging.getLogger(__name__)


class DaySession:
    """Serve customers against a shared catalog and keep the finalized orders."""

    def __init__(
        self,
        catalog: Catalog,
        prompter: Prompter,
        console: Console,
        receipt_numbers: ReceiptNumberGenerator | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.catalog = catalog
        self.prompter = prompter
        self.console = console
        self.receipt_numbers = receipt_numbers or ReceiptNumberGenerator()
        self.clock = clock
        self.orders: list[Order] = []
        self.customers_served = 0

    def run(self) -> DaySummary:
        """Serve customers until the operator stops (or input ends), then summarize."""
        render_welcome(self.console)
        try:
            while True:
                self.serve_customer()
                if not self.prompter.ask_yes_no("Serve next customer? (Y/N): "):
                    break
        except InputClosed:
            logger.warning("input_closed closing_day orders=%d", len(self.orders))

        summary = self.summarize()
        logger.info(
            "day_closed customers=%d revenue=%s items_sold=%d",
            summary.customers_served,
            summary.total_revenue,
            summary.total_items_sold,
        )
        render_summary(self.console, summary)
        return summary

    def serve_customer(self) -> Order | None:
        """Take one customer's order; return it if finalized, None if cancelled.

        If input ends part-way through, lines already committed are kept:
        the order is closed as usual before ``InputClosed`` propagates.
        """
        render_new_customer(self.console)
        name = self.prompter.ask_name()
        eat_in = self.prompter.ask_yes_no("Dine option - Eat in? or Take-Out (Y/N): ")
        order = Order(
            customer_name=name,
            dine_option=DineOption.EAT_IN if eat_in else DineOption.TAKE_OUT,
            created_at=self.clock(),
        )

        flow = SelectionFlow(self.catalog, self.prompter, self.console)
        try:
            flow.run(order)
        except InputClosed:
            self.close_order(order)
            raise
        return self.close_order(order)

    def close_order(self, order: Order) -> Order | None:
        """Finalize a non-empty order or discard an empty one."""
        if order.is_empty:
            logger.info("order_cancelled customer=%r", order.customer_name)
            render_cancelled(self.console)
            return None

        order.receipt_number = self.receipt_numbers.next()
        self.orders.append(order)
        self.customers_served += 1
        logger.info(
            "order_finalized receipt=%d customer=%r lines=%d total=%s",
            order.receipt_number,
            order.customer_name,
            len(order.lines),
            order.total(),
        )
        render_receipt(self.console, order)
        return order

    def summarize(self) -> DaySummary:
        return DaySummary(
            customers_served=self.customers_served,
            total_revenue=sum((order.total() for order in self.orders), Decimal("0.00")),
            total_items_sold=self.catalog.total_sold(),
            best_seller=self.catalog.best_seller(),
            inventory=self.catalog.items,
        )
