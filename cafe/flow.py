"""Per-customer item selection state machine."""

from __future__ import annotations

import logging
from enum import Enum

from rich.console import Console

from cafe.catalog import Catalog
from cafe.data import CATEGORY_BY_CHOICE
from cafe.models import Category, MenuItem, Order, OrderLine
from cafe.prompts import Prompter
from cafe.rendering import (
    render_added,
    render_available,
    render_categories,
    render_item_gone,
    render_sold_out,
)

logger = logging.getLogger(__name__)


class FlowState(Enum):
    AWAITING_CATEGORY = "awaiting_category"
    AWAITING_ITEM = "awaiting_item"
    AWAITING_QUANTITY = "awaiting_quantity"
    ADDED = "added"
    AWAITING_MORE = "awaiting_more"
    DONE = "done"


class SelectionFlow:
    """Walk one customer through category -> item -> quantity -> add-more.

    The flow is the only writer of catalog stock. Quantities are bounded
    by the item's stock at the moment of the prompt, so ``Catalog.commit``
    is never handed an invalid quantity.
    """

    def __init__(
        self,
        catalog: Catalog,
        prompter: Prompter,
        console: Console,
        categories: dict[int, Category] | None = None,
    ) -> None:
        self.catalog = catalog
        self.prompter = prompter
        self.console = console
        self.categories = categories if categories is not None else CATEGORY_BY_CHOICE
        self.state = FlowState.AWAITING_CATEGORY
        self._category: Category | None = None
        self._item: MenuItem | None = None
        self._quantity = 0
        self._handlers = {
            FlowState.AWAITING_CATEGORY: self._await_category,
            FlowState.AWAITING_ITEM: self._await_item,
            FlowState.AWAITING_QUANTITY: self._await_quantity,
            FlowState.ADDED: self._added,
            FlowState.AWAITING_MORE: self._await_more,
        }

    def run(self, order: Order) -> Order:
        """Drive the flow until the customer finishes; lines are appended to ``order``."""
        self.state = FlowState.AWAITING_CATEGORY
        while self.state is not FlowState.DONE:
            self.state = self._handlers[self.state](order)
        return order

    def _await_category(self, order: Order) -> FlowState:
        sold_out = {cat for cat in self.categories.values() if self.catalog.is_category_sold_out(cat)}
        render_categories(self.console, self.categories, sold_out)
        choice = self.prompter.ask_int(f"Choose category (0-{len(self.categories)}): ", 0, len(self.categories))
        if choice == 0:
            return FlowState.DONE

        category = self.categories[choice]
        if category in sold_out:
            render_sold_out(self.console, category)
            return FlowState.AWAITING_CATEGORY
        self._category = category
        return FlowState.AWAITING_ITEM

    def _await_item(self, order: Order) -> FlowState:
        available = self.catalog.list_available(self._category)
        render_available(self.console, self._category, available)
        if not available:
            return FlowState.AWAITING_CATEGORY

        choice = self.prompter.ask_int("Select item number (0 to go back): ", 0, len(available))
        if choice == 0:
            return FlowState.AWAITING_CATEGORY
        self._item = available[choice - 1]
        return FlowState.AWAITING_QUANTITY

    def _await_quantity(self, order: Order) -> FlowState:
        item = self._item
        if item.remaining == 0:
            logger.info("item_gone item=%r category=%s", item.name, item.category.value)
            render_item_gone(self.console, item)
            return FlowState.AWAITING_ITEM
        self._quantity = self.prompter.ask_int("Enter quantity: ", 1, item.remaining)
        return FlowState.ADDED

    def _added(self, order: Order) -> FlowState:
        item, quantity = self._item, self._quantity
        self.catalog.commit(item, quantity)
        order.add_line(
            OrderLine(
                item_index=self.catalog.item_index(item),
                name=item.name,
                unit_price=item.price,
                quantity=quantity,
            )
        )
        render_added(self.console, quantity, item)
        return FlowState.AWAITING_MORE

    def _await_more(self, order: Order) -> FlowState:
        if self.prompter.ask_yes_no("Add more items? (Y/N): "):
            return FlowState.AWAITING_CATEGORY
        if self.prompter.ask_yes_no("Continue ordering (another category)? (Y/N): "):
            return FlowState.AWAITING_CATEGORY
        return FlowState.DONE
