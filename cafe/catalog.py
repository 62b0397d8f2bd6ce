"""Authoritative in-memory stock for one trading day."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from cafe.models import Category, MenuItem

logger = logging.getLogger(__name__)


class Catalog:
    """Ordered collection of menu items; catalog order is definition order."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        self._items: list[MenuItem] = list(items)
        names = [item.name for item in self._items]
        if len(set(names)) != len(names):
            raise ValueError("menu item names must be unique")

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> MenuItem:
        return self._items[index]

    @property
    def items(self) -> list[MenuItem]:
        return list(self._items)

    def item_index(self, item: MenuItem) -> int:
        """Return the stable catalog index of ``item``."""
        for idx, candidate in enumerate(self._items):
            if candidate is item:
                return idx
        raise ValueError(f"{item.name!r} is not in this catalog")

    def by_name(self, name: str) -> MenuItem:
        for item in self._items:
            if item.name == name:
                return item
        raise KeyError(name)

    def items_in(self, category: Category) -> list[MenuItem]:
        return [item for item in self._items if item.category == category]

    def is_category_sold_out(self, category: Category) -> bool:
        """True iff no item of ``category`` has stock left (vacuously true when empty)."""
        return all(item.remaining == 0 for item in self.items_in(category))

    def list_available(self, category: Category) -> list[MenuItem]:
        """Items of ``category`` with stock left, in catalog order."""
        return [item for item in self.items_in(category) if item.remaining > 0]

    def commit(self, item: MenuItem, quantity: int) -> None:
        """Move ``quantity`` units of ``item`` from remaining stock to sold."""
        if not (0 < quantity <= item.remaining):
            raise ValueError(
                f"cannot commit {quantity} x {item.name!r}: {item.remaining} remaining"
            )
        item.remaining -= quantity
        item.sold += quantity
        logger.debug("commit item=%r qty=%d remaining=%d sold=%d", item.name, quantity, item.remaining, item.sold)

    def stock_is_conserved(self) -> bool:
        return all(item.remaining + item.sold == item.initial_stock for item in self._items)

    def total_sold(self) -> int:
        return sum(item.sold for item in self._items)

    def best_seller(self) -> MenuItem | None:
        """Item with the highest sold count; earliest in catalog order wins ties.

        Returns None when nothing has been sold.
        """
        best: MenuItem | None = None
        for item in self._items:
            if item.sold > 0 and (best is None or item.sold > best.sold):
                best = item
        return best
