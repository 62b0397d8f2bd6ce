"""Static menu data and catalog construction."""

from __future__ import annotations

from decimal import Decimal

from cafe.catalog import Catalog
from cafe.constant import CATEGORY_ORDER, MENU_ROWS, OPENING_STOCK, STOCK_OVERRIDES
from cafe.models import Category, MenuItem

# Menu choice -> category. Choice 0 is reserved for "finish order".
CATEGORY_BY_CHOICE: dict[int, Category] = {
    idx: Category(name) for idx, name in enumerate(CATEGORY_ORDER, start=1)
}


def build_catalog(opening_stock: int | None = None) -> Catalog:
    """Build a fresh catalog from the static menu rows.

    ``opening_stock`` replaces the default stock level for every item; it
    exists so a short shift can be simulated with scarce stock.
    """
    default_stock = OPENING_STOCK if opening_stock is None else opening_stock
    return Catalog(
        MenuItem(
            name=name,
            price=Decimal(price),
            category=Category(category),
            remaining=STOCK_OVERRIDES.get(name, default_stock),
        )
        for name, price, category in MENU_ROWS
    )
