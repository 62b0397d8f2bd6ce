"""Editable static catalog configuration."""

from __future__ import annotations

# Category display order; menu choice N selects CATEGORY_ORDER[N - 1].
CATEGORY_ORDER: list[str] = ["Beverages", "Snacks", "Meals", "Desserts"]

OPENING_STOCK = 20

# (name, price, category) in catalog order. Catalog order breaks best-seller ties.
MENU_ROWS: list[tuple[str, str, str]] = [
    ("Cappuccino", "140.00", "Beverages"),
    ("Latte", "150.00", "Beverages"),
    ("Iced Americano", "120.00", "Beverages"),
    ("Chocolate Milkshake", "190.00", "Beverages"),
    ("Blueberry Muffin", "75.00", "Snacks"),
    ("Garlic Parmesan Toast", "95.00", "Snacks"),
    ("Glazed Donut Holes", "100.00", "Snacks"),
    ("Chicken Wrap", "180.00", "Meals"),
    ("Garlic Rice + Burger", "220.00", "Meals"),
    ("Chicken Alfredo Pasta", "275.00", "Meals"),
    ("Chocolate Cake Slice", "130.00", "Desserts"),
    ("Fruit Parfait", "110.00", "Desserts"),
    ("Tiramisu", "270.00", "Desserts"),
]

# Per-item opening stock overrides; items not listed start at OPENING_STOCK.
STOCK_OVERRIDES: dict[str, int] = {}
