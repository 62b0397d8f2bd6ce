"""Domain models for the café till."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class Category(str, Enum):
    """Closed set of menu categories, in menu display order."""

    BEVERAGES = "Beverages"
    SNACKS = "Snacks"
    MEALS = "Meals"
    DESSERTS = "Desserts"


class DineOption(str, Enum):
    EAT_IN = "Eat-In"
    TAKE_OUT = "Take-Out"


@dataclass
class MenuItem:
    """A sellable item with live stock.

    ``remaining + sold == initial_stock`` holds for the whole run; only
    ``Catalog.commit`` moves units from ``remaining`` to ``sold``.
    """

    name: str
    price: Decimal
    category: Category
    remaining: int
    sold: int = 0
    initial_stock: int = field(init=False)

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be non-negative: {self.name}")
        if self.remaining < 0 or self.sold < 0:
            raise ValueError(f"stock counters must be non-negative: {self.name}")
        self.initial_stock = self.remaining + self.sold


@dataclass(frozen=True)
class OrderLine:
    """A committed quantity of one catalog item.

    Holds the item's catalog index plus a snapshot of its name and price
    taken when the quantity was committed.
    """

    item_index: int
    name: str
    unit_price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass
class Order:
    """One customer's accumulating order."""

    customer_name: str
    dine_option: DineOption
    lines: list[OrderLine] = field(default_factory=list)
    receipt_number: int | None = None
    created_at: datetime = field(default_factory=datetime.now)

    def add_line(self, line: OrderLine) -> None:
        self.lines.append(line)

    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal("0.00"))

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class DaySummary:
    """End-of-day aggregate over finalized orders and the final catalog."""

    customers_served: int
    total_revenue: Decimal
    total_items_sold: int
    best_seller: MenuItem | None
    inventory: list[MenuItem]
