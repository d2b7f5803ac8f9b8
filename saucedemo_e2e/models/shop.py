# models/shop.py
from dataclasses import dataclass, field
from typing import Tuple

PRICE_TOLERANCE = 0.01


@dataclass(frozen=True)
class Product:
    name: str
    description: str
    price: float
    price_text: str


@dataclass(frozen=True)
class CartItem:
    name: str
    description: str
    price: float
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


@dataclass(frozen=True)
class OrderSummary:
    items: Tuple[CartItem, ...] = field(default_factory=tuple)
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0

    @property
    def expected_subtotal(self) -> float:
        return sum(item.line_total for item in self.items)

    def calculations_valid(self, tolerance: float = PRICE_TOLERANCE) -> bool:
        # total == subtotal + tax and subtotal == sum(price * qty)
        subtotal_ok = abs(self.subtotal - self.expected_subtotal) < tolerance
        total_ok = abs(self.total - (self.subtotal + self.tax)) < tolerance
        return subtotal_ok and total_ok
