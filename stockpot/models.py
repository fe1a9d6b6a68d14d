"""Data models for stockpot.

Category / DiscountKind / LookupKey enums, the Product entity and the value
objects that flow through factory → discounts → inventory → report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from stockpot.config import DEFAULT_LOW_STOCK_THRESHOLD
from stockpot.errors import InvalidArgument

LOGGER = logging.getLogger(__name__)


def to_decimal(value) -> Decimal:
    """Convert a price-like value to Decimal through its string form.

    Going through str() keeps 19.99 as Decimal('19.99') rather than the
    binary float expansion.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise InvalidArgument(f"Invalid price: {value!r}") from e
    if not amount.is_finite():
        raise InvalidArgument(f"Invalid price: {value!r}")
    return amount


def is_whole_number(value) -> bool:
    """True for ints; bools and floats such as 2.0 do not count."""
    return isinstance(value, int) and not isinstance(value, bool)


class Category(str, Enum):
    """Product classification."""

    BOOK = "Book"
    ELECTRONICS = "Electronics"

    @classmethod
    def parse(cls, value: str | Category) -> Category:
        """Resolve a category case-insensitively ('BOOK', 'book', 'Book')."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        raise InvalidArgument(f"Invalid product type: {value}")


class DiscountKind(str, Enum):
    """Discount rule applied to a sale."""

    STUDENT = "Student"
    BULK = "Bulk"
    NONE = "None"

    @classmethod
    def parse(cls, value: str | DiscountKind | None, strict: bool = False) -> DiscountKind:
        """Resolve a discount kind case-insensitively.

        Unrecognized kinds fall back to NONE, unless strict is set, in which
        case they raise InvalidArgument.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        key = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        if strict:
            raise InvalidArgument(f"Unknown discount kind: {value}")
        LOGGER.warning("Unknown discount kind %r, applying no discount", value)
        return cls.NONE


class LookupKey(str, Enum):
    """How an inventory operation resolves its product."""

    ID = "id"
    NAME = "name"


class Product:
    """A stocked item.

    Price and quantity can never be negative: the constructor rejects them
    and the stock primitives refuse any change that would break that.
    """

    def __init__(
        self,
        id: str,
        name: str,
        category: Category | str,
        price,
        quantity: int,
    ) -> None:
        price = to_decimal(price)
        if price < 0:
            raise InvalidArgument("Price cannot be negative")
        if not is_whole_number(quantity):
            raise InvalidArgument("Quantity must be a whole number")
        if quantity < 0:
            raise InvalidArgument("Quantity cannot be negative")
        self.id = id
        self.name = name
        self.category = Category.parse(category)
        self.price = price
        self.quantity = quantity

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    @property
    def value(self) -> Decimal:
        """Stock value: price × quantity on hand."""
        return self.price * self.quantity

    def sell(self, amount: int) -> bool:
        """Remove `amount` units. Returns False (no change) if not possible."""
        if not is_whole_number(amount) or amount <= 0 or amount > self.quantity:
            return False
        self.quantity -= amount
        return True

    def add_stock(self, amount: int) -> bool:
        """Add `amount` units. Non-positive increments are refused."""
        if not is_whole_number(amount) or amount <= 0:
            return False
        self.quantity += amount
        return True

    def __repr__(self) -> str:
        return (
            f"Product(id={self.id!r}, name={self.name!r}, "
            f"category={self.category.value!r}, price={self.price:.2f}, "
            f"quantity={self.quantity})"
        )

    __str__ = __repr__


@dataclass(frozen=True)
class DiscountResult:
    """Discount computed for one sale line."""

    amount: Decimal
    description: str


@dataclass(frozen=True)
class SaleReceipt:
    """Everything a completed sale reports back."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    original_total: Decimal
    discount: DiscountResult
    final_total: Decimal
    remaining_stock: int

    @property
    def discount_amount(self) -> Decimal:
        return self.discount.amount

    @property
    def description(self) -> str:
        return self.discount.description


@dataclass
class Outcome:
    """Result of an inventory operation that may fail softly."""

    ok: bool
    message: str
    product: Optional[Product] = None

    def __bool__(self) -> bool:
        return self.ok


@dataclass
class SaleOutcome(Outcome):
    """Outcome of a sale; carries the receipt when the sale went through."""

    receipt: Optional[SaleReceipt] = None


@dataclass
class InventoryStats:
    """Aggregate view of an inventory at one point in time."""

    product_count: int = 0
    total_value: Decimal = Decimal("0")
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    low_stock: list[Product] = field(default_factory=list)
