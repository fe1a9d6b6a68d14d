"""Product factory: validates category rules before building a Product."""

from __future__ import annotations

from decimal import Decimal

from stockpot.errors import InvalidArgument
from stockpot.models import Category, Product, to_decimal

# Lowest accepted unit price per category (inclusive).
_MINIMUM_PRICES: dict[Category, Decimal] = {
    Category.BOOK: Decimal("5.00"),
    Category.ELECTRONICS: Decimal("10.00"),
}


def minimum_price(category: Category | str) -> Decimal:
    """Return the lowest unit price a product of `category` may have."""
    return _MINIMUM_PRICES[Category.parse(category)]


def create_product(
    identifier: str,
    name: str,
    category: Category | str,
    price,
    quantity: int,
) -> Product:
    """Build a Product after checking the category's minimum price.

    Args:
        identifier: Unique product id (e.g., "B001").
        name: Display name.
        category: Category enum or its name, matched case-insensitively.
        price: Unit price; anything Decimal(str(price)) accepts.
        quantity: Units on hand.

    Returns:
        The new Product.  No shared state is touched.

    Raises:
        InvalidArgument: unknown category, price below the category minimum,
            or negative price/quantity.
    """
    cat = Category.parse(category)
    amount = to_decimal(price)
    floor = _MINIMUM_PRICES[cat]
    if amount < floor:
        raise InvalidArgument(f"{cat.value} price must be at least ${floor}")
    return Product(identifier, name, cat, amount, quantity)
