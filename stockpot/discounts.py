"""Discount calculator.

Maps (product, quantity, discount kind) to a DiscountResult. Pure: nothing is
stored and the product is never modified.
"""

from __future__ import annotations

from decimal import Decimal

from stockpot.errors import InvalidArgument
from stockpot.models import Category, DiscountKind, DiscountResult, Product

STUDENT_RATE = Decimal("0.10")
BULK_RATE = Decimal("0.15")
BULK_MIN_QUANTITY = 5

_ZERO = Decimal("0")

# Human-readable rule summaries, shown by `stockpot discounts`.
RULES: dict[DiscountKind, str] = {
    DiscountKind.STUDENT: "10% off books",
    DiscountKind.BULK: f"15% off when buying {BULK_MIN_QUANTITY}+ items",
    DiscountKind.NONE: "No discount",
}


def available_discount_kinds() -> list[DiscountKind]:
    """All discount kinds, in display order."""
    return list(DiscountKind)


def is_valid_discount_kind(kind: DiscountKind | str | None) -> bool:
    """True when `kind` names a known discount kind (case-insensitive)."""
    try:
        DiscountKind.parse(kind, strict=True)
    except InvalidArgument:
        return False
    return True


def calculate_discount(
    product: Product,
    quantity: int,
    kind: DiscountKind | str | None,
    strict: bool = False,
) -> DiscountResult:
    """Compute the discount for selling `quantity` units of `product`.

    String kinds are matched case-insensitively; unknown strings mean no
    discount unless `strict` is set (then InvalidArgument is raised).
    """
    kind = DiscountKind.parse(kind, strict=strict)
    subtotal = product.price * quantity

    if kind is DiscountKind.STUDENT:
        if product.category is Category.BOOK:
            return DiscountResult(subtotal * STUDENT_RATE, "Student discount: 10% off books")
        return DiscountResult(_ZERO, "Student discount only applies to books")

    if kind is DiscountKind.BULK:
        if quantity >= BULK_MIN_QUANTITY:
            return DiscountResult(
                subtotal * BULK_RATE,
                f"Bulk discount: 15% off for {BULK_MIN_QUANTITY}+ items",
            )
        return DiscountResult(_ZERO, f"Bulk discount requires {BULK_MIN_QUANTITY}+ items")

    return DiscountResult(_ZERO, "No discount applied")


def final_price(product: Product, quantity: int, kind: DiscountKind | str | None) -> Decimal:
    """Price × quantity minus the applicable discount."""
    return product.price * quantity - calculate_discount(product, quantity, kind).amount
