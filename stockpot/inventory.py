"""Inventory manager, owner of the product collection.

Every mutation of a stocked Product goes through this class. Validation
errors from the factory are caught here and turned into failed Outcomes;
operational failures (unknown product, not enough stock) are never raised.

Data flow for a sale:
1. Resolve the product by id or name
2. Check quantity against stock
3. Compute the discount (stockpot.discounts)
4. Decrement stock and build the receipt
"""

from __future__ import annotations

import logging
import threading
from decimal import Decimal
from typing import Optional

from stockpot.config import Settings
from stockpot.discounts import calculate_discount
from stockpot.errors import InvalidArgument
from stockpot.factory import create_product
from stockpot.models import (
    Category,
    DiscountKind,
    InventoryStats,
    LookupKey,
    Outcome,
    Product,
    SaleOutcome,
    SaleReceipt,
    is_whole_number,
)

LOGGER = logging.getLogger(__name__)


class InventoryManager:
    """In-memory product inventory keyed by product id.

    One lock per instance guards the collection, so an instance shared across
    threads still keeps quantities non-negative.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self._products: dict[str, Product] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_product(
        self,
        identifier: str,
        name: str,
        category: Category | str,
        price,
        quantity: int,
    ) -> Outcome:
        """Create a product through the factory and store it.

        An existing product with the same id is replaced. Validation errors
        leave the inventory unchanged and come back as a failed Outcome.
        """
        try:
            product = create_product(identifier, name, category, price, quantity)
        except InvalidArgument as e:
            LOGGER.info("Error adding product %s: %s", identifier, e)
            return Outcome(ok=False, message=f"Error adding product: {e}")

        with self._lock:
            replaced = identifier in self._products
            self._products[identifier] = product

        if replaced:
            LOGGER.info("Product replaced: %s", product)
        else:
            LOGGER.info("Product added: %s", product)
        return Outcome(ok=True, message=f"Product added successfully: {product}", product=product)

    def sell(
        self,
        key: str,
        quantity: int,
        discount_kind: DiscountKind | str | None = DiscountKind.NONE,
        by: LookupKey = LookupKey.ID,
    ) -> SaleOutcome:
        """Sell `quantity` units of the product identified by `key`.

        Args:
            key: Product id, or product name when by=LookupKey.NAME.
            quantity: Units to sell; must be positive and at most the stock.
            discount_kind: Student, Bulk or None (case-insensitive).
            by: Whether `key` is an id or a name.

        Returns:
            SaleOutcome with a SaleReceipt on success. Failures leave the
            stock untouched.
        """
        with self._lock:
            product = self._resolve(key, by)
            if product is None:
                return self._sale_failure(f"Product not found: {key}")
            if not is_whole_number(quantity) or quantity <= 0:
                return self._sale_failure(f"Invalid quantity for {product.id}: {quantity}", product)
            if not product.in_stock or product.quantity < quantity:
                return self._sale_failure(
                    f"Insufficient stock for product: {product.id}. "
                    f"Available: {product.quantity}",
                    product,
                )

            try:
                discount = calculate_discount(
                    product, quantity, discount_kind,
                    strict=self.settings.strict_discounts,
                )
            except InvalidArgument as e:
                return self._sale_failure(str(e), product)

            original_total = product.price * quantity
            final_total = original_total - discount.amount
            product.sell(quantity)

            receipt = SaleReceipt(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                unit_price=product.price,
                original_total=original_total,
                discount=discount,
                final_total=final_total,
                remaining_stock=product.quantity,
            )

        LOGGER.info(
            "Sale completed: %s x%d, total %.2f (discount %.2f)",
            product.id, quantity, final_total, discount.amount,
        )
        return SaleOutcome(
            ok=True,
            message=f"Sale completed: {product.name} x{quantity}",
            product=product,
            receipt=receipt,
        )

    def sell_by_name(
        self,
        name: str,
        quantity: int,
        discount_kind: DiscountKind | str | None = DiscountKind.NONE,
    ) -> SaleOutcome:
        """Sell by case-insensitive product name."""
        return self.sell(name, quantity, discount_kind, by=LookupKey.NAME)

    def add_stock(self, key: str, quantity: int, by: LookupKey = LookupKey.ID) -> Outcome:
        """Restock a product. Non-positive or fractional increments are refused."""
        with self._lock:
            product = self._resolve(key, by)
            if product is None:
                LOGGER.info("Product not found: %s", key)
                return Outcome(ok=False, message=f"Product not found: {key}")
            if not product.add_stock(quantity):
                LOGGER.info("Refused stock increment of %s for %s", quantity, product.id)
                return Outcome(
                    ok=False,
                    message=f"Stock increment must be a positive whole number, got {quantity}",
                    product=product,
                )
            new_stock = product.quantity

        LOGGER.info("Added %d items to %s, new stock %d", quantity, product.id, new_stock)
        return Outcome(
            ok=True,
            message=f"Added {quantity} items to {product.name}. New stock: {new_stock}",
            product=product,
        )

    def add_stock_by_name(self, name: str, quantity: int) -> Outcome:
        """Restock by case-insensitive product name."""
        return self.add_stock(name, quantity, by=LookupKey.NAME)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, identifier: str) -> Optional[Product]:
        with self._lock:
            return self._products.get(identifier)

    def find_by_name(self, name: str) -> Optional[Product]:
        """First product whose name equals `name`, ignoring case."""
        with self._lock:
            return self._find_by_name(name)

    def products(self) -> list[Product]:
        """All products in insertion order."""
        with self._lock:
            return list(self._products.values())

    def list_low_stock(self, threshold: Optional[int] = None) -> list[Product]:
        """Products with quantity <= threshold (settings default when None)."""
        with self._lock:
            return self._low_stock(self._threshold(threshold))

    def list_by_category(self, category: Category | str) -> list[Product]:
        """Products of `category`; an unknown category matches nothing."""
        try:
            cat = Category.parse(category)
        except InvalidArgument as e:
            LOGGER.info("%s", e)
            return []
        with self._lock:
            return [p for p in self._products.values() if p.category is cat]

    def total_value(self) -> Decimal:
        """Sum of price × quantity over every product."""
        with self._lock:
            return self._total_value()

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._products

    def statistics(self, threshold: Optional[int] = None) -> InventoryStats:
        """Snapshot of count, total value and low-stock products."""
        limit = self._threshold(threshold)
        with self._lock:
            return InventoryStats(
                product_count=len(self._products),
                total_value=self._total_value(),
                low_stock_threshold=limit,
                low_stock=self._low_stock(limit),
            )

    # ------------------------------------------------------------------
    # Internal helpers (caller holds the lock)
    # ------------------------------------------------------------------

    def _resolve(self, key: str, by: LookupKey) -> Optional[Product]:
        if LookupKey(by) is LookupKey.NAME:
            return self._find_by_name(key)
        return self._products.get(key)

    def _find_by_name(self, name: str) -> Optional[Product]:
        wanted = name.casefold()
        for product in self._products.values():
            if product.name.casefold() == wanted:
                return product
        return None

    def _low_stock(self, threshold: int) -> list[Product]:
        return [p for p in self._products.values() if p.quantity <= threshold]

    def _total_value(self) -> Decimal:
        return sum((p.value for p in self._products.values()), Decimal("0"))

    def _threshold(self, threshold: Optional[int]) -> int:
        return self.settings.low_stock_threshold if threshold is None else threshold

    @staticmethod
    def _sale_failure(message: str, product: Optional[Product] = None) -> SaleOutcome:
        LOGGER.info("%s", message)
        return SaleOutcome(ok=False, message=message, product=product)
