"""Tests for the discount calculator."""

from decimal import Decimal

import pytest

from stockpot.discounts import (
    available_discount_kinds,
    calculate_discount,
    final_price,
    is_valid_discount_kind,
)
from stockpot.errors import InvalidArgument
from stockpot.models import DiscountKind, Product


@pytest.fixture
def book():
    return Product("B001", "Test Book", "Book", "20.00", 10)


@pytest.fixture
def laptop():
    return Product("E001", "Test Laptop", "Electronics", "500.00", 5)


# --- Student ---

def test_student_discount_on_books(book):
    result = calculate_discount(book, 2, "STUDENT")
    assert result.amount == Decimal("4.00")
    assert "Student discount" in result.description


def test_student_discount_not_for_electronics(laptop):
    result = calculate_discount(laptop, 1, DiscountKind.STUDENT)
    assert result.amount == 0
    assert "only applies to books" in result.description


def test_student_discount_ignores_quantity_for_electronics(laptop):
    assert calculate_discount(laptop, 5, "Student").amount == 0


@pytest.mark.parametrize("kind", ["student", "STUDENT", "StUdEnT"])
def test_discount_kind_case_insensitive(book, kind):
    assert calculate_discount(book, 2, kind).amount == Decimal("4.00")


# --- Bulk ---

def test_bulk_discount_exactly_five():
    p = Product("P004", "Test Product", "Electronics", "100.00", 10)
    assert calculate_discount(p, 5, "BULK").amount == Decimal("75.00")


def test_bulk_discount_more_than_five():
    p = Product("P005", "Test Product", "Book", "15.00", 20)
    result = calculate_discount(p, 10, "Bulk")
    assert result.amount == Decimal("22.50")
    assert "15%" in result.description


def test_no_bulk_discount_below_five(book):
    result = calculate_discount(book, 4, "BULK")
    assert result.amount == 0
    assert "requires 5+ items" in result.description


# --- None / unknown ---

def test_no_discount(book):
    result = calculate_discount(book, 5, "NONE")
    assert result.amount == 0
    assert result.description == "No discount applied"


def test_unknown_kind_means_no_discount(book):
    result = calculate_discount(book, 5, "coupon")
    assert result.amount == 0
    assert result.description == "No discount applied"


def test_unknown_kind_strict(book):
    with pytest.raises(InvalidArgument):
        calculate_discount(book, 5, "coupon", strict=True)


def test_calculation_does_not_touch_stock(book):
    calculate_discount(book, 5, "Bulk")
    assert book.quantity == 10


def test_final_price(book):
    assert final_price(book, 2, "Student") == Decimal("36.00")
    assert final_price(book, 2, "None") == Decimal("40.00")


def test_available_discount_kinds():
    assert available_discount_kinds() == [DiscountKind.STUDENT, DiscountKind.BULK, DiscountKind.NONE]


@pytest.mark.parametrize("kind", ["student", "BULK", "None", DiscountKind.STUDENT])
def test_is_valid_discount_kind(kind):
    assert is_valid_discount_kind(kind) is True


def test_is_valid_discount_kind_rejects_unknown():
    assert is_valid_discount_kind("coupon") is False
