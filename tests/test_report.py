"""Tests for rich rendering of inventory, statistics and receipts."""

from decimal import Decimal

import pytest
from rich.console import Console

from stockpot.inventory import InventoryManager
from stockpot.models import Category
from stockpot.report import (
    _CATEGORY_STYLES,
    fmt_money,
    render_inventory,
    render_receipt,
    render_statistics,
)


@pytest.fixture
def console():
    return Console(record=True, width=120)


@pytest.fixture
def inventory():
    inv = InventoryManager()
    inv.add_product("B001", "Test Book", "Book", 20.0, 10)
    inv.add_product("E001", "Phone", "Electronics", 300.0, 2)
    return inv


def test_fmt_money():
    assert fmt_money(Decimal("1234.5")) == "$1,234.50"
    assert fmt_money(Decimal("0")) == "$0.00"


def test_render_inventory(console, inventory):
    render_inventory(inventory.products(), console)
    text = console.export_text()
    assert "Test Book" in text
    assert "Electronics" in text
    assert "$600.00" in text


def test_render_empty_inventory(console):
    render_inventory([], console)
    assert "No products in inventory." in console.export_text()


def test_render_statistics(console, inventory):
    render_statistics(inventory.statistics(), console)
    text = console.export_text()
    assert "$800.00" in text
    assert "Items needing restock:" in text
    assert "Phone (Stock: 2)" in text


def test_render_receipt(console, inventory):
    outcome = inventory.sell("B001", 2, "Student")
    render_receipt(outcome.receipt, console)
    text = console.export_text()
    assert "$36.00" in text
    assert "Student discount: 10% off books" in text


def test_every_category_has_a_style():
    assert set(_CATEGORY_STYLES) == set(Category)
