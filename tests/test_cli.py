"""Tests for the typer CLI and the interactive shell."""

import pytest
from typer.testing import CliRunner

from stockpot.__main__ import SAMPLE_CATALOG, app, run_shell_line, seed_sample_catalog
from stockpot.inventory import InventoryManager

runner = CliRunner()


@pytest.fixture
def inventory():
    return InventoryManager()


def test_discounts_command():
    result = runner.invoke(app, ["discounts"])
    assert result.exit_code == 0
    assert "Student" in result.output
    assert "Bulk" in result.output


def test_demo_command():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert "Sale Complete" in result.output
    assert "Inventory Statistics" in result.output


def test_shell_session():
    script = "\n".join([
        'add B001 "Test Book" Book 20 10',
        "sell B001 2 student",
        "value",
        "quit",
    ]) + "\n"
    result = runner.invoke(app, ["shell"], input=script)
    assert result.exit_code == 0
    assert "$36.00" in result.output
    assert "$160.00" in result.output


def test_shell_exits_on_eof():
    result = runner.invoke(app, ["shell"], input="help\n")
    assert result.exit_code == 0
    assert "Commands:" in result.output


# --- run_shell_line ---

def test_seed_sample_catalog(inventory):
    seed_sample_catalog(inventory)
    assert inventory.count() == len(SAMPLE_CATALOG)


def test_shell_add_and_sell(inventory):
    assert run_shell_line(inventory, 'add E001 "Laptop" Electronics 100 10') is True
    run_shell_line(inventory, "sell E001 5 BULK")
    assert inventory.get_product("E001").quantity == 5


def test_shell_sell_by_name(inventory):
    run_shell_line(inventory, 'add B001 "Clean Code" Book 40 4')
    run_shell_line(inventory, 'sell-name "clean code" 1')
    assert inventory.get_product("B001").quantity == 3


def test_shell_stock(inventory):
    run_shell_line(inventory, "add B001 Book Book 40 4")
    run_shell_line(inventory, "stock B001 6")
    assert inventory.get_product("B001").quantity == 10


def test_shell_rejects_bad_numbers(inventory):
    run_shell_line(inventory, "add B001 Book Book 40 four")
    assert inventory.count() == 0


def test_shell_unknown_category_does_not_raise(inventory):
    assert run_shell_line(inventory, "category Toys") is True


def test_shell_unknown_command(inventory):
    assert run_shell_line(inventory, "frobnicate") is True


def test_shell_unbalanced_quotes(inventory):
    assert run_shell_line(inventory, 'find "oops') is True


@pytest.mark.parametrize("line", ["quit", "exit", "QUIT"])
def test_shell_quit(inventory, line):
    assert run_shell_line(inventory, line) is False


def test_demo_threshold_applies_to_table_and_stats(monkeypatch):
    import stockpot.__main__ as cli

    seen = []
    real_render = cli.render_inventory

    def spy(products, console, **kwargs):
        seen.append(kwargs.get("low_stock_threshold"))
        real_render(products, console, **kwargs)

    monkeypatch.setattr(cli, "render_inventory", spy)
    result = runner.invoke(app, ["demo", "--threshold", "1"])
    assert result.exit_code == 0
    assert seen == [1]
    assert "(<= 1)" in result.output


def test_shell_unknown_category_shows_empty_listing(inventory):
    run_shell_line(inventory, "add B001 Book Book 40 4")
    assert run_shell_line(inventory, "category Toys") is True
    assert inventory.list_by_category("Toys") == []
