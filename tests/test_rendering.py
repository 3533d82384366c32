from __future__ import annotations

import pytest

from stall_order.models import CartLine, MenuEntry
from stall_order.rendering import (
    format_cart_line,
    format_menu_row,
    format_rupiah,
    format_summary,
    format_tabs,
)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "Rp 0"),
        (500, "Rp 500"),
        (25000, "Rp 25.000"),
        (1234567, "Rp 1.234.567"),
        (-15000, "-Rp 15.000"),
    ],
)
def test_format_rupiah(amount, expected):
    assert format_rupiah(amount) == expected


def test_menu_row_marks_selection():
    entry = MenuEntry(entry_id="nasi", name="Nasi Goreng", price=15000, category="food", image="")

    selected = format_menu_row(entry, 3, True).plain
    plain = format_menu_row(entry, 3, False).plain

    assert selected.startswith("➤ Nasi Goreng")
    assert plain.startswith("  Nasi Goreng")
    assert "Rp 15.000" in selected
    assert " 3 " in selected


def test_cart_line_shows_subtotal_and_unit_price():
    line = CartLine(entry_id="teh", name="Es Teh", price=4000, image="", quantity=3)

    text = format_cart_line(line, False).plain

    assert "Rp 12.000" in text
    assert "Rp 4.000 / portion" in text


def test_summary_badge_only_when_cart_has_portions():
    assert format_summary(0, 0).plain == "Total: Rp 0"
    assert format_summary(25000, 2).plain == "Total: Rp 25.000   2 "


def test_tabs_list_every_category():
    text = format_tabs("drink", ("food", "drink")).plain

    assert "Food (F)" in text
    assert "Drinks (D)" in text
