from __future__ import annotations

import pytest

from stall_order.constant import MENU_ENTRIES
from stall_order.data import (
    CATALOG,
    CATALOG_BY_ID,
    build_catalog,
    category_label,
    default_pending_quantities,
    entries_for_category,
)
from stall_order.models import CATEGORIES

from tests.conftest import RAW_MENU


def test_shipped_catalog_loads_every_row():
    assert len(CATALOG) == len(MENU_ENTRIES)
    assert len(CATALOG_BY_ID) == len(CATALOG)
    assert {entry.category for entry in CATALOG} == set(CATEGORIES)
    assert all(entry.price >= 0 for entry in CATALOG)


def test_build_catalog_keeps_order_and_fields():
    catalog = build_catalog(RAW_MENU)

    assert [entry.entry_id for entry in catalog] == ["nasi", "mie", "teh"]
    assert catalog[0].name == "Nasi Goreng"
    assert catalog[0].price == 15000
    assert catalog[0].image == "nasi.jpg"


def test_entries_for_category_filters_in_catalog_order():
    catalog = build_catalog(RAW_MENU)

    assert [e.entry_id for e in entries_for_category("food", catalog)] == ["nasi", "mie"]
    assert [e.entry_id for e in entries_for_category("drink", catalog)] == ["teh"]


def test_default_pending_quantities_are_one():
    catalog = build_catalog(RAW_MENU)

    assert default_pending_quantities(catalog) == {"nasi": 1, "mie": 1, "teh": 1}


def test_category_label():
    assert category_label("food") == "Food"
    assert category_label("drink") == "Drinks"


@pytest.mark.parametrize(
    "bad_row, message",
    [
        ({"id": "nasi", "name": "Again", "price": 1, "category": "food", "image": ""}, "Duplicate"),
        ({"id": "x", "name": "X", "price": -5, "category": "food", "image": ""}, "non-negative"),
        ({"id": "x", "name": "X", "price": "100", "category": "food", "image": ""}, "non-negative"),
        ({"id": "x", "name": "X", "price": 100, "category": "dessert", "image": ""}, "unknown category"),
    ],
)
def test_build_catalog_rejects_malformed_rows(bad_row, message):
    with pytest.raises(ValueError, match=message):
        build_catalog([RAW_MENU[0], bad_row])


@pytest.mark.parametrize("key", ["id", "name", "price", "category", "image"])
def test_build_catalog_rejects_rows_missing_a_field(key):
    row = {k: v for k, v in RAW_MENU[1].items() if k != key}

    with pytest.raises(ValueError, match=f"missing {key}"):
        build_catalog([RAW_MENU[0], row])
