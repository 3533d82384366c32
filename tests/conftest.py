from __future__ import annotations

import pytest

from stall_order.cart import new_order_state
from stall_order.data import build_catalog
from stall_order.models import MenuEntry, OrderState

RAW_MENU = [
    {"id": "nasi", "name": "Nasi Goreng", "price": 15000, "category": "food", "image": "nasi.jpg"},
    {"id": "mie", "name": "Mie Goreng", "price": 10000, "category": "food", "image": "mie.jpg"},
    {"id": "teh", "name": "Es Teh", "price": 4000, "category": "drink", "image": "teh.jpg"},
]


@pytest.fixture()
def catalog() -> tuple[MenuEntry, ...]:
    return build_catalog(RAW_MENU)


@pytest.fixture()
def entries(catalog: tuple[MenuEntry, ...]) -> dict[str, MenuEntry]:
    return {entry.entry_id: entry for entry in catalog}


@pytest.fixture()
def state(catalog: tuple[MenuEntry, ...]) -> OrderState:
    return new_order_state(catalog)
