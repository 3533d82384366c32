"""Cart and pending-quantity transitions.

Every function takes an ``OrderState`` and returns the resulting state without
mutating its argument. When a transition changes nothing, the argument itself
is returned. While a confirmation gate is open (``state.awaiting``), cart and
pending-quantity transitions leave the state untouched.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from stall_order.data import CATALOG, default_pending_quantities, entries_for_category
from stall_order.models import CATEGORIES, CartLine, MenuEntry, OrderState


def new_order_state(catalog: Iterable[MenuEntry] = CATALOG) -> OrderState:
    """Fresh state: empty cart, pending quantity 1 for every entry."""
    return OrderState(pending=default_pending_quantities(catalog))


def _with_line(state: OrderState, line: CartLine) -> OrderState:
    lines = dict(state.lines)
    lines[line.entry_id] = line
    return replace(state, lines=lines)


def add_to_cart(state: OrderState, entry: MenuEntry, quantity: int) -> OrderState:
    """Add ``quantity`` units of ``entry``; quantities below 1 are ignored."""
    if state.awaiting is not None or quantity < 1:
        return state

    existing = state.lines.get(entry.entry_id)
    if existing is not None:
        return _with_line(state, replace(existing, quantity=existing.quantity + quantity))

    return _with_line(
        state,
        CartLine(
            entry_id=entry.entry_id,
            name=entry.name,
            price=entry.price,
            image=entry.image,
            quantity=quantity,
        ),
    )


def add_pending_to_cart(state: OrderState, entry: MenuEntry) -> OrderState:
    """Add ``entry`` with the quantity currently chosen on the menu."""
    return add_to_cart(state, entry, state.pending.get(entry.entry_id, 1))


def remove_from_cart(state: OrderState, entry_id: str) -> OrderState:
    if state.awaiting is not None or entry_id not in state.lines:
        return state
    lines = {key: line for key, line in state.lines.items() if key != entry_id}
    return replace(state, lines=lines)


def set_quantity_direct(state: OrderState, entry_id: str, value: int) -> OrderState:
    """Store a typed line quantity, flooring anything below 1 to 1."""
    line = state.lines.get(entry_id)
    if state.awaiting is not None or line is None:
        return state
    quantity = max(1, value)
    if quantity == line.quantity:
        return state
    return _with_line(state, replace(line, quantity=quantity))


def increment_cart_item(state: OrderState, entry_id: str) -> OrderState:
    line = state.lines.get(entry_id)
    if line is None:
        return state
    return set_quantity_direct(state, entry_id, line.quantity + 1)


def decrement_cart_item(state: OrderState, entry_id: str) -> OrderState:
    """Lower a line by one unit; a line at 1 stays at 1 and is not removed."""
    line = state.lines.get(entry_id)
    if line is None:
        return state
    return set_quantity_direct(state, entry_id, line.quantity - 1)


def total_cost(state: OrderState) -> int:
    return sum(line.price * line.quantity for line in state.lines.values())


def total_line_count(state: OrderState) -> int:
    """Number of portions in the cart (sum of quantities)."""
    return sum(line.quantity for line in state.lines.values())


def set_pending_quantity(state: OrderState, entry_id: str, value: int) -> OrderState:
    """Store a menu stepper value, flooring to 1. Unknown ids are ignored."""
    if state.awaiting is not None or entry_id not in state.pending:
        return state
    quantity = max(1, value)
    if state.pending[entry_id] == quantity:
        return state
    pending = dict(state.pending)
    pending[entry_id] = quantity
    return replace(state, pending=pending)


def increment_pending(state: OrderState, entry_id: str) -> OrderState:
    return set_pending_quantity(state, entry_id, state.pending.get(entry_id, 1) + 1)


def decrement_pending(state: OrderState, entry_id: str) -> OrderState:
    return set_pending_quantity(state, entry_id, state.pending.get(entry_id, 1) - 1)


def clear_order(state: OrderState) -> OrderState:
    """Empty the cart, reset every pending quantity to 1, close the detail view."""
    return replace(
        state,
        lines={},
        pending={entry_id: 1 for entry_id in state.pending},
        show_details=False,
    )


def select_tab(state: OrderState, category: str) -> OrderState:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category!r}")
    if state.active_tab == category:
        return state
    return replace(state, active_tab=category)


def toggle_details(state: OrderState) -> OrderState:
    return replace(state, show_details=not state.show_details)


def close_details(state: OrderState) -> OrderState:
    if not state.show_details:
        return state
    return replace(state, show_details=False)


def visible_entries(state: OrderState, catalog: Iterable[MenuEntry] = CATALOG) -> list[MenuEntry]:
    """Catalog entries on the active tab, in catalog order."""
    return entries_for_category(state.active_tab, catalog)
