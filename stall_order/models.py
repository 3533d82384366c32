"""Domain models for stall-order."""

from __future__ import annotations

from dataclasses import dataclass, field

CATEGORIES: tuple[str, ...] = ("food", "drink")


@dataclass(frozen=True)
class MenuEntry:
    """A purchasable menu entry."""

    entry_id: str
    name: str
    price: int
    category: str
    image: str


@dataclass(frozen=True)
class CartLine:
    """A cart row with display fields copied from the entry when it was added."""

    entry_id: str
    name: str
    price: int
    image: str
    quantity: int

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity


@dataclass(frozen=True)
class OrderState:
    """Everything the ordering screen can change, owned by the caller.

    ``lines`` is keyed by entry id and kept in insertion order. ``pending``
    holds the quantity chosen on the menu before adding. ``awaiting`` names the
    confirmation gate currently open, if any.
    """

    lines: dict[str, CartLine] = field(default_factory=dict)
    pending: dict[str, int] = field(default_factory=dict)
    active_tab: str = CATEGORIES[0]
    show_details: bool = False
    awaiting: str | None = None
