"""Confirmation gates for reset and checkout.

A gate is a two-step exchange: ``request_*`` returns a ``Prompt`` to show and
records the open gate on the state; ``resolve_*`` takes the user's decision and
returns the resulting state plus an optional acknowledgement to show. The
functions never wait on the user, so they can be driven from any surface.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from stall_order.cart import clear_order, total_cost
from stall_order.models import OrderState
from stall_order.rendering import format_rupiah

RESET = "reset"
CHECKOUT = "checkout"


class GateError(ValueError):
    """Raised when gates are requested or resolved out of order."""


@dataclass(frozen=True)
class Prompt:
    """A dialog to present. ``cancel_label`` is None for a one-button notice."""

    kind: str
    title: str
    message: str
    icon: str
    confirm_label: str
    cancel_label: str | None = None

    @property
    def is_acknowledgement(self) -> bool:
        return self.cancel_label is None


def _ensure_idle(state: OrderState, kind: str) -> None:
    if state.awaiting is not None:
        raise GateError(f"Cannot open {kind!r} gate while {state.awaiting!r} is pending")


def _open(state: OrderState, kind: str) -> OrderState:
    _ensure_idle(state, kind)
    return replace(state, awaiting=kind)


def _close(state: OrderState, kind: str) -> OrderState:
    if state.awaiting != kind:
        raise GateError(f"No {kind!r} gate is pending (awaiting={state.awaiting!r})")
    return replace(state, awaiting=None)


def request_reset(state: OrderState) -> tuple[OrderState, Prompt]:
    prompt = Prompt(
        kind=RESET,
        title="Are you sure?",
        message="The cart will be reset!",
        icon="warning",
        confirm_label="Yes, reset!",
        cancel_label="Cancel",
    )
    return _open(state, RESET), prompt


def resolve_reset(state: OrderState, confirmed: bool) -> tuple[OrderState, Prompt]:
    """Close the reset gate. Both outcomes end with an acknowledgement."""
    state = _close(state, RESET)
    if not confirmed:
        return state, Prompt(
            kind=RESET,
            title="Cancelled",
            message="The cart was left unchanged.",
            icon="info",
            confirm_label="OK",
        )
    return clear_order(state), Prompt(
        kind=RESET,
        title="Reset!",
        message="The cart has been reset.",
        icon="success",
        confirm_label="OK",
    )


def request_checkout(
    state: OrderState, format_price: Callable[[int], str] = format_rupiah
) -> tuple[OrderState, Prompt]:
    """Open the checkout gate, or return an info notice when the cart is empty.

    The empty-cart path opens no gate and returns ``state`` itself.
    """
    _ensure_idle(state, CHECKOUT)
    if not state.lines:
        return state, Prompt(
            kind=CHECKOUT,
            title="Cart is empty",
            message="Please add something from the menu first.",
            icon="info",
            confirm_label="OK",
        )

    prompt = Prompt(
        kind=CHECKOUT,
        title="Confirm checkout",
        message=f"Total: {format_price(total_cost(state))}\nDo you want to check out?",
        icon="question",
        confirm_label="Yes, check out",
        cancel_label="Cancel",
    )
    return _open(state, CHECKOUT), prompt


def resolve_checkout(state: OrderState, confirmed: bool) -> tuple[OrderState, Prompt | None]:
    state = _close(state, CHECKOUT)
    if not confirmed:
        return state, None
    return clear_order(state), Prompt(
        kind=CHECKOUT,
        title="Success!",
        message="Thank you for your purchase.",
        icon="success",
        confirm_label="Close",
    )
