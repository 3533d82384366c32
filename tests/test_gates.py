from __future__ import annotations

import pytest

from stall_order import cart
from stall_order.gates import (
    CHECKOUT,
    RESET,
    GateError,
    request_checkout,
    request_reset,
    resolve_checkout,
    resolve_reset,
)
from stall_order.models import MenuEntry


@pytest.fixture()
def filled(state, entries):
    state = cart.add_to_cart(state, entries["nasi"], 1)
    state = cart.add_to_cart(state, entries["mie"], 1)
    state = cart.set_pending_quantity(state, "teh", 3)
    return cart.toggle_details(state)


class TestReset:
    def test_request_opens_gate(self, filled):
        state, prompt = request_reset(filled)

        assert state.awaiting == RESET
        assert state.lines == filled.lines
        assert prompt.kind == RESET
        assert prompt.icon == "warning"
        assert prompt.cancel_label is not None
        assert not prompt.is_acknowledgement

    def test_confirm_clears_cart_and_pending(self, filled):
        state, _ = request_reset(filled)
        state, ack = resolve_reset(state, True)

        assert state.awaiting is None
        assert state.lines == {}
        assert set(state.pending.values()) == {1}
        assert state.show_details is False
        assert ack.is_acknowledgement
        assert ack.icon == "success"

    def test_cancel_leaves_state_and_acknowledges(self, filled):
        state, _ = request_reset(filled)
        state, ack = resolve_reset(state, False)

        assert state == filled
        assert ack.is_acknowledgement
        assert ack.icon == "info"

    def test_reset_on_empty_cart_still_resets_pending(self, state):
        state = cart.set_pending_quantity(state, "nasi", 4)
        state, _ = request_reset(state)
        state, _ = resolve_reset(state, True)

        assert state.pending["nasi"] == 1


class TestCheckout:
    def test_empty_cart_is_an_info_notice(self, state):
        after, prompt = request_checkout(state)

        assert after is state
        assert after.awaiting is None
        assert prompt.is_acknowledgement
        assert prompt.icon == "info"

    def test_prompt_shows_formatted_total(self, filled):
        state, prompt = request_checkout(filled)

        assert state.awaiting == CHECKOUT
        assert prompt.icon == "question"
        assert "Rp 25.000" in prompt.message

    def test_prompt_uses_given_formatter(self, filled):
        _, prompt = request_checkout(filled, format_price=lambda amount: f"<{amount}>")

        assert "<25000>" in prompt.message

    def test_confirm_clears_and_thanks(self, filled):
        state, _ = request_checkout(filled)
        state, ack = resolve_checkout(state, True)

        assert state.lines == {}
        assert set(state.pending.values()) == {1}
        assert state.show_details is False
        assert state.awaiting is None
        assert ack is not None
        assert ack.icon == "success"

    def test_cancel_keeps_lines(self, filled):
        state, _ = request_checkout(filled)
        state, ack = resolve_checkout(state, False)

        assert ack is None
        assert state == filled
        assert {key: line.quantity for key, line in state.lines.items()} == {"nasi": 1, "mie": 1}

    def test_cart_is_locked_while_checkout_is_pending(self, filled, entries):
        state, _ = request_checkout(filled)

        assert cart.add_to_cart(state, entries["teh"], 1) is state
        assert cart.remove_from_cart(state, "nasi") is state


class TestGateOrdering:
    def test_cannot_open_two_gates(self, filled):
        state, _ = request_checkout(filled)

        with pytest.raises(GateError):
            request_reset(state)

    def test_cannot_resolve_without_request(self, filled):
        with pytest.raises(GateError):
            resolve_checkout(filled, True)
        with pytest.raises(GateError):
            resolve_reset(filled, True)

    def test_cannot_resolve_the_other_gate(self, filled):
        state, _ = request_reset(filled)

        with pytest.raises(GateError):
            resolve_checkout(state, True)

    def test_gate_error_is_value_error(self):
        assert issubclass(GateError, ValueError)


def test_free_order_still_needs_confirmation(state):
    freebie = MenuEntry(entry_id="air", name="Air Putih", price=0, category="drink", image="")
    state = cart.add_to_cart(state, freebie, 1)

    state, prompt = request_checkout(state)

    assert not prompt.is_acknowledgement
    assert "Rp 0" in prompt.message


def test_checkout_on_empty_cart_still_refuses_while_reset_is_pending(state):
    state, _ = request_reset(state)

    with pytest.raises(GateError):
        request_checkout(state)
