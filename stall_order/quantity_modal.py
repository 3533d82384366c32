"""Quantity entry modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

_MAX_DIGITS = 3
_DIGITS = frozenset("0123456789")


class QuantityModal(ModalScreen[int | None]):
    """Prompt for a typed quantity. Dismisses with the number, or None on cancel.

    An empty field confirms as 0; callers floor it to 1.
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("ctrl+c", "cancel", "Cancel"),
        ("enter", "confirm", "Confirm"),
        ("backspace", "delete_digit", "Delete"),
    ]

    CSS = """
    QuantityModal {
        align: center middle;
        background: $background 60%;
    }

    #quantity-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #quantity-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #quantity-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #quantity-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str, initial: int) -> None:
        super().__init__()
        self.title_text = title
        self.value = str(initial)
        # The first digit typed replaces the prefilled value.
        self.prefilled = True

    def compose(self) -> ComposeResult:
        with Container(id="quantity-dialog"):
            yield Static(self.title_text, id="quantity-title")
            yield Static(id="quantity-value")
            yield Static("Digits only. Enter confirm. Backspace delete. Esc cancel.", id="quantity-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def action_confirm(self) -> None:
        self.dismiss(int(self.value) if self.value else 0)

    def action_delete_digit(self) -> None:
        self.prefilled = False
        if self.value:
            self.value = self.value[:-1]
            self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.is_printable and event.character in _DIGITS:
            if self.prefilled:
                self.value = ""
                self.prefilled = False
            if len(self.value) < _MAX_DIGITS:
                self.value += event.character
            self._refresh_content()
            event.stop()

    def _refresh_content(self) -> None:
        self.query_one("#quantity-value", Static).update(self.value or "")
