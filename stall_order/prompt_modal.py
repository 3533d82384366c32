"""Confirmation and notice modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from stall_order.gates import Prompt

_ICON_GLYPHS: dict[str, tuple[str, str]] = {
    "warning": ("!", "bold #1a1a1a on #f0b429"),
    "question": ("?", "bold #ffffff on #2f6db5"),
    "info": ("i", "bold #ffffff on #5a6b7b"),
    "success": ("✓", "bold #0b1f0f on #5fbf72"),
}


class PromptModal(ModalScreen[bool]):
    """Centered modal presenting a Prompt; dismisses with the user's decision.

    A one-button notice always dismisses with True.
    """

    BINDINGS = [
        ("y", "confirm", "Confirm"),
        ("enter", "confirm", "Confirm"),
        ("n", "cancel", "Cancel"),
        ("escape", "cancel", "Cancel"),
        ("q", "cancel", "Cancel"),
    ]

    CSS = """
    PromptModal {
        align: center middle;
        background: $background 60%;
    }

    #prompt-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #prompt-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #prompt-body {
        color: white;
        margin-bottom: 1;
    }

    #prompt-help {
        color: #dddddd;
    }
    """

    def __init__(self, prompt: Prompt) -> None:
        super().__init__()
        self.prompt = prompt

    def compose(self) -> ComposeResult:
        with Container(id="prompt-dialog"):
            yield Static(id="prompt-title")
            yield Static(id="prompt-body")
            yield Static(id="prompt-help")

    def on_mount(self) -> None:
        glyph, style = _ICON_GLYPHS.get(self.prompt.icon, _ICON_GLYPHS["info"])
        title = Text()
        title.append(f" {glyph} ", style=style)
        title.append(f" {self.prompt.title}")
        self.query_one("#prompt-title", Static).update(title)
        self.query_one("#prompt-body", Static).update(Text(self.prompt.message, style="white"))

        if self.prompt.is_acknowledgement:
            help_text = f"Enter/Esc: {self.prompt.confirm_label}"
        else:
            help_text = f"Y/Enter: {self.prompt.confirm_label}    N/Esc: {self.prompt.cancel_label}"
        self.query_one("#prompt-help", Static).update(help_text)

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(self.prompt.is_acknowledgement)
