"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from stall_order import cart
from stall_order.config import DEBUG_LOG_PATH, STALL_NAME
from stall_order.data import CATALOG
from stall_order.gates import Prompt, request_checkout, request_reset, resolve_checkout, resolve_reset
from stall_order.models import CATEGORIES, CartLine, MenuEntry, OrderState
from stall_order.prompt_modal import PromptModal
from stall_order.quantity_modal import QuantityModal
from stall_order.rendering import format_cart_line, format_menu_row, format_rupiah, format_summary, format_tabs


class StallOrderApp(App):
    """A Textual app for picking menu entries into a cart and checking out."""

    TITLE = STALL_NAME
    SUB_TITLE = "Food / Drinks"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #cart-pane.details-open {
        border: heavy $accent;
    }

    #tabs {
        margin-bottom: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #summary {
        height: 3;
        border: heavy $secondary;
        padding: 0 1;
    }

    #status-bar {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    menu_index = reactive(0)
    cart_index = reactive(0)

    BINDINGS = [
        ("f", "select_tab('food')", "Food"),
        ("d", "select_tab('drink')", "Drinks"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("j", "move_cursor(1)", "Next"),
        ("plus", "step(1)", "More"),
        ("minus", "step(-1)", "Less"),
        ("e", "edit_quantity", "Type quantity"),
        ("a", "add_selected", "Add to cart"),
        ("enter", "add_selected", "Add to cart"),
        ("x", "remove_selected", "Remove line"),
        ("c", "toggle_details", "Cart details"),
        Binding("ctrl+r", "reset", "Reset", priority=True),
        Binding("ctrl+s", "checkout", "Checkout", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, catalog: tuple[MenuEntry, ...] = CATALOG, debug_log_path: str = DEBUG_LOG_PATH) -> None:
        super().__init__()
        self.catalog = catalog
        self.order_state: OrderState = cart.new_order_state(catalog)
        self.system_status = ""
        self._debug_log_path = Path(debug_log_path) if debug_log_path else None
        self._log_debug(f"app_init entries={len(catalog)}")

    def _log_debug(self, message: str) -> None:
        if self._debug_log_path is None:
            return
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="tabs")
                yield Static(id="menu-list")
            with Vertical(id="cart-pane"):
                yield Static("Cart", classes="pane-title")
                yield Static(id="cart-list")
                yield Static(id="summary")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._log_debug("on_mount")
        self._refresh_all()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    # Menu and cart actions

    def action_select_tab(self, category: str) -> None:
        if self._modal_open():
            return
        previous = self.order_state.active_tab
        self.order_state = cart.select_tab(self.order_state, category)
        if self.order_state.active_tab != previous:
            self.menu_index = 0
            self._log_debug(f"select_tab category={category!r}")
        self._refresh_menu()

    def action_move_cursor(self, delta: int) -> None:
        if self._modal_open():
            return

        if self.order_state.show_details:
            count = len(self.order_state.lines)
            if count:
                self.cart_index = (self.cart_index + delta) % count
            self._refresh_cart()
            return

        entries = self._visible_entries()
        if entries:
            self.menu_index = (self.menu_index + delta) % len(entries)
        self._refresh_menu()

    def action_step(self, delta: int) -> None:
        if self._modal_open():
            return

        if self.order_state.show_details:
            line = self._selected_line()
            if line is None:
                return
            if delta > 0:
                self.order_state = cart.increment_cart_item(self.order_state, line.entry_id)
            else:
                self.order_state = cart.decrement_cart_item(self.order_state, line.entry_id)
            self._log_debug(f"line_step entry={line.entry_id!r} delta={delta}")
            self._refresh_cart()
            return

        entry = self._selected_entry()
        if entry is None:
            return
        if delta > 0:
            self.order_state = cart.increment_pending(self.order_state, entry.entry_id)
        else:
            self.order_state = cart.decrement_pending(self.order_state, entry.entry_id)
        self._refresh_menu()

    def action_edit_quantity(self) -> None:
        if self._modal_open():
            return

        if self.order_state.show_details:
            line = self._selected_line()
            if line is None:
                return
            self.push_screen(
                QuantityModal(f"Quantity for {line.name}", line.quantity),
                callback=lambda value: self._on_line_quantity_typed(line.entry_id, value),
            )
            return

        entry = self._selected_entry()
        if entry is None:
            return
        self.push_screen(
            QuantityModal(f"Portions of {entry.name} to add", self.order_state.pending[entry.entry_id]),
            callback=lambda value: self._on_pending_quantity_typed(entry.entry_id, value),
        )

    def _on_line_quantity_typed(self, entry_id: str, value: int | None) -> None:
        if value is None:
            return
        self.order_state = cart.set_quantity_direct(self.order_state, entry_id, value)
        self._log_debug(f"line_set entry={entry_id!r} value={value}")
        self._refresh_cart()

    def _on_pending_quantity_typed(self, entry_id: str, value: int | None) -> None:
        if value is None:
            return
        self.order_state = cart.set_pending_quantity(self.order_state, entry_id, value)
        self._refresh_menu()

    def action_add_selected(self) -> None:
        if self._modal_open() or self.order_state.show_details:
            return

        entry = self._selected_entry()
        if entry is None:
            return
        quantity = self.order_state.pending[entry.entry_id]
        self.order_state = cart.add_pending_to_cart(self.order_state, entry)
        self.system_status = f"Added {quantity} x {entry.name}"
        self._log_debug(f"add entry={entry.entry_id!r} quantity={quantity}")
        self._refresh_cart()
        self._refresh_status()

    def action_remove_selected(self) -> None:
        if self._modal_open() or not self.order_state.show_details:
            return

        line = self._selected_line()
        if line is None:
            return
        idx = self.cart_index
        self.order_state = cart.remove_from_cart(self.order_state, line.entry_id)
        if self.order_state.lines:
            self.cart_index = min(idx, len(self.order_state.lines) - 1)
        else:
            self.cart_index = 0
        self.system_status = f"Removed {line.name}"
        self._log_debug(f"remove entry={line.entry_id!r}")
        self._refresh_cart()
        self._refresh_status()

    def action_toggle_details(self) -> None:
        if self._modal_open():
            return
        self.order_state = cart.toggle_details(self.order_state)
        self.cart_index = 0
        self._refresh_all()

    # Confirmation gates

    def _show_prompt(self, prompt: Prompt, callback: Callable[[bool | None], None] | None = None) -> None:
        self._log_debug(f"prompt kind={prompt.kind!r} icon={prompt.icon!r} title={prompt.title!r}")
        self.push_screen(PromptModal(prompt), callback=callback)

    def action_reset(self) -> None:
        if self._modal_open():
            return
        self.order_state, prompt = request_reset(self.order_state)
        self._log_debug("reset_requested")
        self._show_prompt(prompt, self._on_reset_decided)

    def _on_reset_decided(self, confirmed: bool | None) -> None:
        self.order_state, acknowledgement = resolve_reset(self.order_state, bool(confirmed))
        self._log_debug(f"reset_resolved confirmed={bool(confirmed)}")
        if confirmed:
            self.menu_index = 0
            self.cart_index = 0
            self.system_status = "Cart reset"
        self._refresh_all()
        self._show_prompt(acknowledgement)

    def action_checkout(self) -> None:
        if self._modal_open():
            return
        self.order_state, prompt = request_checkout(self.order_state)
        if prompt.is_acknowledgement:
            self._log_debug("checkout_blocked reason=empty_cart")
            self._show_prompt(prompt)
            return
        self._log_debug(f"checkout_requested total={cart.total_cost(self.order_state)}")
        self._show_prompt(prompt, self._on_checkout_decided)

    def _on_checkout_decided(self, confirmed: bool | None) -> None:
        total = cart.total_cost(self.order_state)
        self.order_state, acknowledgement = resolve_checkout(self.order_state, bool(confirmed))
        self._log_debug(f"checkout_resolved confirmed={bool(confirmed)} total={total}")
        if acknowledgement is None:
            return
        self.menu_index = 0
        self.cart_index = 0
        self.system_status = f"Checked out {format_rupiah(total)}"
        self._refresh_all()
        self._show_prompt(acknowledgement)

    # Rendering

    def _visible_entries(self) -> list[MenuEntry]:
        return cart.visible_entries(self.order_state, self.catalog)

    def _selected_entry(self) -> MenuEntry | None:
        entries = self._visible_entries()
        if not (0 <= self.menu_index < len(entries)):
            return None
        return entries[self.menu_index]

    def _selected_line(self) -> CartLine | None:
        lines = list(self.order_state.lines.values())
        if not (0 <= self.cart_index < len(lines)):
            return None
        return lines[self.cart_index]

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_cart()
        self._refresh_status()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(
        self, total: int, rows: int, selected: int | None, reserve_markers: bool = True
    ) -> tuple[int, int]:
        """Slice of items to draw so that ``selected`` stays visible.

        With ``reserve_markers``, each "⋮" overflow marker uses one of ``rows``.
        """
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        span = max(1, rows - 2) if reserve_markers else rows
        if selected is None:
            start = 0
        else:
            start = max(0, selected - span // 2)
            start = min(start, total - span)

        if not reserve_markers:
            return (start, start + span)

        # Only one marker is drawn at either end of the list.
        if start == 0:
            return (0, max(1, rows - 1))
        if start + span >= total:
            return (total - max(1, rows - 1), total)
        return (start, start + span)

    def _refresh_menu(self) -> None:
        try:
            tabs_widget = self.query_one("#tabs", Static)
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        tabs_widget.update(format_tabs(self.order_state.active_tab, CATEGORIES))

        entries = self._visible_entries()
        if not entries:
            menu_widget.update("(nothing on this tab)")
            return
        if self.menu_index >= len(entries):
            self.menu_index = 0

        selected = None if self.order_state.show_details else self.menu_index
        start, end = self._window_bounds(len(entries), self._visible_rows(menu_widget), selected)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            entry = entries[idx]
            lines.append_text(format_menu_row(entry, self.order_state.pending[entry.entry_id], idx == selected))
        if end < len(entries):
            lines.append("\n⋮", style="dim")

        menu_widget.update(lines)

    def _refresh_cart(self) -> None:
        try:
            pane = self.query_one("#cart-pane", Vertical)
            cart_widget = self.query_one("#cart-list", Static)
            summary_widget = self.query_one("#summary", Static)
        except NoMatches:
            return

        pane.set_class(self.order_state.show_details, "details-open")
        summary_widget.update(format_summary(cart.total_cost(self.order_state), cart.total_line_count(self.order_state)))

        cart_lines = list(self.order_state.lines.values())
        if not cart_lines:
            cart_widget.update("Cart is empty")
            return

        if not self.order_state.show_details:
            compact = Text()
            for idx, line in enumerate(cart_lines):
                if idx > 0:
                    compact.append("\n")
                compact.append(f"{line.quantity} x {line.name}")
            compact.append("\n\nC: details", style="dim")
            cart_widget.update(compact)
            return

        if self.cart_index >= len(cart_lines):
            self.cart_index = len(cart_lines) - 1

        # Each cart line takes two rows; keep one row for each overflow marker.
        rows = max(1, (self._visible_rows(cart_widget) - 2) // 2)
        start, end = self._window_bounds(len(cart_lines), rows, self.cart_index, reserve_markers=False)

        detail = Text()
        if start > 0:
            detail.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                detail.append("\n")
            detail.append_text(format_cart_line(cart_lines[idx], idx == self.cart_index))
        if end < len(cart_lines):
            detail.append("\n⋮", style="dim")

        cart_widget.update(detail)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        if self.order_state.show_details:
            hint = "+/- qty  E type  X remove  C close  Ctrl+R reset  Ctrl+S checkout"
        else:
            hint = "F/D tab  +/- qty  E type  A add  C cart  Ctrl+S checkout"
        status = self.system_status or "Ready"
        bar.update(f"{status}  |  {hint}")
