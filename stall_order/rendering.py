"""Currency formatting and rich rendering helpers."""

from __future__ import annotations

from rich.text import Text

from stall_order.config import CURRENCY_PREFIX, THOUSANDS_SEPARATOR
from stall_order.data import category_label
from stall_order.models import CartLine, MenuEntry


def format_rupiah(amount: int) -> str:
    """Format a whole-rupiah amount for display, e.g. ``Rp 25.000``."""
    digits = f"{abs(amount):,}".replace(",", THOUSANDS_SEPARATOR)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_PREFIX} {digits}"


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    if category == "drink":
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_tabs(active_tab: str, categories: tuple[str, ...]) -> Text:
    """Render the category tab strip, highlighting the active tab."""
    text = Text()
    for idx, category in enumerate(categories):
        if idx > 0:
            text.append("  ")
        label = f" {category_label(category)} ({category[0].upper()}) "
        if category == active_tab:
            text.append(label, style=badge_style(category))
        else:
            text.append(label, style="dim")
    return text


def format_stepper(quantity: int) -> Text:
    text = Text()
    text.append("[-]", style="dim")
    text.append(f" {quantity} ", style="bold")
    text.append("[+]", style="dim")
    return text


def format_menu_row(entry: MenuEntry, pending: int, selected: bool) -> Text:
    """Render one menu row: pointer, name, unit price and pending stepper."""
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(entry.name, style="bold" if selected else "")
    text.append(f"  {format_rupiah(entry.price)}  ", style="white")
    text.append_text(format_stepper(pending))
    return text


def format_cart_line(line: CartLine, selected: bool) -> Text:
    """Render one cart line over two rows: stepper and subtotal, then unit price."""
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(line.name, style="bold")
    text.append(" ")
    text.append_text(format_stepper(line.quantity))
    text.append(f"  {format_rupiah(line.subtotal)}")
    text.append(f"\n    {format_rupiah(line.price)} / portion", style="dim")
    return text


def format_summary(total: int, portions: int) -> Text:
    """Render the bottom bar: running total and portion badge."""
    text = Text()
    text.append(f"Total: {format_rupiah(total)}", style="bold")
    if portions > 0:
        text.append("  ")
        text.append(f" {portions} ", style="bold #ffffff on #b23a48")
    return text
