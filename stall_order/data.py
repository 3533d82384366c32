"""Static catalog data."""

from __future__ import annotations

from typing import Iterable, Mapping

from stall_order.constant import CATEGORY_LABELS, MENU_ENTRIES
from stall_order.models import CATEGORIES, MenuEntry

_REQUIRED_KEYS = ("id", "name", "price", "category", "image")


def build_catalog(raw_entries: Iterable[Mapping[str, str | int]]) -> tuple[MenuEntry, ...]:
    """Wrap raw menu rows into MenuEntry records, rejecting malformed rows."""
    catalog: list[MenuEntry] = []
    seen: set[str] = set()
    for raw in raw_entries:
        missing = [key for key in _REQUIRED_KEYS if key not in raw]
        if missing:
            raise ValueError(f"Menu row {dict(raw)!r} is missing {', '.join(missing)}")

        entry_id = str(raw["id"])
        if entry_id in seen:
            raise ValueError(f"Duplicate menu entry id: {entry_id!r}")
        seen.add(entry_id)

        price = raw["price"]
        if not isinstance(price, int) or isinstance(price, bool) or price < 0:
            raise ValueError(f"Menu entry {entry_id!r} needs a non-negative integer price, got {price!r}")

        category = str(raw["category"])
        if category not in CATEGORIES:
            raise ValueError(f"Menu entry {entry_id!r} has unknown category {category!r}")

        catalog.append(
            MenuEntry(
                entry_id=entry_id,
                name=str(raw["name"]),
                price=price,
                category=category,
                image=str(raw["image"]),
            )
        )
    return tuple(catalog)


CATALOG: tuple[MenuEntry, ...] = build_catalog(MENU_ENTRIES)

CATALOG_BY_ID: dict[str, MenuEntry] = {entry.entry_id: entry for entry in CATALOG}


def entries_for_category(category: str, catalog: Iterable[MenuEntry] = CATALOG) -> list[MenuEntry]:
    """Catalog entries of one category, in catalog order."""
    return [entry for entry in catalog if entry.category == category]


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category.title())


def default_pending_quantities(catalog: Iterable[MenuEntry] = CATALOG) -> dict[str, int]:
    """Pending quantity of 1 for every catalog entry."""
    return {entry.entry_id: 1 for entry in catalog}
