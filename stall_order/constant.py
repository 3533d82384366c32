"""Editable static menu configuration."""

from __future__ import annotations

CATEGORY_LABELS: dict[str, str] = {
    "food": "Food",
    "drink": "Drinks",
}

# Keys of each entry: id, name, price (whole rupiah), category, image.
MENU_ENTRIES: list[dict[str, str | int]] = [
    {"id": "nasi_goreng", "name": "Nasi Goreng", "price": 15000, "category": "food", "image": "nasi-goreng.jpg"},
    {"id": "mie_goreng", "name": "Mie Goreng", "price": 13000, "category": "food", "image": "mie-goreng.jpg"},
    {"id": "ayam_geprek", "name": "Ayam Geprek", "price": 18000, "category": "food", "image": "ayam-geprek.jpg"},
    {"id": "soto_ayam", "name": "Soto Ayam", "price": 14000, "category": "food", "image": "soto-ayam.jpg"},
    {"id": "bakso", "name": "Bakso Urat", "price": 16000, "category": "food", "image": "bakso.jpg"},
    {"id": "gado_gado", "name": "Gado-Gado", "price": 12000, "category": "food", "image": "gado-gado.jpg"},
    {"id": "pisang_goreng", "name": "Pisang Goreng", "price": 8000, "category": "food", "image": "pisang-goreng.jpg"},
    {"id": "es_teh", "name": "Es Teh Manis", "price": 4000, "category": "drink", "image": "es-teh.jpg"},
    {"id": "es_jeruk", "name": "Es Jeruk", "price": 6000, "category": "drink", "image": "es-jeruk.jpg"},
    {"id": "kopi_tubruk", "name": "Kopi Tubruk", "price": 5000, "category": "drink", "image": "kopi-tubruk.jpg"},
    {"id": "es_campur", "name": "Es Campur", "price": 10000, "category": "drink", "image": "es-campur.jpg"},
    {"id": "air_mineral", "name": "Air Mineral", "price": 3000, "category": "drink", "image": "air-mineral.jpg"},
]
