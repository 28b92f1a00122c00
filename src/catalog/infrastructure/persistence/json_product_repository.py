"""JSON-file-backed implementation of ProductRepository.

Removed products stay in the file with ``is_active: false``; every read
method skips them.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        # Removed products keep their ids, so they count here.
        ids = [int(raw["id"]) for raw in self._load_raw()]
        return str(max(ids, default=0) + 1)

    def get_by_name(self, name: str) -> Product | None:
        wanted = name.casefold()
        return next((p for p in self._active() if p.name.casefold() == wanted), None)

    def list_all(self) -> list[Product]:
        return self._active()

    def save(self, product: Product) -> None:
        records = [r for r in self._load_raw() if r["id"] != product.id]
        records.append(self._to_raw(product))
        records.sort(key=lambda r: int(r["id"]))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "category": product.category,
            "price": str(product.price),
            "description": product.description,
            "sku": product.sku,
            "stock_quantity": product.stock_quantity,
            "is_active": product.is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            category=raw["category"],
            price=Decimal(raw["price"]),
            description=raw.get("description", ""),
            sku=raw.get("sku"),
            stock_quantity=raw.get("stock_quantity", 0),
            is_active=raw.get("is_active", True),
        )

    # --- File helpers ---------------------------------------------------------

    def _active(self) -> list[Product]:
        products = (self._to_domain(raw) for raw in self._load_raw())
        return [p for p in products if p.is_active]

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
