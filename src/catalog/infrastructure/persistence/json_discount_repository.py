"""JSON-file-backed implementation of DiscountRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.discount import DiscountKind, DiscountRule
from catalog.domain.model.value_objects import Percent
from catalog.domain.repository.discount_repository import DiscountRepository


class JsonDiscountRepository(DiscountRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- DiscountRepository interface -----------------------------------------

    def next_id(self) -> str:
        records = self._load_raw()
        if not records:
            return "1"
        return str(max(int(r["id"]) for r in records) + 1)

    def list_all(self) -> list[DiscountRule]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, rule: DiscountRule) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == rule.id:
                records[i] = self._to_raw(rule)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(rule))
        self._persist_raw(records)

    def delete(self, rule_id: str) -> bool:
        records = self._load_raw()
        kept = [r for r in records if r["id"] != rule_id]
        if len(kept) == len(records):
            return False
        self._persist_raw(kept)
        return True

    def clear(self) -> int:
        removed = len(self._load_raw())
        self._persist_raw([])
        return removed

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(rule: DiscountRule) -> dict:
        return {
            "id": rule.id,
            "kind": rule.kind.value,
            "percent": str(rule.percent.value),
            "category": rule.category,
        }

    @staticmethod
    def _to_domain(raw: dict) -> DiscountRule:
        return DiscountRule(
            id=raw["id"],
            kind=DiscountKind(raw["kind"]),
            percent=Percent(Decimal(raw["percent"])),
            category=raw.get("category"),
        )

    # --- File helpers ---------------------------------------------------------

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
