"""Application service: List Categories use case (query)."""

from __future__ import annotations

from collections import Counter

from catalog.application.dto import CategoryDTO
from catalog.domain.model.category import Category
from catalog.domain.repository.product_repository import ProductRepository


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, include_empty: bool = False) -> list[CategoryDTO]:
        """Return the categories in use, sorted by name.

        With *include_empty*, every known category is listed even when no
        product is filed under it.
        """
        counts = Counter(p.category for p in self._product_repo.list_all())
        if include_empty:
            for name in Category.values():
                counts.setdefault(name, 0)

        return [
            CategoryDTO(
                name=name,
                display_name=Category.display_name(name),
                product_count=count,
            )
            for name, count in sorted(counts.items())
        ]
