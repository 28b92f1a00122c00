"""Storage interface for catalog products.

Read methods only ever see active products; a soft-deleted product is
still passed to ``save`` so implementations can keep the record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return an active product by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every active product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product (including soft deletes)."""
