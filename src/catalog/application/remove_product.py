"""Application service: Remove Product and Clear Products use cases.

Removal is a soft delete: the record is kept (flagged inactive) so its
history survives, but it no longer shows up anywhere in the catalog.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str) -> None:
        product = self._product_repo.get_by_name(name.strip())
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{name}'")

        product.deactivate()
        self._product_repo.save(product)
        logger.info("Removed product #%s '%s'", product.id, product.name)


class ClearProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> int:
        """Soft-delete every active product; return how many were removed."""
        products = self._product_repo.list_all()
        for product in products:
            product.deactivate()
            self._product_repo.save(product)
        logger.info("Cleared %d product(s)", len(products))
        return len(products)
