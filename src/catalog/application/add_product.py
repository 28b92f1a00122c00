"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from catalog.domain.exceptions import DuplicateProductError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        category: str,
        price: str | Decimal,
        description: str = "",
        sku: str | None = None,
        stock_quantity: int = 0,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise DuplicateProductError(f"Product '{name.strip()}' already exists")

        product = Product.create(
            id=self._product_repo.next_id(),
            name=name,
            category=category,
            price=price,
            description=description,
            sku=sku,
            stock_quantity=stock_quantity,
        )
        self._product_repo.save(product)
        logger.info("Added product #%s '%s'", product.id, product.name)
        return product
