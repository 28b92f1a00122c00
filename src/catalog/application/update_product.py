"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str | Decimal | None = None,
        category: str | None = None,
        stock_quantity: int | None = None,
        description: str | None = None,
    ) -> Product:
        """Change any of a product's price, category, stock or description.

        Every new value is validated before anything is changed, so a bad
        field never leaves the product half-updated.
        """
        if price is None and category is None and stock_quantity is None and description is None:
            raise ValidationError("Nothing to update")

        product = self._product_repo.get_by_name(name.strip())
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{name}'")

        new_price = Money.of(price) if price is not None else None

        updated = Product(**vars(product))
        if new_price is not None:
            updated.update_price(new_price)
        if category is not None:
            updated.update_category(category)
        if stock_quantity is not None:
            updated.update_stock(stock_quantity)
        if description is not None:
            updated.update_description(description)

        self._product_repo.save(updated)
        logger.info("Updated product #%s '%s'", updated.id, updated.name)
        return updated
