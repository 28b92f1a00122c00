"""Composition root: builds the concrete repositories from settings.

Only this module imports the JSON repositories; handlers receive them
through their constructors.
"""

from __future__ import annotations

from catalog.infrastructure.config import Settings, load_settings
from catalog.infrastructure.persistence.json_discount_repository import (
    JsonDiscountRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return load_settings()


def product_repository(config: Settings | None = None) -> JsonProductRepository:
    config = config or settings()
    return JsonProductRepository(config.products_file)


def discount_repository(config: Settings | None = None) -> JsonDiscountRepository:
    config = config or settings()
    return JsonDiscountRepository(config.discounts_file)
