"""Application service: List Products use case (query).

Builds a fresh filter chain and a fresh price calculator for every call,
so nothing leaks between listings.
"""

from __future__ import annotations

import logging

from catalog.application.dto import FilterSpec, PaginationDTO, ProductDTO, ProductPageDTO
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.discount import DiscountMode
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import format_amount
from catalog.domain.repository.discount_repository import DiscountRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.filter_factory import FilterCriteria, FilterFactory
from catalog.domain.service.price_calculators import PriceCalculator
from catalog.domain.service.pricing import build_price_calculator
from catalog.domain.service.product_sorting import SortOrder, sort_products

logger = logging.getLogger(__name__)


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_repo: DiscountRepository,
        mode: DiscountMode = DiscountMode.COMPOUND,
        include_shipping: bool = False,
    ) -> None:
        self._product_repo = product_repo
        self._discount_repo = discount_repo
        self._mode = mode
        self._include_shipping = include_shipping

    def handle(
        self,
        spec: FilterSpec | None = None,
        limit: int | None = None,
        offset: int = 0,
        sort: str | None = None,
    ) -> ProductPageDTO:
        """Filter the catalog and return one page of results.

        Steps:
        1. Build the price calculator from the active discount rules.
        2. Build the filter chain (the discount filter prices products
           with the calculator's discounts only, never with shipping).
        3. Filter, sort when asked, then skip *offset* rows and keep at
           most *limit*.
        """
        spec = spec or FilterSpec()
        if limit is not None and limit <= 0:
            raise ValidationError("Limit must be positive")
        if offset < 0:
            raise ValidationError("Offset cannot be negative")
        order = SortOrder.from_string(sort) if sort else None

        rules = self._discount_repo.list_all()
        discount_calc = build_price_calculator(rules, self._mode)
        display_calc = build_price_calculator(rules, self._mode, self._include_shipping)

        chain = FilterFactory.create(
            FilterCriteria(
                category=spec.category,
                search=spec.search,
                min_price=spec.min_price,
                max_price=spec.max_price,
                in_stock_only=spec.in_stock_only,
                only_with_discount=spec.only_with_discount,
                price_fn=discount_calc.total,
            )
        )

        products = self._product_repo.list_all()
        matches = chain.filter(products)
        description = chain.describe()
        logger.debug("Filter applied: %s", description)
        logger.debug("Products found: %d of %d", len(matches), len(products))

        if order is not None:
            matches = sort_products(matches, order)

        pagination = None
        page = matches[offset:]
        if limit is not None:
            page = page[:limit]
            pagination = PaginationDTO(
                limit=limit,
                offset=offset,
                has_next=offset + limit < len(matches),
            )

        return ProductPageDTO(
            items=[self._to_dto(p, display_calc) for p in page],
            total=len(matches),
            original=len(products),
            filter_description=description,
            pagination=pagination,
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(product: Product, calc: PriceCalculator) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            price=format_amount(product.price),
            final_price=format_amount(calc.total(product)),
            stock_quantity=product.stock_quantity or 0,
            description=product.description,
            sku=product.sku,
        )
