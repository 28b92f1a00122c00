"""Application service: Show Statistics use case (query)."""

from __future__ import annotations

import logging

from catalog.application.dto import FilterSpec, StatisticsDTO
from catalog.domain.model.discount import DiscountMode
from catalog.domain.model.value_objects import format_amount
from catalog.domain.repository.discount_repository import DiscountRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.catalog_statistics import summarize
from catalog.domain.service.filter_factory import FilterCriteria, FilterFactory
from catalog.domain.service.pricing import build_price_calculator

logger = logging.getLogger(__name__)


class ShowStatisticsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_repo: DiscountRepository,
        mode: DiscountMode = DiscountMode.COMPOUND,
    ) -> None:
        self._product_repo = product_repo
        self._discount_repo = discount_repo
        self._mode = mode

    def handle(self, spec: FilterSpec | None = None) -> StatisticsDTO:
        """Summarize the products matching *spec* (the whole catalog by default).

        Savings are measured against the active discounts without shipping.
        """
        spec = spec or FilterSpec()
        calc = build_price_calculator(self._discount_repo.list_all(), self._mode)
        chain = FilterFactory.create(
            FilterCriteria(
                category=spec.category,
                search=spec.search,
                min_price=spec.min_price,
                max_price=spec.max_price,
                in_stock_only=spec.in_stock_only,
                only_with_discount=spec.only_with_discount,
                price_fn=calc.total,
            )
        )
        products = chain.filter(self._product_repo.list_all())
        logger.debug("Statistics over %d products (%s)", len(products), chain.describe())

        stats = summarize(products, calc.total)
        return StatisticsDTO(
            total=stats.total,
            average_price=format_amount(stats.average_price),
            min_price=format_amount(stats.min_price),
            max_price=format_amount(stats.max_price),
            total_value=format_amount(stats.total_value),
            categories_count=stats.categories_count,
            in_stock_count=stats.in_stock_count,
            out_of_stock_count=stats.out_of_stock_count,
            most_expensive=stats.most_expensive,
            cheapest=stats.cheapest,
            by_category=stats.by_category,
            discounted_count=stats.discounted_count,
            total_savings=format_amount(stats.total_savings),
            filter_description=chain.describe(),
        )
