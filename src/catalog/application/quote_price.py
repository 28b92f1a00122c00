"""Application service: Quote Price use case (query)."""

from __future__ import annotations

from decimal import Decimal

from catalog.application.dto import PriceQuoteDTO
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.discount import DiscountMode
from catalog.domain.model.value_objects import format_amount
from catalog.domain.repository.discount_repository import DiscountRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing import build_price_calculator, quote


class QuotePriceHandler:

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

    def handle(self, product_name: str) -> PriceQuoteDTO:
        product = self._product_repo.get_by_name(product_name.strip())
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_name}'")

        calc = build_price_calculator(
            self._discount_repo.list_all(), self._mode, self._include_shipping
        )
        result = quote(calc, product)

        # A shipping surcharge can push the final price above the original.
        if result.has_discount:
            discount, discount_percent = result.discount, result.discount_percent
        else:
            discount, discount_percent = Decimal("0"), Decimal("0")
        return PriceQuoteDTO(
            product_name=product.name,
            original_price=format_amount(result.original_price),
            final_price=format_amount(result.final_price),
            discount=format_amount(discount),
            discount_percent=f"{discount_percent:.1f}%",
            pricing=calc.describe(),
        )
