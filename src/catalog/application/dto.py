"""Data Transfer Objects passed between the CLI and the application layer.

Query handlers map their results to one of these before returning,
so formatting (money as "$15.00", percents as "10%") happens once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class FilterSpec:
    """Input: the filters a user asked for, already parsed."""

    category: str | None = None
    search: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock_only: bool = False
    only_with_discount: bool = False


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: str
    name: str
    category: str
    price: str  # formatted, e.g. "$15.00"
    final_price: str
    stock_quantity: int
    description: str = ""
    sku: str | None = None


@dataclass(frozen=True)
class PaginationDTO:
    limit: int
    offset: int
    has_next: bool


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: one page of a filtered listing."""

    items: list[ProductDTO]
    total: int  # products matching the filter
    original: int  # products in the catalog
    filter_description: str
    pagination: PaginationDTO | None = None


@dataclass(frozen=True)
class PriceQuoteDTO:
    product_name: str
    original_price: str
    final_price: str
    discount: str
    discount_percent: str  # e.g. "14.5%"
    pricing: str  # description of the calculator chain


@dataclass(frozen=True)
class StatisticsDTO:
    total: int
    average_price: str
    min_price: str
    max_price: str
    total_value: str
    categories_count: int
    in_stock_count: int
    out_of_stock_count: int
    most_expensive: str | None
    cheapest: str | None
    by_category: dict[str, int] = field(default_factory=dict)
    discounted_count: int = 0
    total_savings: str = "$0.00"
    filter_description: str = ""


@dataclass(frozen=True)
class DiscountDTO:
    id: str
    kind: str
    percent: str
    category: str | None


@dataclass(frozen=True)
class CategoryDTO:
    name: str
    display_name: str
    product_count: int
