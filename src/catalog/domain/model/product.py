"""Product aggregate.

Products are the unit everything else works on: prices are computed for
them, filters narrow lists of them, statistics summarize them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Use the ``Product.create()`` factory for new products; it enforces
    all business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted products without re-validating,
    and so pricing and filtering can be exercised on arbitrary data.
    """

    id: str
    name: str
    category: str
    price: Decimal
    description: str = ""
    sku: str | None = None
    stock_quantity: int | None = 0
    is_active: bool = True

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: str,
        name: str,
        category: str,
        price: str | int | float | Decimal,
        description: str = "",
        sku: str | None = None,
        stock_quantity: int = 0,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        amount = Money.of(price).amount
        if amount <= 0:
            raise ValidationError("Product price must be greater than zero")

        if stock_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

        return Product(
            id=id,
            name=name.strip(),
            category=Category.from_string(category).value,
            price=amount,
            description=(description or "").strip(),
            sku=sku.strip() if sku else None,
            stock_quantity=stock_quantity,
        )

    # --- Mutations ------------------------------------------------------------

    def update_price(self, new_price: Money) -> None:
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price.amount

    def update_category(self, category: str) -> None:
        self.category = Category.from_string(category).value

    def update_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self.stock_quantity = quantity

    def update_description(self, description: str) -> None:
        self.description = description.strip()

    def deactivate(self) -> None:
        """Soft-delete: the record stays in storage but leaves the catalog."""
        if not self.is_active:
            raise ValidationError(f"Product '{self.name}' is already removed")
        self.is_active = False

    # --- Computed properties --------------------------------------------------

    @property
    def in_stock(self) -> bool:
        return (self.stock_quantity or 0) > 0
