"""Money and Percent, the two value types every price calculation uses.

Both are frozen and validate on construction, so a price chain never
has to re-check its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError


def _to_decimal(value: str | float | int | Decimal, label: str) -> Decimal:
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {label}: {value!r}")
    return result


def format_amount(amount: Decimal) -> str:
    """Format any Decimal as dollars, even one that would fail validation.

    A negative amount prints as ``-$2.50`` and NaN as ``n/a``.
    """
    if amount.is_nan():
        return "n/a"
    if amount < 0:
        return f"-${-amount:.2f}"
    return f"${amount:.2f}"


@dataclass(frozen=True)
class Money:
    """A validated, non-negative amount of dollars."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __str__(self) -> str:
        return format_amount(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Parse *amount* (a string from the CLI, JSON or a number)."""
        return Money(_to_decimal(amount, "money amount"))


_ZERO = Decimal("0")
_ONE = Decimal("1")
_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class Percent:
    """A discount rate expressed as a fraction in ``[0, 1]``.

    Out-of-range values are rejected, never clamped: ``0.1`` means ten
    percent off, ``1`` means free.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Percent must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value < _ZERO or self.value > _ONE:
            raise ValidationError(
                f"Percent must be between 0 and 1, got {self.value}"
            )

    @property
    def complement(self) -> Decimal:
        """``1 - value``: the factor a price is multiplied by."""
        return _ONE - self.value

    @property
    def whole(self) -> Decimal:
        return self.value * _HUNDRED

    def __str__(self) -> str:
        return f"{self.whole.normalize():f}%"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(value: Percent | str | float | int | Decimal) -> Percent:
        """Coerce a fraction (``0.15``) into a Percent."""
        if isinstance(value, Percent):
            return value
        return Percent(_to_decimal(value, "percent"))

    @staticmethod
    def from_whole(value: str | float | int | Decimal) -> Percent:
        """Coerce a 0-100 figure (``15``) into a Percent."""
        whole = _to_decimal(value, "percent")
        if whole < _ZERO or whole > _HUNDRED:
            raise ValidationError(
                f"Percent must be between 0 and 100, got {whole}"
            )
        return Percent(whole / _HUNDRED)
