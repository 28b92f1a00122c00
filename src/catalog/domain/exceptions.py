"""Catalog errors.

Every rejected command or query raises a DomainException subclass; the
CLI turns those into a one-line message and exit code 1.
"""


class DomainException(Exception):
    """Base class for catalog errors."""


class ValidationError(DomainException):
    """Bad input: an amount, percent, category or price range."""


class DuplicateProductError(ValidationError):
    """An active product already uses the requested name."""


class EntityNotFoundError(DomainException):
    """No active product or discount matches the given name or id."""
