"""Errors raised by the ordering domain.

``IncorrectItemError`` means the order looked at an item and refused it
(negative price, non-positive or non-integer quantity, unreadable price).
Passing no item at all is a caller bug and surfaces as a plain
``TypeError`` instead, outside this hierarchy.
"""


class DomainException(Exception):
    """Root of every error the ordering domain raises on purpose."""


class ValidationError(DomainException):
    """A value broke an ordering rule."""


class IncorrectItemError(ValidationError):
    """An item was refused by the order (bad price or quantity)."""
