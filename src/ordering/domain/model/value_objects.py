"""Value coercion shared across the domain.

Prices are carried as Decimal end to end so that two prices which read
the same as decimal literals always compare equal, whatever form the
caller supplied them in.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ordering.domain.exceptions import IncorrectItemError

ZERO_PRICE = Decimal("0")


def as_price(amount: str | float | int | Decimal) -> Decimal:
    """Coerce *amount* to Decimal safely.

    Floats go through ``str()`` first, so ``10.1`` becomes
    ``Decimal("10.1")`` rather than the exact binary expansion.
    The sign is not checked here; that is the order's decision.
    """
    if isinstance(amount, Decimal):
        result = amount
    elif isinstance(amount, bool):
        raise IncorrectItemError(f"Invalid price: {amount!r}")
    else:
        try:
            result = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise IncorrectItemError(f"Invalid price: {amount!r}") from exc

    if not result.is_finite():
        raise IncorrectItemError(f"Price must be a finite number, got {amount!r}")
    return result


def as_quantity(value: int) -> int:
    """Check that *value* is a plain integer count (sign is not checked)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise IncorrectItemError(
            f"Quantity must be an integer, got {type(value).__name__}"
        )
    return value
