"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its sequence of items.
Items only get in through ``add_item``, which either merges a new item
into an existing line or appends it as a new one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import overload

from ordering.domain.exceptions import IncorrectItemError, ValidationError
from ordering.domain.model.product import Product
from ordering.domain.model.value_objects import ZERO_PRICE, as_price, as_quantity

logger = logging.getLogger(__name__)


@dataclass
class Item:
    """One line of an order: a product at a given unit price.

    ``quantity`` is the only field the order ever changes, and only on
    an item it already holds.  Price and quantity are not range-checked
    here so that the order stays the single place refusing bad items.
    """

    product: Product
    price: Decimal
    quantity: int

    def __post_init__(self) -> None:
        self.price = as_price(self.price)
        self.quantity = as_quantity(self.quantity)

    def is_same_line(self, other: Item) -> bool:
        """True if *other* has the same product and a decimal-equal price."""
        return self.product == other.product and as_price(self.price) == as_price(
            other.price
        )

    def increase_quantity(self, amount: int) -> None:
        """Add *amount* units to this line.

        Public guard for direct callers; the order never passes a
        non-positive amount.
        """
        if amount <= 0:
            raise ValidationError("Quantity increase must be positive")
        self.quantity = as_quantity(self.quantity) + amount


class ItemsView(Sequence):
    """Read-only live view over an order's items.

    Reflects later additions and merges; offers no way to add, replace
    or remove entries.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[Item]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> Item: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Item, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ItemsView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ItemsView({self._items!r})"


class Order:
    """Aggregate root holding the items a customer has added.

    Invariants:
    - the item sequence exists from construction on (empty, never None)
    - at most one item per (product, price) pair
    """

    def __init__(self) -> None:
        self._items: list[Item] = []

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> ItemsView:
        return ItemsView(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    # --- Commands -------------------------------------------------------------

    def add_item(self, item: Item) -> None:
        """Add *item*, merging it into an existing line when possible.

        If a line with the same product and the same price exists, its
        quantity grows by ``item.quantity`` and *item* itself is not
        stored.  Otherwise *item* is appended as is (not copied).

        Price and quantity are read and converted here on every call,
        so fields reassigned after the item was built compare the same
        way as constructor arguments.

        Raises TypeError if *item* is None and IncorrectItemError if its
        price is negative or its quantity is not positive.
        """
        price, quantity = self._validate(item)

        existing = self._find_line(item.product, price)
        if existing is not None:
            existing.increase_quantity(quantity)
            logger.debug(
                "Merged %d x %s at %s (line quantity now %d)",
                quantity, item.product, price, existing.quantity,
            )
            return

        self._items.append(item)
        logger.debug("Added line %d x %s at %s", quantity, item.product, price)

    def add_items(self, items: Iterable[Item]) -> None:
        """Add several items in order.

        Every item is validated before any is added, so a rejected item
        leaves the order untouched.
        """
        pending = list(items)
        for item in pending:
            self._validate(item)
        for item in pending:
            self.add_item(item)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate(item: Item) -> tuple[Decimal, int]:
        if item is None:
            raise TypeError("item must not be None")
        # price is checked before quantity
        price = as_price(item.price)
        if price < ZERO_PRICE:
            logger.debug("Rejected %s: negative price %s", item.product, price)
            raise IncorrectItemError(f"Price cannot be negative, got {price}")
        quantity = as_quantity(item.quantity)
        if quantity <= 0:
            logger.debug(
                "Rejected %s: non-positive quantity %d", item.product, quantity
            )
            raise IncorrectItemError(f"Quantity must be positive, got {quantity}")
        return price, quantity

    def _find_line(self, product: Product, price: Decimal) -> Item | None:
        for existing in self._items:
            if existing.product == product and as_price(existing.price) == price:
                return existing
        return None
