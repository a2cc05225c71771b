"""Product value object.

Products are owned by whoever builds the items; an order only ever
asks whether two products are the same one.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A product as referenced by order items.

    Compared by value: two instances with the same ``id`` and ``name``
    are the same product.
    """

    id: str
    name: str

    def __str__(self) -> str:
        return self.name
