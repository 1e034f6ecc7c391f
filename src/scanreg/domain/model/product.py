"""Product aggregate.

A product is registered once and never edited afterwards: there is no
price update or rename, only removal. It is therefore a frozen dataclass,
and anything handed to the UI can be rendered freely without risk of
mutating the registry.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from scanreg.domain.exceptions import ValidationError
from scanreg.domain.model.value_objects import Money, ProductCode


def new_product_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Product:
    """A registered item.

    Use ``Product.register()`` for new products; it validates the raw
    operator input. The ``__init__`` stays plain so the repository can
    reconstitute stored products without re-running the input rules.
    """

    id: str
    code: ProductCode
    name: str
    price: Money
    created_at: datetime

    @staticmethod
    def register(
        code: str,
        name: str,
        price: str | float | int,
        created_at: datetime,
    ) -> Product:
        """Build a new product from operator input, enforcing all invariants."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Product name is required")

        return Product(
            id=new_product_id(),
            code=ProductCode(code),
            name=name.strip(),
            price=Money.of(price),
            created_at=created_at,
        )

    def has_code(self, candidate: str) -> bool:
        return self.code.matches(candidate)


def find_by_code(products: Iterable[Product], code: str) -> Product | None:
    """Return the product registered under *code* (trimmed, exact), if any."""
    for product in products:
        if product.has_code(code):
            return product
    return None
