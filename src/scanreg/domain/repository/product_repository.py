"""Abstract repository for the product registry.

The registry is stored as a single unit: it is always loaded in full and
replaced in full. ``load`` hands back a version token alongside the
products so ``replace`` can refuse to overwrite a collection that another
writer changed in the meantime.

Defined in the domain layer so the domain never depends on
infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from scanreg.domain.model.product import Product


@dataclass(frozen=True)
class RegistrySnapshot:
    products: tuple[Product, ...]
    version: str | None  # None when nothing has been stored yet


class ProductRepository(ABC):

    @abstractmethod
    def load(self) -> RegistrySnapshot:
        """Return the full stored collection.

        An absent or unreadable payload is reported as an empty collection.
        """

    @abstractmethod
    def replace(self, products: list[Product], expected_version: str | None) -> None:
        """Write *products* as the whole collection.

        Raises ConflictError if the stored version is no longer
        *expected_version*.
        """

    @abstractmethod
    def clear(self) -> None:
        """Drop the whole collection unconditionally."""
