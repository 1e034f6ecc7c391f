"""Application service: Register Product use case."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from scanreg.domain.exceptions import DuplicateError
from scanreg.domain.model.product import Product, find_by_code
from scanreg.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RegisterProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, code: str, name: str, price: str | float | int) -> Product:
        """Register a new product.

        Steps:
        1. Validate the raw input by building the Product (fails before
           touching storage).
        2. Re-load the stored collection and check the code is still free.
           The caller may have looked the code up earlier, but another
           registration could have landed since.
        3. Append and write the whole collection back.
        """
        product = Product.register(code, name, price, created_at=self._clock())

        snapshot = self._product_repo.load()
        existing = find_by_code(snapshot.products, product.code.value)
        if existing is not None:
            logger.info("Rejected duplicate code %s (product %s)", product.code, existing.id)
            raise DuplicateError(existing)

        self._product_repo.replace([*snapshot.products, product], snapshot.version)
        logger.info("Registered product %s with code %s", product.id, product.code)
        return product
